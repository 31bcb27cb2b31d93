"""
# Timezone views resolving the &types.Subzone in effect at a point in time.

# Usage:

#!syntax/python
	from civiltime import views
	z = views.Zone.open("America/Los_Angeles")
	subzone = z.find(1136073600)
"""
import os.path
import bisect
import logging
import threading
from . import tzif
from . import types

logger = logging.getLogger(__name__)

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular &types.Subzone.

	# Zones constructed with a path are loaded on first use. The loading state
	# progresses from `'unloaded'` to `'loading'` and finally `'loaded'`; a failed
	# load leaves the previously published tables in place.

	# [ Properties ]
	# /transitions/
		# Sorted transition times in seconds since the unix epoch.
	# /indices/
		# Subzone indices parallel to &transitions.
	# /subzones/
		# The &types.Subzone instances of the zone in the order of the source file.
	# /leaps/
		# Leap second records, `(time, correction)`. Stored, but not used.
	# /path/
		# The TZif file that the zone is loaded from.
	# /name/
		# The location name of the zone.
	# /state/
		# One of `'unloaded'`, `'loading'`, or `'loaded'`.
	"""

	Subzone = types.Subzone

	def __init__(self, path=None, name=None):
		self.path = path
		self.name = name if name is not None else path
		self.transitions = []
		self.indices = ()
		self.subzones = ()
		self.leaps = ()
		self.state = 'unloaded'
		self._guard = threading.Lock()

	def __repr__(self):
		if self.state != 'loaded':
			return '<%s: %s[%s]>' %(self.__class__.__name__, self.name, self.state)
		return '<%s: %s[%d/%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
			len(self.subzones),
		)

	@property
	def loaded(self) -> bool:
		return self.state == 'loaded'

	def publish(self, data):
		"""
		# Replace the zone's tables with the structured &tzif.tzdata.
		"""
		subzones = tuple([
			self.Subzone((x.tz_offset, x.tz_abbrev, 'dst' if x.tz_isdst else 'std'))
			for x in data.types
		])
		# Assign everything at once; readers never see a partial table.
		self.transitions, self.indices, self.subzones, self.leaps = (
			list(data.transitions), tuple(data.indices), subzones, tuple(data.leaps)
		)
		self.state = 'loaded'

	def load(self, reload=False):
		"""
		# Load the zone's tables from its &path.

		# Nothing is done when the zone is already loaded unless &reload is &True.
		# Returns the zone.
		"""
		if self.state == 'loaded' and not reload:
			return self

		with self._guard:
			if self.state == 'loaded' and not reload:
				# Loaded by another thread while waiting.
				return self
			if self.path is None:
				if self.state == 'loaded':
					return self
				raise ValueError("zone %r has no source path to load from" %(self.name,))

			prior = self.state
			self.state = 'loading'
			try:
				data = tzif.load(self.path)
			except BaseException:
				self.state = prior
				raise

			self.publish(data)
			logger.debug("loaded zone %s from %s: %d transitions, %d subzones",
				self.name, self.path, len(self.transitions), len(self.subzones))

		return self

	def find(self, unix_seconds, search=bisect.bisect_right):
		"""
		# Get the &types.Subzone in effect at the given point in time.

		# Queries before the first transition resolve to the first transition's subzone,
		# and queries at or after the last resolve to the last.
		# Zones without transitions always resolve to the first subzone.

		# [ Parameters ]
		# /unix_seconds/
			# The point in time expressed in seconds since the unix epoch.
		"""
		if self.state != 'loaded':
			self.load()

		transitions = self.transitions
		if not transitions:
			return self.subzones[0]

		idx = search(transitions, unix_seconds) - 1
		if idx < 0:
			idx = 0
		return self.subzones[self.indices[idx]]

	def slice(self, start, stop, search=bisect.bisect_right):
		"""
		# Get a slice of transition points and subzones relative to a given &start and &stop.

		# Returns an iterable of transitions and &types.Subzone instances that were effective
		# during the period designated by the slice.

		# [ Parameters ]
		# /start/
			# The start of the period in unix seconds.
		# /stop/
			# The end of the period in unix seconds.
		"""
		if self.state != 'loaded':
			self.load()

		first = max(search(self.transitions, start) - 1, 0)
		last = search(self.transitions, stop)

		trans = self.transitions[first:last]
		subs = [self.subzones[i] for i in self.indices[first:last]]

		return zip(trans, subs)

	def transitions_with_subzones(self):
		"""
		# Iterate over all the transitions and their subzone.
		"""
		if self.state != 'loaded':
			self.load()
		return zip(self.transitions, [self.subzones[i] for i in self.indices])

	@classmethod
	def fixed(Class, offset, abbreviation=None, name=None, dst=False):
		"""
		# Construct a loaded zone that has a single subzone and no transitions.
		"""
		if abbreviation is None:
			abbreviation = types.offset_abbreviation(offset)
		z = Class(None, name if name is not None else abbreviation)
		z.subzones = (Class.Subzone((offset, abbreviation, 'dst' if dst else 'std')),)
		z.state = 'loaded'
		return z

	@classmethod
	def from_tzif_data(Class, data, name=None, path=None):
		"""
		# Construct a loaded zone from parsed &tzif.tzdata.
		"""
		z = Class(path, name)
		z.publish(tzif.structure(data))
		return z

	@classmethod
	def from_file(Class, filepath, name=None):
		"""
		# Construct and load the zone stored at &filepath.
		"""
		return Class(filepath, name).load()

	@classmethod
	def open(Class, name=None, tzdir=None):
		"""
		# Construct and load a zone by its location name relative to &tzdir.
		# When &name is &None, the host's default zone file is used.
		"""
		if not name:
			return Class.from_file(tzif.tzdefault, name='localtime')
		return Class.from_file(os.path.join(tzdir or tzif.tzdir, name), name=name)
