"""
# Zone repositories and the process' default zone.

# A &Repository maps location names to &views.Zone instances and indexes the
# abbreviations used by their subzones. Repositories are only populated by
# explicit &Repository.define and &Repository.reload calls.

#!python
	from civiltime import libzone
	repo = libzone.Repository('/usr/share/zoneinfo')
	repo.reload()
	ny = repo['America/New_York']
	names = repo.matching('EST')

# [ Elements ]

# /utc/
	# The fixed UTC zone.
"""
import os
import os.path
import logging
import threading
from . import tzif
from . import views

logger = logging.getLogger(__name__)

#: The UTC zone. Always loaded.
utc = views.Zone.fixed(0, 'UTC', name='UTC')

class Repository(object):
	"""
	# Location name and abbreviation index of a set of zones.

	# [ Properties ]
	# /directory/
		# The directory walked by &reload.
	# /zones/
		# Mapping of location names to &views.Zone instances.
	# /abbreviations/
		# Mapping of subzone abbreviations to the sorted location names using them.
	"""

	def __init__(self, directory=None):
		self.directory = directory if directory is not None else tzif.tzdir
		self.zones = {}
		self.abbreviations = {}
		self._guard = threading.Lock()

	def __repr__(self):
		return '<%s: %s[%d]>' %(self.__class__.__name__, self.directory, len(self.zones))

	def __contains__(self, name):
		return name in self.zones

	def __getitem__(self, name):
		return self.zones[name]

	def __iter__(self):
		return iter(self.zones)

	def __len__(self):
		return len(self.zones)

	@staticmethod
	def index(zones):
		"""
		# Construct the abbreviation index of the given name to zone mapping.
		"""
		idx = {}
		for name, zone in zones.items():
			for subzone in zone.load().subzones:
				idx.setdefault(subzone.abbreviation, set()).add(name)
		return {k: sorted(v) for k, v in idx.items()}

	def define(self, name, zone):
		"""
		# Add the &zone to the repository under the location &name.
		# The zone is loaded in order to index its abbreviations.
		"""
		zone.load()
		with self._guard:
			zones = dict(self.zones)
			zones[name] = zone
			self.zones, self.abbreviations = zones, self.index(zones)
		return zone

	def find(self, name):
		"""
		# Get the zone with the location &name; &None if there is no such zone.
		"""
		return self.zones.get(name)

	def matching(self, abbreviation):
		"""
		# Get the zones with a subzone using the &abbreviation.

		# Returns a list of `(name, zone)` pairs ordered by name.
		"""
		return [(x, self.zones[x]) for x in self.abbreviations.get(abbreviation, ())]

	def scan(self, prefixlen=None, join=os.path.join):
		"""
		# Walk the &directory yielding `(path, name)` pairs of TZif files.
		"""
		root = self.directory
		if prefixlen is None:
			prefixlen = len(os.path.join(root, ''))

		for dirpath, dirnames, filenames in os.walk(root):
			dirnames.sort()
			for x in sorted(filenames):
				path = join(dirpath, x)
				if tzif.is_tzif(path):
					yield (path, path[prefixlen:].replace(os.sep, '/'))

	def reload(self):
		"""
		# Replace the repository's contents with the zones found in the &directory.

		# Files that fail to load are skipped and logged.
		# Returns the number of zones loaded.
		"""
		zones = {}
		for path, name in self.scan():
			try:
				zones[name] = views.Zone(path, name).load()
			except Exception as err:
				logger.warning("skipped zone %s: %s", name, err)

		abbreviations = self.index(zones)
		with self._guard:
			self.zones, self.abbreviations = zones, abbreviations

		logger.info("loaded %d zones from %s", len(zones), self.directory)
		return len(zones)

def host_default(path=None):
	"""
	# Construct the zone described by the host's local zone file, or &utc when
	# it does not exist.
	"""
	path = path or tzif.tzdefault
	if os.path.exists(path):
		return views.Zone(path, 'localtime')
	return utc

_default = host_default()
_default_guard = threading.Lock()

def default() -> views.Zone:
	"""
	# Get the process' default zone.
	"""
	return _default

def select_default(zone) -> views.Zone:
	"""
	# Replace the process' default zone with &zone.

	# Returns the previous default.
	"""
	global _default
	with _default_guard:
		previous, _default = _default, zone
	return previous
