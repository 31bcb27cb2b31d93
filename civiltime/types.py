"""
# Value types for points in time and timezone offsets.

#!python
	from civiltime import types
	i = types.Instant(0, 3600)
	assert i.day == 0 and i.second == 3600

	# Overflow is carried into the larger fields.
	assert types.Instant(0, -1) == types.Instant(-1, 86399)

# [ Elements ]

# /Instant/
	# Point in time as a day, second, and nanosecond triple.
# /Subzone/
	# A fixed offset regime of a timezone.
# /Civil/
	# The decoded representation of an &Instant in a particular zone.
"""
import collections
from . import core

class Instant(tuple):
	"""
	# A point in time expressed as `(day, second, nanosecond)` relative to
	# the &core.datum, 2000-03-01T00:00:00Z.

	# Instances are normalized on construction: &second is in `[0, 86399]` and
	# &nanosecond is in `[0, 999999999]`. Tuple ordering is chronological.
	"""
	__slots__ = ()

	def __new__(Class, day=0, second=0, nanosecond=0,
			divmod=divmod,
			spd=core.seconds_in_day,
			nps=core.nanoseconds_in_second,
		):
		carry, nanosecond = divmod(nanosecond, nps)
		carry, second = divmod(second + carry, spd)
		return tuple.__new__(Class, (day + carry, second, nanosecond))

	@property
	def day(self) -> int:
		"""
		# Days since the datum.
		"""
		return self[0]

	@property
	def second(self) -> int:
		"""
		# Second of the day.
		"""
		return self[1]

	@property
	def nanosecond(self) -> int:
		"""
		# Nanosecond of the second.
		"""
		return self[2]

	def __repr__(self):
		return "%s(%d, %d, %d)" %(self.__class__.__name__, self[0], self[1], self[2])

	def __getnewargs__(self):
		return tuple(self)

	def is_time(self) -> bool:
		"""
		# Whether the instant is a time of day value; the &day is zero.
		"""
		return self[0] == 0

	def is_date(self) -> bool:
		"""
		# Whether the instant is a date value; the time of day is zero.
		"""
		return self[1] == 0 and self[2] == 0

	def replace(self, day=None, second=None, nanosecond=None):
		"""
		# Create a new instant substituting the given fields.
		"""
		return self.__class__(
			self[0] if day is None else day,
			self[1] if second is None else second,
			self[2] if nanosecond is None else nanosecond,
		)

	def unix(self, spd=core.seconds_in_day, epoch=core.unix_epoch_day) -> int:
		"""
		# Whole seconds since 1970-01-01T00:00:00Z; the &nanosecond is discarded.
		"""
		return ((self[0] - epoch) * spd) + self[1]

	def unix_nanoseconds(self) -> int:
		"""
		# Nanoseconds since 1970-01-01T00:00:00Z.
		"""
		return (self.unix() * core.nanoseconds_in_second) + self[2]

	@classmethod
	def from_unix(Class, seconds, nanosecond=0, epoch=core.unix_epoch_day):
		"""
		# Create an instant from the seconds since the unix epoch.
		"""
		return Class(epoch, seconds, nanosecond)

class Subzone(tuple):
	"""
	# Subzones are constructed by a tuple of the form: `(offset, abbreviation, type)`.
	# The type is either `'dst'` or `'std'`, and signifies whether or not the subzone
	# is a daylight savings time regime.

	# &Subzone instances are usually extracted from &.views.Zone objects which
	# associate them with transition times.
	"""
	__slots__ = ()

	@property
	def utc_offset(self) -> int:
		"""
		# The offset in seconds east of UTC.
		"""
		return self[0]

	@property
	def abbreviation(self) -> str:
		"""
		# The subzone's abbreviation; such as UTC, GMT, and EST.
		"""
		return self[1]

	@property
	def type(self) -> str:
		return self[2]

	@property
	def is_dst(self) -> bool:
		"""
		# Whether or not the subzone is a daylight savings time offset.
		"""
		return self[2] == 'dst'

	def __int__(self):
		return self[0]

	def __str__(self):
		return '%s%s%d' %(
			self.abbreviation,
			"+" if self.utc_offset >= 0 else "-",
			abs(self.utc_offset)
		)

	def __repr__(self):
		return '<%s(%s: %d%s)>' %(
			self.__class__.__name__, self.abbreviation, self.utc_offset,
			', dst' if self.is_dst else '',
		)

	@classmethod
	def from_offset(Class, offset):
		"""
		# Construct the standard time subzone used for an explicit UTC offset.
		"""
		return Class((offset, offset_abbreviation(offset), 'std'))

def offset_abbreviation(offset):
	"""
	# The abbreviation given to explicit offsets: `UTC` when zero and `+hh:mm` otherwise.
	"""
	if offset == 0:
		return 'UTC'
	sign = '-' if offset < 0 else '+'
	hours, minutes = divmod(abs(offset) // 60, 60)
	return "%s%02d:%02d" %(sign, hours, minutes)

#: Civil fields of an &Instant as seen from a particular zone.
Civil = collections.namedtuple('Civil', (
	'year',
	'month',
	'day',
	'hour',
	'minute',
	'second',
	'nanosecond',
	'weekday',
	'dst',
	'offset',
	'abbreviation',
))
