"""
# Arithmetic on &types.Instant values.

# Units are divided into absolute units, measured in exact nanoseconds, and
# calendrical units whose span depends on the zone and the calendar.

# /Absolute/
	# `nanosecond`, `microsecond`, `millisecond`, `second`, `minute`, and `hour`
	# shift the instant by an exact amount.
# /Day/
	# `day` and `week` preserve the local wall clock; when the zone's UTC offset
	# differs after the shift, the difference is applied to the result.
# /Calendar/
	# `month` and `year` operate on the decoded civil fields, clamping the day of
	# month to the length of the resulting month. The result keeps the original
	# UTC offset.
# /Weekday/
	# `sunday` through `saturday` move to an occurrence of the named weekday.

#!python
	from civiltime import arithmetic, libzone
	i = arithmetic.elapse(instant, 'month', 1, libzone.utc)
	j = arithmetic.adjust(i, [
		arithmetic.SetPart('hour', 0),
		arithmetic.OffsetPart('day', 1),
	], libzone.utc)
"""
import collections
import fractions
from . import core
from . import types
from . import gregorian
from . import week
from . import civil

nps = core.nanoseconds_in_second

#: Absolute units and their size in nanoseconds.
absolute_units = {
	'nanosecond': 1,
	'microsecond': 1000,
	'millisecond': 1000000,
	'second': nps,
	'minute': 60 * nps,
	'hour': 3600 * nps,
}

#: Units of whole days.
day_units = {
	'day': 1,
	'week': week.days_in_week,
}

#: Units of gregorian months.
calendar_units = {
	'month': 1,
	'year': gregorian.months_in_year,
}

#: Parts of an instant, smallest first, as used by &minimize, &maximize, and &SetPart.
parts = (
	'nanosecond',
	'second',
	'minute',
	'hour',
	'day',
	'month',
	'year',
)

def correct(instant, old_offset, zone):
	"""
	# Apply the difference between the &old_offset and the offset in effect at the
	# &instant in the &zone.
	"""
	new_offset = zone.find(instant.unix()).utc_offset
	if new_offset == old_offset:
		return instant
	return types.Instant(instant.day, instant.second + (old_offset - new_offset), instant.nanosecond)

def elapse_days(instant, days, zone=None, offset=None):
	"""
	# Add &days to the &instant preserving the local time of day.
	"""
	shifted = types.Instant(instant.day + days, instant.second, instant.nanosecond)
	if offset is not None:
		return shifted

	zone = civil.resolve_zone(zone)
	old_offset = zone.find(instant.unix()).utc_offset
	return correct(shifted, old_offset, zone)

def elapse_months(instant, months, zone=None, offset=None, divmod=divmod, min=min):
	"""
	# Add &months to the &instant's civil month clamping the day of month.

	# The fields are encoded at the offset they were decoded with; the zone is
	# not consulted again.
	"""
	c = civil.decode(instant, zone, offset)
	carry, month = divmod(c.month - 1 + months, gregorian.months_in_year)
	month += 1
	year = c.year + carry
	day = min(c.day, gregorian.days_in_month(month, year))

	return civil.encode_with_offset(year, month, day, c.hour, c.minute, c.second, c.nanosecond, c.offset)

def weekday_delta(current, target, occurrence):
	"""
	# The signed number of days from the &current weekday to an occurrence of the
	# &target weekday.

	# An &occurrence of zero selects the &target in the current Sunday-based week.
	# Positive occurrences count forward from the following day, and negative
	# occurrences count backward from the preceding day.
	"""
	if occurrence == 0:
		return target - current
	elif occurrence > 0:
		return ((target - current - 1) % 7) + 1 + (7 * (occurrence - 1))
	else:
		return -(((current - target - 1) % 7) + 1) - (7 * (-occurrence - 1))

def elapse(instant, unit, amount=1, zone=None, offset=None):
	"""
	# Add &amount &unit to the &instant.

	# [ Parameters ]
	# /instant/
		# The &types.Instant to adjust.
	# /unit/
		# The name of the unit or weekday.
	# /amount/
		# The number of units to add.
	# /zone/
		# The &views.Zone used by calendrical units. Defaults to &libzone.default.
	# /offset/
		# Explicit UTC offset used instead of the &zone.
	"""
	if unit in absolute_units:
		return types.Instant(instant.day, instant.second, instant.nanosecond + (amount * absolute_units[unit]))
	elif unit in day_units:
		return elapse_days(instant, amount * day_units[unit], zone, offset)
	elif unit in calendar_units:
		return elapse_months(instant, amount * calendar_units[unit], zone, offset)
	elif unit in week.weekday_name_to_number:
		current = civil.decode(instant, zone, offset).weekday
		target = week.weekday_name_to_number[unit]
		return elapse_days(instant, weekday_delta(current, target, amount), zone, offset)
	else:
		raise ValueError("unknown unit %r" %(unit,))

def rollback(instant, unit, amount=1, zone=None, offset=None):
	"""
	# Subtract &amount &unit from the &instant.
	"""
	return elapse(instant, unit, -amount, zone, offset)

def compare(a, b) -> int:
	"""
	# Returns `-1` when &a precedes &b, `1` when &a follows &b, and `0` when equal.
	"""
	return (a > b) - (a < b)

def precedes(a, b) -> bool:
	return a < b

def follows(a, b) -> bool:
	return a > b

def minimum(first, *instants):
	"""
	# The earliest of the given instants.
	"""
	return min((first,) + instants)

def maximum(first, *instants):
	"""
	# The latest of the given instants.
	"""
	return max((first,) + instants)

def measure(a, b) -> int:
	"""
	# The nanoseconds elapsed from &b to &a.
	"""
	seconds = ((a.day - b.day) * core.seconds_in_day) + (a.second - b.second)
	return (seconds * nps) + (a.nanosecond - b.nanosecond)

def difference(a, b, Fraction=fractions.Fraction):
	"""
	# The exact seconds elapsed from &b to &a as a &fractions.Fraction.
	"""
	return Fraction(measure(a, b), nps)

def whole_year_difference(a, b, zone=None, offset=None):
	"""
	# The number of anniversaries of &b that have passed by &a in the &zone.
	# Negative when &a precedes &b.
	"""
	if a < b:
		return -whole_year_difference(b, a, zone, offset)

	ca = civil.decode(a, zone, offset)
	cb = civil.decode(b, zone, offset)
	years = ca.year - cb.year
	if ca[1:7] < cb[1:7]:
		years -= 1
	return years

def _limits(c, part, maximal):
	"""
	# Fields of the &types.Civil &c with the parts up to &part at their limits.
	"""
	fields = dict(zip(parts, (c.nanosecond, c.second, c.minute, c.hour, c.day, c.month, c.year)))
	if part not in parts[:6]:
		raise ValueError("cannot limit part %r" %(part,))

	if maximal:
		limits = (core.nanoseconds_in_second - 1, 59, 59, 23, None, 12)
	else:
		limits = (0, 0, 0, 0, 1, 1)

	for name, limit in zip(parts, limits):
		fields[name] = limit
		if name == part:
			break

	if maximal and fields['day'] is None:
		fields['day'] = gregorian.days_in_month(fields['month'], fields['year'])
	return fields

def minimize(instant, part, zone=None, offset=None):
	"""
	# Set the parts of the &instant up to and including &part to their minimum.

	#!python
		# Midnight of the first day of the instant's month.
		arithmetic.minimize(instant, 'day', zone)
	"""
	c = civil.decode(instant, zone, offset)
	return civil.encode(zone=zone, offset=offset, **_limits(c, part, False))

def maximize(instant, part, zone=None, offset=None):
	"""
	# Set the parts of the &instant up to and including &part to their maximum.
	"""
	c = civil.decode(instant, zone, offset)
	return civil.encode(zone=zone, offset=offset, **_limits(c, part, True))

# Batch adjustment operations.
SetPart = collections.namedtuple('SetPart', ('part', 'value'))
OffsetPart = collections.namedtuple('OffsetPart', ('part', 'amount'))
PinTimezone = collections.namedtuple('PinTimezone', ('zone',))
PinOffset = collections.namedtuple('PinOffset', ('offset',))

class Adjustment(object):
	"""
	# Working state of &adjust.

	# [ Properties ]
	# /instant/
		# The last materialized instant.
	# /zone/
		# The pinned zone.
	# /offset/
		# The pinned UTC offset; overrides &zone.
	# /pending/
		# Civil fields modified by &SetPart operations that have not been encoded.
	"""
	__slots__ = ('instant', 'zone', 'offset', 'pending')

	def __init__(self, instant, zone, offset):
		self.instant = instant
		self.zone = zone
		self.offset = offset
		self.pending = None

	def set(self, part, value):
		if part not in parts:
			raise ValueError("unknown part %r" %(part,))
		if self.pending is None:
			c = civil.decode(self.instant, self.zone, self.offset)
			self.pending = dict(zip(parts, (c.nanosecond, c.second, c.minute, c.hour, c.day, c.month, c.year)))
		self.pending[part] = value

	def materialize(self):
		if self.pending is not None:
			self.instant = civil.encode(zone=self.zone, offset=self.offset, **self.pending)
			self.pending = None
		return self.instant

def adjust(instant, operations, zone=None, offset=None):
	"""
	# Apply the sequence of &operations to &instant from left to right.

	# Consecutive &SetPart operations are composed before the fields are validated, so
	# `SetPart('day', 31)` followed by `SetPart('month', 1)` is valid regardless of the
	# month of &instant.

	# [ Parameters ]
	# /operations/
		# Sequence of &SetPart, &OffsetPart, &PinTimezone, and &PinOffset instances.
	# /zone/
		# The initial zone.
	# /offset/
		# The initial explicit UTC offset.
	"""
	state = Adjustment(instant, zone, offset)

	for op in operations:
		if isinstance(op, SetPart):
			if op.part == 'weekday':
				target = op.value
				if isinstance(target, int):
					target = week.weekday_names[target]
				state.instant = elapse(state.materialize(), target, 0, state.zone, state.offset)
			else:
				state.set(op.part, op.value)
		elif isinstance(op, OffsetPart):
			state.instant = elapse(state.materialize(), op.part, op.amount, state.zone, state.offset)
		elif isinstance(op, PinTimezone):
			state.materialize()
			state.zone = op.zone
			state.offset = None
		elif isinstance(op, PinOffset):
			state.materialize()
			state.offset = op.offset
		else:
			raise TypeError("unknown adjustment %r" %(op,))

	return state.materialize()
