"""
# Conversion between &types.Instant and civil fields.

# Encoding is the construction of an instant from a year, month, day, and time of day
# as read on a wall clock in a zone; decoding is the inverse. Both accept either a
# &views.Zone or an explicit UTC offset in seconds. When neither is given, the
# process' default zone, &libzone.default, is used.

#!python
	from civiltime import civil, libzone
	i = civil.encode(2008, 6, 5, 4, 3, 2, offset=0)
	assert civil.decode(i, libzone.utc)[:6] == (2008, 6, 5, 4, 3, 2)
"""
import fractions
from . import core
from . import types
from . import gregorian
from . import week
from . import libzone

def valid(year, month, day, hour=0, minute=0, second=0, nanosecond=0):
	"""
	# Whether the fields identify a civil date and time.
	"""
	return (
		0 <= nanosecond < core.nanoseconds_in_second
		and 0 <= second < 60
		and 0 <= minute < 60
		and 0 <= hour < 24
		and 1 <= month <= 12
		and 1 <= day <= gregorian.days_in_month(month, year)
		and year != 0
	)

def resolve_zone(zone):
	"""
	# Substitute the default zone for &None.
	"""
	if zone is None:
		return libzone.default()
	return zone

def subzone(instant, zone=None, offset=None):
	"""
	# Get the &types.Subzone used to decode the &instant.
	"""
	if offset is not None:
		return types.Subzone.from_offset(offset)
	return resolve_zone(zone).find(instant.unix())

def encode_with_offset(year, month, day, hour, minute, second, nanosecond, offset):
	"""
	# Construct the instant of the civil fields as seen at the UTC &offset.
	# No validation is performed; fields overflow onto larger units.
	"""
	days = gregorian.days_from_date((year, month, day))
	seconds = gregorian.seconds_from_time(hour, minute, second)
	return types.Instant(days, seconds - offset, nanosecond)

def encode(year, month, day, hour=0, minute=0, second=0, nanosecond=0, zone=None, offset=None):
	"""
	# Construct the &types.Instant identified by the civil fields.

	# When &offset is &None, the subzones of the &zone are tried in their listed order
	# and the first whose offset agrees with the offset in effect at the resulting
	# instant is used. Consequently, ambiguous local times select the earliest listed
	# subzone and local times skipped by a transition raise
	# &core.InvalidTimeSpecification.

	# [ Parameters ]
	# /zone/
		# The &views.Zone that the fields are local to.
	# /offset/
		# Explicit UTC offset in seconds. Overrides &zone.
	"""
	fields = (year, month, day, hour, minute, second, nanosecond)
	if not valid(*fields):
		raise core.InvalidTimeSpecification(fields, "fields are out of range")

	if offset is not None:
		return encode_with_offset(*fields, offset)

	zone = resolve_zone(zone)
	if zone.state != 'loaded':
		zone.load()

	for candidate in zone.subzones:
		i = encode_with_offset(*fields, candidate.utc_offset)
		if zone.find(i.unix()).utc_offset == candidate.utc_offset:
			return i

	raise core.InvalidTimeSpecification(fields,
		"local time does not exist in zone %s" %(zone.name,))

def decode(instant, zone=None, offset=None):
	"""
	# Decode the &instant into &types.Civil fields as seen in the &zone, or at
	# the explicit &offset.
	"""
	sz = subzone(instant, zone, offset)
	local = types.Instant(instant.day, instant.second + sz.utc_offset, instant.nanosecond)

	year, month, day = gregorian.date_from_days(local.day)
	hour, minute, second = gregorian.time_from_seconds(local.second)

	return types.Civil(
		year, month, day,
		hour, minute, second, local.nanosecond,
		week.day_of_week(local.day),
		sz.is_dst, sz.utc_offset, sz.abbreviation,
	)

def localize(instant, zone=None, offset=None):
	"""
	# Shift the &instant by the UTC offset in effect; the resulting instant's fields
	# read as the local wall clock.

	# Returns the shifted instant and the &types.Subzone used.
	"""
	sz = subzone(instant, zone, offset)
	return (types.Instant(instant.day, instant.second + sz.utc_offset, instant.nanosecond), sz)

def from_unix(seconds, nanosecond=0):
	"""
	# Create an instant from the seconds since 1970-01-01T00:00:00Z.
	"""
	return types.Instant.from_unix(seconds, nanosecond)

def to_unix(instant):
	"""
	# Whole seconds since 1970-01-01T00:00:00Z.
	"""
	return instant.unix()

def from_universal(seconds, epoch=core.universal_epoch_day):
	"""
	# Create an instant from the seconds since 1900-01-01T00:00:00Z.
	"""
	return types.Instant(epoch, seconds)

def to_universal(instant, epoch=core.universal_epoch_day):
	"""
	# Whole seconds since 1900-01-01T00:00:00Z.
	"""
	return ((instant.day - epoch) * core.seconds_in_day) + instant.second

#: Julian day number of the datum.
julian_datum = 2451605

#: Modified julian day of the datum.
modified_julian_datum = 51604

def julian_day_number(instant):
	"""
	# The julian day number of the instant's UTC date.
	"""
	return instant.day + julian_datum

def modified_julian_day(instant):
	"""
	# The modified julian day of the instant's UTC date.
	"""
	return instant.day + modified_julian_datum

def julian_date(instant, Fraction=fractions.Fraction):
	"""
	# The exact astronomical julian date of the instant; julian days begin at noon.
	"""
	seconds = (instant.second * core.nanoseconds_in_second) + instant.nanosecond
	day = Fraction(seconds, core.seconds_in_day * core.nanoseconds_in_second)
	return instant.day + julian_datum - Fraction(1, 2) + day
