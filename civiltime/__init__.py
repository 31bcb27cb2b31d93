"""
[ About ]
---------

civiltime is a date and time package based on integer arithmetic. Points in time are
&.types.Instant values: a count of days since 2000-03-01, the second of the day, and
the nanosecond of the second. Instants are independent of any zone; operations that
need a wall clock take a zone, or an explicit UTC offset, as a parameter.

Calendar Support:

	- Proleptic Gregorian

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	from civiltime import library as libtime
	now = libtime.now() # UTC

[ Encoding ]
------------

Civil fields are encoded into instants with a zone or an offset.

#!/pl/python
	ny = libtime.zone('America/New_York')
	i = libtime.encode(2005, 4, 3, zone=ny)
	assert libtime.decode(i, ny)[:3] == (2005, 4, 3)

Unlike a lenient calendar, encoding validates the fields. Local times skipped by
a daylight savings transition raise &.core.InvalidTimeSpecification, and local
times repeated by a transition select the earliest subzone listed in the zone's file.

[ Datetime Math ]
-----------------

#!/pl/python
	i = libtime.elapse(i, 'day', 1, ny) # Same wall clock time, the next day.
	i = libtime.elapse(i, 'month', 1, ny) # Day of month clamped to the month's end.
	i = libtime.adjust(i, [
		libtime.SetPart('hour', 0),
		libtime.OffsetPart('friday', 1),
	], ny)

[ Text ]
--------

#!/pl/python
	i = libtime.parse_rfc3339('2008-06-05T04:03:02.000001Z')
	assert libtime.format_rfc3339(i, libtime.utc) == '2008-06-05T04:03:02.000001Z'

[ Time Zones ]
--------------

Zones are read from TZif files. &.libzone.Repository indexes a zone directory by
location name and abbreviation.

#!/pl/python
	repo = libtime.Repository('/usr/share/zoneinfo')
	repo.reload()
	eastern = [name for name, z in repo.matching('EST')]
"""
__pkg_bottom__ = True
