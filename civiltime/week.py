"""
# Week based measures of time: days of seven.
"""
from . import gregorian

#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'sun', 'mon', 'tue', 'wed', 'thu', 'fri', 'sat',
)

#: Map of weekday names and abbreviations to a zero-based index.
weekday_name_to_number = {
	weekday_names[i]: i
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

#: Day of week of the datum, 2000-03-01, a Wednesday.
datum_weekday = 3

def day_of_week(days, offset=datum_weekday):
	"""
	# Derive the canonical day of week, Sunday being zero, from the days relative
	# to the datum.
	"""
	return (days + offset) % 7

def iso_weekday(days):
	"""
	# The ISO-8601 day of week, Monday being one and Sunday seven.
	"""
	return ((day_of_week(days) + 6) % 7) + 1

def iso_week_date(year, month, day, days_from_date=gregorian.days_from_date):
	"""
	# Convert the Gregorian date to an ISO-8601 week date:
	# `(iso_year, week_number, iso_weekday)`.

	# The ISO year of a date is the year of the Thursday in the same week.
	"""
	days = days_from_date((year, month, day))
	weekday = iso_weekday(days)
	thursday = days - weekday + 4
	iso_year = gregorian.date_from_days(thursday)[0]
	week = ((thursday - days_from_date((iso_year, 1, 1))) // 7) + 1
	return (iso_year, week, weekday)
