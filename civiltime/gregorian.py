"""
# Proleptic Gregorian calendar functions and data.

# Days are counted from the &.core.datum, 2000-03-01, the beginning of a 400 year
# leap cycle. The months of a year are rotated so that March is the first month and
# February the last; this places the leap day at the very end of the rotated year
# and allows a single table of month lengths to serve every year.

#!python
	from civiltime import gregorian
	assert gregorian.days_from_date((2000, 3, 1)) == 0
	assert gregorian.date_from_days(-1) == (2000, 2, 29)
"""
import itertools

#: number of years in a gregorian cycle.
years_in_cycle = 400

#: number of years in a century.
years_in_century = 100

#: number of years in a leap group.
years_in_olympiad = 4

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with a zero-based index.
month_name_to_number = {
	month_names[i] : i for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Month lengths of the rotated year, March through February.
#: The final entry is only reached in leap years.
rotated_year = calendar_leap[2:] + calendar_leap[:2]

#: Days preceding each month of the rotated year.
rotated_offsets = tuple(itertools.accumulate((0,) + rotated_year[:-1]))

def years_to_days(years):
	"""
	# The number of days consumed by the given number of rotated years.
	"""
	return (365 * years) + (years // 4) - (years // 100) + (years // 400)

days_in_year = years_to_days(1)
days_in_olympiad = years_to_days(years_in_olympiad)
days_in_century = years_to_days(years_in_century)
days_in_cycle = years_to_days(years_in_cycle)

def days_to_years(days, divmod=divmod, min=min):
	"""
	# Convert a day count to the number of whole rotated years and the remaining days.

	# Whole cycles are consumed first, followed by centuries, leap groups, and single
	# years. The remainder is in `[0, 365]`; `365` identifies the leap day.
	"""
	cycles, days = divmod(days, days_in_cycle)
	years = cycles * years_in_cycle

	centuries = min(days // days_in_century, 3)
	days -= centuries * days_in_century
	years += centuries * years_in_century

	olympiads, days = divmod(days, days_in_olympiad)
	years += olympiads * years_in_olympiad

	remainder = min(days // days_in_year, 3)
	days -= remainder * days_in_year
	years += remainder

	return (years, days)

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(month, year):
	"""
	# The number of days in the &month, one-based, of the &year.
	"""
	if month == 2 and year_is_leap(year):
		return 29
	return calendar_year[month - 1]

def rotate(year, month):
	"""
	# Convert a calendar year and one-based month to the rotated year, relative to the
	# datum's year, and zero-based rotated month.
	"""
	if month < 3:
		return (year - 2001, month + 9)
	return (year - 2000, month - 3)

def unrotate(years, month):
	"""
	# Convert the rotated year and month back into the calendar year and one-based month.
	"""
	if month >= 10:
		return (years + 2001, month - 9)
	return (years + 2000, month + 3)

def month_from_remainder(days, offsets=rotated_offsets):
	"""
	# Identify the rotated month and the zero-based day of month from the
	# days remaining after &days_to_years.
	"""
	month = 11
	while offsets[month] > days:
		month -= 1
	return (month, days - offsets[month])

def days_from_date(date):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days relative to the datum.
	"""
	year, month, day = date
	years, month = rotate(year, month)
	return years_to_days(years) + rotated_offsets[month] + day - 1

def date_from_days(days):
	"""
	# Convert the given days relative to the datum into a Gregorian date in the
	# common form: (year, month, day).

	# Years before the common era are astronomical; 1 BC is year zero.
	"""
	years, remainder = days_to_years(days)
	month, day = month_from_remainder(remainder)
	year, month = unrotate(years, month)
	return (year, month, day + 1)

def day_of_year(year, month, day):
	"""
	# One-based ordinal of the date within its year.
	"""
	return days_from_date((year, month, day)) - days_from_date((year, 1, 1)) + 1

def seconds_from_time(hour, minute, second):
	"""
	# Convert a time of day to the seconds since midnight.
	"""
	return (hour * 3600) + (minute * 60) + second

def time_from_seconds(seconds, divmod=divmod):
	"""
	# Convert seconds since midnight to `(hour, minute, second)`.
	"""
	hour, seconds = divmod(seconds, 3600)
	minute, second = divmod(seconds, 60)
	return (hour, minute, second)

def century(year):
	"""
	# The ordinal century containing the &year; 2000 is in the twentieth.
	"""
	if year > 0:
		return (year - 1) // 100 + 1
	return -((-year) // 100 + 1)

def millennium(year):
	"""
	# The ordinal millennium containing the &year.
	"""
	if year > 0:
		return (year - 1) // 1000 + 1
	return -((-year) // 1000 + 1)

def decade(year):
	"""
	# The decade containing the &year: 1987 is in the decade 198.
	"""
	return year // 10
