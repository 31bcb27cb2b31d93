"""
# Integer Gregorian calendar checks.
"""
import itertools
from .. import core
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(2100)
	test/True == gregorian.year_is_leap(2004)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1604, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_days_in_month(test):
	test/gregorian.days_in_month(2, 2000) == 29
	test/gregorian.days_in_month(2, 1900) == 28
	test/gregorian.days_in_month(2, 2004) == 29
	test/gregorian.days_in_month(2, 2005) == 28
	test/gregorian.days_in_month(1, 2005) == 31
	test/gregorian.days_in_month(4, 2005) == 30
	test/gregorian.days_in_month(12, 2005) == 31

def test_cycle_sizes(test):
	test/gregorian.days_in_year == 365
	test/gregorian.days_in_olympiad == (365 * 4) + 1
	test/gregorian.days_in_century == (365 * 100) + 24
	test/gregorian.days_in_cycle == 146097
	test/gregorian.rotated_offsets == (0, 31, 61, 92, 122, 153, 184, 214, 245, 275, 306, 337)

def test_days_to_years(test):
	test/gregorian.days_to_years(0) == (0, 0)
	test/gregorian.days_to_years(364) == (0, 364)
	test/gregorian.days_to_years(365) == (1, 0)
	# Rotated year three ends with 2004-02-29.
	test/gregorian.days_to_years(1460) == (3, 365)
	test/gregorian.days_to_years(1461) == (4, 0)
	# Last day of the cycle is a leap day; the fourth century is not truncated.
	test/gregorian.days_to_years(gregorian.days_in_cycle - 1) == (399, 365)
	test/gregorian.days_to_years(gregorian.days_in_cycle) == (400, 0)
	test/gregorian.days_to_years(-1) == (-1, 365)
	test/gregorian.days_to_years(-366) == (-1, 0)

def test_years_to_days(test):
	for y in (0, 1, 3, 4, 99, 100, 101, 399, 400, -1, -400, -401):
		days = gregorian.years_to_days(y)
		test/gregorian.days_to_years(days) == (y, 0)

def test_datum(test):
	test/gregorian.days_from_date(core.datum) == 0
	test/gregorian.date_from_days(0) == core.datum
	test/gregorian.date_from_days(-1) == (2000, 2, 29)
	test/gregorian.date_from_days(-60) == (2000, 1, 1)

def test_epochs(test):
	test/gregorian.days_from_date((1970, 1, 1)) == core.unix_epoch_day
	test/gregorian.days_from_date((1900, 1, 1)) == core.universal_epoch_day
	test/gregorian.date_from_days(core.unix_epoch_day) == (1970, 1, 1)

def test_century_boundaries(test):
	test/gregorian.days_from_date((2100, 3, 1)) == gregorian.days_in_century
	test/gregorian.date_from_days(gregorian.days_in_century - 1) == (2100, 2, 28)
	test/gregorian.date_from_days(gregorian.days_in_cycle) == (2400, 3, 1)
	test/gregorian.date_from_days(gregorian.days_in_cycle - 1) == (2400, 2, 29)
	test/gregorian.date_from_days(-gregorian.days_in_cycle) == (1600, 3, 1)

def test_date_succession(test):
	"""
	# Consecutive day counts produce consecutive dates across a leap cycle
	# boundary and the skipped leap of 1900.
	"""
	for start in (-36600, -500, 36400):
		prev = gregorian.date_from_days(start)
		for days in range(start + 1, start + 800):
			y, m, d = gregorian.date_from_days(days)
			py, pm, pd = prev
			if d == 1:
				test/pd == gregorian.days_in_month(pm, py)
				if m == 1:
					test/(y, pm) == (py + 1, 12)
				else:
					test/(y, m) == (py, pm + 1)
			else:
				test/(y, m, d) == (py, pm, pd + 1)
			test/gregorian.days_from_date((y, m, d)) == days
			prev = (y, m, d)

def test_rotation(test):
	test/gregorian.rotate(2000, 3) == (0, 0)
	test/gregorian.rotate(2001, 2) == (0, 11)
	test/gregorian.rotate(2001, 1) == (0, 10)
	test/gregorian.unrotate(0, 11) == (2001, 2)
	test/gregorian.unrotate(-1, 0) == (1999, 3)
	test/gregorian.month_from_remainder(0) == (0, 0)
	test/gregorian.month_from_remainder(365) == (11, 28)
	test/gregorian.month_from_remainder(336) == (10, 30)

def test_day_of_year(test):
	test/gregorian.day_of_year(2000, 1, 1) == 1
	test/gregorian.day_of_year(2000, 12, 31) == 366
	test/gregorian.day_of_year(2001, 12, 31) == 365
	test/gregorian.day_of_year(2001, 3, 1) == 60

def test_time_of_day(test):
	test/gregorian.seconds_from_time(1, 1, 1) == 3661
	test/gregorian.time_from_seconds(3661) == (1, 1, 1)
	test/gregorian.time_from_seconds(86399) == (23, 59, 59)

def test_year_groups(test):
	test/gregorian.century(2000) == 20
	test/gregorian.century(2001) == 21
	test/gregorian.millennium(2000) == 2
	test/gregorian.millennium(2001) == 3
	test/gregorian.decade(1987) == 198

def test_month_names(test):
	test/gregorian.month_name_to_number['january'] == 0
	test/gregorian.month_name_to_number['dec'] == 11
	test/len(gregorian.calendar_leap) == 12
	test/sum(gregorian.calendar_leap) == 366
	test/sum(gregorian.calendar_year) == 365

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
