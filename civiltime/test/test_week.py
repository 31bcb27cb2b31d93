from .. import core
from .. import gregorian
from .. import week

def test_day_of_week(test):
	test/week.day_of_week(0) == 3 # wednesday
	test/week.day_of_week(core.unix_epoch_day) == 4 # thursday
	test/week.day_of_week(-1) == 2
	d = gregorian.days_from_date((2008, 6, 5))
	test/week.weekday_names[week.day_of_week(d)] == 'thursday'

def test_iso_weekday(test):
	sunday = gregorian.days_from_date((2008, 6, 1))
	test/week.iso_weekday(sunday) == 7
	test/week.iso_weekday(sunday + 1) == 1

def test_iso_week_date(test):
	test/week.iso_week_date(2008, 6, 5) == (2008, 23, 4)
	test/week.iso_week_date(2005, 1, 1) == (2004, 53, 6)
	test/week.iso_week_date(2008, 12, 29) == (2009, 1, 1)
	test/week.iso_week_date(2004, 12, 31) == (2004, 53, 5)
	test/week.iso_week_date(2008, 1, 1) == (2008, 1, 2)

def test_weekday_names(test):
	test/week.weekday_name_to_number['friday'] == 5
	test/week.weekday_name_to_number['fri'] == 5
	test/week.weekday_name_to_number['sun'] == 0
	test/week.days_in_week == 7

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
