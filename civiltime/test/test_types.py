import pickle
from .. import core
from .. import types

def test_instant_normalization(test):
	test/types.Instant(0, -1) == types.Instant(-1, 86399)
	test/types.Instant(0, 0, -1) == (-1, 86399, 999999999)
	test/types.Instant(0, 86400) == (1, 0, 0)
	test/types.Instant(0, 0, core.nanoseconds_in_second * 86400) == (1, 0, 0)
	test/types.Instant(5, 86400 * -3 + 10, 1) == (2, 10, 1)

def test_instant_fields(test):
	i = types.Instant(10, 3600, 500)
	test/i.day == 10
	test/i.second == 3600
	test/i.nanosecond == 500
	test/repr(i) == "Instant(10, 3600, 500)"

def test_instant_refinements(test):
	test/types.Instant(0, 30).is_time() == True
	test/types.Instant(1, 30).is_time() == False
	test/types.Instant(3).is_date() == True
	test/types.Instant(3, 0, 1).is_date() == False

def test_instant_replace(test):
	i = types.Instant(10, 20, 30)
	test/i.replace(day=1) == (1, 20, 30)
	test/i.replace(second=86401) == (11, 1, 30)
	test/i.replace() == i
	test.isinstance(i.replace(nanosecond=0), types.Instant)

def test_instant_ordering(test):
	a = types.Instant(0, 0, 1)
	b = types.Instant(0, 1, 0)
	c = types.Instant(1, 0, 0)
	test/a < b
	test/b < c
	test/a < c
	test/types.Instant(-1, 86399, 999999999) < types.Instant(0)

def test_instant_unix(test):
	test/types.Instant.from_unix(0) == types.Instant(core.unix_epoch_day, 0, 0)
	test/types.Instant.from_unix(0).unix() == 0
	test/types.Instant(0).unix() == 951868800
	test/types.Instant.from_unix(-1).unix() == -1
	test/types.Instant.from_unix(1, 5).unix_nanoseconds() == 1000000005
	test/types.Instant.from_unix(-1, 5).unix_nanoseconds() == -999999995

def test_instant_pickle(test):
	i = types.Instant(7, 8, 9)
	j = pickle.loads(pickle.dumps(i))
	test/j == i
	test.isinstance(j, types.Instant)

def test_subzone(test):
	est = types.Subzone((-18000, 'EST', 'std'))
	edt = types.Subzone((-14400, 'EDT', 'dst'))
	test/est.utc_offset == -18000
	test/est.abbreviation == 'EST'
	test/est.is_dst == False
	test/edt.is_dst == True
	test/edt.type == 'dst'
	test/int(edt) == -14400
	test/str(est) == 'EST-18000'
	test/str(types.Subzone((3600, 'CET', 'std'))) == 'CET+3600'

def test_subzone_from_offset(test):
	test/types.Subzone.from_offset(0) == (0, 'UTC', 'std')
	test/types.Subzone.from_offset(3600) == (3600, '+01:00', 'std')
	test/types.Subzone.from_offset(-19800) == (-19800, '-05:30', 'std')
	test/types.offset_abbreviation(20700) == '+05:45'

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
