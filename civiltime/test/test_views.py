import os
import os.path
import tempfile
import threading
from .. import core
from .. import tzif
from .. import views
from . import mock

def test_find_boundaries(test):
	z = mock.eastern()
	est = z.subzones[2]
	edt = z.subzones[1]
	test/z.loaded == True

	# Before the first transition: the first transition's subzone.
	test/z.find(-1000000) == est
	test/z.find(0) == est
	test/z.find(mock.spring_2005 - 1) == est
	test/z.find(mock.spring_2005) == edt
	test/z.find(mock.fall_2005 - 1) == edt
	test/z.find(mock.fall_2005) == est
	test/z.find(mock.spring_2006) == edt
	test/z.find(mock.fall_2006) == est
	test/z.find(mock.fall_2006 + 10**8) == est

def test_find_three_transitions(test):
	img = mock.image([100, 200, 300], [1, 2, 0], [
		(0, False, 'A'), (10, False, 'B'), (20, True, 'C'),
	])
	z = views.Zone.from_tzif_data(tzif.parse(img), name='Three')
	a, b, c = z.subzones
	test/z.find(99) == b
	for t in (100, 150, 199):
		test/z.find(t) == b
	for t in (200, 299):
		test/z.find(t) == c
	for t in (300, 10**9):
		test/z.find(t) == a

def test_fixed(test):
	z = views.Zone.fixed(3600, 'CET')
	test/z.name == 'CET'
	test/z.transitions == []
	test/z.find(0) == (3600, 'CET', 'std')
	test/z.find(-10**12) == z.find(10**12)
	test/views.Zone.fixed(-16200).find(0).abbreviation == '-04:30'
	test/views.Zone.fixed(3600, 'CEST', dst=True).find(0).is_dst == True

def test_zone_without_transitions(test):
	z = views.Zone.from_tzif_data(tzif.parse(mock.fixed_image(19800, 'IST')), name='Asia/Kolkata')
	test/z.find(123456789).utc_offset == 19800
	test/list(z.transitions_with_subzones()) == []

def test_slice(test):
	z = mock.eastern()
	s = list(z.slice(mock.spring_2005, mock.fall_2006))
	test/[x[0] for x in s] == mock.eastern_transitions[1:]
	test/s[0][1].abbreviation == 'EDT'

	s = list(z.slice(mock.spring_2005 + 10, mock.spring_2005 + 20))
	test/s == [(mock.spring_2005, z.subzones[1])]

def test_transitions_with_subzones(test):
	z = mock.eastern()
	l = list(z.transitions_with_subzones())
	test/len(l) == 5
	test/l[0] == (0, z.subzones[2])
	test/[x[1].abbreviation for x in l] == ['EST', 'EDT', 'EST', 'EDT', 'EST']

def test_lazy_load(test):
	tmp = test.exits.enter_context(tempfile.TemporaryDirectory())
	path = mock.write(os.path.join(tmp, 'Eastern'), mock.eastern_image())

	z = views.Zone(path, 'Eastern')
	test/z.state == 'unloaded'
	test/z.loaded == False
	test/z.find(mock.spring_2005).abbreviation == 'EDT'
	test/z.state == 'loaded'

	# Idempotent unless forced.
	mock.write(path, mock.fixed_image(0, 'UTC'))
	test/(z.load() is z) == True
	test/len(z.subzones) == 3
	z.load(reload=True)
	test/len(z.subzones) == 1
	test/z.transitions == []

def test_failed_load(test):
	tmp = test.exits.enter_context(tempfile.TemporaryDirectory())
	path = mock.write(os.path.join(tmp, 'Eastern'), mock.eastern_image())

	z = views.Zone(path, 'Eastern')
	mock.write(path, mock.eastern_image()[:50])
	test/core.InvalidTimezoneFile ^ z.load
	test/z.state == 'unloaded'

	mock.write(path, mock.eastern_image())
	z.load()
	mock.write(path, b'garbage')
	test/core.InvalidTimezoneFile ^ (lambda: z.load(reload=True))
	# Prior tables remain published.
	test/z.state == 'loaded'
	test/z.transitions == mock.eastern_transitions

	test/ValueError ^ views.Zone(None, 'nowhere').load

def test_concurrent_load(test):
	tmp = test.exits.enter_context(tempfile.TemporaryDirectory())
	path = mock.write(os.path.join(tmp, 'Eastern'), mock.eastern_image())
	z = views.Zone(path, 'Eastern')
	results = []

	def query():
		results.append(z.find(mock.spring_2006).abbreviation)

	threads = [threading.Thread(target=query) for x in range(8)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()

	test/results == ['EDT'] * 8
	test/z.state == 'loaded'

def test_open(test):
	tmp = test.exits.enter_context(tempfile.TemporaryDirectory())
	os.mkdir(os.path.join(tmp, 'America'))
	mock.write(os.path.join(tmp, 'America', 'New_York'), mock.eastern_image())

	z = views.Zone.open('America/New_York', tzdir=tmp)
	test/z.name == 'America/New_York'
	test/z.loaded == True
	test/FileNotFoundError ^ (lambda: views.Zone.open('America/Nowhere', tzdir=tmp))

def test_repr(test):
	test/repr(mock.eastern('NY')) == '<Zone: NY[5/3]>'
	test/repr(views.Zone('/x', 'X')) == '<Zone: X[unloaded]>'

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
