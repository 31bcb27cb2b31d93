"""
# Read TZif, time zone information, files(zic output).

# Only the version 1 block, 4-byte times, is read. The data sections are consumed in
# the order: transition times, transition types, type records, leap-second pairs,
# abbreviation characters, wall indicators, and UTC indicators.

# Any defect in the data raises &core.InvalidTimezoneFile.
"""
import struct
import collections
from . import core

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'

#: Size of the reserved area following the &magic; includes the version byte.
reserved_size = 16

header_fields = (
	'tzh_ttisutcnt',   # The number of UTC/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of ``transition times'' for which data is stored in the file.
	'tzh_typecnt',     # The number of ``local time types'' for which data is stored in the file (must not be zero).
	'tzh_charcnt',     # The number of characters of ``time zone abbreviation strings'' stored in the file.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)
header_struct = struct.Struct("!" + (len(header_fields) * "L"))

ttinfo_fields = (
	'tt_utoff',
	'tt_isdst',
	'tt_abbrind',
)
tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ttinfo_fields)
ttinfo_struct = struct.Struct("!lBB")

transtime_struct = struct.Struct("!l")
leappairs_struct = struct.Struct("!ll")

#: The structured contents of a TZif image.
tzdata = collections.namedtuple('tzdata', (
	'transitions',
	'indices',
	'types',
	'leaps',
	'isstd',
	'isut',
))

#: A resolved type record.
tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
))

class Reader(object):
	"""
	# Cursor over a TZif image that refuses short reads.
	"""
	__slots__ = ('data', 'position', 'path')

	def __init__(self, data, path=None):
		self.data = memoryview(data)
		self.position = 0
		self.path = path

	def take(self, size, what):
		start = self.position
		stop = start + size
		if stop > len(self.data):
			raise core.InvalidTimezoneFile(self.path,
				"truncated data reading %s; needed %d bytes at offset %d, have %d" %(
					what, size, start, len(self.data) - start
				)
			)
		self.position = stop
		return self.data[start:stop]

	def unpack(self, st, count, what):
		"""
		# Unpack &count records of the struct &st.
		"""
		block = self.take(st.size * count, what)
		return [x for x in st.iter_unpack(block)]

def parse(data, path=None):
	"""
	# Parse the raw data from a TZif file.

	# Returns a &tzdata instance whose &tzdata.types are &tzinfo records with
	# the abbreviations resolved.
	"""
	r = Reader(data, path)

	if bytes(r.take(len(magic), 'magic')) != magic:
		raise core.InvalidTimezoneFile(path, "not a TZif file; magic number is missing")
	r.take(reserved_size, 'reserved header')

	header = tzinfo_header(*header_struct.unpack(r.take(header_struct.size, 'header')))
	if header.tzh_typecnt == 0:
		raise core.InvalidTimezoneFile(path, "no local time types are defined")

	transitions = [x[0] for x in r.unpack(transtime_struct, header.tzh_timecnt, 'transition times')]

	# unsigned char's
	indices = tuple(bytes(r.take(header.tzh_timecnt, 'transition types')))
	for i in indices:
		if i >= header.tzh_typecnt:
			raise core.InvalidTimezoneFile(path,
				"transition type %d is not less than the type count %d" %(i, header.tzh_typecnt))

	ttinfo = [
		tzinfo_ttinfo(*x)
		for x in r.unpack(ttinfo_struct, header.tzh_typecnt, 'local time types')
	]

	leaps = tuple(
		tuple(x) for x in r.unpack(leappairs_struct, header.tzh_leapcnt, 'leap second records')
	)

	abbr = bytes(r.take(header.tzh_charcnt, 'abbreviations'))

	isstd = tuple(bool(x) for x in bytes(r.take(header.tzh_ttisstdcnt, 'wall indicators')))
	isut = tuple(bool(x) for x in bytes(r.take(header.tzh_ttisutcnt, 'UTC indicators')))

	types = []
	for x in ttinfo:
		if x.tt_abbrind > len(abbr):
			raise core.InvalidTimezoneFile(path,
				"abbreviation index %d is outside of the %d character table" %(x.tt_abbrind, len(abbr)))
		end = abbr.find(b'\0', x.tt_abbrind)
		if end == -1:
			end = len(abbr)
		types.append(tzinfo(
			abbr[x.tt_abbrind:end].decode('ascii', 'replace'),
			x.tt_utoff,
			bool(x.tt_isdst),
		))

	return tzdata(transitions, indices, tuple(types), leaps, isstd, isut)

def structure(data):
	"""
	# Order the transitions of the parsed &data by time.

	# Returns a new &tzdata with the transitions and indices sorted together.
	# The sort is stable, so equal times retain the file's order.
	"""
	pairs = sorted(zip(data.transitions, data.indices), key=lambda x: x[0])
	return data._replace(
		transitions = [x[0] for x in pairs],
		indices = tuple([x[1] for x in pairs]),
	)

def load(filepath):
	"""
	# Read and parse the TZif file at &filepath.
	"""
	with open(filepath, 'rb') as f:
		return structure(parse(f.read(), path=filepath))

def is_tzif(filepath):
	"""
	# Whether the file at &filepath begins with the TZif &magic.
	"""
	try:
		with open(filepath, 'rb') as f:
			return f.read(len(magic)) == magic
	except OSError:
		return False
