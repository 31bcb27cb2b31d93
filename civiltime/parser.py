"""
# Parse RFC 3339 and ISO-8601 family timestrings.

# The grammar is a full date and full time joined by a separator, a date alone, or
# a time alone:

#!text
	timestring = full-date sep full-time | full-date | full-time
	full-date = [+-]year "-" month "-" day
	full-time = hour ":" minute ":" second [fraction] [zone]
	fraction = ("." | ",") digit+
	zone = "Z" | ("+" | "-") hour [":" minute [":" second]]

# Each production of &Parser takes the text and a cursor and returns the advanced
# cursor along with the value it consumed. Failures raise &core.InvalidTimestring.

#!python
	from civiltime import parser
	i = parser.parse_timestring("2006-01-01T00:00:00,0")
	f = parser.Parser().fields("10:30:00+01:00")
	assert f.year is None and f.offset == 3600
"""
from . import core
from . import types
from . import gregorian
from . import civil

#: Multiplier of a fraction with the indexed number of digits to nanoseconds.
fraction_scale = tuple(10 ** (9 - i) for i in range(10))

#: Maximum number of significant fraction digits.
fraction_digits = len(fraction_scale) - 1

class Fields(object):
	"""
	# The raw field values of a timestring; absent fields are &None.
	"""
	__slots__ = (
		'year', 'month', 'day',
		'hour', 'minute', 'second', 'nanosecond',
		'offset',
	)

	def __init__(self):
		for x in self.__slots__:
			setattr(self, x, None)

	def __repr__(self):
		return '<%s %s>' %(
			self.__class__.__name__,
			' '.join('%s=%r' %(x, getattr(self, x)) for x in self.__slots__ if getattr(self, x) is not None)
		)

	def __eq__(self, ob):
		if not isinstance(ob, Fields):
			return NotImplemented
		return all(getattr(self, x) == getattr(ob, x) for x in self.__slots__)

	@property
	def date(self):
		"""
		# The `(year, month, day)` tuple; &None when the date was absent.
		"""
		if self.year is None:
			return None
		return (self.year, self.month, self.day)

	@property
	def time(self):
		"""
		# The `(hour, minute, second, nanosecond)` tuple; &None when the time was absent.
		"""
		if self.hour is None:
			return None
		return (self.hour, self.minute, self.second, self.nanosecond)

class Parser(object):
	"""
	# Configured timestring parser.

	# [ Properties ]
	# /date_separator/
		# Character separating the fields of the date.
	# /time_separator/
		# Character separating the fields of the time.
	# /date_time_separators/
		# Characters accepted between the date and the time.
	# /fraction_separators/
		# Characters accepted before the fractional seconds.
	# /allow_missing_date/
		# Accept timestrings consisting of a time alone.
	# /allow_missing_time/
		# Accept timestrings consisting of a date alone.
	# /allow_missing_timezone/
		# Accept times without a zone designator.
	"""

	def __init__(self,
			date_separator='-',
			time_separator=':',
			date_time_separators='Tt ',
			fraction_separators='.,',
			allow_missing_date=True,
			allow_missing_time=True,
			allow_missing_timezone=True,
		):
		self.date_separator = date_separator
		self.time_separator = time_separator
		self.date_time_separators = date_time_separators
		self.fraction_separators = fraction_separators
		self.allow_missing_date = allow_missing_date
		self.allow_missing_time = allow_missing_time
		self.allow_missing_timezone = allow_missing_timezone

	def digits(self, text, cursor, what):
		"""
		# Consume one or more decimal digits.
		"""
		end = cursor
		while end < len(text) and '0' <= text[end] <= '9':
			end += 1
		if end == cursor:
			raise core.InvalidTimestring(text, "expected digits of the " + what, cursor)
		return (end, text[cursor:end])

	def integer(self, text, cursor, what, minimum, maximum):
		"""
		# Consume an unsigned integer in the range `[minimum, maximum]`.
		"""
		end, digits = self.digits(text, cursor, what)
		value = int(digits)
		if value < minimum or value > maximum:
			raise core.InvalidTimestring(text,
				"%s %d is not in [%d, %d]" %(what, value, minimum, maximum), cursor)
		return (end, value)

	def separator(self, text, cursor, characters, what):
		"""
		# Consume one of the &characters.
		"""
		if cursor >= len(text) or text[cursor] not in characters:
			raise core.InvalidTimestring(text, "expected " + what, cursor)
		return (cursor + 1, text[cursor])

	def year(self, text, cursor):
		sign = 1
		if cursor < len(text) and text[cursor] in '+-':
			if text[cursor] == '-':
				sign = -1
			cursor += 1
		end, digits = self.digits(text, cursor, 'year')
		return (end, sign * int(digits))

	def date(self, text, cursor):
		"""
		# Consume a full date. The day is not checked against the length of the month.
		"""
		cursor, year = self.year(text, cursor)
		cursor, _ = self.separator(text, cursor, self.date_separator, 'date separator')
		cursor, month = self.integer(text, cursor, 'month', 1, 12)
		cursor, _ = self.separator(text, cursor, self.date_separator, 'date separator')
		cursor, day = self.integer(text, cursor, 'day', 1, 31)
		return (cursor, (year, month, day))

	def fraction(self, text, cursor):
		"""
		# Consume the digits of fractional seconds returning nanoseconds.
		"""
		start = cursor
		cursor, digits = self.digits(text, cursor, 'fraction')
		digits = digits.rstrip('0')
		if len(digits) > fraction_digits:
			raise core.InvalidTimestring(text,
				"fraction has more than %d significant digits" %(fraction_digits,), start)
		return (cursor, int(digits or '0') * fraction_scale[len(digits)])

	def time(self, text, cursor):
		"""
		# Consume a time of day without the zone.
		"""
		cursor, hour = self.integer(text, cursor, 'hour', 0, 23)
		cursor, _ = self.separator(text, cursor, self.time_separator, 'time separator')
		cursor, minute = self.integer(text, cursor, 'minute', 0, 59)
		cursor, _ = self.separator(text, cursor, self.time_separator, 'time separator')
		cursor, second = self.integer(text, cursor, 'second', 0, 59)

		nanosecond = 0
		if cursor < len(text) and text[cursor] in self.fraction_separators:
			cursor, nanosecond = self.fraction(text, cursor + 1)

		return (cursor, (hour, minute, second, nanosecond))

	def zone(self, text, cursor):
		"""
		# Consume the zone designator returning the UTC offset in seconds.
		# &None is returned when the designator is absent and permitted.
		"""
		if cursor >= len(text):
			if not self.allow_missing_timezone:
				raise core.InvalidTimestring(text, "zone designator is missing", cursor)
			return (cursor, None)

		c = text[cursor]
		if c in 'Zz':
			return (cursor + 1, 0)
		elif c in '+-':
			sign = -1 if c == '-' else 1
			separators = ':' + self.time_separator
			cursor, hours = self.integer(text, cursor + 1, 'offset hour', 0, 23)
			minutes = seconds = 0
			if cursor < len(text) and text[cursor] in separators:
				cursor, minutes = self.integer(text, cursor + 1, 'offset minute', 0, 59)
				# Local mean time offsets carry seconds.
				if cursor < len(text) and text[cursor] in separators:
					cursor, seconds = self.integer(text, cursor + 1, 'offset second', 0, 59)
			return (cursor, sign * ((hours * 3600) + (minutes * 60) + seconds))

		raise core.InvalidTimestring(text, "expected zone designator", cursor)

	def split(self, text):
		"""
		# Index of the date and time separator; `-1` when absent.
		"""
		for i, c in enumerate(text):
			if c in self.date_time_separators:
				return i
		return -1

	def leads_with_time(self, text):
		"""
		# Whether the text begins with an hour field.
		"""
		end = 0
		while end < len(text) and '0' <= text[end] <= '9':
			end += 1
		return end > 0 and end < len(text) and text[end] == self.time_separator

	def fields(self, text):
		"""
		# Parse the &text into &Fields.
		"""
		if not isinstance(text, str):
			raise core.InvalidTimestring(text, "timestring is not a string")
		if not text:
			raise core.InvalidTimestring(text, "timestring is empty", 0)

		f = Fields()
		cursor = 0
		split = self.split(text)

		if split != -1 or not self.leads_with_time(text):
			cursor, (f.year, f.month, f.day) = self.date(text, cursor)
			if split == -1 and cursor == len(text):
				if not self.allow_missing_time:
					raise core.InvalidTimestring(text, "time is missing", cursor)
				return f
			cursor, _ = self.separator(text, cursor, self.date_time_separators, 'date and time separator')
		elif not self.allow_missing_date:
			raise core.InvalidTimestring(text, "date is missing", 0)

		cursor, (f.hour, f.minute, f.second, f.nanosecond) = self.time(text, cursor)
		cursor, f.offset = self.zone(text, cursor)

		if cursor != len(text):
			raise core.InvalidTimestring(text, "unexpected characters", cursor)
		return f

	def parse(self, text, zone=None, offset=0, date=None, fail=True):
		"""
		# Parse the &text into a &types.Instant.

		# [ Parameters ]
		# /zone/
			# The &views.Zone used when the timestring has no zone designator
			# and &offset is &None.
		# /offset/
			# The UTC offset used when the timestring has no zone designator.
		# /date/
			# The `(year, month, day)`, or an Instant whose UTC date, is used when the
			# timestring has no date. Defaults to the datum, 2000-03-01.
		# /fail/
			# When &False, &None is returned instead of raising
			# &core.InvalidTimestring or &core.InvalidTimeSpecification.
		"""
		try:
			f = self.fields(text)
			return self.encode(f, zone, offset, date)
		except (core.InvalidTimestring, core.InvalidTimeSpecification):
			if fail:
				raise
			return None

	def encode(self, fields, zone=None, offset=0, date=None):
		"""
		# Construct the instant of the parsed &fields substituting the defaults for
		# the absent parts.
		"""
		ymd = fields.date
		if ymd is None:
			if date is None:
				ymd = core.datum
			elif isinstance(date, types.Instant):
				ymd = gregorian.date_from_days(date.day)
			else:
				ymd = tuple(date)

		hms = fields.time or (0, 0, 0, 0)
		if fields.offset is not None:
			offset = fields.offset

		return civil.encode(*ymd, *hms, zone=zone, offset=offset)

#: The default, lenient, parser.
default = Parser()

#: Strict RFC 3339 parser; every part is required.
rfc3339 = Parser(
	fraction_separators='.',
	allow_missing_date=False,
	allow_missing_time=False,
	allow_missing_timezone=False,
)

def parse_timestring(text, zone=None, offset=0, date=None, fail=True, **options):
	"""
	# Parse the &text using a &Parser configured with &options.
	"""
	p = Parser(**options) if options else default
	return p.parse(text, zone=zone, offset=offset, date=date, fail=fail)

def parse_rfc3339(text, fail=True):
	"""
	# Parse a complete RFC 3339 timestring.
	"""
	return rfc3339.parse(text, fail=fail)
