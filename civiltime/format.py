"""
# Render instants as strings using templates.

# A template is a sequence of &Token instances. Literal tokens carry text and field
# tokens name a part of the decoded instant along with a padding width and pad
# character. The instant is decoded once and every token is rendered from the
# resulting &types.Civil fields.

#!python
	from civiltime import format, libzone
	t = format.template(format.field('year', 4), '-', format.field('month', 2))
	format.render(instant, t, libzone.utc)

# [ Elements ]

# /ISO8601/
	# `2008-06-05T04:03:02.000001-05:00`
# /RFC3339/
	# `2008-06-05T04:03:02.000001Z`; `Z` replaces a zero offset.
# /RFC3339_NANOSECOND/
	# `2008-06-05T04:03:02.000001000Z`; full precision.
# /RFC3339_DATE/
	# `2008-06-05`
# /RFC1123/
	# `Thu, 05 Jun 2008 04:03:02 +0000`
# /ASCTIME/
	# `Thu Jun  5 04:03:02 2008`
# /ISO_WEEK_DATE/
	# `2008-W23-4`
"""
import collections
from . import gregorian
from . import week
from . import civil
from . import libzone

#: Template token. Literal tokens have a &None field and carry their &text.
Token = collections.namedtuple('Token', ('field', 'width', 'pad', 'text'))

def literal(text):
	"""
	# Construct a token rendering the &text as is.
	"""
	return Token(None, 0, '', text)

def field(name, width=0, pad='0'):
	"""
	# Construct a token rendering the &name field.

	# [ Parameters ]
	# /width/
		# Minimum width of numeric fields; the sign is not counted.
	# /pad/
		# Character used to fill to the &width.
	"""
	if name not in renderers:
		raise ValueError("unknown format field %r" %(name,))
	return Token(name, width, pad, None)

def template(*parts):
	"""
	# Construct a template from a sequence of strings and &Token instances;
	# strings are literal.
	"""
	return tuple([
		x if isinstance(x, Token) else literal(x)
		for x in parts
	])

def ordinal_suffix(n):
	"""
	# The english ordinal suffix of the number: st, nd, rd, or th.
	"""
	if 10 <= (n % 100) <= 20:
		return 'th'
	return {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')

def format_offset(offset, separator=':', zulu=False):
	"""
	# Render an offset in seconds as `+hh:mm`; `+hh:mm:ss` when the offset
	# has seconds, as local mean time offsets do.
	"""
	if zulu and offset == 0:
		return 'Z'
	sign = '-' if offset < 0 else '+'
	minutes, seconds = divmod(abs(offset), 60)
	hours, minutes = divmod(minutes, 60)
	if seconds:
		return "%s%02d%s%02d%s%02d" %(sign, hours, separator, minutes, separator, seconds)
	return "%s%02d%s%02d" %(sign, hours, separator, minutes)

class Snapshot(object):
	"""
	# The decoded fields of an instant along with the derived week data.
	# ISO week fields are calculated on first access.
	"""
	__slots__ = ('civil', '_iso')

	def __init__(self, civil):
		self.civil = civil
		self._iso = None

	@property
	def iso(self):
		if self._iso is None:
			c = self.civil
			self._iso = week.iso_week_date(c.year, c.month, c.day)
		return self._iso

def _hour12(c):
	h = c.hour % 12
	return 12 if h == 0 else h

#: Field renderers returning either an integer, padded by &pad, or a string.
renderers = {
	'year': lambda s: s.civil.year,
	'short_year': lambda s: s.civil.year % 100,
	'century': lambda s: gregorian.century(s.civil.year),
	'month': lambda s: s.civil.month,
	'month_name': lambda s: gregorian.month_names[s.civil.month - 1].capitalize(),
	'month_abbreviation': lambda s: gregorian.month_abbreviations[s.civil.month - 1].capitalize(),
	'day': lambda s: s.civil.day,
	'ordinal_day': lambda s: str(s.civil.day) + ordinal_suffix(s.civil.day),
	'day_of_year': lambda s: gregorian.day_of_year(s.civil.year, s.civil.month, s.civil.day),
	'weekday': lambda s: s.civil.weekday,
	'weekday_name': lambda s: week.weekday_names[s.civil.weekday].capitalize(),
	'weekday_abbreviation': lambda s: week.weekday_abbreviations[s.civil.weekday].capitalize(),
	'hour': lambda s: s.civil.hour,
	'hour12': lambda s: _hour12(s.civil),
	'ampm': lambda s: 'PM' if s.civil.hour >= 12 else 'AM',
	'minute': lambda s: s.civil.minute,
	'second': lambda s: s.civil.second,
	'millisecond': lambda s: s.civil.nanosecond // 1000000,
	'microsecond': lambda s: s.civil.nanosecond // 1000,
	'nanosecond': lambda s: s.civil.nanosecond,
	'utc_offset': lambda s: format_offset(s.civil.offset),
	'utc_offset_hhmm': lambda s: format_offset(s.civil.offset, separator=''),
	'utc_offset_or_z': lambda s: format_offset(s.civil.offset, zulu=True),
	'timezone': lambda s: s.civil.abbreviation,
	'iso_week_year': lambda s: s.iso[0],
	'iso_week_number': lambda s: s.iso[1],
	'iso_weekday': lambda s: s.iso[2],
}

def pad(value, width, character):
	"""
	# Render the integer &value padded to &width; negative values are signed before padding.
	"""
	if value < 0:
		return '-' + str(-value).rjust(width, character)
	return str(value).rjust(width, character)

def render(instant, template=None, zone=None, offset=None):
	"""
	# Render the &instant according to the &template.

	# [ Parameters ]
	# /template/
		# Sequence of &Token instances. Defaults to &RFC3339.
	# /zone/
		# The &views.Zone to render the instant in. Defaults to &libzone.default.
	# /offset/
		# Explicit UTC offset overriding &zone.
	"""
	if template is None:
		template = RFC3339

	snapshot = Snapshot(civil.decode(instant, zone, offset))
	out = []
	for token in template:
		if token.field is None:
			out.append(token.text)
			continue

		value = renderers[token.field](snapshot)
		if isinstance(value, int):
			out.append(pad(value, token.width, token.pad))
		else:
			out.append(value.rjust(token.width, token.pad) if token.width else value)

	return ''.join(out)

ISO8601 = template(
	field('year', 4), '-', field('month', 2), '-', field('day', 2),
	'T', field('hour', 2), ':', field('minute', 2), ':', field('second', 2),
	'.', field('microsecond', 6), field('utc_offset'),
)

RFC3339 = template(
	field('year', 4), '-', field('month', 2), '-', field('day', 2),
	'T', field('hour', 2), ':', field('minute', 2), ':', field('second', 2),
	'.', field('microsecond', 6), field('utc_offset_or_z'),
)

RFC3339_NANOSECOND = template(
	field('year', 4), '-', field('month', 2), '-', field('day', 2),
	'T', field('hour', 2), ':', field('minute', 2), ':', field('second', 2),
	'.', field('nanosecond', 9), field('utc_offset_or_z'),
)

RFC3339_DATE = template(
	field('year', 4), '-', field('month', 2), '-', field('day', 2),
)

RFC1123 = template(
	field('weekday_abbreviation'), ', ', field('day', 2), ' ',
	field('month_abbreviation'), ' ', field('year', 4), ' ',
	field('hour', 2), ':', field('minute', 2), ':', field('second', 2), ' ',
	field('utc_offset_hhmm'),
)

ASCTIME = template(
	field('weekday_abbreviation'), ' ', field('month_abbreviation'), ' ',
	field('day', 2, ' '), ' ',
	field('hour', 2), ':', field('minute', 2), ':', field('second', 2), ' ',
	field('year', 4),
)

ISO_WEEK_DATE = template(
	field('iso_week_year', 4), '-W', field('iso_week_number', 2), '-', field('iso_weekday', 1),
)

def format_rfc3339(instant, zone=None, offset=None):
	"""
	# Render the &instant as an RFC 3339 timestring.
	"""
	return render(instant, RFC3339, zone, offset)

def format_rfc1123(instant):
	"""
	# Render the &instant as an RFC 1123 timestring in GMT.
	"""
	return render(instant, RFC1123, libzone.utc)
