"""
# Primary public module.

# Provides access to the &types.Instant type, zones, and the encoding, arithmetic,
# parsing, and formatting operations.
"""
import functools

from . import views
from . import libzone

__shortname__ = 'libtime'

from .core import *
from .types import Instant, Subzone, Civil
from .civil import valid, encode, decode, subzone, localize
from .civil import from_unix, to_unix, from_universal, to_universal
from .civil import julian_day_number, modified_julian_day, julian_date
from .gregorian import year_is_leap, days_in_month
from .arithmetic import elapse, rollback, adjust, minimize, maximize
from .arithmetic import SetPart, OffsetPart, PinTimezone, PinOffset
from .arithmetic import compare, precedes, follows, minimum, maximum
from .arithmetic import difference, measure, whole_year_difference
from .parser import Parser, parse_timestring, parse_rfc3339
from .format import render, format_rfc3339, format_rfc1123
from .format import ISO8601, RFC3339, RFC3339_NANOSECOND, RFC3339_DATE, RFC1123, ASCTIME, ISO_WEEK_DATE
from .sysclock import now, today

#: The fixed UTC zone.
utc = libzone.utc

#: Zone repository context type.
Repository = libzone.Repository

def unix(unix_timestamp, nanosecond=0) -> Instant:
	"""
	# Create an &Instant from seconds since the unix epoch.
	"""
	return from_unix(unix_timestamp, nanosecond)

def default_zone() -> views.Zone:
	"""
	# Get the process' default zone.
	"""
	return libzone.default()

def select_default_zone(zone:views.Zone) -> views.Zone:
	"""
	# Replace the process' default zone returning the previous one.
	"""
	return libzone.select_default(zone)

def zone(name:str=None,
		zone_open=functools.lru_cache()(views.Zone.open),
	) -> views.Zone:
	"""
	# Return a loaded Zone object for the location &name in the system's zone
	# directory; the host's local zone when &name is &None.
	"""
	return zone_open(name)
