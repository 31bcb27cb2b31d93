"""
# Typed System Clock access.
"""
import time
from . import types

def now(read=time.time_ns) -> types.Instant:
	"""
	# Get the current point in time according to the system's real clock as a &types.Instant.
	"""
	seconds, nanosecond = divmod(read(), 1000000000)
	return types.Instant.from_unix(seconds, nanosecond)

def today(read=time.time_ns) -> types.Instant:
	"""
	# Get the current UTC date as a &types.Instant whose time of day is zero.
	"""
	return types.Instant(now(read).day)
