"""
# Exceptions and epoch constants shared by the package.

# [ Elements ]

# /Error/
	# Base class of all exceptions raised by the package.
# /InvalidTimezoneFile/
	# Raised by &.tzif when the data is not a TZif image or is truncated.
# /InvalidTimeSpecification/
	# Raised when civil fields are out of range or when a local time
	# cannot be resolved by the zone.
# /InvalidTimestring/
	# Raised by &.parser when a string does not conform to the grammar.
"""

#: Seconds in an earth-day.
seconds_in_day = 86400

#: Nanoseconds in a second.
nanoseconds_in_second = 1000000000

#: The gregorian date of day zero. The start of a 400 year leap cycle.
datum = (2000, 3, 1)

#: Day of 1970-01-01 relative to the &datum.
unix_epoch_day = -11017

#: Day of 1900-01-01 relative to the &datum.
universal_epoch_day = -36584

#: Seconds between 1970-01-01 and the &datum.
unix_epoch_delta = -unix_epoch_day * seconds_in_day

class Error(Exception):
	"""
	# Base class for the package's exceptions.
	"""

class InvalidTimezoneFile(Error):
	"""
	# The given data or file could not be interpreted as TZif.

	# [ Properties ]
	# /path/
		# The file that was being loaded; &None when the data was given directly.
	# /reason/
		# Description of the defect.
	"""

	def __init__(self, path, reason):
		self.path = path
		self.reason = reason
		super().__init__(path, reason)

	def __str__(self):
		if self.path is None:
			return self.reason
		return "%s: %s" %(self.path, self.reason)

class InvalidTimeSpecification(Error):
	"""
	# The civil fields given to an encoding operation do not identify
	# exactly one point in time.

	# [ Properties ]
	# /fields/
		# The `(year, month, day, hour, minute, second, nanosecond)` tuple.
	# /reason/
		# Description of the defect.
	"""

	def __init__(self, fields, reason):
		self.fields = tuple(fields)
		self.reason = reason
		super().__init__(self.fields, reason)

	def __str__(self):
		return "%s: %r" %(self.reason, self.fields)

class InvalidTimestring(Error, ValueError):
	"""
	# The timestring could not be parsed.

	# [ Properties ]
	# /source/
		# The offending text.
	# /reason/
		# Description of the failure.
	# /position/
		# Index into &source where the failure was detected.
	"""

	def __init__(self, source, reason, position=None):
		self.source = source
		self.reason = reason
		self.position = position
		super().__init__(source, reason, position)

	def __str__(self):
		if self.position is None:
			return "%s in %r" %(self.reason, self.source)
		return "%s at %d in %r" %(self.reason, self.position, self.source)
