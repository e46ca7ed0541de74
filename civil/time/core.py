"""
# Exceptions raised by the time package.

# Four kinds of failure are distinguished and never conflated:

# - &RangeError, a value would violate the range of a type or field.
# - &ArithmeticOverflow, integer arithmetic left the 64-bit (or 32-bit) range
  before any range validation could occur.
# - &UnsupportedError, a field or unit was given to a type that does not support it.
# - &ParseError, text did not hold a canonical representation.

# &ZoneNotFound is raised when a zone identifier has no rules.
"""

class Error(Exception):
	"""
	# Base class for the errors raised by the time package.
	"""

class RangeError(Error, ValueError):
	"""
	# A constructed or computed value is outside of the range permitted
	# by the type or field.
	"""

class ArithmeticOverflow(Error, ArithmeticError):
	"""
	# The integer arithmetic performed by an operation overflowed.
	"""

class UnsupportedError(Error):
	"""
	# A field or unit was used with a temporal type that does not support it.
	"""

class ZoneNotFound(Error, LookupError):
	"""
	# The zone identifier could not be found by the rules provider.

	# [ Properties ]
	# /identifier/
		# The zone identifier that was requested.
	"""

	def __init__(self, identifier, message=None):
		super().__init__(message or "unknown time-zone identifier: " + repr(identifier))
		self.identifier = identifier

class ParseError(Error, ValueError):
	"""
	# The text could not be parsed.

	# [ Properties ]
	# /source/
		# The text that was being parsed.
	# /position/
		# The index of &source where the parser failed.
	# /format/
		# The identifier of the format that was being parsed.
	"""

	def __init__(self, source, position=0, message=None, format=None):
		self.source = source
		self.position = position
		self.format = format
		self.message = message
		super().__init__(source, position)

	def __str__(self):
		s = "text {0!r} could not be parsed at index {1}".format(self.source, self.position)
		if self.format is not None:
			s += " as " + self.format
		if self.message:
			s += ": " + self.message
		return s
