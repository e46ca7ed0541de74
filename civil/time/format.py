"""
# Format and parse the canonical text of the value types.

# The functions here operate on integer components; the value types render
# themselves through &formatter and construct themselves from the components
# returned by &parser. Each format is identified by a string:

# - `'date'`, `2007-12-03`
# - `'time'`, `10:15:30.123`
# - `'datetime'`, `2007-12-03T10:15:30`
# - `'offset-datetime'`, `2007-12-03T10:15:30+01:00`
# - `'zoned-datetime'`, `2007-12-03T10:15:30+01:00[Europe/Paris]`
# - `'instant'`, `2007-12-03T10:15:30Z`
# - `'offset'`, `+01:00`
# - `'offset-time'`, `10:15:30+01:00`
# - `'year'`, `2007`
# - `'year-month'`, `2007-12`
# - `'month-day'`, `--12-03`
# - `'duration'`, `PT8H6M12.345S`
# - `'period'`, `P1Y2M3D`

# Failures raise &core.ParseError carrying the text and the index where parsing
# stopped. Errors raised while constructing a value from parsed components are
# wrapped by &structure in a &core.ParseError with the original error as the
# cause.
"""
import re
import functools

from . import core
from . import exact

def year(y):
	"""
	# Render a year with at least four digits. Years outside of `0000-9999`
	# carry a sign.
	"""
	if abs(y) < 1000:
		if y < 0:
			return '-%04d' %(-y,)
		return '%04d' %(y,)
	if y > 9999:
		return '+' + str(y)
	return str(y)

def date(y, m, d):
	return '%s-%02d-%02d' %(year(y), m, d)

def fraction(nano):
	"""
	# Render the nanoseconds of a second as a fraction in groups of three digits.
	"""
	if nano == 0:
		return ''
	if nano % 1_000_000 == 0:
		return '.%03d' %(nano // 1_000_000,)
	if nano % 1_000 == 0:
		return '.%06d' %(nano // 1_000,)
	return '.%09d' %(nano,)

def time(h, m, s, n):
	"""
	# Render a time of day omitting the seconds and the fraction when they are zero.
	"""
	text = '%02d:%02d' %(h, m)
	if s > 0 or n > 0:
		text += ':%02d' %(s,) + fraction(n)
	return text

def offset(total):
	"""
	# Render the offset, &total, in seconds as `Z` or `±HH:MM[:SS]`.
	"""
	if total == 0:
		return 'Z'
	sign = '-' if total < 0 else '+'
	absolute = abs(total)
	h, rem = divmod(absolute, 3600)
	m, s = divmod(rem, 60)
	text = '%s%02d:%02d' %(sign, h, m)
	if s:
		text += ':%02d' %(s,)
	return text

def datetime(date_parts, time_parts):
	return date(*date_parts) + 'T' + time(*time_parts)

def offset_datetime(date_parts, time_parts, offset_seconds):
	return datetime(date_parts, time_parts) + offset(offset_seconds)

def zoned_datetime(date_parts, time_parts, offset_seconds, zone=None):
	text = offset_datetime(date_parts, time_parts, offset_seconds)
	if zone is not None:
		text += '[' + zone + ']'
	return text

def instant(date_parts, time_parts):
	"""
	# Render an instant in UTC; the seconds are always present.
	"""
	h, m, s, n = time_parts
	return date(*date_parts) + 'T' + ('%02d:%02d:%02d' %(h, m, s)) + fraction(n) + 'Z'

def offset_time(time_parts, offset_seconds):
	return time(*time_parts) + offset(offset_seconds)

def year_month(y, m):
	return '%s-%02d' %(year(y), m)

def month_day(m, d):
	return '--%02d-%02d' %(m, d)

def period(years, months, days):
	if years == 0 and months == 0 and days == 0:
		return 'P0D'
	text = 'P'
	if years != 0:
		text += str(years) + 'Y'
	if months != 0:
		text += str(months) + 'M'
	if days != 0:
		text += str(days) + 'D'
	return text

def duration(seconds, nanos, quotient=exact.quotient, remainder=exact.remainder):
	"""
	# Render a duration in hours, minutes, and fractional seconds.
	# Days are not used so that the text does not imply a calendar.
	"""
	if seconds == 0 and nanos == 0:
		return 'PT0S'

	effective = seconds
	if seconds < 0 and nanos > 0:
		effective += 1
	hours = quotient(effective, 3600)
	minutes = quotient(remainder(effective, 3600), 60)
	secs = remainder(effective, 60)

	text = 'PT'
	if hours != 0:
		text += str(hours) + 'H'
	if minutes != 0:
		text += str(minutes) + 'M'
	if secs == 0 and nanos == 0 and len(text) > 2:
		return text

	if seconds < 0 and nanos > 0 and secs == 0:
		text += '-0'
	else:
		text += str(secs)

	if nanos > 0:
		if seconds < 0:
			digits = str(2 * 1_000_000_000 - nanos)
		else:
			digits = str(nanos + 1_000_000_000)
		text += '.' + digits[1:].rstrip('0')
	return text + 'S'

formatters = {
	'date': date,
	'time': time,
	'datetime': datetime,
	'offset-datetime': offset_datetime,
	'zoned-datetime': zoned_datetime,
	'instant': instant,
	'offset': offset,
	'offset-time': offset_time,
	'year': year,
	'year-month': year_month,
	'month-day': month_day,
	'period': period,
	'duration': duration,
}

def formatter(fmt):
	"""
	# Given a format identifier, return the function rendering the components.
	"""
	return formatters[fmt]

class Cursor(object):
	"""
	# Position within the text being parsed.
	"""
	__slots__ = ('source', 'position', 'format')

	def __init__(self, source, format):
		self.source = source
		self.position = 0
		self.format = format

	def error(self, message, position=None):
		if position is None:
			position = self.position
		return core.ParseError(self.source, position, message, self.format)

	def peek(self):
		if self.position < len(self.source):
			return self.source[self.position]
		return ''

	def literal(self, characters):
		c = self.peek()
		if not c or c not in characters:
			raise self.error("expected " + ' or '.join(repr(x) for x in characters))
		self.position += 1
		return c

	def optional(self, characters):
		c = self.peek()
		if c and c in characters:
			self.position += 1
			return c
		return None

	def digits(self, minimum, maximum=None):
		if maximum is None:
			maximum = minimum
		start = self.position
		end = start
		limit = min(len(self.source), start + maximum)
		while end < limit and self.source[end] in '0123456789':
			end += 1
		if end - start < minimum:
			raise self.error("expected %d digits" %(minimum,), start)
		self.position = end
		return self.source[start:end]

	def number(self, count):
		return int(self.digits(count))

	def finish(self):
		if self.position != len(self.source):
			raise self.error("unparsed text found")

def read_year(cursor):
	start = cursor.position
	sign = cursor.optional('+-')
	if sign is None:
		return cursor.number(4)
	digits = cursor.digits(4, 10)
	if sign == '-' and int(digits) == 0:
		raise cursor.error("negative year zero", start)
	if sign == '-':
		return -int(digits)
	return int(digits)

def read_date(cursor):
	y = read_year(cursor)
	cursor.literal('-')
	m = cursor.number(2)
	cursor.literal('-')
	d = cursor.number(2)
	return (y, m, d)

def read_time(cursor):
	h = cursor.number(2)
	cursor.literal(':')
	m = cursor.number(2)
	s = n = 0
	if cursor.optional(':'):
		s = cursor.number(2)
		if cursor.optional('.'):
			digits = cursor.digits(0, 9)
			n = int(digits.ljust(9, '0'))
	return (h, m, s, n)

def read_offset(cursor):
	if cursor.optional('Z'):
		return 0
	sign = cursor.literal('+-')
	h = cursor.number(2)
	cursor.literal(':')
	m = cursor.number(2)
	s = 0
	if cursor.optional(':'):
		s = cursor.number(2)
	if h > 18 or m > 59 or s > 59:
		raise cursor.error("invalid offset")
	total = (h * 3600) + (m * 60) + s
	if sign == '-':
		return -total
	return total

def read_datetime(cursor):
	d = read_date(cursor)
	cursor.literal('T')
	t = read_time(cursor)
	return d, t

def parse_date(cursor):
	return read_date(cursor)

def parse_time(cursor):
	return read_time(cursor)

def parse_datetime(cursor):
	return read_datetime(cursor)

def parse_offset_datetime(cursor):
	d, t = read_datetime(cursor)
	return d, t, read_offset(cursor)

def parse_zoned_datetime(cursor):
	d, t = read_datetime(cursor)
	o = read_offset(cursor)
	zone = None
	if cursor.optional('['):
		start = cursor.position
		end = cursor.source.find(']', start)
		if end <= start:
			raise cursor.error("unterminated zone identifier")
		zone = cursor.source[start:end]
		cursor.position = end + 1
	return d, t, o, zone

def parse_instant(cursor):
	d, t = read_datetime(cursor)
	return d, t, read_offset(cursor)

def parse_offset(cursor):
	return (read_offset(cursor),)

def parse_offset_time(cursor):
	t = read_time(cursor)
	return t, read_offset(cursor)

def parse_year(cursor):
	return (read_year(cursor),)

def parse_year_month(cursor):
	y = read_year(cursor)
	cursor.literal('-')
	return (y, cursor.number(2))

def parse_month_day(cursor):
	cursor.literal('-')
	cursor.literal('-')
	m = cursor.number(2)
	cursor.literal('-')
	return (m, cursor.number(2))

duration_pattern = re.compile(
	r"([-+]?)P(?:([-+]?[0-9]+)D)?"
	r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
	re.IGNORECASE
)

period_pattern = re.compile(
	r"([-+]?)P(?:([-+]?[0-9]+)Y)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)W)?(?:([-+]?[0-9]+)D)?",
	re.IGNORECASE
)

def parse_duration(cursor):
	"""
	# Parse `PnDTnHnMn.nS` into (negate, days, hours, minutes, seconds, nanos).
	"""
	text = cursor.source
	match = duration_pattern.fullmatch(text)
	if match is None or match.group(3) == 'T' or match.group(3) == 't':
		raise cursor.error("text cannot be parsed to a Duration", 0)
	if all(match.group(i) is None for i in (2, 4, 5, 6)):
		raise cursor.error("text cannot be parsed to a Duration", 0)

	negate = match.group(1) == '-'
	days, hours, minutes, seconds = [int(match.group(i) or 0) for i in (2, 4, 5, 6)]
	fraction = match.group(7)
	nanos = 0
	if fraction:
		nanos = int(fraction.ljust(9, '0'))
		if (match.group(6) or '').startswith('-'):
			nanos = -nanos
	cursor.position = len(text)
	return (negate, days, hours, minutes, seconds, nanos)

def parse_period(cursor):
	"""
	# Parse `PnYnMnWnD` into (years, months, weeks, days) applying the leading sign.
	"""
	text = cursor.source
	match = period_pattern.fullmatch(text)
	if match is None or all(match.group(i) is None for i in (2, 3, 4, 5)):
		raise cursor.error("text cannot be parsed to a Period", 0)
	sign = -1 if match.group(1) == '-' else 1
	cursor.position = len(text)
	return tuple(sign * int(match.group(i) or 0) for i in (2, 3, 4, 5))

parsers = {
	'date': parse_date,
	'time': parse_time,
	'datetime': parse_datetime,
	'offset-datetime': parse_offset_datetime,
	'zoned-datetime': parse_zoned_datetime,
	'instant': parse_instant,
	'offset': parse_offset,
	'offset-time': parse_offset_time,
	'year': parse_year,
	'year-month': parse_year_month,
	'month-day': parse_month_day,
	'period': parse_period,
	'duration': parse_duration,
}

def _parse(fun, format):
	def EXCEPTION(src, fun=fun, format=format):
		if not isinstance(src, str):
			raise TypeError("text must be a str, not " + type(src).__name__)
		cursor = Cursor(src, format)
		try:
			result = fun(cursor)
			cursor.finish()
			return result
		except core.ParseError:
			raise
		except Exception as e:
			parse_error = core.ParseError(src, cursor.position, str(e), format=format)
			parse_error.__cause__ = e
			raise parse_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(src, parts, fun=fun, format=format):
		try:
			return fun(*parts)
		except core.ParseError:
			raise
		except core.Error as e:
			struct_error = core.ParseError(src, 0, str(e), format=format)
			struct_error.__cause__ = e
			raise struct_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def parser(fmt):
	"""
	# Given a format identifier, return the function parsing text into the
	# tuple of components of the format.
	"""
	return _parse(parsers[fmt], fmt)

def structure(fmt, text, constructor):
	"""
	# Parse &text using the format, &fmt, and construct the value by calling
	# &constructor with the parsed components.
	"""
	return _structure(constructor, fmt)(text, parser(fmt)(text))
