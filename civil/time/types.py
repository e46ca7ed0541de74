"""
# Value types of the time package.

# [ Elements ]
# /LocalDate/
	# A date of the proleptic Gregorian calendar.
# /LocalTime/
	# A time of day with nanosecond precision.
# /LocalDateTime/
	# A date and time of day without a zone.
# /Instant/
	# A point on the UTC time-line with nanosecond precision.
# /Year/
	# A year of the proleptic Gregorian calendar.
# /OffsetTime/
	# A time of day with a fixed offset from UTC.
# /OffsetDateTime/
	# A local date-time with a fixed offset from UTC.
# /ZonedDateTime/
	# A local date-time resolved in a zone's rules.
# /Duration/
	# An exact amount of seconds and nanoseconds.
# /Period/
	# An amount of years, months, and days.
"""
from .core import Error, RangeError, ArithmeticOverflow, UnsupportedError, ParseError, ZoneNotFound
from .gregorian import Month
from .week import DayOfWeek
from .fields import ValueRange, ChronoField
from .units import ChronoUnit
from .timeofday import LocalTime
from .dates import LocalDate, Year, YearMonth, MonthDay
from .datetimes import LocalDateTime
from .instant import Instant
from .amounts import Duration, Period
from .zones import ZoneId, ZoneOffset, ZoneRegion, ZoneOffsetTransition
from .zoned import OffsetTime, OffsetDateTime, ZonedDateTime
from .clocks import SystemClock, FixedClock, OffsetClock, TickClock

__all__ = [
	'Error',
	'RangeError',
	'ArithmeticOverflow',
	'UnsupportedError',
	'ParseError',
	'ZoneNotFound',
	'Month',
	'DayOfWeek',
	'ValueRange',
	'ChronoField',
	'ChronoUnit',
	'LocalTime',
	'LocalDate',
	'Year',
	'YearMonth',
	'MonthDay',
	'LocalDateTime',
	'Instant',
	'Duration',
	'Period',
	'ZoneId',
	'ZoneOffset',
	'ZoneRegion',
	'ZoneOffsetTransition',
	'OffsetTime',
	'OffsetDateTime',
	'ZonedDateTime',
	'SystemClock',
	'FixedClock',
	'OffsetClock',
	'TickClock',
]
