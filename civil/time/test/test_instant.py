"""
"""
from .. import core
from .. import exact
from ..units import ChronoUnit as U
from ..fields import ChronoField as F
from ..amounts import Duration
from ..instant import Instant, minimum_second, maximum_second
from ..zones import ZoneOffset
from ..datetimes import LocalDateTime

def test_normalization(test):
	test/Instant.of_epoch_second(3, 1) == Instant(3, 1)
	test/Instant.of_epoch_second(3, -1) == Instant(2, 999_999_999)
	test/Instant.of_epoch_second(3, 2_000_000_001) == Instant(5, 1)
	test/Instant.of_epoch_second(-3, -1_000_000_001) == Instant(-5, 999_999_999)
	test/core.RangeError ^ (lambda: Instant(0, -1))
	test/core.RangeError ^ (lambda: Instant(0, 1_000_000_000))

def test_limits(test):
	test/Instant.MIN.seconds == minimum_second
	test/Instant.MAX.seconds == maximum_second
	test/core.RangeError ^ (lambda: Instant.of_epoch_second(maximum_second + 1))
	test/core.RangeError ^ (lambda: Instant.MAX.plus_nanos(1))
	test/core.ArithmeticOverflow ^ (lambda: Instant.of_epoch_second(exact.long_maximum, exact.long_maximum))
	test/core.RangeError ^ (lambda: Instant.of_epoch_second(maximum_second, 1_000_000_000))
	test/str(Instant.MIN) == '-1000000000-01-01T00:00:00Z'
	test/str(Instant.MAX) == '+1000000000-12-31T23:59:59.999999999Z'

def test_epoch_milli(test):
	test/Instant.of_epoch_milli(-1) == Instant(-1, 999_000_000)
	test/Instant.of_epoch_milli(1001) == Instant(1, 1_000_000)
	test/Instant(-1, 999_000_000).to_epoch_milli() == -1
	test/Instant(-1, 999_999_999).to_epoch_milli() == -1
	test/Instant(-2, 500_000_000).to_epoch_milli() == -1500
	test/Instant(1, 1_999_999).to_epoch_milli() == 1001
	test/core.ArithmeticOverflow ^ (lambda: Instant.MAX.to_epoch_milli())

def test_str(test):
	test/str(Instant.EPOCH) == '1970-01-01T00:00:00Z'
	test/str(Instant(1196676930, 123_000_000)) == '2007-12-03T10:15:30.123Z'
	test/str(Instant(-1, 0)) == '1969-12-31T23:59:59Z'
	test/str(Instant(0, 1_000)) == '1970-01-01T00:00:00.000001Z'

def test_parse(test):
	test/Instant.parse('2007-12-03T10:15:30.123Z') == Instant(1196676930, 123_000_000)
	test/Instant.parse('2007-12-03T11:15:30+01:00') == Instant(1196676930)
	test/Instant.parse(str(Instant.MIN)) == Instant.MIN
	test/Instant.parse(str(Instant.MAX)) == Instant.MAX
	test/core.ParseError ^ (lambda: Instant.parse('2007-12-03T10:15:30'))
	test/core.ParseError ^ (lambda: Instant.parse('+1000000001-01-01T00:00:00Z'))

def test_arithmetic(test):
	i = Instant(10, 500_000_000)
	test/i.plus_seconds(-20) == Instant(-10, 500_000_000)
	test/i.plus_millis(600) == Instant(11, 100_000_000)
	test/i.plus_millis(-600) == Instant(9, 900_000_000)
	test/i.plus_nanos(-500_000_001) == Instant(9, 999_999_999)
	test/i.minus_seconds(10) == Instant(0, 500_000_000)
	test/i.minus_millis(500) == Instant(10)
	test/i.minus_nanos(1) == Instant(10, 499_999_999)
	test/i.plus(1, U.MICROS) == Instant(10, 500_001_000)
	test/i.plus(1, U.DAYS) == Instant(86410, 500_000_000)
	test/i.plus(Duration.of_seconds(-1, 600_000_000)) == Instant(10, 100_000_000)

def test_amount_range(test):
	"""
	# Amounts outside of the signed 64-bit range overflow before they are applied.
	"""
	test/core.ArithmeticOverflow ^ (lambda: Instant.EPOCH.plus_nanos(2**70))
	test/core.ArithmeticOverflow ^ (lambda: Instant.EPOCH.plus_millis(2**70))
	test/core.ArithmeticOverflow ^ (lambda: Instant.EPOCH.plus_seconds(-(2**70)))
	test/core.ArithmeticOverflow ^ (lambda: Instant.EPOCH.plus(2**70, U.MICROS))
	test/core.ArithmeticOverflow ^ (lambda: Instant.EPOCH.minus(2**70, U.NANOS))
	test/core.ArithmeticOverflow ^ (lambda: LocalDateTime.of(2007, 12, 3).plus_hours(2**64))
	test/core.RangeError ^ (lambda: Instant.EPOCH.plus_nanos(exact.long_maximum).plus_seconds(maximum_second))

def test_until(test):
	a = Instant(10, 500_000_000)
	b = Instant(12, 400_000_000)
	test/a.until(b, U.SECONDS) == 1
	test/b.until(a, U.SECONDS) == -1
	test/a.until(b, U.MILLIS) == 1900
	test/a.until(b, U.NANOS) == 1_900_000_000
	test/a.until(b, U.MICROS) == 1_900_000
	test/a.until(b, U.MINUTES) == 0
	test/Instant.EPOCH.until(Instant(86400 * 3 - 1), U.DAYS) == 2
	test/core.UnsupportedError ^ (lambda: a.until(b, U.WEEKS))

def test_truncated_to(test):
	i = Instant(-1, 500_000_000)
	test/i.truncated_to(U.SECONDS) == Instant(-1)
	test/i.truncated_to(U.DAYS) == Instant(-86400)
	test/Instant(3601, 5).truncated_to(U.HOURS) == Instant(3600)
	test/Instant(3601, 5).truncated_to(U.NANOS) == Instant(3601, 5)
	test/core.UnsupportedError ^ (lambda: i.truncated_to(U.MONTHS))

def test_at_offset(test):
	i = Instant(1196676930)
	odt = i.at_offset(ZoneOffset.of_hours(1))
	test/odt.datetime == LocalDateTime.of(2007, 12, 3, 11, 15, 30)
	test/odt.to_instant() == i
	test/Instant.from_temporal(odt) == i

def test_adjust_into(test):
	i = Instant(10, 5)
	test/Instant(99, 99).adjust(i) == i
	test/i.with_field(F.INSTANT_SECONDS, 20) == Instant(20, 5)

def test_ordering(test):
	test/Instant(0, 1) > Instant(0)
	test/Instant(-1, 999_999_999) < Instant(0)

if __name__ == '__main__':
	import sys
	from ...test import engine
	engine.execute(sys.modules[__name__])
