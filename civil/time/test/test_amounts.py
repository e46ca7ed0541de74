"""
"""
from .. import core
from .. import exact
from ..units import ChronoUnit as U
from ..amounts import Duration, Period
from ..dates import LocalDate
from ..datetimes import LocalDateTime
from ..instant import Instant

def test_duration_factories(test):
	test/Duration.of_days(1) == Duration(86400)
	test/Duration.of_hours(-1) == Duration(-3600)
	test/Duration.of_minutes(2) == Duration(120)
	test/Duration.of_seconds(1, -1) == Duration(0, 999_999_999)
	test/Duration.of_millis(-1) == Duration(-1, 999_000_000)
	test/Duration.of_nanos(-1) == Duration(-1, 999_999_999)
	test/Duration.of(3, U.HALF_DAYS) == Duration.of_hours(36)
	test/Duration.of(2, U.DAYS) == Duration.of_days(2)
	test/core.UnsupportedError ^ (lambda: Duration.of(1, U.MONTHS))
	test/core.ArithmeticOverflow ^ (lambda: Duration.of_days(exact.long_maximum))

def test_duration_str(test):
	test/str(Duration.ZERO) == 'PT0S'
	test/str(Duration.of_days(2)) == 'PT48H'
	test/str(Duration.of_seconds(8 * 3600 + 6 * 60 + 12, 345_000_000)) == 'PT8H6M12.345S'
	test/str(Duration.of_minutes(-90)) == 'PT-1H-30M'
	test/str(Duration.of_seconds(-1, 500_000_000)) == 'PT-0.5S'
	test/str(Duration.of_seconds(-61, 500_000_000)) == 'PT-1M-0.5S'
	test/str(Duration.of_nanos(1)) == 'PT0.000000001S'
	test/str(Duration.of_seconds(59, 100_000_000)) == 'PT59.1S'

def test_duration_parse(test):
	test/Duration.parse('PT20.345S') == Duration(20, 345_000_000)
	test/Duration.parse('PT15M') == Duration.of_minutes(15)
	test/Duration.parse('PT10H') == Duration.of_hours(10)
	test/Duration.parse('P2D') == Duration.of_days(2)
	test/Duration.parse('P2DT3H4M') == Duration(2 * 86400 + 3 * 3600 + 4 * 60)
	test/Duration.parse('PT-6H3M') == Duration(-6 * 3600 + 3 * 60)
	test/Duration.parse('-PT6H3M') == Duration(-(6 * 3600 + 3 * 60))
	test/Duration.parse('-PT-6H+3M') == Duration(6 * 3600 - 3 * 60)
	test/Duration.parse('PT-0.5S') == Duration(-1, 500_000_000)
	test/Duration.parse('pt1s') == Duration(1)
	test/Duration.parse(str(Duration.of_seconds(-61, 500_000_000))) == Duration.of_seconds(-61, 500_000_000)
	test/core.ParseError ^ (lambda: Duration.parse('PT'))
	test/core.ParseError ^ (lambda: Duration.parse('P'))
	test/core.ParseError ^ (lambda: Duration.parse('P1Y'))
	test/core.ParseError ^ (lambda: Duration.parse('PT1.1234567891S'))

def test_duration_arithmetic(test):
	d = Duration.of_seconds(10, 500_000_000)
	test/d.plus(Duration.of_millis(600)) == Duration(11, 100_000_000)
	test/d.minus(Duration.of_millis(600)) == Duration(9, 900_000_000)
	test/d.plus(1, U.DAYS) == Duration(86410, 500_000_000)
	test/d.plus_hours(1) == Duration(3610, 500_000_000)
	test/d.minus_minutes(1) == Duration(-50, 500_000_000)
	test/d.plus_nanos(-500_000_001) == Duration(9, 999_999_999)
	test/d.plus(-1, U.MICROS) == Duration(10, 499_999_000)
	test/d.minus_millis(1) == Duration(10, 499_000_000)
	test/core.UnsupportedError ^ (lambda: d.plus(1, U.WEEKS))
	test/core.ArithmeticOverflow ^ (lambda: Duration(exact.long_maximum).plus_seconds(1))

def test_duration_minus_minimum(test):
	minimum = Duration(exact.long_minimum)
	test/Duration(-1).minus(minimum) == Duration(exact.long_maximum)
	test/core.ArithmeticOverflow ^ (lambda: minimum.negated())

def test_duration_multiply_divide(test):
	d = Duration.of_seconds(3, 500_000_000)
	test/d.multiplied_by(2) == Duration(7)
	test/d.multiplied_by(-1) == Duration(-4, 500_000_000)
	test/d.divided_by(2) == Duration(1, 750_000_000)
	test/Duration(-7).divided_by(2) == Duration(-4, 500_000_000)
	test/Duration.of_nanos(-3).divided_by(2) == Duration.of_nanos(-1)
	test/Duration.of_hours(1).divided_by(Duration.of_minutes(7)) == 8
	test/Duration.of_hours(-1).divided_by(Duration.of_minutes(7)) == -8
	test/ZeroDivisionError ^ (lambda: d.divided_by(0))
	test/ZeroDivisionError ^ (lambda: d.divided_by(Duration.ZERO))

def test_duration_conversions(test):
	d = Duration.of_seconds(-1, 500_000_000)
	test/d.is_negative() == True
	test/d.abs() == Duration(0, 500_000_000)
	test/d.to_millis() == -500
	test/d.to_nanos() == -500_000_000
	test/Duration.of_hours(-25).to_days() == -1
	test/Duration.of_seconds(-3599).to_hours() == 0
	test/Duration.of_seconds(-61).to_minutes() == -1
	test/Duration.ZERO.is_zero() == True
	test/core.ArithmeticOverflow ^ (lambda: Duration(exact.long_maximum).to_nanos())

def test_duration_between(test):
	a = Instant(10, 500_000_000)
	b = Instant(12, 400_000_000)
	test/Duration.between(a, b) == Duration(1, 900_000_000)
	test/Duration.between(b, a) == Duration(-2, 100_000_000)
	start = LocalDateTime.of(2007, 12, 3, 10)
	test/Duration.between(start, LocalDateTime.of(2007, 12, 4, 11, 0, 0, 1)) == Duration(25 * 3600, 1)
	# The nanoseconds between the extremes exceed 64 bits.
	test/Duration.between(Instant.MIN, Instant.MAX) == Duration(Instant.MAX.seconds - Instant.MIN.seconds, 999_999_999)

def test_duration_amount(test):
	d = Duration.of_seconds(5, 1)
	test/d.units == (U.SECONDS, U.NANOS)
	test/d.get(U.SECONDS) == 5
	test/d.get(U.NANOS) == 1
	test/core.UnsupportedError ^ (lambda: d.get(U.DAYS))
	test/Duration.from_amount(d) == d
	# Years and months are estimated units even when the amount is zero.
	test/core.UnsupportedError ^ (lambda: Duration.from_amount(Period.of_days(2)))
	test/core.UnsupportedError ^ (lambda: Duration.from_amount(Period.of_months(1)))

def test_period_construction(test):
	test/Period.of(1, 2, 3) == Period(1, 2, 3)
	test/Period.of_weeks(2) == Period.of_days(14)
	test/Period.of_years(1) == Period(1, 0, 0)
	test/core.ArithmeticOverflow ^ (lambda: Period.of_days(exact.int_maximum + 1))
	test/core.ArithmeticOverflow ^ (lambda: Period.of_weeks(exact.int_maximum))

def test_period_str_parse(test):
	test/str(Period.ZERO) == 'P0D'
	test/str(Period.of(1, 2, 3)) == 'P1Y2M3D'
	test/str(Period.of(0, -1, 0)) == 'P-1M'
	test/str(Period.of_weeks(1)) == 'P7D'
	test/Period.parse('P1Y2M3D') == Period.of(1, 2, 3)
	test/Period.parse('P2W') == Period.of_days(14)
	test/Period.parse('P1W3D') == Period.of_days(10)
	test/Period.parse('-P1Y2M') == Period.of(-1, -2, 0)
	test/Period.parse('P-1Y+2M') == Period.of(-1, 2, 0)
	test/Period.parse('p0d') == Period.ZERO
	test/core.ParseError ^ (lambda: Period.parse('P'))
	test/core.ParseError ^ (lambda: Period.parse('PT1H'))
	test/core.ParseError ^ (lambda: Period.parse('P3000000000D'))

def test_period_arithmetic(test):
	test/Period.of(1, 2, 3).plus(Period.of(2, 3, 4)) == Period.of(3, 5, 7)
	test/Period.of(1, 2, 3).minus(Period.of(2, 3, 4)) == Period.of(-1, -1, -1)
	test/Period.of(1, 2, 3).multiplied_by(-2) == Period.of(-2, -4, -6)
	test/Period.of(1, 2, 3).negated() == Period.of(-1, -2, -3)
	test/Period.of(1, 2, 3).plus_days(1).minus_months(2).plus_years(-1) == Period.of(0, 0, 4)
	test/core.UnsupportedError ^ (lambda: Period.ZERO.plus(Duration.of_days(1)))

def test_period_normalized(test):
	test/Period.of(1, 15, 3).normalized() == Period.of(2, 3, 3)
	test/Period.of(1, -15, 3).normalized() == Period.of(0, -3, 3)
	test/Period.of(-1, 2, 0).normalized() == Period.of(0, -10, 0)
	test/Period.of(1, 15, 3).to_total_months() == 27

def test_period_add_to(test):
	test/LocalDate.of(2012, 2, 29).plus(Period.of(1, 2, 0)) == LocalDate.of(2013, 4, 29)
	test/LocalDate.of(2012, 2, 29).plus(Period.of_years(1)) == LocalDate.of(2013, 2, 28)
	test/LocalDate.of(2013, 4, 29).minus(Period.of(1, 2, 0)) == LocalDate.of(2012, 2, 29)
	test/LocalDate.of(2007, 1, 31).plus(Period.of(0, 1, 1)) == LocalDate.of(2007, 3, 1)
	test/Period.of_days(1).add_to(LocalDate.of(2007, 12, 31)) == LocalDate.of(2008, 1, 1)
	test/core.UnsupportedError ^ (lambda: Instant.EPOCH.plus(Period.of_months(1)))

def test_period_state(test):
	test/Period.of(0, 0, -1).is_negative() == True
	test/Period.ZERO.is_zero() == True
	test/Period.of(1, 2, 3).get(U.MONTHS) == 2
	test/Period.of(1, 2, 3).units == (U.YEARS, U.MONTHS, U.DAYS)
	test/core.UnsupportedError ^ (lambda: Period.ZERO.get(U.WEEKS))
	test/Period.of(1, 2, 3).with_days(0) == Period.of(1, 2, 0)

if __name__ == '__main__':
	import sys
	from ...test import engine
	engine.execute(sys.modules[__name__])
