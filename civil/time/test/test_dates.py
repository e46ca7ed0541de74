"""
"""
from .. import core
from ..units import ChronoUnit as U
from ..fields import ChronoField as F
from ..week import DayOfWeek
from ..amounts import Period
from ..dates import LocalDate, Year, YearMonth, MonthDay
from ..datetimes import LocalDateTime
from ..timeofday import LocalTime

def test_construction(test):
	d = LocalDate.of(2007, 12, 3)
	test/(d.year, d.month, d.day) == (2007, 12, 3)
	test/core.RangeError ^ (lambda: LocalDate.of(2007, 2, 29))
	test/core.RangeError ^ (lambda: LocalDate.of(2007, 13, 1))
	test/core.RangeError ^ (lambda: LocalDate.of(1_000_000_000, 1, 1))
	test/LocalDate.of(2008, 2, 29).is_leap_year() == True

def test_limits(test):
	test/LocalDate.MIN.to_epoch_day() == -365243219162
	test/LocalDate.MAX.to_epoch_day() == 365241780471
	test/LocalDate.of_epoch_day(0) == LocalDate.EPOCH
	test/core.RangeError ^ (lambda: LocalDate.of_epoch_day(365241780472))
	test/core.Error ^ (lambda: LocalDate.MAX.plus_days(1))
	test/core.Error ^ (lambda: LocalDate.MIN.minus_days(1))
	test/core.Error ^ (lambda: LocalDate.MAX.plus_months(1))

def test_of_year_day(test):
	test/LocalDate.of_year_day(2008, 60) == LocalDate.of(2008, 2, 29)
	test/LocalDate.of_year_day(2007, 365) == LocalDate.of(2007, 12, 31)
	test/core.RangeError ^ (lambda: LocalDate.of_year_day(2007, 366))

def test_properties(test):
	d = LocalDate.of(2007, 12, 3)
	test/d.day_of_week == DayOfWeek.MONDAY
	test/d.day_of_year == 337
	test/d.length_of_month() == 31
	test/d.length_of_year() == 365
	test/LocalDate.of(1900, 2, 1).length_of_month() == 28

def test_str(test):
	test/str(LocalDate.of(2007, 12, 3)) == '2007-12-03'
	test/str(LocalDate.of(10000, 1, 1)) == '+10000-01-01'
	test/str(LocalDate.of(-1, 1, 1)) == '-0001-01-01'
	test/str(LocalDate.of(0, 1, 1)) == '0000-01-01'
	test/str(LocalDate.of(999, 1, 1)) == '0999-01-01'
	test/str(LocalDate.of(-10000, 1, 1)) == '-10000-01-01'

def test_parse(test):
	test/LocalDate.parse('2007-12-03') == LocalDate.of(2007, 12, 3)
	test/LocalDate.parse('+10000-01-01') == LocalDate.of(10000, 1, 1)
	test/LocalDate.parse('-0001-01-01') == LocalDate.of(-1, 1, 1)
	test/core.ParseError ^ (lambda: LocalDate.parse('2007-02-29'))
	with test/core.ParseError as exc:
		LocalDate.parse('2007-12-3')
	test/exc().position == 8
	with test/core.ParseError as exc:
		LocalDate.parse('2007-12-03x')
	test/exc().position == 10
	test/exc().source == '2007-12-03x'

def test_with_clamps(test):
	test/LocalDate.of(2008, 2, 29).with_year(2007) == LocalDate.of(2007, 2, 28)
	test/LocalDate.of(2007, 3, 31).with_month(4) == LocalDate.of(2007, 4, 30)
	test/LocalDate.of(2007, 3, 31).with_day_of_month(1) == LocalDate.of(2007, 3, 1)
	test/LocalDate.of(2007, 3, 31).with_day_of_year(1) == LocalDate.of(2007, 1, 1)
	test/core.RangeError ^ (lambda: LocalDate.of(2007, 4, 1).with_day_of_month(31))

def test_month_arithmetic(test):
	test/LocalDate.of(2007, 1, 31).plus_months(1) == LocalDate.of(2007, 2, 28)
	test/LocalDate.of(2008, 1, 31).plus_months(1) == LocalDate.of(2008, 2, 29)
	test/LocalDate.of(2008, 2, 29).plus_years(1) == LocalDate.of(2009, 2, 28)
	test/LocalDate.of(2008, 2, 29).plus_years(4) == LocalDate.of(2012, 2, 29)
	test/LocalDate.of(2007, 3, 31).minus_months(1) == LocalDate.of(2007, 2, 28)
	test/LocalDate.of(2007, 1, 1).minus_months(1) == LocalDate.of(2006, 12, 1)
	test/LocalDate.of(2007, 1, 1).plus_months(-13) == LocalDate.of(2005, 12, 1)

def test_day_arithmetic(test):
	test/LocalDate.of(2007, 12, 31).plus_days(1) == LocalDate.of(2008, 1, 1)
	test/LocalDate.of(2008, 3, 1).minus_days(1) == LocalDate.of(2008, 2, 29)
	test/LocalDate.of(2007, 12, 3).plus_weeks(4) == LocalDate.of(2007, 12, 31)
	test/LocalDate.of(2007, 12, 3).minus_weeks(1) == LocalDate.of(2007, 11, 26)
	test/LocalDate.of(2007, 12, 3).plus(Period.of(1, 2, 3)) == LocalDate.of(2009, 2, 6)
	test/LocalDate.of(2007, 12, 3).minus(Period.of_days(3)) == LocalDate.of(2007, 11, 30)

def test_until(test):
	start = LocalDate.of(2007, 1, 31)
	test/start.until(LocalDate.of(2007, 2, 28), U.MONTHS) == 0
	test/start.until(LocalDate.of(2007, 3, 31), U.MONTHS) == 2
	test/start.until(LocalDate.of(2008, 1, 30), U.YEARS) == 0
	test/start.until(LocalDate.of(2008, 1, 31), U.YEARS) == 1
	test/start.until(LocalDate.of(2007, 2, 28), U.DAYS) == 28
	test/start.until(LocalDate.of(2007, 1, 1), U.DAYS) == -30
	test/start.until(LocalDate.of(-1, 1, 1), U.ERAS) == -1
	test/start.until(LocalDate.of(3007, 1, 31), U.MILLENNIA) == 1
	test/start.until(LocalDateTime.of(2007, 2, 7, 10), U.WEEKS) == 1

def sampled_dates(count=600):
	"""
	# Pairs of dates spread across four centuries, no more than two years apart.
	"""
	for i in range(count):
		start = -70000 + (i * 257)
		yield LocalDate.of_epoch_day(start), LocalDate.of_epoch_day(start + ((i * 7919) % 1461) - 730)

def test_until_plus_does_not_pass_end(test):
	"""
	# Adding the measured amount back to the start never moves beyond the end.
	"""
	for start, end in sampled_dates():
		for unit in (U.DAYS, U.MONTHS, U.YEARS):
			moved = start.plus(start.until(end, unit), unit)
			if start <= end:
				test/moved <= end
			else:
				test/moved >= end
		test/start.plus(start.until(end, U.DAYS), U.DAYS) == end

def test_period_until(test):
	test/LocalDate.of(2007, 1, 31).period_until(LocalDate.of(2007, 3, 1)) == Period.of(0, 1, 1)
	test/LocalDate.of(2007, 3, 1).period_until(LocalDate.of(2007, 1, 31)) == Period.of(0, -1, -1)
	test/LocalDate.of(2007, 12, 3).period_until(LocalDate.of(2009, 2, 6)) == Period.of(1, 2, 3)
	test/LocalDate.of(2008, 2, 29).period_until(LocalDate.of(2009, 2, 28)) == Period.of(0, 11, 30)
	test/Period.between(LocalDate.of(2007, 1, 1), LocalDate.of(2007, 1, 1)) == Period.ZERO

def test_at_time(test):
	d = LocalDate.of(2007, 12, 3)
	test/d.at_time(LocalTime.of(10, 15)) == LocalDateTime.of(2007, 12, 3, 10, 15)
	test/d.at_start_of_day() == LocalDateTime.of(2007, 12, 3)

def test_ordering(test):
	test/LocalDate.of(2007, 12, 3) < LocalDate.of(2007, 12, 4)
	test/LocalDate.of(2007, 12, 3) > LocalDate.of(-2007, 12, 3)
	test/LocalDate.of(2007, 12, 3) == LocalDate.parse('2007-12-03')
	test/hash(LocalDate.of(2007, 12, 3)) == hash(LocalDate.parse('2007-12-03'))

def test_year(test):
	y = Year.of(2008)
	test/str(y) == '2008'
	test/str(Year(-1)) == '-0001'
	test/str(Year(10000)) == '+10000'
	test/Year.parse('2007') == Year(2007)
	test/Year.parse('-0001') == Year(-1)
	test/core.ParseError ^ (lambda: Year.parse('07'))
	test/core.RangeError ^ (lambda: Year(1_000_000_000))
	test/Year.MAX.year == 999_999_999

	test/y.is_leap() == True
	test/y.length() == 366
	test/Year(2007).length() == 365
	test/y.at_day(60) == LocalDate.of(2008, 2, 29)
	test/y.at_month(2) == YearMonth.of(2008, 2)
	test/Year(2007).at_month_day(MonthDay.of(2, 29)) == LocalDate.of(2007, 2, 28)
	test/Year(2007).is_valid_month_day(MonthDay.of(2, 29)) == False
	test/y.is_valid_month_day(MonthDay.of(2, 29)) == True

	test/y.plus_years(3) == Year(2011)
	test/y.minus_years(9) == Year(1999)
	test/y.plus(1, U.DECADES) == Year(2018)
	test/Year(2007).until(Year(2210), U.CENTURIES) == 2
	test/Year(2007).until(LocalDate.of(2010, 1, 1), U.YEARS) == 3
	test/core.UnsupportedError ^ (lambda: y.plus(1, U.MONTHS))
	test/core.UnsupportedError ^ (lambda: y.get(F.MONTH_OF_YEAR))

def test_year_fields(test):
	test/Year(0).get(F.YEAR_OF_ERA) == 1
	test/Year(0).get(F.ERA) == 0
	test/Year(2007).with_field(F.ERA, 0) == Year(-2006)
	test/Year(2007).with_field(F.YEAR, 1999) == Year(1999)

	test/LocalDate.of(2008, 2, 29).adjust(Year(2007)) == LocalDate.of(2007, 2, 28)
	test/Year.from_temporal(LocalDate.of(2007, 12, 3)) == Year(2007)
	test/core.UnsupportedError ^ (lambda: Year.from_temporal(LocalTime(10, 15)))
	test/Year(2007) < Year(2008)
	test/Year(-1) < Year(0)

def test_year_month(test):
	ym = YearMonth.of(2008, 2)
	test/str(ym) == '2008-02'
	test/ym.length_of_month() == 29
	test/ym.is_valid_day(30) == False
	test/ym.at_end_of_month() == LocalDate.of(2008, 2, 29)
	test/ym.at_day(1) == LocalDate.of(2008, 2, 1)
	test/ym.plus_months(11) == YearMonth.of(2009, 1)
	test/ym.minus_years(1) == YearMonth.of(2007, 2)
	test/ym.until(YearMonth.of(2010, 1), U.YEARS) == 1
	test/ym.until(YearMonth.of(2010, 1), U.MONTHS) == 23
	test/YearMonth.parse('-0001-12') == YearMonth.of(-1, 12)
	test/str(YearMonth.of(10000, 1)) == '+10000-01'
	test/core.RangeError ^ (lambda: YearMonth.of(2007, 13))
	test/LocalDate.of(2007, 1, 31).adjust(YearMonth.of(2008, 2)) == LocalDate.of(2008, 2, 29)

def test_month_day(test):
	md = MonthDay.of(2, 29)
	test/str(md) == '--02-29'
	test/md.is_valid_year(2007) == False
	test/md.is_valid_year(2008) == True
	test/md.at_year(2007) == LocalDate.of(2007, 2, 28)
	test/md.at_year(2008) == LocalDate.of(2008, 2, 29)
	test/MonthDay.of(3, 31).with_month(4) == MonthDay.of(4, 30)
	test/MonthDay.parse('--12-03') == MonthDay.of(12, 3)
	test/core.RangeError ^ (lambda: MonthDay.of(4, 31))
	test/core.RangeError ^ (lambda: MonthDay.of(13, 1))
	test/core.ParseError ^ (lambda: MonthDay.parse('--02-30'))
	test/LocalDate.of(2007, 1, 1).adjust(md) == LocalDate.of(2007, 2, 28)
	test/MonthDay.of(1, 31) < MonthDay.of(2, 1)

if __name__ == '__main__':
	import sys
	from ...test import engine
	engine.execute(sys.modules[__name__])
