"""
"""
from .. import core
from .. import adjusters
from ..week import DayOfWeek
from ..dates import LocalDate, YearMonth
from ..datetimes import LocalDateTime
from ..zoned import ZonedDateTime
from . import samples

def test_month_boundaries(test):
	d = LocalDate(2008, 2, 15)
	test/d.adjust(adjusters.first_day_of_month()) == LocalDate(2008, 2, 1)
	test/d.adjust(adjusters.last_day_of_month()) == LocalDate(2008, 2, 29)
	test/d.adjust(adjusters.first_day_of_next_month()) == LocalDate(2008, 3, 1)
	test/LocalDate(2007, 12, 31).adjust(adjusters.first_day_of_next_month()) == LocalDate(2008, 1, 1)
	test/LocalDate(2007, 2, 1).adjust(adjusters.last_day_of_month()) == LocalDate(2007, 2, 28)

def test_year_boundaries(test):
	d = LocalDate(2008, 2, 15)
	test/d.adjust(adjusters.first_day_of_year()) == LocalDate(2008, 1, 1)
	test/d.adjust(adjusters.last_day_of_year()) == LocalDate(2008, 12, 31)
	test/d.adjust(adjusters.first_day_of_next_year()) == LocalDate(2009, 1, 1)

def test_day_of_week_in_month(test):
	# 2007-12-01 is a Saturday.
	d = LocalDate(2007, 12, 15)
	test/d.adjust(adjusters.first_in_month(DayOfWeek.MONDAY)) == LocalDate(2007, 12, 3)
	test/d.adjust(adjusters.first_in_month(DayOfWeek.SATURDAY)) == LocalDate(2007, 12, 1)
	test/d.adjust(adjusters.last_in_month(DayOfWeek.MONDAY)) == LocalDate(2007, 12, 31)
	test/d.adjust(adjusters.last_in_month(DayOfWeek.SUNDAY)) == LocalDate(2007, 12, 30)
	test/d.adjust(adjusters.day_of_week_in_month(2, DayOfWeek.TUESDAY)) == LocalDate(2007, 12, 11)
	test/d.adjust(adjusters.day_of_week_in_month(5, DayOfWeek.MONDAY)) == LocalDate(2007, 12, 31)
	test/d.adjust(adjusters.day_of_week_in_month(6, DayOfWeek.MONDAY)) == LocalDate(2008, 1, 7)
	test/d.adjust(adjusters.day_of_week_in_month(-2, DayOfWeek.MONDAY)) == LocalDate(2007, 12, 24)
	test/d.adjust(adjusters.day_of_week_in_month(0, DayOfWeek.MONDAY)) == LocalDate(2007, 11, 26)
	test/d.adjust(adjusters.day_of_week_in_month(1, 1)) == LocalDate(2007, 12, 3)

def test_relative_weekday(test):
	# 2007-12-03 is a Monday.
	d = LocalDate(2007, 12, 3)
	test/d.adjust(adjusters.next(DayOfWeek.MONDAY)) == LocalDate(2007, 12, 10)
	test/d.adjust(adjusters.next(DayOfWeek.WEDNESDAY)) == LocalDate(2007, 12, 5)
	test/d.adjust(adjusters.next(DayOfWeek.SUNDAY)) == LocalDate(2007, 12, 9)
	test/d.adjust(adjusters.next_or_same(DayOfWeek.MONDAY)) == d
	test/d.adjust(adjusters.next_or_same(DayOfWeek.TUESDAY)) == LocalDate(2007, 12, 4)
	test/d.adjust(adjusters.previous(DayOfWeek.MONDAY)) == LocalDate(2007, 11, 26)
	test/d.adjust(adjusters.previous(DayOfWeek.SUNDAY)) == LocalDate(2007, 12, 2)
	test/d.adjust(adjusters.previous(DayOfWeek.TUESDAY)) == LocalDate(2007, 11, 27)
	test/d.adjust(adjusters.previous_or_same(DayOfWeek.MONDAY)) == d
	test/d.adjust(adjusters.previous_or_same(DayOfWeek.FRIDAY)) == LocalDate(2007, 11, 30)

def test_other_temporals(test):
	dt = LocalDateTime.of(2007, 12, 3, 10, 15)
	test/dt.adjust(adjusters.last_day_of_month()) == LocalDateTime.of(2007, 12, 31, 10, 15)

	z = ZonedDateTime.of_local(LocalDateTime.of(2007, 3, 1, 2, 30), samples.paris)
	test/str(z.adjust(adjusters.last_in_month(DayOfWeek.SUNDAY))) == '2007-03-25T03:30+02:00[Europe/Paris]'

	ym = YearMonth(2007, 12)
	test/core.UnsupportedError ^ (lambda: ym.adjust(adjusters.first_day_of_month()))

def test_adjuster_record(test):
	a = adjusters.next(DayOfWeek.MONDAY)
	test/a.name == 'next'
	test/a.adjust_into(LocalDate(2007, 12, 3)) == LocalDate(2007, 12, 10)

if __name__ == '__main__':
	import sys
	from ...test import engine
	engine.execute(sys.modules[__name__])
