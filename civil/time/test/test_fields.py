"""
# The field table, value ranges, and fields defined outside of the package.
"""
from .. import core
from .. import fields
from .. import queries
from ..fields import ChronoField as F, ValueRange
from ..units import ChronoUnit as U
from ..dates import LocalDate, YearMonth, MonthDay
from ..timeofday import LocalTime
from ..datetimes import LocalDateTime
from ..instant import Instant
from ..zones import ZoneOffset

def test_value_range(test):
	r = ValueRange.of(1, 28, 31)
	test/str(r) == '1 - 28/31'
	test/r.is_fixed() == False
	test/r.is_valid_value(31) == True
	test/r.is_valid_value(32) == False
	test/str(ValueRange.of(0, 59)) == '0 - 59'
	test/ValueRange.of(0, 59).is_fixed() == True

def test_value_range_validation(test):
	test/core.RangeError ^ (lambda: ValueRange.of(5, 1))
	test/core.RangeError ^ (lambda: ValueRange(1, 2, 10, 5))

def test_check_valid_value(test):
	with test/core.RangeError as exc:
		F.MONTH_OF_YEAR.check_valid_value(13)
	test/str(exc()) == "Invalid value for MonthOfYear (valid values 1 - 12): 13"
	test/F.MONTH_OF_YEAR.check_valid_value(12) == 12
	test/F.INSTANT_SECONDS.range().is_int_value() == False
	test/core.RangeError ^ (lambda: F.INSTANT_SECONDS.check_valid_int_value(0))

def test_field_classification(test):
	test/F.DAY_OF_WEEK.is_date_based() == True
	test/F.ERA.is_date_based() == True
	test/F.AMPM_OF_DAY.is_time_based() == True
	test/F.INSTANT_SECONDS.is_date_based() == False
	test/F.INSTANT_SECONDS.is_time_based() == False
	test/F.DAY_OF_MONTH.base_unit == U.DAYS
	test/F.DAY_OF_MONTH.range_unit == U.MONTHS
	test/str(F.CLOCK_HOUR_OF_AMPM) == 'ClockHourOfAmPm'

def test_date_fields(test):
	d = LocalDate.of(2007, 12, 3)
	test/d.get(F.DAY_OF_WEEK) == 1
	test/d.get(F.DAY_OF_YEAR) == 337
	test/d.get(F.ALIGNED_WEEK_OF_MONTH) == 1
	test/d.get(F.ALIGNED_DAY_OF_WEEK_IN_MONTH) == 3
	test/d.get(F.PROLEPTIC_MONTH) == (2007 * 12) + 11
	test/d.get(F.EPOCH_DAY) == 13850
	test/d.get(F.ERA) == 1
	test/LocalDate.of(0, 1, 1).get(F.YEAR_OF_ERA) == 1
	test/LocalDate.of(-1, 1, 1).get(F.YEAR_OF_ERA) == 2
	test/LocalDate.of(0, 1, 1).get(F.ERA) == 0

def test_date_field_writers(test):
	d = LocalDate.of(2007, 12, 3)
	test/d.with_field(F.DAY_OF_WEEK, 7) == LocalDate.of(2007, 12, 9)
	test/d.with_field(F.MONTH_OF_YEAR, 2) == LocalDate.of(2007, 2, 3)
	test/d.with_field(F.DAY_OF_YEAR, 1) == LocalDate.of(2007, 1, 1)
	test/d.with_field(F.ERA, 0) == LocalDate.of(-2006, 12, 3)
	test/d.with_field(F.YEAR_OF_ERA, 2008) == LocalDate.of(2008, 12, 3)
	test/LocalDate.of(2008, 2, 29).with_field(F.YEAR, 2007) == LocalDate.of(2007, 2, 28)

def test_date_refined_ranges(test):
	test/LocalDate.of(2007, 2, 1).range(F.DAY_OF_MONTH) == ValueRange.of(1, 28)
	test/LocalDate.of(2008, 2, 1).range(F.DAY_OF_MONTH) == ValueRange.of(1, 29)
	test/LocalDate.of(2008, 1, 1).range(F.DAY_OF_YEAR) == ValueRange.of(1, 366)
	test/LocalDate.of(2007, 2, 1).range(F.ALIGNED_WEEK_OF_MONTH) == ValueRange.of(1, 4)
	test/LocalDate.of(2007, 1, 1).range(F.MONTH_OF_YEAR) == F.MONTH_OF_YEAR.range()

def test_writer_range_checks(test):
	d = LocalDate.of(2007, 12, 3)
	test/core.RangeError ^ (lambda: d.with_field(F.MONTH_OF_YEAR, 13))
	test/core.RangeError ^ (lambda: d.with_field(F.DAY_OF_MONTH, 32))
	# In range for the field, but not for February.
	test/core.RangeError ^ (lambda: LocalDate.of(2007, 2, 1).with_field(F.DAY_OF_MONTH, 30))

def test_unsupported_fields(test):
	t = LocalTime.of(10, 15)
	test/t.is_supported(F.DAY_OF_MONTH) == False
	test/t.is_supported(F.HOUR_OF_DAY) == True
	test/t.is_supported(None) == False
	test/core.UnsupportedError ^ (lambda: t.get(F.DAY_OF_MONTH))
	test/core.UnsupportedError ^ (lambda: t.with_field(F.YEAR, 2000))
	test/core.UnsupportedError ^ (lambda: t.range(F.EPOCH_DAY))
	test/core.UnsupportedError ^ (lambda: LocalDate.of(2007, 1, 1).get(F.HOUR_OF_DAY))

def test_time_fields(test):
	t = LocalTime.of(13, 5, 30, 123_456_789)
	test/t.get(F.HOUR_OF_AMPM) == 1
	test/t.get(F.CLOCK_HOUR_OF_AMPM) == 1
	test/t.get(F.AMPM_OF_DAY) == 1
	test/t.get(F.MILLI_OF_SECOND) == 123
	test/t.get(F.MICRO_OF_SECOND) == 123456
	test/t.get(F.MINUTE_OF_DAY) == (13 * 60) + 5
	test/LocalTime.of(0).get(F.CLOCK_HOUR_OF_DAY) == 24
	test/t.with_field(F.AMPM_OF_DAY, 0) == LocalTime.of(1, 5, 30, 123_456_789)
	test/t.with_field(F.MILLI_OF_SECOND, 5) == LocalTime.of(13, 5, 30, 5_000_000)
	test/t.with_field(F.CLOCK_HOUR_OF_DAY, 24) == LocalTime.of(0, 5, 30, 123_456_789)
	test/t.with_field(F.SECOND_OF_DAY, 0) == LocalTime.of(0, 0, 0, 123_456_789)

def test_datetime_delegation(test):
	dt = LocalDateTime.of(2007, 12, 3, 10, 15, 30)
	test/dt.get(F.HOUR_OF_DAY) == 10
	test/dt.get(F.DAY_OF_MONTH) == 3
	test/dt.with_field(F.HOUR_OF_DAY, 23) == LocalDateTime.of(2007, 12, 3, 23, 15, 30)
	test/dt.with_field(F.YEAR, 2008) == LocalDateTime.of(2008, 12, 3, 10, 15, 30)
	test/dt.is_supported(F.INSTANT_SECONDS) == False
	test/dt.is_supported(F.OFFSET_SECONDS) == False

def test_instant_fields(test):
	i = Instant.of_epoch_second(100, 123_456_789)
	test/i.get(F.INSTANT_SECONDS) == 100
	test/i.get(F.MILLI_OF_SECOND) == 123
	test/i.with_field(F.MILLI_OF_SECOND, 1) == Instant(100, 1_000_000)
	test/core.UnsupportedError ^ (lambda: i.get(F.HOUR_OF_DAY))

def test_year_month_and_month_day(test):
	ym = YearMonth.of(2007, 12)
	test/ym.get(F.PROLEPTIC_MONTH) == (2007 * 12) + 11
	test/ym.with_field(F.MONTH_OF_YEAR, 2) == YearMonth.of(2007, 2)
	test/ym.is_supported(F.DAY_OF_MONTH) == False
	md = MonthDay.of(2, 29)
	test/md.get(F.DAY_OF_MONTH) == 29
	test/md.range(F.DAY_OF_MONTH) == ValueRange.of(1, 28, 29)
	test/core.UnsupportedError ^ (lambda: md.with_field(F.DAY_OF_MONTH, 1))

def test_offset_field(test):
	o = ZoneOffset.of_hours(2)
	test/o.get(F.OFFSET_SECONDS) == 7200
	test/o.is_supported(F.DAY_OF_MONTH) == False

class QuarterOfYear(object):
	"""
	# Field outside of the package: the quarter of the year derived from the month.
	"""

	def __str__(self):
		return 'QuarterOfYear'

	def is_supported_by(self, temporal):
		return temporal.is_supported(F.MONTH_OF_YEAR)

	def range_refined_by(self, temporal):
		return ValueRange.of(1, 4)

	def get_from(self, temporal):
		return ((temporal.get(F.MONTH_OF_YEAR) - 1) // 3) + 1

	def adjust_into(self, temporal, value):
		ValueRange.of(1, 4).check_valid_value(value, self)
		offset = (temporal.get(F.MONTH_OF_YEAR) - 1) % 3
		return temporal.with_field(F.MONTH_OF_YEAR, ((value - 1) * 3) + 1 + offset)

def test_custom_field(test):
	q = QuarterOfYear()
	d = LocalDate.of(2007, 8, 31)
	test/d.is_supported(q) == True
	test/LocalTime.of(10).is_supported(q) == False
	test/d.get(q) == 3
	test/d.range(q) == ValueRange.of(1, 4)
	test/d.with_field(q, 1) == LocalDate.of(2007, 2, 28)
	test/YearMonth.of(2007, 12).with_field(q, 2) == YearMonth.of(2007, 6)
	test/core.RangeError ^ (lambda: d.with_field(q, 5))

def test_queries(test):
	dt = LocalDateTime.of(2007, 12, 3, 10, 15)
	test/dt.query(queries.local_date) == LocalDate.of(2007, 12, 3)
	test/dt.query(queries.local_time) == LocalTime.of(10, 15)
	test/dt.query(queries.offset) == None
	test/dt.query(queries.zone) == None
	test/dt.query(queries.precision) == U.NANOS
	test/LocalDate.of(2007, 12, 3).query(queries.precision) == U.DAYS
	test/LocalDate.of(2007, 12, 3).query(queries.local_time) == None
	test/ZoneOffset.of_hours(1).query(queries.offset) == ZoneOffset.of_hours(1)

def test_from_temporal(test):
	dt = LocalDateTime.of(2007, 12, 3, 10, 15)
	test/LocalDate.from_temporal(dt) == LocalDate.of(2007, 12, 3)
	test/LocalTime.from_temporal(dt) == LocalTime.of(10, 15)
	test/YearMonth.from_temporal(dt) == YearMonth.of(2007, 12)
	test/MonthDay.from_temporal(dt) == MonthDay.of(12, 3)
	test/core.UnsupportedError ^ (lambda: LocalTime.from_temporal(LocalDate.of(2007, 1, 1)))
	test/core.UnsupportedError ^ (lambda: ZoneOffset.from_temporal(dt))

if __name__ == '__main__':
	import sys
	from ...test import engine
	engine.execute(sys.modules[__name__])
