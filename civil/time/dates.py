"""
# Calendar dates of the proleptic Gregorian calendar: &LocalDate, &Year,
# &YearMonth, and &MonthDay.

# Changes to the year or month of a date clamp the day of month to the last
# valid day of the new month: `2008-02-29` with the year `2007` is `2007-02-28`.
"""
from ..context import tools
from . import core
from . import exact
from . import earth
from . import gregorian
from . import week
from . import fields
from . import units
from . import format
from .fields import ChronoField as F
from .units import ChronoUnit as U

def resolve_previous_valid(year, month, day):
	"""
	# Construct the date clamping &day to the length of the month.
	"""
	return LocalDate(year, month, min(day, gregorian.month_length(year, month)))

@tools.ordered
class LocalDate(fields.Dispatch):
	"""
	# A date without a time of day or a zone, such as `2007-12-03`.
	"""
	year: int
	month: int
	day: int

	def __post_init__(self):
		gregorian.validate((self.year, self.month, self.day))

	@classmethod
	def of(Class, year, month, day):
		return Class(year, month, day)

	@classmethod
	def of_year_day(Class, year, day_of_year):
		"""
		# Construct the date from the year and the one-based &day_of_year.
		"""
		F.YEAR.check_valid_value(year)
		F.DAY_OF_YEAR.check_valid_value(day_of_year)
		return Class(*gregorian.date_from_day_of_year(year, day_of_year))

	@classmethod
	def of_epoch_day(Class, epoch_day):
		"""
		# Construct the date from the number of days since 1970-01-01.
		"""
		F.EPOCH_DAY.check_valid_value(epoch_day)
		return Class(*gregorian.date_from_days(epoch_day))

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		from . import queries
		d = temporal.query(queries.local_date)
		if d is None:
			raise core.UnsupportedError("Unable to obtain LocalDate from %r" %(temporal,))
		return d

	@classmethod
	def now(Class, clock):
		"""
		# The current date according to the &clock.
		"""
		instant = clock.instant()
		offset = clock.zone.rules.offset(instant)
		local = exact.add(instant.seconds, offset.total_seconds)
		return Class.of_epoch_day(local // earth.seconds_in_day)

	@classmethod
	def parse(Class, text):
		return format.structure('date', text, Class)

	def __str__(self):
		return format.date(self.year, self.month, self.day)

	def to_epoch_day(self):
		return gregorian.days_from_date((self.year, self.month, self.day))

	@property
	def day_of_week(self):
		return week.DayOfWeek.from_days(self.to_epoch_day())

	@property
	def day_of_year(self):
		return gregorian.day_of_year((self.year, self.month, self.day))

	@property
	def proleptic_month(self):
		return (self.year * 12) + self.month - 1

	def is_leap_year(self):
		return gregorian.year_is_leap(self.year)

	def length_of_month(self):
		return gregorian.month_length(self.year, self.month)

	def length_of_year(self):
		return gregorian.year_length(self.year)

	def with_year(self, year):
		if year == self.year:
			return self
		F.YEAR.check_valid_value(year)
		return resolve_previous_valid(year, self.month, self.day)

	def with_month(self, month):
		if month == self.month:
			return self
		F.MONTH_OF_YEAR.check_valid_value(month)
		return resolve_previous_valid(self.year, month, self.day)

	def with_day_of_month(self, day):
		if day == self.day:
			return self
		return LocalDate(self.year, self.month, day)

	def with_day_of_year(self, day_of_year):
		if day_of_year == self.day_of_year:
			return self
		return LocalDate.of_year_day(self.year, day_of_year)

	def plus_days(self, days):
		if days == 0:
			return self
		return LocalDate.of_epoch_day(exact.add(self.to_epoch_day(), days))

	def plus_weeks(self, weeks):
		return self.plus_days(exact.multiply(weeks, 7))

	def plus_months(self, months):
		if months == 0:
			return self
		calc = exact.add(self.proleptic_month, months)
		year = F.YEAR.check_valid_value(calc // 12)
		return resolve_previous_valid(year, (calc % 12) + 1, self.day)

	def plus_years(self, years):
		if years == 0:
			return self
		year = F.YEAR.check_valid_value(exact.add(self.year, years))
		return resolve_previous_valid(year, self.month, self.day)

	def minus_days(self, days):
		return self.minus(days, U.DAYS)

	def minus_weeks(self, weeks):
		return self.minus(weeks, U.WEEKS)

	def minus_months(self, months):
		return self.minus(months, U.MONTHS)

	def minus_years(self, years):
		return self.minus(years, U.YEARS)

	def days_until(self, end):
		return end.to_epoch_day() - self.to_epoch_day()

	def months_until(self, end):
		"""
		# The number of complete months between the date and &end.
		"""
		packed1 = (self.proleptic_month * 32) + self.day
		packed2 = (end.proleptic_month * 32) + end.day
		return exact.quotient(packed2 - packed1, 32)

	def period_until(self, end):
		"""
		# The &..amounts.Period between this date and the date, &end.
		"""
		from .amounts import Period
		end = LocalDate.from_temporal(end)
		total = end.proleptic_month - self.proleptic_month
		days = end.day - self.day
		if total > 0 and days < 0:
			total -= 1
			calc = self.plus_months(total)
			days = end.to_epoch_day() - calc.to_epoch_day()
		elif total < 0 and days > 0:
			total += 1
			days -= end.length_of_month()
		return Period.of(exact.quotient(total, 12), exact.remainder(total, 12), days)

	def at_time(self, time):
		from .datetimes import LocalDateTime
		return LocalDateTime(self, time)

	def at_start_of_day(self, zone=None):
		"""
		# The &..datetimes.LocalDateTime at midnight or, when &zone is given, the
		# earliest valid &..zoned.ZonedDateTime of the date in the &zone.
		"""
		from .timeofday import LocalTime
		from .datetimes import LocalDateTime
		local = LocalDateTime(self, LocalTime.MIDNIGHT)
		if zone is None:
			return local

		from .zones import ZoneOffset
		from .zoned import ZonedDateTime
		if not isinstance(zone, ZoneOffset):
			trans = zone.rules.transition(local)
			if trans is not None and trans.is_gap:
				local = trans.datetime_after
		return ZonedDateTime.of_local(local, zone)

	def adjust_into(self, temporal):
		return temporal.with_field(F.EPOCH_DAY, self.to_epoch_day())

LocalDate.MIN = LocalDate(gregorian.year_minimum, 1, 1)
LocalDate.MAX = LocalDate(gregorian.year_maximum, 12, 31)
LocalDate.EPOCH = LocalDate(1970, 1, 1)

def _year_of_era(d):
	return d.year if d.year >= 1 else 1 - d.year

def _era(d):
	return 1 if d.year >= 1 else 0

def _with_era(d, v):
	return d if _era(d) == v else d.with_year(1 - d.year)

def _year_of_era_range(d):
	if d.year <= 0:
		return fields.ValueRange.of(1, gregorian.year_maximum + 1)
	return fields.ValueRange.of(1, gregorian.year_maximum)

def _with_year_of_era(d, v):
	return d.with_year(v if d.year >= 1 else 1 - v)

def _aligned_dow_month(d):
	return ((d.day - 1) % 7) + 1

def _aligned_dow_year(d):
	return ((d.day_of_year - 1) % 7) + 1

def _aligned_week_month(d):
	return ((d.day - 1) // 7) + 1

def _aligned_week_year(d):
	return ((d.day_of_year - 1) // 7) + 1

def _aligned_week_month_range(d):
	if d.month == 2 and not d.is_leap_year():
		return fields.ValueRange.of(1, 4)
	return fields.ValueRange.of(1, 5)

for field, read, write, refine in [
	(F.DAY_OF_WEEK, lambda d: d.day_of_week.value,
		lambda d, v: d.plus_days(v - d.day_of_week.value), None),
	(F.ALIGNED_DAY_OF_WEEK_IN_MONTH, _aligned_dow_month,
		lambda d, v: d.plus_days(v - _aligned_dow_month(d)), None),
	(F.ALIGNED_DAY_OF_WEEK_IN_YEAR, _aligned_dow_year,
		lambda d, v: d.plus_days(v - _aligned_dow_year(d)), None),
	(F.DAY_OF_MONTH, lambda d: d.day, LocalDate.with_day_of_month,
		lambda d: fields.ValueRange.of(1, d.length_of_month())),
	(F.DAY_OF_YEAR, lambda d: d.day_of_year, LocalDate.with_day_of_year,
		lambda d: fields.ValueRange.of(1, d.length_of_year())),
	(F.EPOCH_DAY, LocalDate.to_epoch_day, lambda d, v: LocalDate.of_epoch_day(v), None),
	(F.ALIGNED_WEEK_OF_MONTH, _aligned_week_month,
		lambda d, v: d.plus_weeks(v - _aligned_week_month(d)), _aligned_week_month_range),
	(F.ALIGNED_WEEK_OF_YEAR, _aligned_week_year,
		lambda d, v: d.plus_weeks(v - _aligned_week_year(d)), None),
	(F.MONTH_OF_YEAR, lambda d: d.month, LocalDate.with_month, None),
	(F.PROLEPTIC_MONTH, lambda d: d.proleptic_month,
		lambda d, v: d.plus_months(v - d.proleptic_month), None),
	(F.YEAR_OF_ERA, _year_of_era, _with_year_of_era, _year_of_era_range),
	(F.YEAR, lambda d: d.year, LocalDate.with_year, None),
	(F.ERA, _era, _with_era, None),
]:
	fields.define(LocalDate, field, read, write, refine)

#: Number of months in the calendar units measured in months.
month_units = {
	U.MONTHS: 1,
	U.YEARS: 12,
	U.DECADES: 120,
	U.CENTURIES: 1200,
	U.MILLENNIA: 12000,
}

def add(d, amount, unit):
	if unit is U.DAYS:
		return d.plus_days(amount)
	if unit is U.WEEKS:
		return d.plus_weeks(amount)
	if unit is U.MONTHS:
		return d.plus_months(amount)
	if unit is U.ERAS:
		return d.with_field(F.ERA, exact.add(d.get(F.ERA), amount))
	return d.plus_years(exact.multiply(amount, month_units[unit] // 12))

def measure(start, end, unit):
	if unit is U.DAYS:
		return start.days_until(end)
	if unit is U.WEEKS:
		return exact.quotient(start.days_until(end), 7)
	if unit is U.ERAS:
		return end.get(F.ERA) - start.get(F.ERA)
	return exact.quotient(start.months_until(end), month_units[unit])

for unit in (U.DAYS, U.WEEKS, U.MONTHS, U.YEARS, U.DECADES, U.CENTURIES, U.MILLENNIA, U.ERAS):
	units.define(LocalDate, unit, add, measure)

@tools.ordered
class Year(fields.Dispatch):
	"""
	# A year of the proleptic Gregorian calendar, such as `2007`.

	# Year zero is 1 BCE; negative years continue backwards from there.
	"""
	year: int

	def __post_init__(self):
		F.YEAR.check_valid_value(self.year)

	@classmethod
	def of(Class, year):
		return Class(year)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		if not temporal.is_supported(F.YEAR):
			raise core.UnsupportedError("Unable to obtain Year from %r" %(temporal,))
		return Class(temporal.get(F.YEAR))

	@classmethod
	def now(Class, clock):
		return Class(LocalDate.now(clock).year)

	@classmethod
	def parse(Class, text):
		return format.structure('year', text, Class)

	def __str__(self):
		return format.year(self.year)

	def is_leap(self):
		return gregorian.year_is_leap(self.year)

	def length(self):
		return gregorian.year_length(self.year)

	def is_valid_month_day(self, month_day):
		return month_day is not None and month_day.is_valid_year(self.year)

	def with_year(self, year):
		if year == self.year:
			return self
		return Year(year)

	def plus_years(self, years):
		if years == 0:
			return self
		return Year(F.YEAR.check_valid_value(exact.add(self.year, years)))

	def minus_years(self, years):
		return self.minus(years, U.YEARS)

	def at_day(self, day_of_year):
		"""
		# The &LocalDate of the one-based &day_of_year in the year.
		"""
		return LocalDate.of_year_day(self.year, day_of_year)

	def at_month(self, month):
		return YearMonth(self.year, month)

	def at_month_day(self, month_day):
		"""
		# The &LocalDate of &month_day in the year; February 29 becomes
		# February 28 in common years.
		"""
		return month_day.at_year(self.year)

	def adjust_into(self, temporal):
		return temporal.with_field(F.YEAR, self.year)

def _year_value(y):
	return y.year

for field, read, write, refine in [
	(F.YEAR_OF_ERA, _year_of_era, _with_year_of_era, _year_of_era_range),
	(F.YEAR, _year_value, Year.with_year, None),
	(F.ERA, _era, _with_era, None),
]:
	fields.define(Year, field, read, write, refine)

def add_years(y, amount, unit):
	if unit is U.ERAS:
		return y.with_field(F.ERA, exact.add(y.get(F.ERA), amount))
	return y.plus_years(exact.multiply(amount, month_units[unit] // 12))

def measure_years(start, end, unit):
	if unit is U.ERAS:
		return end.get(F.ERA) - start.get(F.ERA)
	return exact.quotient(end.year - start.year, month_units[unit] // 12)

for unit in (U.YEARS, U.DECADES, U.CENTURIES, U.MILLENNIA, U.ERAS):
	units.define(Year, unit, add_years, measure_years)

Year.MIN = Year(gregorian.year_minimum)
Year.MAX = Year(gregorian.year_maximum)

@tools.ordered
class YearMonth(fields.Dispatch):
	"""
	# A month of a year, such as `2007-12`.
	"""
	year: int
	month: int

	def __post_init__(self):
		F.YEAR.check_valid_value(self.year)
		F.MONTH_OF_YEAR.check_valid_value(self.month)

	@classmethod
	def of(Class, year, month):
		return Class(year, month)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		d = LocalDate.from_temporal(temporal)
		return Class(d.year, d.month)

	@classmethod
	def now(Class, clock):
		d = LocalDate.now(clock)
		return Class(d.year, d.month)

	@classmethod
	def parse(Class, text):
		return format.structure('year-month', text, Class)

	def __str__(self):
		return format.year_month(self.year, self.month)

	@property
	def proleptic_month(self):
		return (self.year * 12) + self.month - 1

	def is_leap_year(self):
		return gregorian.year_is_leap(self.year)

	def length_of_month(self):
		return gregorian.month_length(self.year, self.month)

	def length_of_year(self):
		return gregorian.year_length(self.year)

	def is_valid_day(self, day):
		return 1 <= day <= self.length_of_month()

	def with_year(self, year):
		if year == self.year:
			return self
		return YearMonth(year, self.month)

	def with_month(self, month):
		if month == self.month:
			return self
		return YearMonth(self.year, month)

	def plus_months(self, months):
		if months == 0:
			return self
		calc = exact.add(self.proleptic_month, months)
		year = F.YEAR.check_valid_value(calc // 12)
		return YearMonth(year, (calc % 12) + 1)

	def plus_years(self, years):
		if years == 0:
			return self
		return self.with_year(F.YEAR.check_valid_value(exact.add(self.year, years)))

	def minus_months(self, months):
		return self.minus(months, U.MONTHS)

	def minus_years(self, years):
		return self.minus(years, U.YEARS)

	def at_day(self, day):
		return LocalDate(self.year, self.month, day)

	def at_end_of_month(self):
		return LocalDate(self.year, self.month, self.length_of_month())

	def adjust_into(self, temporal):
		return temporal.with_field(F.PROLEPTIC_MONTH, self.proleptic_month)

for field, read, write, refine in [
	(F.MONTH_OF_YEAR, lambda ym: ym.month, YearMonth.with_month, None),
	(F.PROLEPTIC_MONTH, lambda ym: ym.proleptic_month,
		lambda ym, v: ym.plus_months(v - ym.proleptic_month), None),
	(F.YEAR_OF_ERA, _year_of_era, _with_year_of_era, _year_of_era_range),
	(F.YEAR, lambda ym: ym.year, YearMonth.with_year, None),
	(F.ERA, _era, _with_era, None),
]:
	fields.define(YearMonth, field, read, write, refine)

def add_months(ym, amount, unit):
	if unit is U.MONTHS:
		return ym.plus_months(amount)
	if unit is U.ERAS:
		return ym.with_field(F.ERA, exact.add(ym.get(F.ERA), amount))
	return ym.plus_years(exact.multiply(amount, month_units[unit] // 12))

def measure_months(start, end, unit):
	if unit is U.ERAS:
		return end.get(F.ERA) - start.get(F.ERA)
	return exact.quotient(end.proleptic_month - start.proleptic_month, month_units[unit])

for unit in (U.MONTHS, U.YEARS, U.DECADES, U.CENTURIES, U.MILLENNIA, U.ERAS):
	units.define(YearMonth, unit, add_months, measure_months)

@tools.ordered
class MonthDay(fields.Dispatch):
	"""
	# A day of a month without a year, such as `--12-03`.

	# February 29 is a valid month-day; &is_valid_year identifies the years
	# where it exists.
	"""
	month: int
	day: int

	def __post_init__(self):
		month = gregorian.Month.of(self.month)
		F.DAY_OF_MONTH.check_valid_value(self.day)
		if self.day > month.maximum_length:
			raise core.RangeError(
				"Illegal value for DayOfMonth field, value %d is not valid for month %s"
				%(self.day, month.name)
			)

	@classmethod
	def of(Class, month, day):
		return Class(month, day)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		d = LocalDate.from_temporal(temporal)
		return Class(d.month, d.day)

	@classmethod
	def now(Class, clock):
		d = LocalDate.now(clock)
		return Class(d.month, d.day)

	@classmethod
	def parse(Class, text):
		return format.structure('month-day', text, Class)

	def __str__(self):
		return format.month_day(self.month, self.day)

	def with_month(self, month):
		"""
		# Change the month clamping the day to the maximum length of the month.
		"""
		if month == self.month:
			return self
		m = gregorian.Month.of(month)
		return MonthDay(month, min(self.day, m.maximum_length))

	def with_day_of_month(self, day):
		if day == self.day:
			return self
		return MonthDay(self.month, day)

	def is_valid_year(self, year):
		return not (self.day == 29 and self.month == 2 and not gregorian.year_is_leap(year))

	def at_year(self, year):
		"""
		# The &LocalDate of the month-day in the &year. February 29 becomes
		# February 28 in common years.
		"""
		if self.is_valid_year(year):
			return LocalDate(year, self.month, self.day)
		return LocalDate(year, self.month, 28)

	def adjust_into(self, temporal):
		temporal = temporal.with_field(F.MONTH_OF_YEAR, self.month)
		limit = temporal.range(F.DAY_OF_MONTH).maximum
		return temporal.with_field(F.DAY_OF_MONTH, min(limit, self.day))

def _month_day_range(md):
	m = gregorian.Month(md.month)
	return fields.ValueRange.of(1, m.minimum_length, m.maximum_length)

fields.define(MonthDay, F.MONTH_OF_YEAR, lambda md: md.month)
fields.define(MonthDay, F.DAY_OF_MONTH, lambda md: md.day, refine=_month_day_range)
del field, read, write, refine, unit
