"""
# Quarter and week-based fields and units of the ISO-8601 calendar.

# The fields are not part of &..fields.ChronoField; they implement the
# &..abstract.Field protocol and compute their values from the standard fields
# that a temporal supports, so any value type with a date can be used with them:

#!syntax/python
	d = LocalDate.of(2008, 12, 29)
	assert d.get(isofields.WEEK_BASED_YEAR) == 2009
	assert d.get(isofields.WEEK_OF_WEEK_BASED_YEAR) == 1

# A week-based year starts on the Monday of the week containing its first
# Thursday; it has 52 or 53 weeks.

# [ Elements ]
# /QUARTER_OF_YEAR/
	# The quarter of the year, one to four.
# /DAY_OF_QUARTER/
	# The day of the quarter, one to 90, 91, or 92.
# /WEEK_OF_WEEK_BASED_YEAR/
	# The week of the week-based year, one to 52 or 53.
# /WEEK_BASED_YEAR/
	# The week-based year.
# /QUARTER_YEARS/
	# Units of three months.
# /WEEK_BASED_YEARS/
	# Units of week-based years.
"""
from . import core
from . import exact
from . import earth
from . import gregorian
from . import fields
from .fields import ChronoField as F
from .units import ChronoUnit as U

#: Days of the year preceding each quarter; common years, then leap years.
quarter_days = (0, 90, 181, 273, 0, 91, 182, 274)

def _date(temporal):
	from .dates import LocalDate
	return LocalDate.from_temporal(temporal)

def week_based_year(date):
	"""
	# The week-based year of the &..dates.LocalDate, &date.
	"""
	year = date.year
	doy = date.day_of_year
	dow0 = date.day_of_week.value - 1
	if doy <= 3:
		if doy - dow0 < -2:
			year -= 1
	elif doy >= 363:
		doy = doy - 363 - (1 if date.is_leap_year() else 0)
		if doy - dow0 >= 0:
			year += 1
	return year

def weeks_in_week_based_year(year):
	"""
	# The number of weeks, 52 or 53, in the week-based &year.
	"""
	from .dates import LocalDate
	dow = LocalDate(year, 1, 1).day_of_week.value
	if dow == 4 or (dow == 3 and gregorian.year_is_leap(year)):
		return 53
	return 52

def week_range(date):
	return fields.ValueRange.of(1, weeks_in_week_based_year(week_based_year(date)))

def week_of_week_based_year(date):
	"""
	# The week of the week-based year of the &..dates.LocalDate, &date.
	"""
	dow0 = date.day_of_week.value - 1
	doy0 = date.day_of_year - 1
	first_monday = exact.remainder(doy0 + (3 - dow0), 7) - 3
	if first_monday < -3:
		first_monday += 7
	if doy0 < first_monday:
		# Last week of the previous week-based year.
		return week_range(date.with_day_of_year(180).minus_years(1)).maximum

	week = ((doy0 - first_monday) // 7) + 1
	if week == 53:
		if not (first_monday == -3 or (first_monday == -2 and date.is_leap_year())):
			week = 1
	return week

class IsoField(object):
	"""
	# Base class of the date-based fields defined here.
	"""
	__slots__ = ('label', 'base_unit', 'range_unit', 'value_range', 'requires')

	def __init__(self, label, base_unit, range_unit, value_range, requires=(F.EPOCH_DAY,)):
		self.label = label
		self.base_unit = base_unit
		self.range_unit = range_unit
		self.value_range = value_range
		self.requires = requires

	def __str__(self):
		return self.label

	def __repr__(self):
		return '<' + self.label + '>'

	def range(self):
		return self.value_range

	def is_date_based(self):
		return True

	def is_time_based(self):
		return False

	def is_supported_by(self, temporal):
		return all(temporal.is_supported(f) for f in self.requires)

	def check_supported(self, temporal):
		if not self.is_supported_by(temporal):
			raise core.UnsupportedError("Unsupported field: " + self.label)

	def range_refined_by(self, temporal):
		self.check_supported(temporal)
		return self.value_range

class QuarterOfYear(IsoField):
	__slots__ = ()

	def get_from(self, temporal):
		self.check_supported(temporal)
		return (temporal.get(F.MONTH_OF_YEAR) + 2) // 3

	def adjust_into(self, temporal, value):
		current = self.get_from(temporal)
		self.value_range.check_valid_value(value, self)
		moy = temporal.get(F.MONTH_OF_YEAR)
		return temporal.with_field(F.MONTH_OF_YEAR, moy + ((value - current) * 3))

class DayOfQuarter(IsoField):
	__slots__ = ()

	def range_refined_by(self, temporal):
		self.check_supported(temporal)
		quarter = QUARTER_OF_YEAR.get_from(temporal)
		if quarter == 1:
			if gregorian.year_is_leap(temporal.get(F.YEAR)):
				return fields.ValueRange.of(1, 91)
			return fields.ValueRange.of(1, 90)
		if quarter == 2:
			return fields.ValueRange.of(1, 91)
		return fields.ValueRange.of(1, 92)

	def get_from(self, temporal):
		self.check_supported(temporal)
		doy = temporal.get(F.DAY_OF_YEAR)
		moy = temporal.get(F.MONTH_OF_YEAR)
		leap = gregorian.year_is_leap(temporal.get(F.YEAR))
		return doy - quarter_days[((moy - 1) // 3) + (4 if leap else 0)]

	def adjust_into(self, temporal, value):
		current = self.get_from(temporal)
		self.value_range.check_valid_value(value, self)
		doy = temporal.get(F.DAY_OF_YEAR)
		return temporal.with_field(F.DAY_OF_YEAR, doy + (value - current))

class WeekOfWeekBasedYear(IsoField):
	__slots__ = ()

	def range_refined_by(self, temporal):
		self.check_supported(temporal)
		return week_range(_date(temporal))

	def get_from(self, temporal):
		self.check_supported(temporal)
		return week_of_week_based_year(_date(temporal))

	def adjust_into(self, temporal, value):
		self.value_range.check_valid_value(value, self)
		return temporal.plus(exact.subtract(value, self.get_from(temporal)), U.WEEKS)

class WeekBasedYear(IsoField):
	__slots__ = ()

	def get_from(self, temporal):
		self.check_supported(temporal)
		return week_based_year(_date(temporal))

	def adjust_into(self, temporal, value):
		"""
		# Move the temporal to the same week and day of week in the week-based
		# year, &value. The 53rd week becomes the 52nd when &value has 52 weeks.
		"""
		from .dates import LocalDate
		self.check_supported(temporal)
		year = self.value_range.check_valid_value(value, self)
		date = _date(temporal)
		dow = date.day_of_week.value
		week = week_of_week_based_year(date)
		if week == 53 and weeks_in_week_based_year(year) == 52:
			week = 52

		# January 4th is always in the first week.
		resolved = LocalDate(year, 1, 4)
		days = (dow - resolved.day_of_week.value) + ((week - 1) * 7)
		return temporal.adjust(resolved.plus_days(days))

class IsoUnit(object):
	"""
	# Date-based units measured with the fields defined here.
	"""
	__slots__ = ('label', 'seconds')

	def __init__(self, label, seconds):
		self.label = label
		self.seconds = seconds

	def __str__(self):
		return self.label

	def __repr__(self):
		return '<' + self.label + '>'

	@property
	def duration(self):
		from .amounts import Duration
		return Duration.of_seconds(self.seconds)

	def is_duration_estimated(self):
		return True

	def is_date_based(self):
		return True

	def is_time_based(self):
		return False

	def is_supported_by(self, temporal):
		return temporal.is_supported(F.EPOCH_DAY)

	def add_to(self, temporal, amount):
		if self is WEEK_BASED_YEARS:
			year = exact.add(temporal.get(WEEK_BASED_YEAR), amount)
			return temporal.with_field(WEEK_BASED_YEAR, year)

		# Whole years first so that the months never exceed a 64-bit amount.
		years = exact.quotient(amount, 4)
		months = exact.remainder(amount, 4) * 3
		return temporal.plus(years, U.YEARS).plus(months, U.MONTHS)

	def between(self, start, end):
		if type(start) is not type(end):
			return start.until(end, self)
		if self is WEEK_BASED_YEARS:
			return exact.subtract(end.get(WEEK_BASED_YEAR), start.get(WEEK_BASED_YEAR))
		return exact.quotient(start.until(end, U.MONTHS), 3)

QUARTER_OF_YEAR = QuarterOfYear(
	'QuarterOfYear', None, U.YEARS, fields.ValueRange.of(1, 4),
	requires=(F.MONTH_OF_YEAR,),
)
DAY_OF_QUARTER = DayOfQuarter(
	'DayOfQuarter', U.DAYS, None, fields.ValueRange.of(1, 90, 92),
	requires=(F.DAY_OF_YEAR, F.MONTH_OF_YEAR, F.YEAR),
)
WEEK_OF_WEEK_BASED_YEAR = WeekOfWeekBasedYear(
	'WeekOfWeekBasedYear', U.WEEKS, None, fields.ValueRange.of(1, 52, 53),
)
WEEK_BASED_YEAR = WeekBasedYear(
	'WeekBasedYear', None, U.FOREVER, F.YEAR.range(),
)

WEEK_BASED_YEARS = IsoUnit('WeekBasedYears', earth.seconds_in_year)
QUARTER_YEARS = IsoUnit('QuarterYears', earth.seconds_in_year // 4)

QUARTER_OF_YEAR.base_unit = QUARTER_YEARS
DAY_OF_QUARTER.range_unit = QUARTER_YEARS
WEEK_OF_WEEK_BASED_YEAR.range_unit = WEEK_BASED_YEARS
WEEK_BASED_YEAR.base_unit = WEEK_BASED_YEARS
