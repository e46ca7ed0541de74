"""
# Gregorian calendar functions and data.

# The calendar is proleptic: the leap year rule is extended across the entire
# supported range and year zero exists. Dates are converted to and from a
# linear count of Earth-days, the epoch day, where day zero is 1970-01-01.
"""
import enum

from . import core

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a decade
years_in_decade = 10

#: number of centuries in a millennium
centuries_in_millennium = 10

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days leading up to each month of a year that begins in March.
#: February, the only month of variable length, is last.
march_offsets = (0, 31, 61, 92, 122, 153, 184, 214, 245, 275, 306, 337)

#: Number of days in a four century cycle.
days_in_cycle = (365 * years_in_cycle) + (years_in_cycle // 4) - (years_in_cycle // 100) + 1

#: Days from 0000-03-01 to 1970-01-01.
days_0000_03_to_1970 = (days_in_cycle * 5) - ((30 * 365) + 7) - 60

#: Days from 0000-01-01 to 1970-01-01.
days_0000_to_1970 = days_0000_03_to_1970 + 60

#: Smallest year supported by dates.
year_minimum = -999_999_999

#: Largest year supported by dates.
year_maximum = 999_999_999

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def year_length(y):
	"""
	# The number of days in the year, &y.
	"""
	return 366 if year_is_leap(y) else 365

def month_length(y, m):
	"""
	# The number of days in the month, &m, of the year, &y.
	"""
	if m == 2:
		return 29 if year_is_leap(y) else 28
	return calendar_year[m-1]

def validate(date, minimum=year_minimum, maximum=year_maximum):
	"""
	# Raise &core.RangeError if the (year, month, day) tuple, &date, does not
	# identify a day of the calendar.
	"""
	y, m, d = date
	if y < minimum or y > maximum:
		raise core.RangeError(
			"Invalid value for Year (valid values %d - %d): %d" %(minimum, maximum, y)
		)
	if m < 1 or m > 12:
		raise core.RangeError("Invalid value for MonthOfYear (valid values 1 - 12): %d" %(m,))
	if d < 1 or d > 31:
		raise core.RangeError("Invalid value for DayOfMonth (valid values 1 - 28/31): %d" %(d,))
	if d > month_length(y, m):
		if d == 29:
			raise core.RangeError("Invalid date 'February 29' as '%d' is not a leap year" %(y,))
		raise core.RangeError("Invalid date '%s %d'" %(month_names[m-1].capitalize(), d))
	return date

def days_from_date(date, _offsets=march_offsets):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the
	# number of days since 1970-01-01; the epoch day.

	# The date is not validated; callers validate before converting.
	"""
	year, month, day = date

	# Shift to a year that begins in March so that February is last.
	if month > 2:
		month -= 3
	else:
		month += 9
		year -= 1

	total = 365 * year
	total += (year // 4) - (year // 100) + (year // 400)
	total += _offsets[month]
	total += day - 1

	return total - days_0000_03_to_1970

def date_from_days(days, _cycle=days_in_cycle):
	"""
	# Convert the given epoch day into a Gregorian date in the common form:
	# (year, month, day).
	"""
	zero = days + days_0000_03_to_1970

	# Remove whole cycles first so that the estimate only sees
	# non-negative quantities.
	cycles, zero = divmod(zero, _cycle)

	year = ((400 * zero) + 591) // _cycle
	doy = zero - ((365 * year) + (year // 4) - (year // 100) + (year // 400))
	if doy < 0:
		year -= 1
		doy = zero - ((365 * year) + (year // 4) - (year // 100) + (year // 400))
	year += cycles * years_in_cycle

	# March based day of year back to January based.
	march_month = ((doy * 5) + 2) // 153
	month = ((march_month + 2) % 12) + 1
	day = doy - (((march_month * 306) + 5) // 10) + 1
	year += march_month // 10

	return (year, month, day)

def day_of_year(date):
	"""
	# The one-based day of the year of the (year, month, day) tuple, &date.
	"""
	y, m, d = date
	return Month(m).first_day_of_year(year_is_leap(y)) + d - 1

def date_from_day_of_year(year, doy):
	"""
	# The (year, month, day) tuple of the one-based day of year, &doy.
	"""
	leap = year_is_leap(year)
	if doy < 1 or doy > 366:
		raise core.RangeError("Invalid value for DayOfYear (valid values 1 - 365/366): %d" %(doy,))
	if doy == 366 and not leap:
		raise core.RangeError("Invalid date 'DayOfYear 366' as '%d' is not a leap year" %(year,))

	moy = Month((doy - 1) // 31 + 1)
	end = moy.first_day_of_year(leap) + moy.length(leap) - 1
	if doy > end:
		moy = moy.plus(1)
	return (year, moy.value, doy - moy.first_day_of_year(leap) + 1)

class Month(enum.IntEnum):
	"""
	# The months of the Gregorian year.
	"""
	JANUARY = 1
	FEBRUARY = 2
	MARCH = 3
	APRIL = 4
	MAY = 5
	JUNE = 6
	JULY = 7
	AUGUST = 8
	SEPTEMBER = 9
	OCTOBER = 10
	NOVEMBER = 11
	DECEMBER = 12

	@classmethod
	def of(Class, month):
		if month < 1 or month > 12:
			raise core.RangeError("Invalid value for MonthOfYear: %d" %(month,))
		return Class(month)

	@property
	def abbreviation(self):
		return month_abbreviations[self.value - 1]

	def plus(self, months):
		"""
		# The month that is &months after this one, wrapping around the year.
		"""
		return Month(((self.value - 1 + months) % 12) + 1)

	def minus(self, months):
		return self.plus(-(months % 12))

	def length(self, leap):
		"""
		# The number of days in the month for a leap, or common, year.
		"""
		if self is Month.FEBRUARY:
			return 29 if leap else 28
		return calendar_year[self.value - 1]

	@property
	def minimum_length(self):
		return calendar_year[self.value - 1]

	@property
	def maximum_length(self):
		return calendar_leap[self.value - 1]

	def first_day_of_year(self, leap):
		"""
		# The day of year of the first day of this month.
		"""
		table = calendar_leap if leap else calendar_year
		return sum(table[:self.value - 1]) + 1

	def first_month_of_quarter(self):
		return Month((((self.value - 1) // 3) * 3) + 1)
