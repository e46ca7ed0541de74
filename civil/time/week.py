"""
# Week based measures of time: days of seven.

# Days of the week are numbered from one, Monday, to seven, Sunday, and are
# derived from the epoch day. The epoch, 1970-01-01, was a Thursday.
"""
import enum

from . import core

#: English names of the days of the week in ISO order.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names and abbreviations to the one-based day of week.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in list(weekday_name_to_number.items())
])

#: Zero-based day of week of the epoch day zero.
epoch_offset = 3

def day_of_week(days, offset=epoch_offset):
	"""
	# The one-based ISO day of week of the epoch day, &days.
	"""
	return ((days + offset) % 7) + 1

def week_from_days(days):
	return days // 7

def days_from_week(weeks):
	return weeks * 7

class DayOfWeek(enum.IntEnum):
	"""
	# The days of the ISO week.
	"""
	MONDAY = 1
	TUESDAY = 2
	WEDNESDAY = 3
	THURSDAY = 4
	FRIDAY = 5
	SATURDAY = 6
	SUNDAY = 7

	@classmethod
	def of(Class, day):
		if day < 1 or day > 7:
			raise core.RangeError("Invalid value for DayOfWeek: %d" %(day,))
		return Class(day)

	@classmethod
	def from_days(Class, days):
		"""
		# The day of week of the given epoch day.
		"""
		return Class(day_of_week(days))

	@property
	def abbreviation(self):
		return weekday_abbreviations[self.value - 1]

	def plus(self, days):
		return DayOfWeek(((self.value - 1 + days) % 7) + 1)

	def minus(self, days):
		return self.plus(-(days % 7))
