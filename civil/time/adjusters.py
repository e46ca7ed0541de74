"""
# Common adjusters of temporal objects.

# Adjusters are applied with `temporal.adjust(adjuster)` and operate through the
# fields of the temporal, so any type supporting the fields used by an adjuster
# can be adjusted by it:

#!syntax/python
	d = LocalDate.of(2007, 12, 3).adjust(adjusters.last_day_of_month())
"""
from ..context import tools
from .fields import ChronoField as F
from .units import ChronoUnit as U

@tools.record
class Adjuster(object):
	"""
	# An &..abstract.Adjuster performing &function.
	"""
	name: str
	function: object

	def adjust_into(self, temporal):
		return self.function(temporal)

def first_day_of_month():
	return Adjuster('first_day_of_month', lambda t: t.with_field(F.DAY_OF_MONTH, 1))

def last_day_of_month():
	def adjust(t):
		return t.with_field(F.DAY_OF_MONTH, t.range(F.DAY_OF_MONTH).maximum)
	return Adjuster('last_day_of_month', adjust)

def first_day_of_next_month():
	return Adjuster('first_day_of_next_month',
		lambda t: t.with_field(F.DAY_OF_MONTH, 1).plus(1, U.MONTHS))

def first_day_of_year():
	return Adjuster('first_day_of_year', lambda t: t.with_field(F.DAY_OF_YEAR, 1))

def last_day_of_year():
	def adjust(t):
		return t.with_field(F.DAY_OF_YEAR, t.range(F.DAY_OF_YEAR).maximum)
	return Adjuster('last_day_of_year', adjust)

def first_day_of_next_year():
	return Adjuster('first_day_of_next_year',
		lambda t: t.with_field(F.DAY_OF_YEAR, 1).plus(1, U.YEARS))

def day_of_week_in_month(ordinal, weekday):
	"""
	# The &ordinal occurrence of &weekday in the month. Zero selects the last
	# &weekday of the previous month; negative ordinals count from the end of
	# the month.
	"""
	weekday = int(weekday)

	def adjust(t):
		if ordinal >= 0:
			first = t.with_field(F.DAY_OF_MONTH, 1)
			diff = (weekday - first.get(F.DAY_OF_WEEK) + 7) % 7
			diff += (ordinal - 1) * 7
			return first.plus(diff, U.DAYS)
		else:
			last = t.with_field(F.DAY_OF_MONTH, t.range(F.DAY_OF_MONTH).maximum)
			diff = weekday - last.get(F.DAY_OF_WEEK)
			if diff > 0:
				diff -= 7
			diff -= (-ordinal - 1) * 7
			return last.plus(diff, U.DAYS)

	return Adjuster('day_of_week_in_month', adjust)

def first_in_month(weekday):
	return day_of_week_in_month(1, weekday)

def last_in_month(weekday):
	return day_of_week_in_month(-1, weekday)

def _forward(weekday, same):
	weekday = int(weekday)
	def adjust(t):
		current = t.get(F.DAY_OF_WEEK)
		if same and current == weekday:
			return t
		diff = current - weekday
		return t.plus(7 - diff if diff >= 0 else -diff, U.DAYS)
	return adjust

def _backward(weekday, same):
	weekday = int(weekday)
	def adjust(t):
		current = t.get(F.DAY_OF_WEEK)
		if same and current == weekday:
			return t
		diff = weekday - current
		return t.minus(7 - diff if diff >= 0 else -diff, U.DAYS)
	return adjust

def next(weekday):
	"""
	# The first &weekday after the date being adjusted.
	"""
	return Adjuster('next', _forward(weekday, False))

def next_or_same(weekday):
	return Adjuster('next_or_same', _forward(weekday, True))

def previous(weekday):
	"""
	# The last &weekday before the date being adjusted.
	"""
	return Adjuster('previous', _backward(weekday, False))

def previous_or_same(weekday):
	return Adjuster('previous_or_same', _backward(weekday, True))
