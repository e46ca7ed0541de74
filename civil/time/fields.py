"""
# Standard date and time fields, their ranges, and the dispatch table used by
# the value types.

# Each value type module registers the fields that it supports using &define.
# &Dispatch, the base class of the value types, resolves &ChronoField
# instances against the table and forwards any other &..abstract.Field to the
# field's own methods.

# [ Properties ]
# /readers/
	# Mapping of (type, field) to a function reading the field's value.
# /writers/
	# Mapping of (type, field) to a function constructing an adjusted copy.
# /refinements/
	# Mapping of (type, field) to a function returning the range of the field
	# for a particular instance.
"""
import enum

from ..context import tools
from . import core
from . import exact
from . import earth
from . import gregorian
from . import queries
from . import units
from .units import ChronoUnit

readers = {}
writers = {}
refinements = {}

def define(Type, field, read, write=None, refine=None):
	"""
	# Define the access to &field by the temporal type, &Type.
	"""
	readers[(Type, field)] = read
	if write is not None:
		writers[(Type, field)] = write
	if refine is not None:
		refinements[(Type, field)] = refine

def lookup(temporal, field, table):
	for T in type(temporal).__mro__:
		try:
			return table[(T, field)]
		except KeyError:
			pass
	return None

def unsupported(field):
	return core.UnsupportedError("Unsupported field: " + str(field))

@tools.record
class ValueRange(object):
	"""
	# The range of valid values of a field.

	# The minimum and the maximum of a range may vary; the day-of-month ends at
	# 28, 29, 30, or 31. &largest_minimum and &smallest_maximum describe
	# the inner bounds of a varying range.
	"""
	minimum: int
	largest_minimum: int
	smallest_maximum: int
	maximum: int

	def __post_init__(self):
		if self.minimum > self.largest_minimum:
			raise core.RangeError("smallest minimum value must be less than largest minimum value")
		if self.smallest_maximum > self.maximum:
			raise core.RangeError("smallest maximum value must be less than largest maximum value")
		if self.largest_minimum > self.maximum:
			raise core.RangeError("minimum value must be less than maximum value")

	@classmethod
	def of(Class, minimum, maximum, largest=None):
		"""
		# Construct a range from its outer bounds. When &largest is given,
		# &maximum is the smallest maximum and &largest is the maximum.
		"""
		if largest is None:
			return Class(minimum, minimum, maximum, maximum)
		return Class(minimum, minimum, maximum, largest)

	def is_fixed(self):
		return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

	def is_int_value(self):
		return self.minimum >= exact.int_minimum and self.maximum <= exact.int_maximum

	def is_valid_value(self, value):
		return self.minimum <= value <= self.maximum

	def is_valid_int_value(self, value):
		return self.is_int_value() and self.is_valid_value(value)

	def check_valid_value(self, value, field=None):
		"""
		# Return &value if it is within the range; raise &core.RangeError otherwise.
		"""
		if not self.is_valid_value(value):
			if field is not None:
				raise core.RangeError(
					"Invalid value for %s (valid values %s): %d" %(field, self, value)
				)
			raise core.RangeError("Invalid value (valid values %s): %d" %(self, value))
		return value

	def check_valid_int_value(self, value, field=None):
		if not self.is_int_value():
			raise core.RangeError("Invalid int value for " + str(field))
		return self.check_valid_value(value, field)

	def __str__(self):
		s = str(self.minimum)
		if self.minimum != self.largest_minimum:
			s += '/' + str(self.largest_minimum)
		s += ' - ' + str(self.smallest_maximum)
		if self.smallest_maximum != self.maximum:
			s += '/' + str(self.maximum)
		return s

_of = ValueRange.of
_ymin = gregorian.year_minimum
_ymax = gregorian.year_maximum

class ChronoField(enum.Enum):
	"""
	# The standard set of date and time fields.
	"""

	def __init__(self, label, base_unit, range_unit, value_range):
		self.label = label
		self.base_unit = base_unit
		self.range_unit = range_unit
		self.value_range = value_range

	NANO_OF_SECOND = ('NanoOfSecond', ChronoUnit.NANOS, ChronoUnit.SECONDS, _of(0, 999_999_999))
	NANO_OF_DAY = ('NanoOfDay', ChronoUnit.NANOS, ChronoUnit.DAYS, _of(0, earth.nanos_in_day - 1))
	MICRO_OF_SECOND = ('MicroOfSecond', ChronoUnit.MICROS, ChronoUnit.SECONDS, _of(0, 999_999))
	MICRO_OF_DAY = ('MicroOfDay', ChronoUnit.MICROS, ChronoUnit.DAYS, _of(0, earth.micros_in_day - 1))
	MILLI_OF_SECOND = ('MilliOfSecond', ChronoUnit.MILLIS, ChronoUnit.SECONDS, _of(0, 999))
	MILLI_OF_DAY = ('MilliOfDay', ChronoUnit.MILLIS, ChronoUnit.DAYS, _of(0, earth.millis_in_day - 1))
	SECOND_OF_MINUTE = ('SecondOfMinute', ChronoUnit.SECONDS, ChronoUnit.MINUTES, _of(0, 59))
	SECOND_OF_DAY = ('SecondOfDay', ChronoUnit.SECONDS, ChronoUnit.DAYS, _of(0, earth.seconds_in_day - 1))
	MINUTE_OF_HOUR = ('MinuteOfHour', ChronoUnit.MINUTES, ChronoUnit.HOURS, _of(0, 59))
	MINUTE_OF_DAY = ('MinuteOfDay', ChronoUnit.MINUTES, ChronoUnit.DAYS, _of(0, earth.minutes_in_day - 1))
	HOUR_OF_AMPM = ('HourOfAmPm', ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, _of(0, 11))
	CLOCK_HOUR_OF_AMPM = ('ClockHourOfAmPm', ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, _of(1, 12))
	HOUR_OF_DAY = ('HourOfDay', ChronoUnit.HOURS, ChronoUnit.DAYS, _of(0, 23))
	CLOCK_HOUR_OF_DAY = ('ClockHourOfDay', ChronoUnit.HOURS, ChronoUnit.DAYS, _of(1, 24))
	AMPM_OF_DAY = ('AmPmOfDay', ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, _of(0, 1))
	DAY_OF_WEEK = ('DayOfWeek', ChronoUnit.DAYS, ChronoUnit.WEEKS, _of(1, 7))
	ALIGNED_DAY_OF_WEEK_IN_MONTH = ('AlignedDayOfWeekInMonth', ChronoUnit.DAYS, ChronoUnit.WEEKS, _of(1, 7))
	ALIGNED_DAY_OF_WEEK_IN_YEAR = ('AlignedDayOfWeekInYear', ChronoUnit.DAYS, ChronoUnit.WEEKS, _of(1, 7))
	DAY_OF_MONTH = ('DayOfMonth', ChronoUnit.DAYS, ChronoUnit.MONTHS, _of(1, 28, 31))
	DAY_OF_YEAR = ('DayOfYear', ChronoUnit.DAYS, ChronoUnit.YEARS, _of(1, 365, 366))
	EPOCH_DAY = ('EpochDay', ChronoUnit.DAYS, ChronoUnit.FOREVER, _of(-365243219162, 365241780471))
	ALIGNED_WEEK_OF_MONTH = ('AlignedWeekOfMonth', ChronoUnit.WEEKS, ChronoUnit.MONTHS, _of(1, 4, 5))
	ALIGNED_WEEK_OF_YEAR = ('AlignedWeekOfYear', ChronoUnit.WEEKS, ChronoUnit.YEARS, _of(1, 53))
	MONTH_OF_YEAR = ('MonthOfYear', ChronoUnit.MONTHS, ChronoUnit.YEARS, _of(1, 12))
	PROLEPTIC_MONTH = ('ProlepticMonth', ChronoUnit.MONTHS, ChronoUnit.FOREVER, _of(_ymin * 12, _ymax * 12 + 11))
	YEAR_OF_ERA = ('YearOfEra', ChronoUnit.YEARS, ChronoUnit.ERAS, _of(1, _ymax, _ymax + 1))
	YEAR = ('Year', ChronoUnit.YEARS, ChronoUnit.FOREVER, _of(_ymin, _ymax))
	ERA = ('Era', ChronoUnit.ERAS, ChronoUnit.FOREVER, _of(0, 1))
	INSTANT_SECONDS = ('InstantSeconds', ChronoUnit.SECONDS, ChronoUnit.FOREVER, _of(exact.long_minimum, exact.long_maximum))
	OFFSET_SECONDS = ('OffsetSeconds', ChronoUnit.SECONDS, ChronoUnit.FOREVER, _of(-18 * 3600, 18 * 3600))

	def __str__(self):
		return self.label

	def range(self):
		return self.value_range

	def is_date_based(self):
		return _order[ChronoField.DAY_OF_WEEK] <= _order[self] <= _order[ChronoField.ERA]

	def is_time_based(self):
		return _order[self] < _order[ChronoField.DAY_OF_WEEK]

	def check_valid_value(self, value):
		return self.value_range.check_valid_value(value, self)

	def check_valid_int_value(self, value):
		return self.value_range.check_valid_int_value(value, self)

	def is_supported_by(self, temporal):
		return temporal.is_supported(self)

	def range_refined_by(self, temporal):
		return temporal.range(self)

	def get_from(self, temporal):
		return temporal.get(self)

	def adjust_into(self, temporal, value):
		return temporal.with_field(self, value)

_order = {field: i for i, field in enumerate(ChronoField)}
del _of, _ymin, _ymax

class Dispatch(object):
	"""
	# Base class of the value types implementing the &..abstract.Temporal
	# protocol using the &readers, &writers, &refinements, and
	# &units.operations tables.
	"""
	__slots__ = ()

	@classmethod
	def from_temporal(Class, temporal):
		"""
		# Convert &temporal into an instance of &Class.
		"""
		if isinstance(temporal, Class):
			return temporal
		raise core.UnsupportedError(
			"Unable to obtain %s from %r" %(Class.__name__, temporal)
		)

	def is_supported(self, subject):
		"""
		# Whether the field or unit, &subject, can be used with this instance.
		"""
		if isinstance(subject, ChronoField):
			return lookup(self, subject, readers) is not None
		if isinstance(subject, ChronoUnit):
			return units.lookup(self, subject) is not None
		if subject is None:
			return False
		return subject.is_supported_by(self)

	def range(self, field):
		if isinstance(field, ChronoField):
			if lookup(self, field, readers) is None:
				raise unsupported(field)
			refine = lookup(self, field, refinements)
			if refine is None:
				return field.range()
			return refine(self)
		return field.range_refined_by(self)

	def get(self, field):
		if isinstance(field, ChronoField):
			read = lookup(self, field, readers)
			if read is None:
				raise unsupported(field)
			return read(self)
		return field.get_from(self)

	def with_field(self, field, value):
		"""
		# Construct a copy of the instance with &field set to &value.
		# The value is checked against the range of the field before the
		# field is applied.
		"""
		if isinstance(field, ChronoField):
			write = lookup(self, field, writers)
			if write is None:
				raise unsupported(field)
			field.check_valid_value(value)
			return write(self, value)
		return field.adjust_into(self, value)

	def adjust(self, adjuster):
		return adjuster.adjust_into(self)

	def plus(self, amount, unit=None):
		if unit is None:
			return amount.add_to(self)
		exact.check(amount)
		if isinstance(unit, ChronoUnit):
			op = units.lookup(self, unit)
			if op is None:
				raise units.unsupported(unit)
			return op[0](self, amount, unit)
		return unit.add_to(self, amount)

	def minus(self, amount, unit=None):
		if unit is None:
			return amount.subtract_from(self)
		exact.check(amount)
		if amount == exact.long_minimum:
			return self.plus(exact.long_maximum, unit).plus(1, unit)
		return self.plus(-amount, unit)

	def until(self, end, unit):
		end = self.from_temporal(end)
		if isinstance(unit, ChronoUnit):
			op = units.lookup(self, unit)
			if op is None:
				raise units.unsupported(unit)
			return op[1](self, end, unit)
		return unit.between(self, end)

	def query(self, query):
		answer = lookup(self, query, queries.answers)
		if answer is not None:
			return answer(self)
		return query(self)
