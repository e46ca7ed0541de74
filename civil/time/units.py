"""
# Standard units of time and the dispatch table of their arithmetic.

# The arithmetic of a (type, unit) pair is defined by the module of the type
# using &define. &..fields.Dispatch consults the table, &operations, when a
# &ChronoUnit is given to `plus` or `until`; other &..abstract.Unit
# implementations are invoked directly.
"""
import enum

from . import core
from . import exact
from . import earth

#: Mapping of (type, unit) to (add, measure) pairs.
operations = {}

def define(Type, unit, add, measure):
	"""
	# Define the arithmetic of &unit for the temporal type, &Type.

	# [ Parameters ]
	# /add/
		# `add(temporal, amount, unit)` returning the adjusted temporal.
	# /measure/
		# `measure(start, end, unit)` returning the number of complete units.
	"""
	operations[(Type, unit)] = (add, measure)

def lookup(temporal, unit, table=operations):
	for T in type(temporal).__mro__:
		try:
			return table[(T, unit)]
		except KeyError:
			pass
	return None

def unsupported(unit):
	return core.UnsupportedError("Unsupported unit: " + str(unit))

class ChronoUnit(enum.Enum):
	"""
	# The standard set of date and time units.

	# The durations of units at or above &DAYS are estimates: they
	# depend on the position on the time-line that they are applied to.
	"""

	def __init__(self, label, seconds, nanos):
		self.label = label
		self.seconds = seconds
		self.nanos = nanos

	NANOS = ('Nanos', 0, 1)
	MICROS = ('Micros', 0, earth.nanos_in_micro)
	MILLIS = ('Millis', 0, earth.nanos_in_milli)
	SECONDS = ('Seconds', 1, 0)
	MINUTES = ('Minutes', earth.seconds_in_minute, 0)
	HOURS = ('Hours', earth.seconds_in_hour, 0)
	HALF_DAYS = ('HalfDays', earth.seconds_in_hour * 12, 0)
	DAYS = ('Days', earth.seconds_in_day, 0)
	WEEKS = ('Weeks', earth.seconds_in_day * 7, 0)
	MONTHS = ('Months', earth.seconds_in_year // 12, 0)
	YEARS = ('Years', earth.seconds_in_year, 0)
	DECADES = ('Decades', earth.seconds_in_year * 10, 0)
	CENTURIES = ('Centuries', earth.seconds_in_year * 100, 0)
	MILLENNIA = ('Millennia', earth.seconds_in_year * 1000, 0)
	ERAS = ('Eras', earth.seconds_in_year * 1_000_000_000, 0)
	FOREVER = ('Forever', exact.long_maximum, 999_999_999)

	def __str__(self):
		return self.label

	@property
	def duration(self):
		from .amounts import Duration
		return Duration.of_seconds(self.seconds, self.nanos)

	@property
	def position(self):
		"""
		# Index of the unit in declaration order; used to compare magnitudes.
		"""
		return _order[self]

	def is_duration_estimated(self):
		return self.position >= _order[ChronoUnit.DAYS]

	def is_date_based(self):
		return _order[ChronoUnit.DAYS] <= self.position < _order[ChronoUnit.FOREVER]

	def is_time_based(self):
		return self.position < _order[ChronoUnit.DAYS]

	def is_supported_by(self, temporal):
		return temporal.is_supported(self)

	def add_to(self, temporal, amount):
		return temporal.plus(amount, self)

	def between(self, start, end):
		return start.until(end, self)

_order = {unit: i for i, unit in enumerate(ChronoUnit)}

def smallest(units):
	"""
	# The &ChronoUnit of smallest duration in the iterable, &units, or &None.
	"""
	selection = [u for u in units if isinstance(u, ChronoUnit)]
	if not selection:
		return None
	return min(selection, key=_order.__getitem__)
