"""
# Amounts of time: the exact &Duration and the calendar based &Period.

# Both types implement the &..abstract.Amount protocol and are applied to
# temporal objects with `temporal.plus(amount)` or `amount.add_to(temporal)`.
"""
from ..context import tools
from . import core
from . import exact
from . import earth
from . import format
from .fields import ChronoField as F
from .units import ChronoUnit as U

_nanos_in_second = earth.nanos_in_second

@tools.ordered
class Duration(object):
	"""
	# An exact amount of time measured in seconds and nanoseconds.

	# [ Properties ]
	# /seconds/
		# The signed 64-bit number of seconds.
	# /nanos/
		# The positive nanoseconds adjusting &seconds; less than a second.
	"""
	seconds: int
	nanos: int = 0

	def __post_init__(self):
		exact.check(self.seconds)
		F.NANO_OF_SECOND.check_valid_value(self.nanos)

	@classmethod
	def of_days(Class, days):
		return Class(exact.multiply(days, earth.seconds_in_day), 0)

	@classmethod
	def of_hours(Class, hours):
		return Class(exact.multiply(hours, earth.seconds_in_hour), 0)

	@classmethod
	def of_minutes(Class, minutes):
		return Class(exact.multiply(minutes, earth.seconds_in_minute), 0)

	@classmethod
	def of_seconds(Class, seconds, adjustment=0):
		secs = exact.add(seconds, exact.floordiv(adjustment, _nanos_in_second))
		return Class(secs, adjustment % _nanos_in_second)

	@classmethod
	def of_millis(Class, millis):
		secs, mos = divmod(millis, 1000)
		return Class(secs, mos * earth.nanos_in_milli)

	@classmethod
	def of_nanos(Class, nanos):
		secs, nos = divmod(nanos, _nanos_in_second)
		return Class(secs, nos)

	@classmethod
	def of(Class, amount, unit):
		"""
		# The duration of &amount of the &unit. The unit must have an exact
		# duration or be &U.DAYS.
		"""
		return Class.ZERO.plus(amount, unit)

	@classmethod
	def from_amount(Class, amount):
		"""
		# Convert the &..abstract.Amount, &amount, by summing the duration
		# of each of its units.
		"""
		duration = Class.ZERO
		for unit in amount.units:
			duration = duration.plus(amount.get(unit), unit)
		return duration

	@classmethod
	def between(Class, start, end):
		"""
		# The duration between the temporals &start and &end.

		# The measurement in nanoseconds is attempted first; when that is not
		# possible the seconds are measured and adjusted by the nanosecond field.
		"""
		try:
			return Class.of_nanos(start.until(end, U.NANOS))
		except (core.RangeError, core.UnsupportedError, core.ArithmeticOverflow):
			secs = start.until(end, U.SECONDS)
			try:
				nanos = end.get(F.NANO_OF_SECOND) - start.get(F.NANO_OF_SECOND)
				if secs > 0 and nanos < 0:
					secs += 1
				elif secs < 0 and nanos > 0:
					secs -= 1
			except (core.RangeError, core.UnsupportedError):
				nanos = 0
			return Class.of_seconds(secs, nanos)

	@classmethod
	def parse(Class, text):
		return format.structure('duration', text, _duration_from_parts)

	def __str__(self):
		return format.duration(self.seconds, self.nanos)

	@property
	def units(self):
		return (U.SECONDS, U.NANOS)

	def get(self, unit):
		if unit is U.SECONDS:
			return self.seconds
		if unit is U.NANOS:
			return self.nanos
		raise core.UnsupportedError("Unsupported unit: " + str(unit))

	def is_zero(self):
		return self.seconds == 0 and self.nanos == 0

	def is_negative(self):
		return self.seconds < 0

	def with_seconds(self, seconds):
		return Duration(seconds, self.nanos)

	def with_nanos(self, nanos):
		return Duration(self.seconds, nanos)

	def _plus(self, seconds, nanos):
		if seconds == 0 and nanos == 0:
			return self
		secs = exact.add(self.seconds, seconds)
		secs = exact.add(secs, nanos // _nanos_in_second)
		return Duration.of_seconds(secs, self.nanos + (nanos % _nanos_in_second))

	def plus(self, amount, unit=None):
		"""
		# Add the &Duration, &amount, or &amount of the &unit.
		"""
		if unit is None:
			return self._plus(amount.seconds, amount.nanos)
		if unit is U.DAYS:
			return self._plus(exact.multiply(amount, earth.seconds_in_day), 0)
		if unit.is_duration_estimated():
			raise core.UnsupportedError("Unit must not have an estimated duration")
		if amount == 0:
			return self
		if unit is U.NANOS:
			return self.plus_nanos(amount)
		if unit is U.MICROS:
			return self._plus(exact.quotient(amount, 1_000_000), exact.remainder(amount, 1_000_000) * 1000)
		if unit is U.MILLIS:
			return self.plus_millis(amount)
		if unit is U.SECONDS:
			return self.plus_seconds(amount)
		if isinstance(unit, U):
			return self.plus_seconds(exact.multiply(unit.seconds, amount))
		d = unit.duration.multiplied_by(amount)
		return self._plus(d.seconds, d.nanos)

	def minus(self, amount, unit=None):
		if unit is None:
			if amount.seconds == exact.long_minimum:
				return self._plus(exact.long_maximum, -amount.nanos)._plus(1, 0)
			return self._plus(-amount.seconds, -amount.nanos)
		if amount == exact.long_minimum:
			return self.plus(exact.long_maximum, unit).plus(1, unit)
		return self.plus(-amount, unit)

	def plus_days(self, days):
		return self._plus(exact.multiply(days, earth.seconds_in_day), 0)

	def plus_hours(self, hours):
		return self._plus(exact.multiply(hours, earth.seconds_in_hour), 0)

	def plus_minutes(self, minutes):
		return self._plus(exact.multiply(minutes, earth.seconds_in_minute), 0)

	def plus_seconds(self, seconds):
		return self._plus(seconds, 0)

	def plus_millis(self, millis):
		return self._plus(exact.quotient(millis, 1000), exact.remainder(millis, 1000) * earth.nanos_in_milli)

	def plus_nanos(self, nanos):
		return self._plus(0, nanos)

	def minus_days(self, days):
		return self.minus(days, U.DAYS)

	def minus_hours(self, hours):
		return self.minus(hours, U.HOURS)

	def minus_minutes(self, minutes):
		return self.minus(minutes, U.MINUTES)

	def minus_seconds(self, seconds):
		return self.minus(seconds, U.SECONDS)

	def minus_millis(self, millis):
		return self.minus(millis, U.MILLIS)

	def minus_nanos(self, nanos):
		return self.minus(nanos, U.NANOS)

	def _total(self):
		return (self.seconds * _nanos_in_second) + self.nanos

	def _create(self, total):
		secs, nos = divmod(total, _nanos_in_second)
		if secs < exact.long_minimum or secs > exact.long_maximum:
			raise core.ArithmeticOverflow("Exceeds capacity of Duration: " + str(total))
		return Duration(secs, nos)

	def multiplied_by(self, multiplicand):
		if multiplicand == 0:
			return Duration.ZERO
		if multiplicand == 1:
			return self
		return self._create(self._total() * multiplicand)

	def divided_by(self, divisor):
		"""
		# Divide the duration by the integer &divisor truncating toward zero.
		# When &divisor is a &Duration, the number of whole times that it
		# occurs within this duration is returned.
		"""
		if isinstance(divisor, Duration):
			if divisor.is_zero():
				raise ZeroDivisionError("Cannot divide by zero")
			return exact.check(exact.quotient(self._total(), divisor._total()))
		if divisor == 0:
			raise ZeroDivisionError("Cannot divide by zero")
		if divisor == 1:
			return self
		return self._create(exact.quotient(self._total(), divisor))

	def negated(self):
		return self.multiplied_by(-1)

	def abs(self):
		return self.negated() if self.is_negative() else self

	def to_days(self):
		return exact.quotient(self.seconds, earth.seconds_in_day)

	def to_hours(self):
		return exact.quotient(self.seconds, earth.seconds_in_hour)

	def to_minutes(self):
		return exact.quotient(self.seconds, earth.seconds_in_minute)

	def to_seconds(self):
		return self.seconds

	def to_millis(self):
		seconds, nanos = self.seconds, self.nanos
		if seconds < 0:
			seconds += 1
			nanos -= _nanos_in_second
		millis = exact.multiply(seconds, 1000)
		return exact.add(millis, exact.quotient(nanos, earth.nanos_in_milli))

	def to_nanos(self):
		seconds, nanos = self.seconds, self.nanos
		if seconds < 0:
			seconds += 1
			nanos -= _nanos_in_second
		total = exact.multiply(seconds, _nanos_in_second)
		return exact.add(total, nanos)

	def add_to(self, temporal):
		if self.seconds != 0:
			temporal = temporal.plus(self.seconds, U.SECONDS)
		if self.nanos != 0:
			temporal = temporal.plus(self.nanos, U.NANOS)
		return temporal

	def subtract_from(self, temporal):
		if self.seconds != 0:
			temporal = temporal.minus(self.seconds, U.SECONDS)
		if self.nanos != 0:
			temporal = temporal.minus(self.nanos, U.NANOS)
		return temporal

Duration.ZERO = Duration(0, 0)

def _duration_from_parts(negate, days, hours, minutes, seconds, nanos):
	total = exact.add(
		exact.add(
			exact.multiply(days, earth.seconds_in_day),
			exact.multiply(hours, earth.seconds_in_hour),
		),
		exact.add(exact.multiply(minutes, earth.seconds_in_minute), seconds),
	)
	d = Duration.of_seconds(total, nanos)
	if negate:
		return d.negated()
	return d

@tools.record
class Period(object):
	"""
	# A calendar based amount of time in years, months, and days.

	# The components are independent: no carrying is performed between them
	# unless requested with &normalized.
	"""
	years: int = 0
	months: int = 0
	days: int = 0

	def __post_init__(self):
		exact.narrow(self.years)
		exact.narrow(self.months)
		exact.narrow(self.days)

	@classmethod
	def of(Class, years, months, days):
		return Class(years, months, days)

	@classmethod
	def of_years(Class, years):
		return Class(years, 0, 0)

	@classmethod
	def of_months(Class, months):
		return Class(0, months, 0)

	@classmethod
	def of_weeks(Class, weeks):
		return Class(0, 0, exact.narrow(exact.multiply(weeks, 7)))

	@classmethod
	def of_days(Class, days):
		return Class(0, 0, days)

	@classmethod
	def between(Class, start, end):
		"""
		# The period between the dates &start and &end.
		"""
		return start.period_until(end)

	@classmethod
	def from_amount(Class, amount):
		"""
		# Convert the &..abstract.Amount, &amount, whose units must be years,
		# months, or days.
		"""
		if isinstance(amount, Class):
			return amount
		years = months = days = 0
		for unit in amount.units:
			quantity = amount.get(unit)
			if unit is U.YEARS:
				years = exact.narrow(exact.add(years, quantity))
			elif unit is U.MONTHS:
				months = exact.narrow(exact.add(months, quantity))
			elif unit is U.DAYS:
				days = exact.narrow(exact.add(days, quantity))
			else:
				raise core.UnsupportedError("Unit must be Years, Months or Days, but was " + str(unit))
		return Class(years, months, days)

	@classmethod
	def parse(Class, text):
		return format.structure('period', text, _period_from_parts)

	def __str__(self):
		return format.period(self.years, self.months, self.days)

	@property
	def units(self):
		return (U.YEARS, U.MONTHS, U.DAYS)

	def get(self, unit):
		if unit is U.YEARS:
			return self.years
		if unit is U.MONTHS:
			return self.months
		if unit is U.DAYS:
			return self.days
		raise core.UnsupportedError("Unsupported unit: " + str(unit))

	def is_zero(self):
		return self.years == 0 and self.months == 0 and self.days == 0

	def is_negative(self):
		return self.years < 0 or self.months < 0 or self.days < 0

	def with_years(self, years):
		return Period(years, self.months, self.days)

	def with_months(self, months):
		return Period(self.years, months, self.days)

	def with_days(self, days):
		return Period(self.years, self.months, days)

	def plus(self, amount):
		other = Period.from_amount(amount)
		return Period(
			exact.narrow(self.years + other.years),
			exact.narrow(self.months + other.months),
			exact.narrow(self.days + other.days),
		)

	def minus(self, amount):
		other = Period.from_amount(amount)
		return Period(
			exact.narrow(self.years - other.years),
			exact.narrow(self.months - other.months),
			exact.narrow(self.days - other.days),
		)

	def plus_years(self, years):
		return self.with_years(exact.narrow(self.years + years))

	def plus_months(self, months):
		return self.with_months(exact.narrow(self.months + months))

	def plus_days(self, days):
		return self.with_days(exact.narrow(self.days + days))

	def minus_years(self, years):
		return self.with_years(exact.narrow(self.years - years))

	def minus_months(self, months):
		return self.with_months(exact.narrow(self.months - months))

	def minus_days(self, days):
		return self.with_days(exact.narrow(self.days - days))

	def multiplied_by(self, scalar):
		if self.is_zero() or scalar == 1:
			return self
		return Period(
			exact.narrow(self.years * scalar),
			exact.narrow(self.months * scalar),
			exact.narrow(self.days * scalar),
		)

	def negated(self):
		return self.multiplied_by(-1)

	def to_total_months(self):
		return (self.years * 12) + self.months

	def normalized(self):
		"""
		# Fold the months into the years so that the months are within ±11.
		# The days are left unchanged.
		"""
		total = self.to_total_months()
		years = exact.quotient(total, 12)
		months = exact.remainder(total, 12)
		if years == self.years and months == self.months:
			return self
		return Period(exact.narrow(years), months, self.days)

	def add_to(self, temporal):
		"""
		# Add the period to the &temporal. A non-zero month component causes
		# the years and months to be added as a single month quantity.
		"""
		if self.months == 0:
			if self.years != 0:
				temporal = temporal.plus(self.years, U.YEARS)
		else:
			total = self.to_total_months()
			if total != 0:
				temporal = temporal.plus(total, U.MONTHS)
		if self.days != 0:
			temporal = temporal.plus(self.days, U.DAYS)
		return temporal

	def subtract_from(self, temporal):
		if self.months == 0:
			if self.years != 0:
				temporal = temporal.minus(self.years, U.YEARS)
		else:
			total = self.to_total_months()
			if total != 0:
				temporal = temporal.minus(total, U.MONTHS)
		if self.days != 0:
			temporal = temporal.minus(self.days, U.DAYS)
		return temporal

Period.ZERO = Period(0, 0, 0)

def _period_from_parts(years, months, weeks, days):
	days = exact.narrow(exact.add(days, exact.multiply(weeks, 7)))
	return Period(exact.narrow(years), exact.narrow(months), days)
