"""
# Instantaneous points on the time-line measured from the epoch,
# 1970-01-01T00:00:00Z.
"""
from ..context import tools
from . import core
from . import exact
from . import earth
from . import gregorian
from . import fields
from . import units
from . import format
from .fields import ChronoField as F
from .units import ChronoUnit as U

_nanos_in_second = earth.nanos_in_second

#: Seconds of `-1000000000-01-01T00:00Z`.
minimum_second = -31557014167219200

#: Seconds of `+1000000000-12-31T23:59:59Z`.
maximum_second = 31556889864403199

@tools.ordered
class Instant(fields.Dispatch):
	"""
	# A point on the time-line with nanosecond precision.

	# [ Properties ]
	# /seconds/
		# The seconds since the epoch.
	# /nanos/
		# The nanoseconds of the second; always positive and less than a second.
	"""
	seconds: int
	nanos: int = 0

	def __post_init__(self):
		if self.seconds < minimum_second or self.seconds > maximum_second:
			raise core.RangeError("Instant exceeds minimum or maximum instant")
		F.NANO_OF_SECOND.check_valid_value(self.nanos)

	@classmethod
	def of_epoch_second(Class, seconds, adjustment=0):
		"""
		# Construct the instant from the epoch &seconds and a nanosecond
		# &adjustment of any magnitude.
		"""
		secs = exact.add(seconds, exact.floordiv(adjustment, _nanos_in_second))
		return Class(secs, adjustment % _nanos_in_second)

	@classmethod
	def of_epoch_milli(Class, millis):
		secs, mos = divmod(millis, 1000)
		return Class(secs, mos * earth.nanos_in_milli)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		seconds = temporal.get(F.INSTANT_SECONDS)
		return Class.of_epoch_second(seconds, temporal.get(F.NANO_OF_SECOND))

	@classmethod
	def now(Class, clock):
		return clock.instant()

	@classmethod
	def parse(Class, text):
		return format.structure('instant', text, _from_parts)

	def __str__(self):
		days, sod = divmod(self.seconds, earth.seconds_in_day)
		h, rem = divmod(sod, earth.seconds_in_hour)
		m, s = divmod(rem, earth.seconds_in_minute)
		return format.instant(gregorian.date_from_days(days), (h, m, s, self.nanos))

	def to_epoch_milli(self):
		"""
		# The milliseconds since the epoch; truncated toward negative infinity.
		"""
		if self.seconds < 0 and self.nanos > 0:
			millis = exact.multiply(self.seconds + 1, 1000)
			return exact.add(millis, (self.nanos // earth.nanos_in_milli) - 1000)
		millis = exact.multiply(self.seconds, 1000)
		return exact.add(millis, self.nanos // earth.nanos_in_milli)

	def _plus(self, seconds, nanos, check=exact.check):
		check(seconds)
		check(nanos)
		if seconds == 0 and nanos == 0:
			return self
		secs = exact.add(self.seconds, seconds)
		secs = exact.add(secs, nanos // _nanos_in_second)
		return Instant.of_epoch_second(secs, self.nanos + (nanos % _nanos_in_second))

	def plus_seconds(self, seconds):
		return self._plus(seconds, 0)

	def plus_millis(self, millis):
		exact.check(millis)
		return self._plus(millis // 1000, (millis % 1000) * earth.nanos_in_milli)

	def plus_nanos(self, nanos):
		return self._plus(0, nanos)

	def minus_seconds(self, seconds):
		return self.minus(seconds, U.SECONDS)

	def minus_millis(self, millis):
		return self.minus(millis, U.MILLIS)

	def minus_nanos(self, nanos):
		return self.minus(nanos, U.NANOS)

	def seconds_until(self, end):
		"""
		# The complete seconds between the instant and &end.
		"""
		secs = exact.subtract(end.seconds, self.seconds)
		nanos = end.nanos - self.nanos
		if secs > 0 and nanos < 0:
			secs -= 1
		elif secs < 0 and nanos > 0:
			secs += 1
		return secs

	def nanos_until(self, end):
		secs = exact.subtract(end.seconds, self.seconds)
		return exact.add(exact.multiply(secs, _nanos_in_second), end.nanos - self.nanos)

	def truncated_to(self, unit):
		"""
		# Truncate the instant to the &unit. The unit must divide a day evenly.
		"""
		if unit is U.NANOS:
			return self
		duration = unit.duration
		if duration.seconds > earth.seconds_in_day:
			raise core.UnsupportedError("Unit is too large to be used for truncation")
		size = duration.to_nanos()
		if earth.nanos_in_day % size != 0:
			raise core.UnsupportedError("Unit must divide into a standard day without remainder")
		nod = ((self.seconds % earth.seconds_in_day) * _nanos_in_second) + self.nanos
		result = (nod // size) * size
		return self.plus_nanos(result - nod)

	def at_offset(self, offset):
		from .zoned import OffsetDateTime
		return OffsetDateTime.of_instant(self, offset)

	def at_zone(self, zone):
		from .zoned import ZonedDateTime
		return ZonedDateTime.of_instant(self, zone)

	def adjust_into(self, temporal):
		temporal = temporal.with_field(F.INSTANT_SECONDS, self.seconds)
		return temporal.with_field(F.NANO_OF_SECOND, self.nanos)

def _from_parts(date_parts, time_parts, offset_seconds):
	days = gregorian.days_from_date(gregorian.validate(date_parts, -1_000_000_000, 1_000_000_000))
	from .timeofday import LocalTime
	t = LocalTime(*time_parts)
	seconds = (days * earth.seconds_in_day) + t.to_second_of_day() - offset_seconds
	return Instant(seconds, t.nano)

Instant.EPOCH = Instant(0, 0)
Instant.MIN = Instant(minimum_second, 0)
Instant.MAX = Instant(maximum_second, 999_999_999)

def _with_nano(i, nanos):
	if nanos == i.nanos:
		return i
	return Instant(i.seconds, nanos)

fields.define(Instant, F.NANO_OF_SECOND, lambda i: i.nanos, _with_nano)
fields.define(Instant, F.MICRO_OF_SECOND, lambda i: i.nanos // 1000,
	lambda i, v: _with_nano(i, v * 1000))
fields.define(Instant, F.MILLI_OF_SECOND, lambda i: i.nanos // 1_000_000,
	lambda i, v: _with_nano(i, v * 1_000_000))
fields.define(Instant, F.INSTANT_SECONDS, lambda i: i.seconds,
	lambda i, v: i if v == i.seconds else Instant(v, i.nanos))

def add(i, amount, unit):
	if unit is U.NANOS:
		return i.plus_nanos(amount)
	if unit is U.MICROS:
		return i._plus(amount // 1_000_000, (amount % 1_000_000) * 1000)
	if unit is U.MILLIS:
		return i.plus_millis(amount)
	return i.plus_seconds(exact.multiply(amount, unit.seconds))

def measure(start, end, unit):
	if unit is U.NANOS:
		return start.nanos_until(end)
	if unit is U.MICROS:
		return exact.quotient(start.nanos_until(end), 1000)
	if unit is U.MILLIS:
		return exact.subtract(end.to_epoch_milli(), start.to_epoch_milli())
	return exact.quotient(start.seconds_until(end), unit.seconds)

for unit in (U.NANOS, U.MICROS, U.MILLIS, U.SECONDS, U.MINUTES, U.HOURS, U.HALF_DAYS, U.DAYS):
	units.define(Instant, unit, add, measure)
del unit
