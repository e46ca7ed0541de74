"""
# Time of day without a date or a zone.
"""
from ..context import tools
from . import core
from . import exact
from . import earth
from . import fields
from . import units
from . import format
from .fields import ChronoField as F
from .units import ChronoUnit as U

_nanos_in_day = earth.nanos_in_day
_nanos_in_second = earth.nanos_in_second

@tools.ordered
class LocalTime(fields.Dispatch):
	"""
	# A time of day with nanosecond precision, such as `10:15:30`.

	# Arithmetic wraps around midnight.
	"""
	hour: int
	minute: int = 0
	second: int = 0
	nano: int = 0

	def __post_init__(self):
		F.HOUR_OF_DAY.check_valid_value(self.hour)
		F.MINUTE_OF_HOUR.check_valid_value(self.minute)
		F.SECOND_OF_MINUTE.check_valid_value(self.second)
		F.NANO_OF_SECOND.check_valid_value(self.nano)

	@classmethod
	def of(Class, hour, minute=0, second=0, nano=0):
		return Class(hour, minute, second, nano)

	@classmethod
	def of_second_of_day(Class, seconds, nano=0):
		F.SECOND_OF_DAY.check_valid_value(seconds)
		h, seconds = divmod(seconds, earth.seconds_in_hour)
		m, s = divmod(seconds, earth.seconds_in_minute)
		return Class(h, m, s, nano)

	@classmethod
	def of_nano_of_day(Class, nanos):
		F.NANO_OF_DAY.check_valid_value(nanos)
		seconds, n = divmod(nanos, _nanos_in_second)
		return Class.of_second_of_day(seconds, n)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		from . import queries
		t = temporal.query(queries.local_time)
		if t is None:
			raise core.UnsupportedError("Unable to obtain LocalTime from %r" %(temporal,))
		return t

	@classmethod
	def now(Class, clock):
		"""
		# The current time of day according to the &clock.
		"""
		instant = clock.instant()
		offset = clock.zone.rules.offset(instant)
		seconds = (instant.seconds + offset.total_seconds) % earth.seconds_in_day
		return Class.of_nano_of_day((seconds * _nanos_in_second) + instant.nanos)

	@classmethod
	def parse(Class, text):
		return format.structure('time', text, Class)

	def __str__(self):
		return format.time(self.hour, self.minute, self.second, self.nano)

	def to_second_of_day(self):
		return (self.hour * earth.seconds_in_hour) + (self.minute * earth.seconds_in_minute) + self.second

	def to_nano_of_day(self):
		return (self.to_second_of_day() * _nanos_in_second) + self.nano

	def with_hour(self, hour):
		if hour == self.hour:
			return self
		return LocalTime(hour, self.minute, self.second, self.nano)

	def with_minute(self, minute):
		if minute == self.minute:
			return self
		return LocalTime(self.hour, minute, self.second, self.nano)

	def with_second(self, second):
		if second == self.second:
			return self
		return LocalTime(self.hour, self.minute, second, self.nano)

	def with_nano(self, nano):
		if nano == self.nano:
			return self
		return LocalTime(self.hour, self.minute, self.second, nano)

	def plus_hours(self, hours):
		if hours == 0:
			return self
		return self.with_hour((self.hour + hours) % 24)

	def plus_minutes(self, minutes):
		if minutes == 0:
			return self
		mofd = (self.hour * 60) + self.minute
		new = (mofd + minutes) % earth.minutes_in_day
		if new == mofd:
			return self
		return LocalTime(new // 60, new % 60, self.second, self.nano)

	def plus_seconds(self, seconds):
		if seconds == 0:
			return self
		sofd = self.to_second_of_day()
		new = (sofd + seconds) % earth.seconds_in_day
		if new == sofd:
			return self
		return LocalTime.of_second_of_day(new, self.nano)

	def plus_nanos(self, nanos):
		if nanos == 0:
			return self
		nofd = self.to_nano_of_day()
		new = (nofd + nanos) % _nanos_in_day
		if new == nofd:
			return self
		return LocalTime.of_nano_of_day(new)

	def minus_hours(self, hours):
		return self.plus_hours(-(hours % 24))

	def minus_minutes(self, minutes):
		return self.plus_minutes(-(minutes % earth.minutes_in_day))

	def minus_seconds(self, seconds):
		return self.plus_seconds(-(seconds % earth.seconds_in_day))

	def minus_nanos(self, nanos):
		return self.plus_nanos(-(nanos % _nanos_in_day))

	def truncated_to(self, unit):
		"""
		# Truncate the time to the &unit. The unit must divide a day evenly.
		"""
		if unit is U.NANOS:
			return self
		if unit is U.DAYS:
			return LocalTime.MIDNIGHT
		duration = unit.duration
		if duration.seconds > earth.seconds_in_day:
			raise core.UnsupportedError("Unit is too large to be used for truncation")
		size = duration.to_nanos()
		if _nanos_in_day % size != 0:
			raise core.UnsupportedError("Unit must divide into a standard day without remainder")
		nofd = self.to_nano_of_day()
		return LocalTime.of_nano_of_day((nofd // size) * size)

	def at_date(self, date):
		from .datetimes import LocalDateTime
		return LocalDateTime(date, self)

	def adjust_into(self, temporal):
		return temporal.with_field(F.NANO_OF_DAY, self.to_nano_of_day())

LocalTime.MIN = LocalTime(0)
LocalTime.MAX = LocalTime(23, 59, 59, 999_999_999)
LocalTime.MIDNIGHT = LocalTime.MIN
LocalTime.NOON = LocalTime(12)

def _hour_of_ampm(t):
	return t.hour % 12

def _clock_hour_of_ampm(t):
	ham = t.hour % 12
	return 12 if ham == 0 else ham

def _minute_of_day(t):
	return (t.hour * 60) + t.minute

def _set_clock_hour_of_ampm(t, v):
	return t.plus_hours((0 if v == 12 else v) - (t.hour % 12))

for field, read, write in [
	(F.NANO_OF_SECOND, lambda t: t.nano, LocalTime.with_nano),
	(F.NANO_OF_DAY, LocalTime.to_nano_of_day, lambda t, v: LocalTime.of_nano_of_day(v)),
	(F.MICRO_OF_SECOND, lambda t: t.nano // 1000, lambda t, v: t.with_nano(v * 1000)),
	(F.MICRO_OF_DAY, lambda t: t.to_nano_of_day() // 1000,
		lambda t, v: LocalTime.of_nano_of_day(v * 1000)),
	(F.MILLI_OF_SECOND, lambda t: t.nano // 1_000_000, lambda t, v: t.with_nano(v * 1_000_000)),
	(F.MILLI_OF_DAY, lambda t: t.to_nano_of_day() // 1_000_000,
		lambda t, v: LocalTime.of_nano_of_day(v * 1_000_000)),
	(F.SECOND_OF_MINUTE, lambda t: t.second, LocalTime.with_second),
	(F.SECOND_OF_DAY, LocalTime.to_second_of_day,
		lambda t, v: t.plus_seconds(v - t.to_second_of_day())),
	(F.MINUTE_OF_HOUR, lambda t: t.minute, LocalTime.with_minute),
	(F.MINUTE_OF_DAY, _minute_of_day, lambda t, v: t.plus_minutes(v - _minute_of_day(t))),
	(F.HOUR_OF_AMPM, _hour_of_ampm, lambda t, v: t.plus_hours(v - _hour_of_ampm(t))),
	(F.CLOCK_HOUR_OF_AMPM, _clock_hour_of_ampm, _set_clock_hour_of_ampm),
	(F.HOUR_OF_DAY, lambda t: t.hour, LocalTime.with_hour),
	(F.CLOCK_HOUR_OF_DAY, lambda t: 24 if t.hour == 0 else t.hour,
		lambda t, v: t.with_hour(0 if v == 24 else v)),
	(F.AMPM_OF_DAY, lambda t: t.hour // 12, lambda t, v: t.plus_hours((v - (t.hour // 12)) * 12)),
]:
	fields.define(LocalTime, field, read, write)

#: Nanoseconds in each of the time-based units supported by &LocalTime.
unit_nanos = {
	U.NANOS: 1,
	U.MICROS: earth.nanos_in_micro,
	U.MILLIS: earth.nanos_in_milli,
	U.SECONDS: _nanos_in_second,
	U.MINUTES: earth.nanos_in_minute,
	U.HOURS: earth.nanos_in_hour,
	U.HALF_DAYS: earth.nanos_in_hour * 12,
}

def add(t, amount, unit):
	if unit is U.HOURS:
		return t.plus_hours(amount)
	if unit is U.HALF_DAYS:
		return t.plus_hours((amount % 2) * 12)
	if unit is U.MINUTES:
		return t.plus_minutes(amount)
	if unit is U.SECONDS:
		return t.plus_seconds(amount)
	size = unit_nanos[unit]
	return t.plus_nanos((amount % (_nanos_in_day // size)) * size)

def measure(start, end, unit):
	return exact.quotient(end.to_nano_of_day() - start.to_nano_of_day(), unit_nanos[unit])

for unit in unit_nanos:
	units.define(LocalTime, unit, add, measure)
del field, read, write, unit
