"""
# Date and time of day without a zone.
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
from .dates import LocalDate
from .timeofday import LocalTime

_nanos_in_day = earth.nanos_in_day

@tools.ordered
class LocalDateTime(fields.Dispatch):
	"""
	# A &LocalDate combined with a &LocalTime, such as `2007-12-03T10:15:30`.

	# Time-based arithmetic carries into the date.
	"""
	date: LocalDate
	time: LocalTime

	def __post_init__(self):
		if not isinstance(self.date, LocalDate):
			raise TypeError("date must be a LocalDate")
		if not isinstance(self.time, LocalTime):
			raise TypeError("time must be a LocalTime")

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, nano=0):
		return Class(LocalDate(year, month, day), LocalTime(hour, minute, second, nano))

	@classmethod
	def of_epoch_second(Class, seconds, nano, offset):
		"""
		# Construct the local date-time of the instant, &seconds and &nano,
		# observed at the &offset.
		"""
		F.NANO_OF_SECOND.check_valid_value(nano)
		local = exact.add(seconds, offset.total_seconds)
		days, sod = divmod(local, earth.seconds_in_day)
		return Class(
			LocalDate.of_epoch_day(days),
			LocalTime.of_nano_of_day((sod * earth.nanos_in_second) + nano),
		)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		return Class(LocalDate.from_temporal(temporal), LocalTime.from_temporal(temporal))

	@classmethod
	def now(Class, clock):
		instant = clock.instant()
		offset = clock.zone.rules.offset(instant)
		return Class.of_epoch_second(instant.seconds, instant.nanos, offset)

	@classmethod
	def of_parts(Class, date_parts, time_parts):
		"""
		# Construct the date-time from (year, month, day) and
		# (hour, minute, second, nano) tuples.
		"""
		return Class(LocalDate(*date_parts), LocalTime(*time_parts))

	@classmethod
	def parse(Class, text):
		return format.structure('datetime', text, Class.of_parts)

	def __str__(self):
		return str(self.date) + 'T' + str(self.time)

	def _with(self, date, time):
		if date is self.date and time is self.time:
			return self
		return LocalDateTime(date, time)

	year = property(lambda self: self.date.year)
	month = property(lambda self: self.date.month)
	day = property(lambda self: self.date.day)
	hour = property(lambda self: self.time.hour)
	minute = property(lambda self: self.time.minute)
	second = property(lambda self: self.time.second)
	nano = property(lambda self: self.time.nano)
	day_of_week = property(lambda self: self.date.day_of_week)
	day_of_year = property(lambda self: self.date.day_of_year)

	def to_epoch_second(self, offset):
		"""
		# The seconds since the epoch of the date-time observed at &offset.
		"""
		seconds = (self.date.to_epoch_day() * earth.seconds_in_day) + self.time.to_second_of_day()
		return seconds - offset.total_seconds

	def with_year(self, year):
		return self._with(self.date.with_year(year), self.time)

	def with_month(self, month):
		return self._with(self.date.with_month(month), self.time)

	def with_day_of_month(self, day):
		return self._with(self.date.with_day_of_month(day), self.time)

	def with_day_of_year(self, day):
		return self._with(self.date.with_day_of_year(day), self.time)

	def with_hour(self, hour):
		return self._with(self.date, self.time.with_hour(hour))

	def with_minute(self, minute):
		return self._with(self.date, self.time.with_minute(minute))

	def with_second(self, second):
		return self._with(self.date, self.time.with_second(second))

	def with_nano(self, nano):
		return self._with(self.date, self.time.with_nano(nano))

	def plus_years(self, years):
		return self._with(self.date.plus_years(years), self.time)

	def plus_months(self, months):
		return self._with(self.date.plus_months(months), self.time)

	def plus_weeks(self, weeks):
		return self._with(self.date.plus_weeks(weeks), self.time)

	def plus_days(self, days):
		return self._with(self.date.plus_days(days), self.time)

	def plus_hours(self, hours):
		return self._carry(exact.check(hours) * earth.nanos_in_hour)

	def plus_minutes(self, minutes):
		return self._carry(exact.check(minutes) * earth.nanos_in_minute)

	def plus_seconds(self, seconds):
		return self._carry(exact.check(seconds) * earth.nanos_in_second)

	def plus_nanos(self, nanos):
		return self._carry(exact.check(nanos))

	def minus_years(self, years):
		return self.minus(years, U.YEARS)

	def minus_months(self, months):
		return self.minus(months, U.MONTHS)

	def minus_weeks(self, weeks):
		return self.minus(weeks, U.WEEKS)

	def minus_days(self, days):
		return self.minus(days, U.DAYS)

	def minus_hours(self, hours):
		return self._carry(-hours * earth.nanos_in_hour)

	def minus_minutes(self, minutes):
		return self._carry(-minutes * earth.nanos_in_minute)

	def minus_seconds(self, seconds):
		return self._carry(-seconds * earth.nanos_in_second)

	def minus_nanos(self, nanos):
		return self._carry(-nanos)

	def _carry(self, nanos):
		"""
		# Add &nanos to the time carrying whole days into the date.
		"""
		if nanos == 0:
			return self
		days, nofd = divmod(self.time.to_nano_of_day() + nanos, _nanos_in_day)
		time = self.time
		if nofd != time.to_nano_of_day():
			time = LocalTime.of_nano_of_day(nofd)
		return self._with(self.date.plus_days(days), time)

	def truncated_to(self, unit):
		return self._with(self.date, self.time.truncated_to(unit))

	def at_offset(self, offset):
		from .zoned import OffsetDateTime
		return OffsetDateTime(self, offset)

	def at_zone(self, zone, preferred=None):
		from .zoned import ZonedDateTime
		return ZonedDateTime.of_local(self, zone, preferred)

	def adjust_into(self, temporal):
		temporal = temporal.with_field(F.EPOCH_DAY, self.date.to_epoch_day())
		return temporal.with_field(F.NANO_OF_DAY, self.time.to_nano_of_day())

LocalDateTime.MIN = LocalDateTime(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime(LocalDate.MAX, LocalTime.MAX)

def _time_field(field):
	return (
		lambda dt: dt.time.get(field),
		lambda dt, v: dt._with(dt.date, dt.time.with_field(field, v)),
		lambda dt: dt.time.range(field),
	)

def _date_field(field):
	return (
		lambda dt: dt.date.get(field),
		lambda dt, v: dt._with(dt.date.with_field(field, v), dt.time),
		lambda dt: dt.date.range(field),
	)

for field in F:
	if field.is_time_based():
		fields.define(LocalDateTime, field, *_time_field(field))
	elif field.is_date_based():
		fields.define(LocalDateTime, field, *_date_field(field))

def add(dt, amount, unit):
	if unit.is_time_based():
		return dt._carry(amount * unit.duration.to_nanos())
	return dt._with(dt.date.plus(amount, unit), dt.time)

#: Size of the time-based units in nanoseconds.
unit_nanos = {
	U.NANOS: 1,
	U.MICROS: earth.nanos_in_micro,
	U.MILLIS: earth.nanos_in_milli,
	U.SECONDS: earth.nanos_in_second,
	U.MINUTES: earth.nanos_in_minute,
	U.HOURS: earth.nanos_in_hour,
	U.HALF_DAYS: earth.nanos_in_hour * 12,
}

def measure(start, end, unit):
	"""
	# The complete &unit between &start and &end.

	# Time-based units count whole days separately so that only the
	# final sum is subject to the 64-bit limit.
	"""
	if unit.is_time_based():
		days = start.date.days_until(end.date)
		if days == 0:
			return start.time.until(end.time, unit)
		time_part = end.time.to_nano_of_day() - start.time.to_nano_of_day()
		if days > 0:
			days -= 1
			time_part += _nanos_in_day
		else:
			days += 1
			time_part -= _nanos_in_day
		size = unit_nanos[unit]
		amount = exact.multiply(days, _nanos_in_day // size)
		return exact.add(amount, exact.quotient(time_part, size))

	end_date = end.date
	if end_date > start.date and end.time < start.time:
		end_date = end_date.minus_days(1)
	elif end_date < start.date and end.time > start.time:
		end_date = end_date.plus_days(1)
	return start.date.until(end_date, unit)

for unit in U:
	if unit is not U.FOREVER:
		units.define(LocalDateTime, unit, add, measure)
del field, unit
