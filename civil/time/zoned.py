"""
# Times and date-times bound to an offset or a zone: &OffsetTime,
# &OffsetDateTime, and &ZonedDateTime.

# The date-times identify an instant on the time-line. &ZonedDateTime keeps
# the offset consistent with the rules of its zone: date-based arithmetic is performed on
# the local date-time and resolved again while time-based arithmetic is
# performed on the instant.
"""
import functools

from ..context import tools
from . import core
from . import exact
from . import earth
from . import fields
from . import units
from . import queries
from . import format
from . import resolution
from . import timeofday
from .fields import ChronoField as F
from .units import ChronoUnit as U
from .timeofday import LocalTime
from .datetimes import LocalDateTime
from .instant import Instant
from .zones import ZoneId, ZoneOffset

def _key(odt):
	return (odt.to_epoch_second(), odt.datetime.nano, odt.datetime)

@functools.total_ordering
@tools.record
class OffsetDateTime(fields.Dispatch):
	"""
	# A &LocalDateTime observed at a &ZoneOffset, such as `2007-12-03T10:15:30+01:00`.

	# Instances order by their instant, and then by their local date-time.
	"""
	datetime: LocalDateTime
	offset: ZoneOffset

	def __post_init__(self):
		if not isinstance(self.datetime, LocalDateTime):
			raise TypeError("datetime must be a LocalDateTime")
		if not isinstance(self.offset, ZoneOffset):
			raise TypeError("offset must be a ZoneOffset")

	def __lt__(self, ob):
		if not isinstance(ob, OffsetDateTime):
			return NotImplemented
		return _key(self) < _key(ob)

	@classmethod
	def of(Class, datetime, offset):
		return Class(datetime, offset)

	@classmethod
	def of_instant(Class, instant, zone):
		"""
		# The date-time of the &instant at the offset of &zone at the instant.
		"""
		offset = zone.rules.offset(instant)
		return Class(LocalDateTime.of_epoch_second(instant.seconds, instant.nanos, offset), offset)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		offset = ZoneOffset.from_temporal(temporal)
		if temporal.is_supported(F.INSTANT_SECONDS):
			return Class.of_instant(Instant.from_temporal(temporal), offset)
		return Class(LocalDateTime.from_temporal(temporal), offset)

	@classmethod
	def now(Class, clock):
		return Class.of_instant(clock.instant(), clock.zone)

	@classmethod
	def parse(Class, text):
		return format.structure('offset-datetime', text, _offset_from_parts)

	def __str__(self):
		return str(self.datetime) + str(self.offset)

	def to_epoch_second(self):
		return self.datetime.to_epoch_second(self.offset)

	def to_instant(self):
		return Instant(self.to_epoch_second(), self.datetime.nano)

	def to_local_date(self):
		return self.datetime.date

	def to_local_time(self):
		return self.datetime.time

	def to_offset_time(self):
		return OffsetTime(self.datetime.time, self.offset)

	def _with(self, datetime, offset):
		if datetime is self.datetime and offset is self.offset:
			return self
		return OffsetDateTime(datetime, offset)

	def with_offset_same_local(self, offset):
		return self._with(self.datetime, offset)

	def with_offset_same_instant(self, offset):
		if offset == self.offset:
			return self
		difference = offset.total_seconds - self.offset.total_seconds
		return OffsetDateTime(self.datetime.plus_seconds(difference), offset)

	def at_zone_same_instant(self, zone):
		return ZonedDateTime.of_instant(self.to_instant(), zone)

	def at_zone_similar_local(self, zone):
		"""
		# The &ZonedDateTime of the local date-time in &zone preferring this
		# instance's offset when the local date-time is in an overlap.
		"""
		return ZonedDateTime.of_local(self.datetime, zone, self.offset)

	def to_zoned_datetime(self):
		return ZonedDateTime.of_local(self.datetime, self.offset)

	def plus_years(self, years):
		return self._with(self.datetime.plus_years(years), self.offset)

	def plus_months(self, months):
		return self._with(self.datetime.plus_months(months), self.offset)

	def plus_weeks(self, weeks):
		return self._with(self.datetime.plus_weeks(weeks), self.offset)

	def plus_days(self, days):
		return self._with(self.datetime.plus_days(days), self.offset)

	def plus_hours(self, hours):
		return self._with(self.datetime.plus_hours(hours), self.offset)

	def plus_minutes(self, minutes):
		return self._with(self.datetime.plus_minutes(minutes), self.offset)

	def plus_seconds(self, seconds):
		return self._with(self.datetime.plus_seconds(seconds), self.offset)

	def plus_nanos(self, nanos):
		return self._with(self.datetime.plus_nanos(nanos), self.offset)

	def truncated_to(self, unit):
		return self._with(self.datetime.truncated_to(unit), self.offset)

	def adjust_into(self, temporal):
		temporal = temporal.with_field(F.EPOCH_DAY, self.datetime.date.to_epoch_day())
		temporal = temporal.with_field(F.NANO_OF_DAY, self.datetime.time.to_nano_of_day())
		return temporal.with_field(F.OFFSET_SECONDS, self.offset.total_seconds)

def _offset_from_parts(date_parts, time_parts, offset_seconds):
	return OffsetDateTime(LocalDateTime.of_parts(date_parts, time_parts), ZoneOffset(offset_seconds))

for field in F:
	if field is F.INSTANT_SECONDS:
		fields.define(OffsetDateTime, field, OffsetDateTime.to_epoch_second,
			lambda o, v: OffsetDateTime.of_instant(Instant.of_epoch_second(v, o.datetime.nano), o.offset))
	elif field is F.OFFSET_SECONDS:
		fields.define(OffsetDateTime, field, lambda o: o.offset.total_seconds,
			lambda o, v: o._with(o.datetime, ZoneOffset(v)))
	else:
		fields.define(OffsetDateTime, field,
			lambda o, f=field: o.datetime.get(f),
			lambda o, v, f=field: o._with(o.datetime.with_field(f, v), o.offset),
			lambda o, f=field: o.datetime.range(f))

def _offset_add(o, amount, unit):
	return o._with(o.datetime.plus(amount, unit), o.offset)

def _offset_measure(start, end, unit):
	end = end.with_offset_same_instant(start.offset)
	return start.datetime.until(end.datetime, unit)

for unit in U:
	if unit is not U.FOREVER:
		units.define(OffsetDateTime, unit, _offset_add, _offset_measure)

queries.define(OffsetDateTime, queries.offset, lambda o: o.offset)
queries.define(OffsetDateTime, queries.local_date, lambda o: o.datetime.date)
queries.define(OffsetDateTime, queries.local_time, lambda o: o.datetime.time)

def _time_key(ot):
	return (ot.to_epoch_nano(), ot.time)

@functools.total_ordering
@tools.record
class OffsetTime(fields.Dispatch):
	"""
	# A &LocalTime observed at a &ZoneOffset, such as `10:15:30+01:00`.

	# Instances order by the time-line position of the time on a common date,
	# and then by their local time.
	"""
	time: LocalTime
	offset: ZoneOffset

	def __post_init__(self):
		if not isinstance(self.time, LocalTime):
			raise TypeError("time must be a LocalTime")
		if not isinstance(self.offset, ZoneOffset):
			raise TypeError("offset must be a ZoneOffset")

	def __lt__(self, ob):
		if not isinstance(ob, OffsetTime):
			return NotImplemented
		return _time_key(self) < _time_key(ob)

	@classmethod
	def of(Class, time, offset):
		return Class(time, offset)

	@classmethod
	def of_instant(Class, instant, zone):
		"""
		# The time of day of the &instant at the offset of &zone at the instant.
		"""
		offset = zone.rules.offset(instant)
		sod = (instant.seconds + offset.total_seconds) % earth.seconds_in_day
		return Class(LocalTime.of_second_of_day(sod, instant.nanos), offset)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		return Class(LocalTime.from_temporal(temporal), ZoneOffset.from_temporal(temporal))

	@classmethod
	def now(Class, clock):
		return Class.of_instant(clock.instant(), clock.zone)

	@classmethod
	def parse(Class, text):
		return format.structure('offset-time', text, _offset_time_from_parts)

	def __str__(self):
		return str(self.time) + str(self.offset)

	def to_epoch_nano(self):
		"""
		# Nanoseconds of the time relative to midnight UTC of the same date.
		"""
		return self.time.to_nano_of_day() - (self.offset.total_seconds * earth.nanos_in_second)

	def to_local_time(self):
		return self.time

	def _with(self, time, offset):
		if time is self.time and offset is self.offset:
			return self
		return OffsetTime(time, offset)

	def with_offset_same_local(self, offset):
		return self._with(self.time, offset)

	def with_offset_same_instant(self, offset):
		if offset == self.offset:
			return self
		difference = offset.total_seconds - self.offset.total_seconds
		return OffsetTime(self.time.plus_seconds(difference), offset)

	def with_hour(self, hour):
		return self._with(self.time.with_hour(hour), self.offset)

	def with_minute(self, minute):
		return self._with(self.time.with_minute(minute), self.offset)

	def with_second(self, second):
		return self._with(self.time.with_second(second), self.offset)

	def with_nano(self, nano):
		return self._with(self.time.with_nano(nano), self.offset)

	def plus_hours(self, hours):
		return self._with(self.time.plus_hours(hours), self.offset)

	def plus_minutes(self, minutes):
		return self._with(self.time.plus_minutes(minutes), self.offset)

	def plus_seconds(self, seconds):
		return self._with(self.time.plus_seconds(seconds), self.offset)

	def plus_nanos(self, nanos):
		return self._with(self.time.plus_nanos(nanos), self.offset)

	def minus_hours(self, hours):
		return self._with(self.time.minus_hours(hours), self.offset)

	def minus_minutes(self, minutes):
		return self._with(self.time.minus_minutes(minutes), self.offset)

	def minus_seconds(self, seconds):
		return self._with(self.time.minus_seconds(seconds), self.offset)

	def minus_nanos(self, nanos):
		return self._with(self.time.minus_nanos(nanos), self.offset)

	def truncated_to(self, unit):
		return self._with(self.time.truncated_to(unit), self.offset)

	def at_date(self, date):
		return OffsetDateTime(LocalDateTime(date, self.time), self.offset)

	def adjust_into(self, temporal):
		temporal = temporal.with_field(F.NANO_OF_DAY, self.time.to_nano_of_day())
		return temporal.with_field(F.OFFSET_SECONDS, self.offset.total_seconds)

def _offset_time_from_parts(time_parts, offset_seconds):
	return OffsetTime(LocalTime(*time_parts), ZoneOffset(offset_seconds))

fields.define(OffsetTime, F.OFFSET_SECONDS, lambda o: o.offset.total_seconds,
	lambda o, v: o._with(o.time, ZoneOffset(v)))
for field in F:
	if field.is_time_based():
		fields.define(OffsetTime, field,
			lambda o, f=field: o.time.get(f),
			lambda o, v, f=field: o._with(o.time.with_field(f, v), o.offset))

def _offset_time_add(o, amount, unit):
	return o._with(o.time.plus(amount, unit), o.offset)

def _offset_time_measure(start, end, unit):
	return exact.quotient(end.to_epoch_nano() - start.to_epoch_nano(), timeofday.unit_nanos[unit])

for unit in timeofday.unit_nanos:
	units.define(OffsetTime, unit, _offset_time_add, _offset_time_measure)

queries.define(OffsetTime, queries.offset, lambda o: o.offset)
queries.define(OffsetTime, queries.local_time, lambda o: o.time)

@functools.total_ordering
@tools.record
class ZonedDateTime(fields.Dispatch):
	"""
	# A &LocalDateTime in a &ZoneId with the resolved &ZoneOffset, such as
	# `2007-12-03T10:15:30+01:00[Europe/Paris]`.

	# Instances are constructed with the factories which resolve the offset
	# with the zone's rules.
	"""
	datetime: LocalDateTime
	offset: ZoneOffset
	zone: ZoneId

	def __lt__(self, ob):
		if not isinstance(ob, ZonedDateTime):
			return NotImplemented
		return (_key(self), self.zone.identifier) < (_key(ob), ob.zone.identifier)

	@classmethod
	def of(Class, datetime, zone):
		return Class.of_local(datetime, zone)

	@classmethod
	def of_local(Class, datetime, zone, preferred=None):
		"""
		# Resolve the local &datetime in the &zone.

		# [ Parameters ]
		# /preferred/
			# The offset to use when &datetime is in an overlap and the offset is
			# one of the two valid offsets.
		"""
		if isinstance(zone, ZoneOffset):
			return Class(datetime, zone, zone)
		datetime, offset = resolution.local(datetime, zone.rules, preferred)
		return Class(datetime, offset, zone)

	@classmethod
	def of_instant(Class, instant, zone):
		return Class._create(instant.seconds, instant.nanos, zone)

	@classmethod
	def _create(Class, seconds, nano, zone):
		datetime, offset = resolution.instant(seconds, nano, zone.rules)
		return Class(datetime, offset, zone)

	@classmethod
	def of_strict(Class, datetime, offset, zone):
		"""
		# Construct the instance raising &core.RangeError if the &offset is not
		# valid for the &datetime in the &zone.
		"""
		return Class(*resolution.strict(datetime, offset, zone), zone)

	@classmethod
	def of_lenient(Class, datetime, offset, zone):
		"""
		# Construct the instance without validating the &offset against the
		# rules of the &zone.
		"""
		return Class(*resolution.lenient(datetime, offset, zone), zone)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		zone = ZoneId.from_temporal(temporal)
		if temporal.is_supported(F.INSTANT_SECONDS):
			return Class.of_instant(Instant.from_temporal(temporal), zone)
		return Class.of_local(LocalDateTime.from_temporal(temporal), zone)

	@classmethod
	def now(Class, clock, zone=None):
		return Class.of_instant(clock.instant(), zone or clock.zone)

	@classmethod
	def parse(Class, text, provider=None):
		def construct(date_parts, time_parts, offset_seconds, zone):
			datetime = LocalDateTime.of_parts(date_parts, time_parts)
			offset = ZoneOffset(offset_seconds)
			if zone is None:
				return Class.of_local(datetime, offset)
			return Class.of_local(datetime, ZoneId.of(zone, provider), offset)
		return format.structure('zoned-datetime', text, construct)

	def __str__(self):
		text = str(self.datetime) + str(self.offset)
		if self.zone != self.offset:
			text += '[' + str(self.zone) + ']'
		return text

	def to_epoch_second(self):
		return self.datetime.to_epoch_second(self.offset)

	def to_instant(self):
		return Instant(self.to_epoch_second(), self.datetime.nano)

	def to_local_date(self):
		return self.datetime.date

	def to_local_time(self):
		return self.datetime.time

	def to_offset_datetime(self):
		return OffsetDateTime(self.datetime, self.offset)

	def _resolve_local(self, datetime):
		return ZonedDateTime.of_local(datetime, self.zone, self.offset)

	def _resolve_instant(self, datetime):
		return ZonedDateTime._create(datetime.to_epoch_second(self.offset), datetime.nano, self.zone)

	def _resolve_offset(self, offset):
		if offset != self.offset and self.zone.rules.is_valid_offset(self.datetime, offset):
			return ZonedDateTime(self.datetime, offset, self.zone)
		return self

	def with_zone_same_local(self, zone):
		"""
		# Change the zone retaining the local date-time where possible.
		"""
		if zone == self.zone:
			return self
		return ZonedDateTime.of_local(self.datetime, zone, self.offset)

	def with_zone_same_instant(self, zone):
		"""
		# Change the zone retaining the instant.
		"""
		if zone == self.zone:
			return self
		return ZonedDateTime._create(self.to_epoch_second(), self.datetime.nano, zone)

	def with_earlier_offset_at_overlap(self):
		trans = self.zone.rules.transition(self.datetime)
		if trans is not None and trans.is_overlap:
			earlier = trans.offset_before
			if earlier != self.offset:
				return ZonedDateTime(self.datetime, earlier, self.zone)
		return self

	def with_later_offset_at_overlap(self):
		trans = self.zone.rules.transition(self.datetime)
		if trans is not None and trans.is_overlap:
			later = trans.offset_after
			if later != self.offset:
				return ZonedDateTime(self.datetime, later, self.zone)
		return self

	def with_fixed_offset_zone(self):
		if self.zone == self.offset:
			return self
		return ZonedDateTime(self.datetime, self.offset, self.offset)

	def plus(self, amount, unit=None):
		from .amounts import Period
		if unit is None and isinstance(amount, Period):
			return self._resolve_local(self.datetime.plus(amount))
		return fields.Dispatch.plus(self, amount, unit)

	def minus(self, amount, unit=None):
		from .amounts import Period
		if unit is None and isinstance(amount, Period):
			return self._resolve_local(self.datetime.minus(amount))
		return fields.Dispatch.minus(self, amount, unit)

	def until(self, end, unit):
		end = ZonedDateTime.from_temporal(end).with_zone_same_instant(self.zone)
		if not isinstance(unit, U):
			return unit.between(self, end)
		if unit.is_date_based():
			return self.datetime.until(end.datetime, unit)
		return self.to_offset_datetime().until(end.to_offset_datetime(), unit)

	def plus_years(self, years):
		return self._resolve_local(self.datetime.plus_years(years))

	def plus_months(self, months):
		return self._resolve_local(self.datetime.plus_months(months))

	def plus_weeks(self, weeks):
		return self._resolve_local(self.datetime.plus_weeks(weeks))

	def plus_days(self, days):
		return self._resolve_local(self.datetime.plus_days(days))

	def plus_hours(self, hours):
		return self._resolve_instant(self.datetime.plus_hours(hours))

	def plus_minutes(self, minutes):
		return self._resolve_instant(self.datetime.plus_minutes(minutes))

	def plus_seconds(self, seconds):
		return self._resolve_instant(self.datetime.plus_seconds(seconds))

	def plus_nanos(self, nanos):
		return self._resolve_instant(self.datetime.plus_nanos(nanos))

	def truncated_to(self, unit):
		return self._resolve_local(self.datetime.truncated_to(unit))

	def adjust_into(self, temporal):
		return self.to_offset_datetime().adjust_into(temporal)

for field in F:
	if field is F.INSTANT_SECONDS:
		fields.define(ZonedDateTime, field, ZonedDateTime.to_epoch_second,
			lambda z, v: ZonedDateTime._create(v, z.datetime.nano, z.zone))
	elif field is F.OFFSET_SECONDS:
		fields.define(ZonedDateTime, field, lambda z: z.offset.total_seconds,
			lambda z, v: z._resolve_offset(ZoneOffset(v)))
	else:
		fields.define(ZonedDateTime, field,
			lambda z, f=field: z.datetime.get(f),
			lambda z, v, f=field: z._resolve_local(z.datetime.with_field(f, v)),
			lambda z, f=field: z.datetime.range(f))

def _zoned_add(z, amount, unit):
	if unit.is_date_based():
		return z._resolve_local(z.datetime.plus(amount, unit))
	return z._resolve_instant(z.datetime.plus(amount, unit))

def _zoned_measure(start, end, unit):
	return start.until(end, unit)

for unit in U:
	if unit is not U.FOREVER:
		units.define(ZonedDateTime, unit, _zoned_add, _zoned_measure)

queries.define(ZonedDateTime, queries.zone_id, lambda z: z.zone)
queries.define(ZonedDateTime, queries.offset, lambda z: z.offset)
queries.define(ZonedDateTime, queries.local_date, lambda z: z.datetime.date)
queries.define(ZonedDateTime, queries.local_time, lambda z: z.datetime.time)
del field, unit
