"""
# Clocks providing the current instant and the zone used to interpret it.

# Every `now` factory of the value types takes a clock. &SystemClock reads the
# system's real time clock; &FixedClock, &OffsetClock, and &TickClock derive
# their instants from a fixed point or from another clock.
"""
import time

from ..context import tools
from . import core
from . import earth

class Clock(object):
	"""
	# Base class of clocks.
	"""
	__slots__ = ()

	def instant(self):
		raise NotImplementedError("clocks must implement instant")

	def millis(self):
		return self.instant().to_epoch_milli()

@tools.record
class SystemClock(Clock):
	"""
	# The system's real time clock observed in &zone.
	"""
	zone: object

	def instant(self, time_ns=time.time_ns):
		from .instant import Instant
		return Instant.of_epoch_second(0, time_ns())

	def millis(self, time_ns=time.time_ns):
		return time_ns() // earth.nanos_in_milli

	def with_zone(self, zone):
		if zone == self.zone:
			return self
		return SystemClock(zone)

@tools.record
class FixedClock(Clock):
	"""
	# A clock that always returns the same instant.
	"""
	fixed: object
	zone: object

	def instant(self):
		return self.fixed

	def with_zone(self, zone):
		if zone == self.zone:
			return self
		return FixedClock(self.fixed, zone)

@tools.record
class OffsetClock(Clock):
	"""
	# A clock returning the instants of the &base clock adjusted by the
	# &..amounts.Duration, &offset.
	"""
	base: Clock
	offset: object

	@property
	def zone(self):
		return self.base.zone

	def instant(self):
		return self.base.instant().plus(self.offset)

	def with_zone(self, zone):
		if zone == self.base.zone:
			return self
		return OffsetClock(self.base.with_zone(zone), self.offset)

@tools.record
class TickClock(Clock):
	"""
	# A clock returning the instants of the &base clock truncated to
	# multiples of the &..amounts.Duration, &tick.
	"""
	base: Clock
	tick: object

	def __post_init__(self):
		if self.tick.is_negative() or self.tick.is_zero():
			raise core.RangeError("Tick duration must be positive")

	@property
	def zone(self):
		return self.base.zone

	def instant(self):
		from .instant import Instant
		i = self.base.instant()
		size = self.tick.to_nanos()
		total = (i.seconds * earth.nanos_in_second) + i.nanos
		return Instant.of_epoch_second(0, total - (total % size))

	def with_zone(self, zone):
		if zone == self.base.zone:
			return self
		return TickClock(self.base.with_zone(zone), self.tick)

def system_utc():
	"""
	# The system clock observed in UTC.
	"""
	from .zones import ZoneOffset
	return SystemClock(ZoneOffset.UTC)

def tick_seconds(zone):
	"""
	# The system clock observed in &zone ticking in whole seconds.
	"""
	from .amounts import Duration
	return TickClock(SystemClock(zone), Duration.of_seconds(1))

def tick_minutes(zone):
	from .amounts import Duration
	return TickClock(SystemClock(zone), Duration.of_minutes(1))
