"""
# Zone identifiers, offsets, and the rules describing how the offset of a
# region changes over time.

# A &ZoneId is either a &ZoneOffset, a fixed amount of time from UTC, or a
# &ZoneRegion whose &Rules map instants to offsets and local date-times to
# their valid offsets. Rules are supplied by providers: &MemoryProvider holds
# rules in a mapping, &CachedProvider memoizes another provider, and
# &..tzif.Provider reads the system's zoneinfo database.
"""
import re
import bisect
import dataclasses

from ..context import tools
from . import core
from . import earth
from . import gregorian
from . import fields
from . import format
from .fields import ChronoField as F

#: Largest absolute offset in seconds.
offset_maximum = 18 * earth.seconds_in_hour

#: Region identifiers that are aliases of UTC.
utc_prefixes = ('UTC', 'GMT', 'UT')

#: Valid form of region identifiers.
region_pattern = re.compile(r'[A-Za-z][A-Za-z0-9~/._+-]+')

#: Transition time definitions of &AnnualRule.
definitions = ('utc', 'wall', 'standard')

class ZoneId(object):
	"""
	# Base class of &ZoneOffset and &ZoneRegion.
	"""
	__slots__ = ()

	@staticmethod
	def of(text, provider=None):
		"""
		# Construct the zone identified by &text.

		# `Z` and text beginning with a sign are offsets. `UTC`, `GMT`, `UT`, and
		# those prefixes followed by an offset are fixed regions. Any other text
		# is a region identifier whose rules are loaded from the &provider, or
		# the system's provider when &None.

		# [ Exceptions ]
		# /&core.RangeError/
			# The text is not a valid identifier.
		# /&core.ZoneNotFound/
			# The provider does not know the identifier.
		"""
		if text == 'Z' or text[:1] in ('+', '-'):
			return ZoneOffset.of(text)

		if text in utc_prefixes:
			return ZoneRegion(text, ZoneOffset.UTC.rules)

		for prefix in utc_prefixes:
			if text.startswith(prefix) and text[len(prefix):len(prefix)+1] in ('+', '-'):
				offset = ZoneOffset.of(text[len(prefix):])
				if offset.total_seconds == 0:
					return ZoneRegion(prefix, offset.rules)
				return ZoneRegion(prefix + offset.identifier, offset.rules)

		if region_pattern.fullmatch(text) is None:
			raise core.RangeError("Invalid ID for region-based ZoneId, invalid format: " + text)

		if provider is None:
			from . import system
			provider = system.provider()
		return ZoneRegion(text, provider.rules(text))

	@staticmethod
	def from_temporal(temporal):
		from . import queries
		zone = temporal.query(queries.zone)
		if zone is None:
			raise core.UnsupportedError("Unable to obtain ZoneId from %r" %(temporal,))
		return zone

	def normalized(self):
		"""
		# The &ZoneOffset of the zone when its rules are fixed; the zone otherwise.
		"""
		rules = self.rules
		if rules.is_fixed_offset():
			from .instant import Instant
			return rules.offset(Instant.EPOCH)
		return self

def _validate_offset(hours, minutes, seconds):
	if hours < -18 or hours > 18:
		raise core.RangeError(
			"Zone offset hours not in valid range: value %d is not in the range -18 to 18" %(hours,)
		)
	if hours > 0 and (minutes < 0 or seconds < 0):
		raise core.RangeError("Zone offset minutes and seconds must be positive because hours is positive")
	if hours < 0 and (minutes > 0 or seconds > 0):
		raise core.RangeError("Zone offset minutes and seconds must be negative because hours is negative")
	if (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
		raise core.RangeError("Zone offset minutes and seconds must have the same sign")
	if minutes < -59 or minutes > 59:
		raise core.RangeError(
			"Zone offset minutes not in valid range: value %d is not in the range -59 to 59" %(minutes,)
		)
	if seconds < -59 or seconds > 59:
		raise core.RangeError(
			"Zone offset seconds not in valid range: value %d is not in the range -59 to 59" %(seconds,)
		)
	if abs(hours) == 18 and (minutes != 0 or seconds != 0):
		raise core.RangeError("Zone offset not in valid range: -18:00 to +18:00")

@tools.record
class ZoneOffset(ZoneId, fields.Dispatch):
	"""
	# A fixed amount of time from UTC, such as `+02:00`.
	"""
	total_seconds: int

	def __post_init__(self):
		if abs(self.total_seconds) > offset_maximum:
			raise core.RangeError("Zone offset not in valid range: -18:00 to +18:00")

	@classmethod
	def of_total_seconds(Class, seconds):
		return Class(seconds)

	@classmethod
	def of_hours(Class, hours):
		return Class.of_hours_minutes_seconds(hours, 0, 0)

	@classmethod
	def of_hours_minutes(Class, hours, minutes):
		return Class.of_hours_minutes_seconds(hours, minutes, 0)

	@classmethod
	def of_hours_minutes_seconds(Class, hours, minutes, seconds):
		_validate_offset(hours, minutes, seconds)
		return Class((hours * earth.seconds_in_hour) + (minutes * earth.seconds_in_minute) + seconds)

	@classmethod
	def of(Class, text):
		"""
		# Construct the offset from `Z`, `±h`, `±hh`, `±hh:mm`, `±hhmm`,
		# `±hh:mm:ss`, or `±hhmmss`.
		"""
		if text == 'Z':
			return Class.UTC

		def invalid():
			return core.RangeError("Invalid ID for ZoneOffset, invalid format: " + text)

		def number(s):
			if len(s) != 2 or not s.isdigit() or not s.isascii():
				raise invalid()
			return int(s)

		size = len(text)
		if size < 2 or text[0] not in '+-':
			raise invalid()
		body = text[1:]
		minutes = seconds = 0
		if size == 2:
			if not body.isdigit() or not body.isascii():
				raise invalid()
			hours = int(body)
		elif size == 3:
			hours = number(body)
		elif size == 5:
			hours, minutes = number(body[0:2]), number(body[2:4])
		elif size == 6 and body[2] == ':':
			hours, minutes = number(body[0:2]), number(body[3:5])
		elif size == 7:
			hours, minutes, seconds = number(body[0:2]), number(body[2:4]), number(body[4:6])
		elif size == 9 and body[2] == ':' and body[5] == ':':
			hours, minutes, seconds = number(body[0:2]), number(body[3:5]), number(body[6:8])
		else:
			raise invalid()

		if text[0] == '-':
			return Class.of_hours_minutes_seconds(-hours, -minutes, -seconds)
		return Class.of_hours_minutes_seconds(hours, minutes, seconds)

	@classmethod
	def from_temporal(Class, temporal):
		if isinstance(temporal, Class):
			return temporal
		from . import queries
		offset = temporal.query(queries.offset)
		if offset is None:
			raise core.UnsupportedError("Unable to obtain ZoneOffset from %r" %(temporal,))
		return offset

	@classmethod
	def parse(Class, text):
		return format.structure('offset', text, Class)

	@property
	def identifier(self):
		return format.offset(self.total_seconds)

	@property
	def rules(self):
		return FixedRules(self)

	def __str__(self):
		return self.identifier

	def normalized(self):
		return self

	def adjust_into(self, temporal):
		return temporal.with_field(F.OFFSET_SECONDS, self.total_seconds)

ZoneOffset.UTC = ZoneOffset(0)
ZoneOffset.MIN = ZoneOffset(-offset_maximum)
ZoneOffset.MAX = ZoneOffset(offset_maximum)
fields.define(ZoneOffset, F.OFFSET_SECONDS, lambda o: o.total_seconds)

@tools.record
class ZoneRegion(ZoneId):
	"""
	# A geographical region sharing the same &Rules, such as `Europe/Paris`.
	# Regions are equal when their identifiers are equal.
	"""
	identifier: str
	rules: object = dataclasses.field(compare=False, repr=False)

	def __str__(self):
		return self.identifier

@tools.ordered
class ZoneOffsetTransition(object):
	"""
	# A change of offset at the instant, &epoch_second.

	# The transition is a gap when the offset increases; the local date-times
	# between &datetime_before and &datetime_after do not exist. The transition
	# is an overlap when the offset decreases; the local date-times between
	# &datetime_after and &datetime_before occur twice.
	"""
	epoch_second: int
	offset_before: ZoneOffset
	offset_after: ZoneOffset

	def __post_init__(self):
		if self.offset_before == self.offset_after:
			raise core.RangeError("Offsets must not be equal")

	@property
	def instant(self):
		from .instant import Instant
		return Instant(self.epoch_second, 0)

	@property
	def datetime_before(self):
		from .datetimes import LocalDateTime
		return LocalDateTime.of_epoch_second(self.epoch_second, 0, self.offset_before)

	@property
	def datetime_after(self):
		from .datetimes import LocalDateTime
		return LocalDateTime.of_epoch_second(self.epoch_second, 0, self.offset_after)

	@property
	def duration(self):
		from .amounts import Duration
		return Duration.of_seconds(self.offset_after.total_seconds - self.offset_before.total_seconds)

	@property
	def is_gap(self):
		return self.offset_after.total_seconds > self.offset_before.total_seconds

	@property
	def is_overlap(self):
		return self.offset_after.total_seconds < self.offset_before.total_seconds

	@property
	def valid_offsets(self):
		if self.is_gap:
			return []
		return [self.offset_before, self.offset_after]

	def is_valid_offset(self, offset):
		if self.is_gap:
			return False
		return offset == self.offset_before or offset == self.offset_after

	def locate(self, local):
		"""
		# The offset of &local relative to the transition: the offset before
		# the transition, the offset after, or the transition itself when
		# &local is in the gap or the overlap.
		"""
		before = self.datetime_before
		after = self.datetime_after
		if self.is_gap:
			if local < before:
				return self.offset_before
			if local < after:
				return self
			return self.offset_after
		else:
			if not local < before:
				return self.offset_after
			if local < after:
				return self.offset_before
			return self

	def __str__(self):
		return 'Transition[%s at %s%s to %s]' %(
			'Gap' if self.is_gap else 'Overlap',
			self.datetime_before, self.offset_before, self.offset_after,
		)

@tools.record
class AnnualRule(object):
	"""
	# A transition recurring every year.

	# [ Properties ]
	# /month/
		# The month of the transition.
	# /day/
		# The day of the month; negative values count back from the end of the
		# month with `-1` being the last day.
	# /weekday/
		# The ISO day of week that the transition must fall on or &None. The day
		# is adjusted forward to the weekday, or backward when &day is negative.
	# /seconds/
		# The seconds after the midnight starting the day; may exceed a day.
	# /definition/
		# How &seconds is interpreted: `'wall'`, relative to &before,
		# `'standard'`, relative to &standard, or `'utc'`.
	"""
	month: int
	day: int
	weekday: object
	seconds: int
	definition: str
	standard: ZoneOffset
	before: ZoneOffset
	after: ZoneOffset

	def __post_init__(self):
		F.MONTH_OF_YEAR.check_valid_value(self.month)
		if self.day == 0 or self.day < -28 or self.day > 31:
			raise core.RangeError(
				"Day of month indicator must be between -28 and 31 inclusive excluding zero"
			)
		if self.weekday is not None:
			F.DAY_OF_WEEK.check_valid_value(self.weekday)
		if self.definition not in definitions:
			raise core.RangeError("Unknown transition time definition: " + repr(self.definition))

	def transition(self, year):
		"""
		# Create the &ZoneOffsetTransition of the rule in &year.
		"""
		from .dates import LocalDate
		from .datetimes import LocalDateTime
		from .timeofday import LocalTime
		from . import adjusters

		if self.day < 0:
			length = gregorian.month_length(year, self.month)
			date = LocalDate(year, self.month, length + 1 + self.day)
			if self.weekday is not None:
				date = date.adjust(adjusters.previous_or_same(self.weekday))
		else:
			date = LocalDate(year, self.month, self.day)
			if self.weekday is not None:
				date = date.adjust(adjusters.next_or_same(self.weekday))

		local = LocalDateTime(date, LocalTime.MIDNIGHT).plus_seconds(self.seconds)
		if self.definition == 'utc':
			reference = ZoneOffset.UTC
		elif self.definition == 'standard':
			reference = self.standard
		else:
			reference = self.before
		return ZoneOffsetTransition(local.to_epoch_second(reference), self.before, self.after)

class Rules(object):
	"""
	# Base class of zone rules.

	# Subclasses implement &offset; the local date-time methods are derived
	# from &locate which, by default, searches the offsets surrounding the local
	# date-time for a transition. Rules with transitions less than two days apart
	# must override &locate.
	"""
	__slots__ = ()

	def offset(self, instant):
		raise NotImplementedError("rules must implement offset")

	def is_fixed_offset(self):
		return False

	def locate(self, local):
		"""
		# The single valid &ZoneOffset of &local, or the &ZoneOffsetTransition
		# when &local is in a gap or an overlap.
		"""
		from .instant import Instant, minimum_second, maximum_second

		t = local.to_epoch_second(ZoneOffset.UTC)
		lo = max(t - offset_maximum, minimum_second)
		hi = min(t + offset_maximum, maximum_second)
		before = self.offset(Instant(lo))
		after = self.offset(Instant(hi))
		if before == after:
			return before

		while hi - lo > 1:
			mid = (lo + hi) // 2
			if self.offset(Instant(mid)) == before:
				lo = mid
			else:
				hi = mid

		return ZoneOffsetTransition(hi, before, self.offset(Instant(hi))).locate(local)

	def transition(self, local):
		info = self.locate(local)
		if isinstance(info, ZoneOffsetTransition):
			return info
		return None

	def valid_offsets(self, local):
		info = self.locate(local)
		if isinstance(info, ZoneOffsetTransition):
			return info.valid_offsets
		return [info]

	def is_valid_offset(self, local, offset):
		return offset in self.valid_offsets(local)

@tools.record
class FixedRules(Rules):
	"""
	# The rules of a zone whose offset never changes.
	"""
	fixed: ZoneOffset

	def offset(self, instant):
		return self.fixed

	def is_fixed_offset(self):
		return True

	def locate(self, local):
		return self.fixed

class TransitionRules(Rules):
	"""
	# Rules defined by a sequence of explicit transitions followed by
	# &AnnualRule instances that apply after the last explicit transition.

	# [ Properties ]
	# /initial/
		# The offset before the first transition.
	# /transitions/
		# The &ZoneOffsetTransition instances in ascending order.
	# /annual/
		# The &AnnualRule instances applied each year after the last transition.
	"""
	__slots__ = ('initial', 'transitions', 'annual', '_seconds')

	def __init__(self, initial, transitions=(), annual=()):
		self.initial = initial
		self.transitions = tuple(transitions)
		self.annual = tuple(annual)
		self._seconds = [t.epoch_second for t in self.transitions]
		if self._seconds != sorted(self._seconds):
			raise core.RangeError("transitions must be in ascending order")

	def __eq__(self, ob):
		if not isinstance(ob, TransitionRules):
			return NotImplemented
		return (self.initial, self.transitions, self.annual) == (ob.initial, ob.transitions, ob.annual)

	def __hash__(self):
		return hash((self.initial, self.transitions, self.annual))

	def __repr__(self):
		return '<%s: %d transitions, %d annual rules>' %(
			self.__class__.__name__, len(self.transitions), len(self.annual)
		)

	def year_transitions(self, year):
		"""
		# The transitions of the &annual rules in &year.
		"""
		if year < gregorian.year_minimum or year > gregorian.year_maximum:
			return []
		return sorted(rule.transition(year) for rule in self.annual)

	def offset(self, instant, search=bisect.bisect_right):
		s = instant.seconds
		if self.annual and (not self._seconds or s > self._seconds[-1]):
			last = self.transitions[-1].offset_after if self.transitions else self.initial
			days = (s + last.total_seconds) // earth.seconds_in_day
			year = gregorian.date_from_days(days)[0]
			trans = None
			for trans in self.year_transitions(year):
				if s < trans.epoch_second:
					return trans.offset_before
			if trans is None:
				return last
			return trans.offset_after

		idx = search(self._seconds, s)
		if idx == 0:
			return self.initial
		return self.transitions[idx - 1].offset_after

	def locate(self, local, left=bisect.bisect_left, right=bisect.bisect_right):
		window = 2 * offset_maximum
		t = local.to_epoch_second(ZoneOffset.UTC)

		candidates = list(self.transitions[left(self._seconds, t - window):right(self._seconds, t + window)])
		if self.annual:
			last = self._seconds[-1] if self._seconds else None
			for year in (local.year - 1, local.year, local.year + 1):
				for trans in self.year_transitions(year):
					if last is not None and trans.epoch_second <= last:
						continue
					if abs(trans.epoch_second - t) <= window:
						candidates.append(trans)
			candidates.sort()

		info = None
		for trans in candidates:
			info = trans.locate(local)
			if isinstance(info, ZoneOffsetTransition) or info == trans.offset_before:
				return info
		if info is None:
			from .instant import Instant, minimum_second, maximum_second
			return self.offset(Instant(min(max(t, minimum_second), maximum_second)))
		return info

class MemoryProvider(object):
	"""
	# Rules provider backed by a mapping of identifiers to rules.
	"""
	__slots__ = ('mapping',)

	def __init__(self, mapping):
		self.mapping = dict(mapping)

	def rules(self, identifier):
		try:
			return self.mapping[identifier]
		except KeyError:
			raise core.ZoneNotFound(identifier) from None

	def identifiers(self):
		return frozenset(self.mapping)

class CachedProvider(object):
	"""
	# Rules provider memoizing the rules loaded from another provider.
	"""
	__slots__ = ('provider', 'rules')

	def __init__(self, provider, size=None):
		self.provider = provider
		self.rules = tools.cachedcalls(size)(provider.rules)

	def identifiers(self):
		return self.provider.identifiers()
