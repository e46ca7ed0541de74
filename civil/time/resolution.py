"""
# Resolution of local date-times and instants into (local date-time, offset)
# pairs using zone rules.

# A local date-time normally has exactly one valid offset. During a gap, when
# clocks move forward, it has none; during an overlap, when clocks move back,
# it has two. &local resolves these cases deterministically:

# - Gap: the local date-time is moved forward by the length of the gap and
  the offset after the transition is used.
# - Overlap: the &preferred offset is used when it is one of the two valid
  offsets; otherwise the earlier offset, the one before the transition.
"""
from . import core

def local(datetime, rules, preferred=None):
	"""
	# Resolve the local &datetime using the &rules.

	# [ Returns ]
	# A pair, `(datetime, offset)`, where `datetime` is the adjusted local
	# date-time when &datetime is in a gap.
	"""
	valid = rules.valid_offsets(datetime)
	if len(valid) == 1:
		return (datetime, valid[0])

	if len(valid) == 0:
		trans = rules.transition(datetime)
		return (datetime.plus_seconds(trans.duration.seconds), trans.offset_after)

	if preferred is not None and preferred in valid:
		return (datetime, preferred)
	return (datetime, valid[0])

def instant(seconds, nano, rules):
	"""
	# Resolve the instant, &seconds and &nano, into the local date-time using
	# the offset of the &rules at the instant.
	"""
	from .instant import Instant
	from .datetimes import LocalDateTime

	offset = rules.offset(Instant.of_epoch_second(seconds, nano))
	return (LocalDateTime.of_epoch_second(seconds, nano, offset), offset)

def strict(datetime, offset, zone):
	"""
	# Return the (datetime, offset) pair if the &offset is valid for &datetime
	# in the &zone; raise &core.RangeError otherwise.
	"""
	rules = zone.rules
	if not rules.is_valid_offset(datetime, offset):
		trans = rules.transition(datetime)
		if trans is not None and trans.is_gap:
			raise core.RangeError(
				"LocalDateTime '%s' does not exist in zone '%s' due to a gap "
				"in the local time-line, typically caused by daylight savings" %(datetime, zone)
			)
		raise core.RangeError(
			"ZoneOffset '%s' is not valid for LocalDateTime '%s' in zone '%s'" %(offset, datetime, zone)
		)
	return (datetime, offset)

def lenient(datetime, offset, zone):
	"""
	# Return the (datetime, offset) pair without consulting the rules of the
	# &zone. A &..zones.ZoneOffset zone must be the &offset.
	"""
	from .zones import ZoneOffset
	if isinstance(zone, ZoneOffset) and offset != zone:
		raise core.RangeError("ZoneId must match ZoneOffset")
	return (datetime, offset)
