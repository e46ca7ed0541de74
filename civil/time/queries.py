"""
# Queries extracting capabilities from temporal objects.

# A query is a callable accepting a temporal and returning the extracted
# information or &None. Temporal types answer the standard queries through
# their `query` method which consults &answers before falling back to the
# query itself; the fallbacks defined here derive their answer from the
# fields that the temporal supports, so custom temporal types are queried
# consistently.
"""

#: Mapping of (type, query) to the function answering the query for the type.
answers = {}

def define(Type, query, answer):
	answers[(Type, query)] = answer

def local_date(temporal):
	"""
	# The &..dates.LocalDate of the temporal, if any.
	"""
	from .fields import ChronoField
	if temporal.is_supported(ChronoField.EPOCH_DAY):
		from .dates import LocalDate
		return LocalDate.of_epoch_day(temporal.get(ChronoField.EPOCH_DAY))
	return None

def local_time(temporal):
	"""
	# The &..timeofday.LocalTime of the temporal, if any.
	"""
	from .fields import ChronoField
	if temporal.is_supported(ChronoField.NANO_OF_DAY):
		from .timeofday import LocalTime
		return LocalTime.of_nano_of_day(temporal.get(ChronoField.NANO_OF_DAY))
	return None

def offset(temporal):
	"""
	# The &..zones.ZoneOffset of the temporal, if any.
	"""
	from .fields import ChronoField
	if temporal.is_supported(ChronoField.OFFSET_SECONDS):
		from .zones import ZoneOffset
		return ZoneOffset.of_total_seconds(temporal.get(ChronoField.OFFSET_SECONDS))
	return None

def zone_id(temporal):
	"""
	# The zone of the temporal, strictly; offsets are not considered.
	"""
	return None

def zone(temporal):
	"""
	# The zone of the temporal, falling back to its offset.
	"""
	z = temporal.query(zone_id)
	if z is not None:
		return z
	return temporal.query(offset)

def precision(temporal):
	"""
	# The smallest &..units.ChronoUnit supported by the temporal.
	"""
	from .units import ChronoUnit, smallest
	return smallest(u for u in ChronoUnit if temporal.is_supported(u))
