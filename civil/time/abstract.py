"""
# Capability protocols of time points, amounts, fields and units.

# Primarily, this module exists to document the interfaces that user defined
# fields, units, amounts, adjusters, clocks, and zone rules implement in order to
# participate in the operations of the value types. The protocols are runtime
# checkable, so `isinstance` identifies conforming objects by their methods.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Temporal(typing.Protocol):
	"""
	# A point on, or a part of, the time-line that can be queried by &Field
	# and manipulated by &Unit.
	"""

	@abstractmethod
	def is_supported(self, subject) -> bool:
		"""
		# Whether the &Field or &Unit, &subject, can be used with the temporal.
		"""

	@abstractmethod
	def range(self, field):
		"""
		# The &..fields.ValueRange of &field refined by the temporal's state.
		"""

	@abstractmethod
	def get(self, field) -> int:
		"""
		# The value of &field.
		"""

	@abstractmethod
	def with_field(self, field, value):
		"""
		# A copy of the temporal with &field set to &value.
		"""

	@abstractmethod
	def adjust(self, adjuster):
		"""
		# A copy of the temporal adjusted by the &Adjuster, &adjuster.
		"""

	@abstractmethod
	def plus(self, amount, unit=None):
		"""
		# A copy of the temporal with the &amount added.

		# [ Parameters ]
		# /amount/
			# An &Amount, or an integer when &unit is given.
		# /unit/
			# The &Unit of the integer &amount.
		"""

	@abstractmethod
	def minus(self, amount, unit=None):
		"""
		# A copy of the temporal with the &amount subtracted.
		"""

	@abstractmethod
	def until(self, end, unit) -> int:
		"""
		# The number of complete &unit between the temporal and &end.
		# Negative when &end is before the temporal.
		"""

	@abstractmethod
	def query(self, query):
		"""
		# Perform the &query against the temporal.
		"""

@typing.runtime_checkable
class Field(typing.Protocol):
	"""
	# A field of date-time, such as month-of-year or hour-of-minute.
	"""

	@property
	@abstractmethod
	def base_unit(self):
		"""
		# The &Unit that the field is measured in.
		"""

	@property
	@abstractmethod
	def range_unit(self):
		"""
		# The &Unit that the field is bound by.
		"""

	@abstractmethod
	def range(self):
		"""
		# The outer bounds of the field's valid values.
		"""

	@abstractmethod
	def is_date_based(self) -> bool:
		"""
		# Whether the field is a component of a date.
		"""

	@abstractmethod
	def is_time_based(self) -> bool:
		"""
		# Whether the field is a component of a time of day.
		"""

	@abstractmethod
	def is_supported_by(self, temporal) -> bool:
		"""
		# Whether the field can be queried from the &temporal.
		"""

	@abstractmethod
	def range_refined_by(self, temporal):
		"""
		# The range of valid values given the state of the &temporal.
		"""

	@abstractmethod
	def get_from(self, temporal) -> int:
		"""
		# Extract the field's value from the &temporal.
		"""

	@abstractmethod
	def adjust_into(self, temporal, value):
		"""
		# Construct a copy of &temporal with the field set to &value.
		"""

@typing.runtime_checkable
class Unit(typing.Protocol):
	"""
	# A unit of date-time, such as days or hours.
	"""

	@property
	@abstractmethod
	def duration(self):
		"""
		# The &..amounts.Duration of the unit; possibly an estimate.
		"""

	@abstractmethod
	def is_duration_estimated(self) -> bool:
		"""
		# Whether &duration is an estimate.
		"""

	@abstractmethod
	def is_date_based(self) -> bool:
		pass

	@abstractmethod
	def is_time_based(self) -> bool:
		pass

	@abstractmethod
	def is_supported_by(self, temporal) -> bool:
		pass

	@abstractmethod
	def add_to(self, temporal, amount):
		"""
		# Construct a copy of &temporal with &amount of the unit added.
		"""

	@abstractmethod
	def between(self, start, end) -> int:
		"""
		# The number of complete units between &start and &end.
		"""

@typing.runtime_checkable
class Amount(typing.Protocol):
	"""
	# An amount of time, such as "6 hours", "8 days" or "2 years and 3 months".
	"""

	@property
	@abstractmethod
	def units(self):
		"""
		# The sequence of &Unit that the amount is composed of. The order of
		# the sequence is the order that the units are applied in.
		"""

	@abstractmethod
	def get(self, unit) -> int:
		"""
		# The quantity of &unit held by the amount.
		"""

	@abstractmethod
	def add_to(self, temporal):
		pass

	@abstractmethod
	def subtract_from(self, temporal):
		pass

@typing.runtime_checkable
class Adjuster(typing.Protocol):
	"""
	# A strategy for adjusting a temporal object.
	"""

	@abstractmethod
	def adjust_into(self, temporal):
		"""
		# Construct an adjusted copy of the &temporal.
		"""

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# Access to the current instant and the zone used to interpret it.
	"""

	@property
	@abstractmethod
	def zone(self):
		pass

	@abstractmethod
	def instant(self):
		"""
		# The current &..instant.Instant.
		"""

	@abstractmethod
	def millis(self) -> int:
		"""
		# The current milliseconds since the epoch.
		"""

	@abstractmethod
	def with_zone(self, zone):
		pass

@typing.runtime_checkable
class ZoneRules(typing.Protocol):
	"""
	# The rules describing how the offset of a region changes.
	"""

	@abstractmethod
	def offset(self, instant):
		"""
		# The single offset in effect at the &instant.
		"""

	@abstractmethod
	def valid_offsets(self, local):
		"""
		# The offsets that are valid for the local date-time, &local.

		# An empty list for a gap, a single offset in the normal case, and two
		# offsets, ordered before and after, for an overlap.
		"""

	@abstractmethod
	def transition(self, local):
		"""
		# The gap or overlap transition at the local date-time, &local,
		# or &None if the local date-time has exactly one valid offset.
		"""

	@abstractmethod
	def is_valid_offset(self, local, offset) -> bool:
		pass

	@abstractmethod
	def is_fixed_offset(self) -> bool:
		pass

@typing.runtime_checkable
class ZoneRulesProvider(typing.Protocol):
	"""
	# A source of &ZoneRules keyed by region identifier.
	"""

	@abstractmethod
	def rules(self, identifier):
		"""
		# The &ZoneRules of &identifier. Raises &..core.ZoneNotFound when
		# the identifier is not known to the provider.
		"""

	@abstractmethod
	def identifiers(self):
		"""
		# The set of identifiers available from the provider.
		"""
