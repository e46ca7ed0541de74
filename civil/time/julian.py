"""
# Day counts from the epochs of astronomy and chronology.

# Each field is the epoch day shifted by a constant, so any value type with a
# date supports them. The Modified Julian Day zero, 1858-11-17, is the epoch
# day -40587.

# [ Elements ]
# /JULIAN_DAY/
	# Days since noon, January 1st, 4713 BCE of the proleptic Julian calendar.
	# The field counts whole days and advances at midnight rather than noon.
# /MODIFIED_JULIAN_DAY/
	# Days since 1858-11-17.
# /RATA_DIE/
	# Days since 0000-12-31; 0001-01-01 is day one.
"""
from . import core
from . import exact
from . import fields
from .fields import ChronoField as F
from .units import ChronoUnit as U

class JulianField(object):
	"""
	# A count of days offset from the epoch day.

	# [ Properties ]
	# /offset/
		# The value of the field at the epoch, 1970-01-01.
	"""
	__slots__ = ('label', 'offset', 'value_range')

	base_unit = U.DAYS
	range_unit = U.FOREVER

	def __init__(self, label, offset):
		self.label = label
		self.offset = offset
		epoch_days = F.EPOCH_DAY.range()
		self.value_range = fields.ValueRange.of(epoch_days.minimum + offset, epoch_days.maximum + offset)

	def __str__(self):
		return self.label

	def __repr__(self):
		return '<' + self.label + '>'

	def range(self):
		return self.value_range

	def is_date_based(self):
		return True

	def is_time_based(self):
		return False

	def is_supported_by(self, temporal):
		return temporal.is_supported(F.EPOCH_DAY)

	def check_supported(self, temporal):
		if not self.is_supported_by(temporal):
			raise core.UnsupportedError("Unsupported field: " + self.label)

	def range_refined_by(self, temporal):
		self.check_supported(temporal)
		return self.value_range

	def get_from(self, temporal):
		self.check_supported(temporal)
		return exact.add(temporal.get(F.EPOCH_DAY), self.offset)

	def adjust_into(self, temporal, value):
		self.check_supported(temporal)
		self.value_range.check_valid_value(value, self)
		return temporal.with_field(F.EPOCH_DAY, exact.subtract(value, self.offset))

JULIAN_DAY = JulianField('JulianDay', 2440588)
MODIFIED_JULIAN_DAY = JulianField('ModifiedJulianDay', 40587)
RATA_DIE = JulianField('RataDie', 719163)
