"""
# Civil calendar dates, times of day, instants, and the amounts between them.

# Values are immutable. Construction validates; arithmetic is exact and raises
# &.core.ArithmeticOverflow instead of wrapping. Fields and units are open:
# every value type answers `get`, `with_field`, `plus`, and `until` through
# the dispatch tables of &.fields and &.units, and unknown fields or units are
# asked to operate on the value themselves.

#!syntax/python
	from civil.time import types

	d = types.LocalDate.of(2012, 2, 29)
	assert str(d.plus_years(1)) == '2013-02-28'

	zone = types.ZoneId.of('Europe/Paris')
	z = types.LocalDateTime.of(2007, 3, 25, 2, 30).at_zone(zone)
	assert str(z) == '2007-03-25T03:30+02:00[Europe/Paris]'

# &.types collects the value types; &.system provides the default zone and
# clock of the host. &.isofields and &.julian provide quarter, week-based,
# and day count fields usable with any value type that has a date.
"""
