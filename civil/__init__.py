"""
# Civil calendar and instant arithmetic.

# [ Packages ]
# /&.time/
	# The value types, the field and unit protocol, and zone resolution.
# /&.test/
	# The test harness used by the project's tests.
# /&.context/
	# Tools shared across the packages.
"""
