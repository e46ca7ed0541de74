"""
# Exact integer arithmetic.

# Python integers do not overflow, so the 64-bit and 32-bit boundaries of the
# calendrical quantities are enforced explicitly: every function here raises
# &core.ArithmeticOverflow instead of producing a result outside of the range.

# Carrying between units uses floor division, &floordiv and &floormod, so that
# a remainder always has the sign of the divisor. Amounts measured between two
# points use &quotient and &remainder which truncate toward zero.
"""
from . import core

#: Smallest signed 64-bit value.
long_minimum = -(2**63)

#: Largest signed 64-bit value.
long_maximum = (2**63) - 1

#: Smallest signed 32-bit value.
int_minimum = -(2**31)

#: Largest signed 32-bit value.
int_maximum = (2**31) - 1

def check(value, minimum=long_minimum, maximum=long_maximum):
	"""
	# Return &value if it is within the signed 64-bit range.
	"""
	if value < minimum or value > maximum:
		raise core.ArithmeticOverflow("long overflow: " + str(value))
	return value

def narrow(value, minimum=int_minimum, maximum=int_maximum):
	"""
	# Return &value if it is within the signed 32-bit range.
	"""
	if value < minimum or value > maximum:
		raise core.ArithmeticOverflow("integer overflow: " + str(value))
	return value

def add(x, y, check=check):
	return check(x + y)

def subtract(x, y, check=check):
	return check(x - y)

def multiply(x, y, check=check):
	return check(x * y)

def negate(x, check=check):
	return check(-x)

def floordiv(x, y, check=check):
	"""
	# Division rounding toward negative infinity.
	"""
	return check(x // y)

def floormod(x, y):
	"""
	# Modulo whose result has the sign of the divisor, &y.
	"""
	return x % y

def quotient(x, y):
	"""
	# Division truncating toward zero.
	"""
	q = abs(x) // abs(y)
	if (x < 0) != (y < 0):
		return -q
	return q

def remainder(x, y):
	"""
	# The remainder of &quotient; has the sign of the dividend, &x.
	"""
	return x - (quotient(x, y) * y)
