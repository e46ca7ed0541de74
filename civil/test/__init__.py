"""
# Test harness for the project's tests.

# Tests are functions whose name begins with `test_` and accept a single
# &core.Test instance. Assertions are made with contentions:

#!syntax/python
	def test_feature(test):
		test/feature() == expectation
		test/feature() != other
		with test/ValueError as exc:
			raise ValueError("trapped")

# &engine.execute runs the tests of a module directly, and the project's
# `conftest.py` provides the `test` fixture for collection by pytest.
"""
