"""
# Collection bridge providing the `test` parameter of the project's tests to pytest.
"""
import pytest

from civil.test import core

class Test(core.Test):
	"""
	# &core.Test whose skips are reported to the collecting runner.
	"""
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def explicit(self):
		pytest.skip("test must be explicitly invoked in order to run")

@pytest.fixture
def test(request):
	t = Test(request.node.name, request.function)
	with t.exits:
		yield t
