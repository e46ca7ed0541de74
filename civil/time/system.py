"""
# Access to the zone database and default zone configured by the system.

# The default zone is selected by the `TZ` environment variable when present,
# and by the `/etc/localtime` link otherwise. &provider is the rules provider
# used by &.zones.ZoneId.of when none is given.
"""
import os
import os.path
import logging

from ..context import tools
from . import core
from . import tzif
from . import zones
from . import clocks

logger = logging.getLogger(__name__)

@tools.cachedcalls(1)
def provider():
	"""
	# The cached &tzif.Provider reading the system's zoneinfo directory.
	"""
	return zones.CachedProvider(tzif.Provider(tzif.tzdir))

def _environment_zone(selector):
	if selector.startswith(':'):
		selector = selector[1:]

	if os.path.isabs(selector):
		return zones.ZoneRegion(selector, tzif.load(selector))

	try:
		return zones.ZoneId.of(selector)
	except (core.ZoneNotFound, core.RangeError):
		# Not an identifier in the database; try it as a POSIX TZ string.
		standard, rules = tzif.posix(selector)
		if rules:
			return zones.ZoneRegion(selector, zones.TransitionRules(standard, (), rules))
		return zones.ZoneRegion(selector, zones.FixedRules(standard))

def _link_zone(path):
	real = os.path.realpath(path)
	directory = os.path.realpath(tzif.tzdir) + os.sep
	if real.startswith(directory):
		identifier = real[len(directory):].replace(os.sep, '/')
		try:
			return zones.ZoneId.of(identifier)
		except (core.ZoneNotFound, core.RangeError):
			logger.debug("zone link %r does not name a known region", path)
	return zones.ZoneRegion('SYSTEM', tzif.load(path))

def zone(environ=os.environ):
	"""
	# Identify the default zone of the system.

	# Falls back to UTC when neither `TZ` nor `/etc/localtime` identify a zone.
	"""
	selector = environ.get(tzif.tzenviron)
	if selector:
		try:
			return _environment_zone(selector)
		except (core.Error, OSError) as err:
			logger.warning("ignoring invalid %s environment variable %r: %s", tzif.tzenviron, selector, err)

	if os.path.exists(tzif.tzdefault):
		try:
			return _link_zone(tzif.tzdefault)
		except (core.Error, OSError) as err:
			logger.warning("unable to read the default zone from %r: %s", tzif.tzdefault, err)

	return zones.ZoneOffset.UTC

def clock():
	"""
	# The system clock observed in the system's default zone.
	"""
	return clocks.SystemClock(zone())
