"""
# Read TZif, time zone information, files (zic output) into zone rules.

# Version 1 files are read from their 32-bit data block. Version 2 and later
# files are read from the 64-bit data block that follows the first, and their
# footer, a POSIX TZ string, is converted into &..zones.AnnualRule instances
# describing the transitions after the last explicit transition.

# See tzfile(5) and RFC 8536 for the layout of the files.
"""
import os
import os.path
import re
import struct
import logging
import collections

from . import core
from . import gregorian
from . import zones

logger = logging.getLogger(__name__)

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'

header_fields = (
	'tzh_ttisutcnt',   # The number of UTC/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of transition times for which data is stored in the file.
	'tzh_typecnt',     # The number of local time types for which data is stored in the file.
	'tzh_charcnt',     # The number of characters of time zone abbreviation strings.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# magic, version, reserved, and the counts.
header_struct = struct.Struct("!4sc15x" + (len(header_fields) * "l"))
ttinfo_struct = struct.Struct("!lBB")

transtime_struct_v1 = struct.Struct("!l")
transtime_struct_v2 = struct.Struct("!q")

tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', (
	'tt_utoff',
	'tt_isdst',
	'tt_abbrev',
))

tzinfo = collections.namedtuple('tzinfo', (
	'version',
	'transitions',
	'types',
	'ttinfo',
	'leaps',
	'isstd',
	'isut',
	'footer',
))

class FormatError(core.Error, ValueError):
	"""
	# The data is not a valid TZif file or POSIX TZ string.
	"""

def read_header(data, offset=0):
	if len(data) < offset + header_struct.size:
		raise FormatError("truncated TZif header")
	fields = header_struct.unpack_from(data, offset)
	if fields[0] != magic:
		raise FormatError("not a TZif file")
	return fields[1], tzinfo_header(*fields[2:])

def block_size(header, time_size):
	"""
	# The size of the data block described by &header.
	"""
	return (
		header.tzh_timecnt * time_size
		+ header.tzh_timecnt
		+ header.tzh_typecnt * ttinfo_struct.size
		+ header.tzh_charcnt
		+ header.tzh_leapcnt * (time_size + 4)
		+ header.tzh_ttisstdcnt
		+ header.tzh_ttisutcnt
	)

def read_block(data, offset, header, time_struct):
	"""
	# Unpack the data block beginning at &offset.

	# Returns the block's fields and the offset following the block.
	"""
	size = time_struct.size
	if len(data) < offset + block_size(header, size):
		raise FormatError("truncated TZif data block")

	transitions = tuple(
		time_struct.unpack_from(data, offset + (i * size))[0]
		for i in range(header.tzh_timecnt)
	)
	offset += header.tzh_timecnt * size

	# unsigned char's
	types = tuple(bytes(data[offset:offset + header.tzh_timecnt]))
	offset += header.tzh_timecnt

	ttinfo = [
		ttinfo_struct.unpack_from(data, offset + (i * ttinfo_struct.size))
		for i in range(header.tzh_typecnt)
	]
	offset += header.tzh_typecnt * ttinfo_struct.size

	# Append a NUL terminator to guarantee that abbr.find() will not return -1.
	abbr = bytes(data[offset:offset + header.tzh_charcnt]) + b'\0'
	offset += header.tzh_charcnt

	leaps = []
	for i in range(header.tzh_leapcnt):
		when = time_struct.unpack_from(data, offset)[0]
		correction = struct.unpack_from("!l", data, offset + size)[0]
		leaps.append((when, correction))
		offset += size + 4

	isstd = tuple(bytes(data[offset:offset + header.tzh_ttisstdcnt]))
	offset += header.tzh_ttisstdcnt

	isut = tuple(bytes(data[offset:offset + header.tzh_ttisutcnt]))
	offset += header.tzh_ttisutcnt

	if any(t >= len(ttinfo) for t in types):
		raise FormatError("transition refers to an undefined local time type")

	ttinfo = tuple(
		tzinfo_ttinfo(utoff, bool(isdst), abbr[index:abbr.find(b'\0', index)].decode('ascii', 'replace'))
		for utoff, isdst, index in ttinfo
	)
	return (transitions, types, ttinfo, tuple(leaps), isstd, isut), offset

def parse(data):
	"""
	# Given TZif data, identify the version and unpack the zone information
	# from the data block with the widest transition times.
	"""
	version, header = read_header(data)
	block, offset = read_block(data, header_struct.size, header, transtime_struct_v1)
	if version == b'\x00':
		return tzinfo(1, *block, None)

	version, header = read_header(data, offset)
	block, offset = read_block(data, offset + header_struct.size, header, transtime_struct_v2)

	footer = None
	rest = bytes(data[offset:])
	if rest.startswith(b'\n'):
		end = rest.find(b'\n', 1)
		if end != -1:
			footer = rest[1:end].decode('ascii') or None
	return tzinfo(int(version.decode('ascii')), *block, footer)

posix_name = r'(?:<[A-Za-z0-9+-]+>|[A-Za-z]{3,})'
posix_offset = r'[+-]?[0-9]{1,3}(?::[0-9]{2}){0,2}'
posix_rule = r'(?:J[0-9]{1,3}|[0-9]{1,3}|M[0-9]{1,2}\.[1-5]\.[0-6])(?:/' + posix_offset + r')?'
posix_pattern = re.compile(
	'(?P<std>' + posix_name + ')(?P<stdoff>' + posix_offset + ')'
	'(?:(?P<dst>' + posix_name + ')(?P<dstoff>' + posix_offset + ')?'
	'(?:,(?P<start>' + posix_rule + '),(?P<end>' + posix_rule + '))?)?'
)

#: Rules used when a POSIX TZ string names a daylight zone without rules.
posix_default_rules = ('M3.2.0', 'M11.1.0')

def posix_seconds(text):
	"""
	# Convert `[+-]hh[:mm[:ss]]` into seconds.
	"""
	sign = 1
	if text[:1] in ('+', '-'):
		if text[0] == '-':
			sign = -1
		text = text[1:]
	parts = [int(x) for x in text.split(':')]
	parts += [0] * (3 - len(parts))
	return sign * ((parts[0] * 3600) + (parts[1] * 60) + parts[2])

def posix_rule_parameters(text):
	"""
	# Convert a POSIX rule, `Jn`, `n`, or `Mm.w.d` with an optional time, into
	# (month, day, weekday, seconds) parameters of an &zones.AnnualRule.
	"""
	date, _, clock = text.partition('/')
	seconds = posix_seconds(clock) if clock else 2 * 3600

	if date.startswith('M'):
		m, w, d = (int(x) for x in date[1:].split('.'))
		weekday = 7 if d == 0 else d
		if w == 5:
			return (m, -1, weekday, seconds)
		return (m, 1 + ((w - 1) * 7), weekday, seconds)

	if date.startswith('J'):
		# One-based day of a common year; February 29 is never counted.
		n = int(date[1:])
		if n < 1 or n > 365:
			raise FormatError("invalid julian day in TZ rule: " + text)
		month = 1
		for length in gregorian.calendar_year:
			if n <= length:
				break
			n -= length
			month += 1
		return (month, n, None, seconds)

	# Zero-based day of the year counting February 29.
	n = int(date)
	if n > 365:
		raise FormatError("invalid day in TZ rule: " + text)
	return (1, 1, None, (n * 86400) + seconds)

def posix(text):
	"""
	# Parse the POSIX TZ string, &text, into the standard offset and the annual
	# rules of the daylight saving transitions.

	# [ Returns ]
	# A pair, `(standard, rules)`, where `rules` is empty when the string does
	# not describe daylight saving time.
	"""
	match = posix_pattern.fullmatch(text)
	if match is None:
		raise FormatError("invalid TZ string: " + repr(text))

	# POSIX offsets are positive west of Greenwich.
	std = zones.ZoneOffset(-posix_seconds(match.group('stdoff')))
	if match.group('dst') is None:
		return std, ()

	if match.group('dstoff') is not None:
		dst = zones.ZoneOffset(-posix_seconds(match.group('dstoff')))
	else:
		dst = zones.ZoneOffset(std.total_seconds + 3600)
	if dst == std:
		return std, ()

	start, end = match.group('start'), match.group('end')
	if start is None:
		start, end = posix_default_rules

	return std, (
		zones.AnnualRule(*posix_rule_parameters(start), 'wall', std, std, dst),
		zones.AnnualRule(*posix_rule_parameters(end), 'wall', std, dst, std),
	)

def rules(info):
	"""
	# Construct the zone rules of the parsed &tzinfo, &info.
	"""
	from .instant import minimum_second, maximum_second

	if info.ttinfo:
		initial = zones.ZoneOffset(info.ttinfo[0].tt_utoff)
	else:
		initial = None

	transitions = []
	current = initial
	for when, index in zip(info.transitions, info.types):
		offset = zones.ZoneOffset(info.ttinfo[index].tt_utoff)
		if when < minimum_second:
			current = initial = offset
			continue
		if when > maximum_second:
			break
		if offset != current:
			transitions.append(zones.ZoneOffsetTransition(when, current, offset))
		current = offset

	annual = ()
	if info.footer:
		standard, annual = posix(info.footer)
		if initial is None:
			initial = standard

	if initial is None:
		raise FormatError("zone defines no local time types")
	if not transitions and not annual:
		return zones.FixedRules(initial)
	return zones.TransitionRules(initial, transitions, annual)

def load(path):
	"""
	# Read the rules from the TZif file at &path.
	"""
	with open(path, 'rb') as f:
		data = f.read()
	logger.debug("loaded %d bytes of zone data from %r", len(data), path)
	return rules(parse(data))

class Provider(object):
	"""
	# Zone rules provider reading the TZif files of a zoneinfo directory.
	"""
	__slots__ = ('directory',)

	def __init__(self, directory=tzdir):
		self.directory = directory

	def __repr__(self):
		return '%s(%r)' %(self.__class__.__name__, self.directory)

	def path(self, identifier, _join=os.path.join):
		parts = identifier.split('/')
		if '..' in parts or '.' in parts or '' in parts:
			raise core.ZoneNotFound(identifier)
		return _join(self.directory, *parts)

	def rules(self, identifier):
		path = self.path(identifier)
		try:
			return load(path)
		except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
			raise core.ZoneNotFound(identifier) from None
		except FormatError as err:
			raise core.ZoneNotFound(identifier, "invalid zone data for %r: %s" %(identifier, err)) from err

	def identifiers(self, _join=os.path.join):
		"""
		# The identifiers of the TZif files within the directory.
		"""
		found = set()
		prefix = len(self.directory) + 1
		for dirpath, dirnames, filenames in os.walk(self.directory):
			for name in filenames:
				path = _join(dirpath, name)
				try:
					with open(path, 'rb') as f:
						if f.read(4) != magic:
							continue
				except OSError:
					continue
				found.add(path[prefix:].replace(os.sep, '/'))
		logger.debug("found %d zone identifiers in %r", len(found), self.directory)
		return frozenset(found)
