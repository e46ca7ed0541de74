"""
# Function and data structure tools used by the project's packages.
"""
import functools
import dataclasses

cachedcalls = functools.lru_cache
partial = functools.partial

# Create the dataclass constructors commonly used by the project.
record = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

# Records whose natural order is the order of their fields.
ordered = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True, order=True)
