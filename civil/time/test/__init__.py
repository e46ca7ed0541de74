"""
# Tests of the time package.
"""
