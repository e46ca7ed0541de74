"""
# Data regarding Earth-based units of time. (The earth day)

# Days are exactly 86,400 seconds; leap seconds are not represented.
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of hours in half of a `day`.
hours_in_half_day = hours_in_day // 2

#: Number of minutes contained in an earth `day`.
minutes_in_day = minutes_in_hour * hours_in_day

#: Number of seconds contained in an `hour`.
seconds_in_hour = seconds_in_minute * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_hour * hours_in_day

#: Number of milliseconds in a second.
millis_in_second = 1_000

#: Number of microseconds in a second.
micros_in_second = 1_000_000

#: Number of nanoseconds in a second.
nanos_in_second = 1_000_000_000

#: Number of nanoseconds in a millisecond.
nanos_in_milli = 1_000_000

#: Number of nanoseconds in a microsecond.
nanos_in_micro = 1_000

#: Number of nanoseconds in a minute.
nanos_in_minute = nanos_in_second * seconds_in_minute

#: Number of nanoseconds in an hour.
nanos_in_hour = nanos_in_minute * minutes_in_hour

#: Number of nanoseconds in an earth `day`.
nanos_in_day = nanos_in_hour * hours_in_day

#: Number of microseconds in an earth `day`.
micros_in_day = micros_in_second * seconds_in_day

#: Number of milliseconds in an earth `day`.
millis_in_day = millis_in_second * seconds_in_day

#: Number of seconds in an average gregorian year; 365.2425 days.
seconds_in_year = 31_556_952

#: Number of a days in four Julian years. (365.25 days)
days_in_four_annum = 1461
