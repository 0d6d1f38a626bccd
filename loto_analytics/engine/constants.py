"""Lotofácil domain constants and fixed lookup tables."""

NUMBER_MIN = 1
NUMBER_MAX = 25
PICK_COUNT = 15

ALL_NUMBERS = tuple(range(NUMBER_MIN, NUMBER_MAX + 1))

PRIMES = frozenset({2, 3, 5, 7, 11, 13, 17, 19, 23})
FIBONACCI = frozenset({1, 2, 3, 5, 8, 13, 21})

# Alert thresholds
LONG_CYCLE_THRESHOLD = 4       # open cycle length, in draws
CRITICAL_DELAY_THRESHOLD = 10  # draws since last appearance
SUM_LOWER_BOUND = 160
SUM_UPPER_BOUND = 240
