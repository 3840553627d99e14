"""
settings.py

Default configuration values shared across huffcodec.
"""


# Code given to the only symbol of a one-symbol alphabet. Must be non-empty.
SINGLE_SYMBOL_CODE = "0"

# Complexity experiment defaults.
BENCHMARK_SIZES = (100, 1000, 10000)
BENCHMARK_ALPHABET = "ABCD"
BENCHMARK_REPEATS = 5
SEED = 1234

# How often progress steps are printed by the logger.
MERGE_STEP_INTERVAL_COUNT = 100
CODING_STEP_INTERVAL_COUNT = 100
