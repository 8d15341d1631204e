SAMPLE_SEED = 0
MAX_SAMPLE_TIME_MS = 3000
# keys are generated as `value // DUPLICATE_KEY_DIVISOR` so that equal keys show up
DUPLICATE_KEY_DIVISOR = 2
STATISTICS_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))

__all__ = ["SAMPLE_SEED", "MAX_SAMPLE_TIME_MS", "DUPLICATE_KEY_DIVISOR", "STATISTICS_NS"]
