RUNS = 11

SMALL_ARRAY_LENGTH = 100_000
MID_ARRAY_LENGTH = 1_000_000
BIG_ARRAY_LENGTH = 10_000_000

# Counting sort cost grows with the value span, keep it bounded for benchmarks
VALUE_LOW = -(2 ** 15)
VALUE_HIGH = 2 ** 15

ROTATION_DISTANCE = 12_345
RANDOM_SEED = 42

DEFAULT_DTYPE = "int32"
SUPPORTED_DTYPES = ("int8", "int16", "int32", "int64", "bool")
