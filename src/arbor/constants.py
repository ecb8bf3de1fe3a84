"""Constants shared by the arbor package."""

# CSV driver
CSV_FIELD_COUNT = 3
LABEL_PRECISION = 3
KILOMETRE_DIVISOR = 1000.0

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

# Spanning forest
MST_OPERATION = "minimum_spanning_forest"
# Resident memory is sampled once every this many queue pops
MEMORY_SAMPLE_INTERVAL = 64
