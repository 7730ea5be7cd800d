"""
Default parameters and thresholds for the M/M/c simulator.
"""

# ============================================================================
# SCENARIO DEFAULTS (per-minute rates)
# ============================================================================

DEFAULT_ARRIVAL_RATE = 2.0   # λ, customers/min
DEFAULT_SERVICE_RATE = 0.8   # μ, customers/min per server
DEFAULT_DURATION = 480.0     # 8 hours in minutes

SCENARIO_A_SERVERS = 2       # surge staffing
SCENARIO_B_SERVERS = 4       # proposed staffing

# ============================================================================
# SAMPLER
# ============================================================================

# Consecutive exact-zero uniform draws tolerated before giving up
MAX_ZERO_DRAWS = 100

# ============================================================================
# DATASET PARSING
# ============================================================================

DELIMITER_PATTERN = r"[,;\t]"

IAT_KEYWORDS = ("iat", "inter_arrival", "interarrival", "inter-arrival")
SERVICE_KEYWORDS = ("service", "st", "duration")

DEFAULT_IAT_COLUMN = 0
DEFAULT_SERVICE_COLUMN = 1

# ============================================================================
# STATUS THRESHOLDS
# ============================================================================

WAIT_WARNING_MINUTES = 5.0
WAIT_DANGER_MINUTES = 10.0

UTILIZATION_WARNING_PERCENT = 70.0
UTILIZATION_DANGER_PERCENT = 90.0
