"""Application-wide constants."""

# Service identification
SERVICE_NAME = "cargo-atc"
SERVICE_VERSION = "0.1.0"

# DynamoDB key prefixes
PARTITION_KEY_FLIGHT_PLAN = "FLIGHT_PLAN#"
SORT_KEY_METADATA = "METADATA"
STATUS_INDEX_NAME = "gsi1-status-created"

# Plan document schema
PLAN_FILE_TYPE = "Plan"
PLAN_VERSION = 1
MISSION_VERSION = 2
GEOFENCE_VERSION = 2
RALLY_POINTS_VERSION = 2
DEFAULT_GROUND_STATION = "AethericRealm"
GLOBAL_PLAN_ALTITUDE_MODE = 1

# Mission item defaults
SIMPLE_ITEM_TYPE = "SimpleItem"
MISSION_ITEM_PARAM_COUNT = 7
DEFAULT_ALTITUDE_MODE = 1
GRIPPER_INSTANCE = 1
WINCH_INSTANCE = 1
DEFAULT_GENTLE_DROPOFF_DESCENT_METERS = 10.0

# Limits
MAX_FLIGHT_PLAN_PAGE_SIZE = 100
# Jump IDs are u16 on the wire.
MAX_MISSION_ITEMS = 65535
