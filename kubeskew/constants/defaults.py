"""Default values for settings.

All default values used in the AppSettings model and the command line parser.
"""

from typing import Final

# ============================================================================
# Topology defaults
# ============================================================================

ZONE_LABEL: Final = "topology.kubernetes.io/zone"
TOPOLOGY_KEY_DEFAULT: Final = ZONE_LABEL

# ============================================================================
# Output defaults
# ============================================================================

OUTPUT_FORMAT_DEFAULT: Final = "text"
NO_RESOURCES_MESSAGE: Final = "No resources found."

# ============================================================================
# Runtime defaults
# ============================================================================

MAX_CONCURRENT_DEFAULT: Final = 4
LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_LEVEL_ENV_VAR: Final = "KUBESKEW_LOG_LEVEL"

__all__ = [
    "LOG_LEVEL_DEFAULT",
    "LOG_LEVEL_ENV_VAR",
    "MAX_CONCURRENT_DEFAULT",
    "NO_RESOURCES_MESSAGE",
    "OUTPUT_FORMAT_DEFAULT",
    "TOPOLOGY_KEY_DEFAULT",
    "ZONE_LABEL",
]
