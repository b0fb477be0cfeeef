"""Constants module for kubectl-topology-skew.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- timeouts.py: Timeout values for kubectl
- defaults.py: Default values for settings
"""

from kubeskew.constants.defaults import (
    MAX_CONCURRENT_DEFAULT,
    NO_RESOURCES_MESSAGE,
    OUTPUT_FORMAT_DEFAULT,
    TOPOLOGY_KEY_DEFAULT,
    ZONE_LABEL,
)
from kubeskew.constants.enums import (
    NodeStatus,
    OutputFormat,
    PodPhase,
)
from kubeskew.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

__all__ = [
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    # Defaults
    "MAX_CONCURRENT_DEFAULT",
    "NO_RESOURCES_MESSAGE",
    "OUTPUT_FORMAT_DEFAULT",
    "TOPOLOGY_KEY_DEFAULT",
    "ZONE_LABEL",
    # Enums
    "NodeStatus",
    "OutputFormat",
    "PodPhase",
]
