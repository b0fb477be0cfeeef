"""All enum definitions for the CLI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================

class NodeStatus(Enum):
    """Node status values from Kubernetes API."""

    READY = "Ready"
    NOT_READY = "NotReady"
    UNKNOWN = "Unknown"


class PodPhase(Enum):
    """Pod phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Output Enums
# =============================================================================

class OutputFormat(str, Enum):
    """Supported output formats for rendered topology tables."""

    TEXT = "text"
    YAML = "yaml"
    JSON = "json"
    TREE = "tree"

    def __str__(self) -> str:
        return self.value
