"""Exception types raised by the topology aggregation pipeline."""


class TopologySkewError(Exception):
    """Base exception for all topology skew failures."""


class ClusterQueryError(TopologySkewError):
    """Raised when the cluster API cannot be queried or answers with garbage."""


class NoMatchError(TopologySkewError):
    """Raised when a selector resolves to no running, node-bound, ready pods."""


class SelectorParseError(TopologySkewError, ValueError):
    """Raised when a label selector is malformed or missing."""
