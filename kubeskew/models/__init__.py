"""Data models for kubectl-topology-skew."""

from kubeskew.models.core import NodeInfo, PodInfo, WorkloadSelector
from kubeskew.models.errors import (
    ClusterQueryError,
    NoMatchError,
    SelectorParseError,
    TopologySkewError,
)
from kubeskew.models.topology import TopologyRow, TopologyTable, TopologyTables

__all__ = [
    "ClusterQueryError",
    "NoMatchError",
    "NodeInfo",
    "PodInfo",
    "SelectorParseError",
    "TopologyRow",
    "TopologyTable",
    "TopologyTables",
    "TopologySkewError",
    "WorkloadSelector",
]
