"""Core cluster object models."""

from kubeskew.models.core.node_info import NodeInfo
from kubeskew.models.core.pod_info import PodInfo
from kubeskew.models.core.workload_info import WorkloadSelector

__all__ = ["NodeInfo", "PodInfo", "WorkloadSelector"]
