"""Controllers module for kubectl-topology-skew.

This module provides the controllers that query the cluster and aggregate
topology skew tables.
"""

from __future__ import annotations

from kubeskew.controllers.cluster.controller import ClusterController
from kubeskew.controllers.cluster.node_directory import NodeDirectory
from kubeskew.controllers.workloads import WorkloadKind

__all__ = [
    "ClusterController",
    "NodeDirectory",
    "WorkloadKind",
]
