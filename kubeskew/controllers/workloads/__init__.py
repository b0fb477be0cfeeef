"""Workload kinds and their selector derivation."""

from kubeskew.controllers.workloads.kinds import (
    WORKLOAD_KINDS,
    DaemonSetKind,
    DeploymentKind,
    JobKind,
    StatefulSetKind,
)
from kubeskew.controllers.workloads.workload_kind import WorkloadKind

__all__ = [
    "WORKLOAD_KINDS",
    "DaemonSetKind",
    "DeploymentKind",
    "JobKind",
    "StatefulSetKind",
    "WorkloadKind",
]
