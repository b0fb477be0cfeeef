"""Concrete workload kinds."""

from __future__ import annotations

from kubeskew.controllers.workloads.workload_kind import WorkloadKind


class DeploymentKind(WorkloadKind):
    resource = "deployments"
    api_version = "apps/v1"
    kind = "Deployment"


class StatefulSetKind(WorkloadKind):
    resource = "statefulsets"
    api_version = "apps/v1"
    kind = "StatefulSet"


class DaemonSetKind(WorkloadKind):
    resource = "daemonsets"
    api_version = "apps/v1"
    kind = "DaemonSet"


class JobKind(WorkloadKind):
    resource = "jobs"
    api_version = "batch/v1"
    kind = "Job"


WORKLOAD_KINDS: dict[str, type[WorkloadKind]] = {
    "deployment": DeploymentKind,
    "statefulset": StatefulSetKind,
    "daemonset": DaemonSetKind,
    "job": JobKind,
}
