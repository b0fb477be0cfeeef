"""Shared fixtures: raw cluster objects and a fake kubectl runner."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from kubeskew.models.errors import ClusterQueryError

ZONE = "topology.kubernetes.io/zone"
REGION = "topology.kubernetes.io/region"


def _node(
    name: str,
    zone: str | None = None,
    *,
    ready: str = "True",
    labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    node_labels = {"kubernetes.io/hostname": name, "kubernetes.io/os": "linux"}
    if zone is not None:
        node_labels[ZONE] = zone
        node_labels[REGION] = zone.rsplit("-", 1)[0]
    node_labels.update(labels or {})
    return {
        "apiVersion": "v1",
        "kind": "Node",
        "metadata": {"name": name, "labels": node_labels},
        "status": {"conditions": [{"type": "Ready", "status": ready}]},
    }


def _pod(
    name: str,
    node_name: str | None,
    *,
    phase: str | None = "Running",
    labels: dict[str, str] | None = None,
    namespace: str = "default",
) -> dict[str, Any]:
    pod: dict[str, Any] = {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"name": name, "namespace": namespace, "labels": labels or {}},
        "spec": {},
    }
    if node_name is not None:
        pod["spec"]["nodeName"] = node_name
    if phase is not None:
        pod["status"] = {"phase": phase}
    return pod


def _workload(
    kind: str,
    name: str,
    match_labels: dict[str, str] | None,
    *,
    api_version: str = "apps/v1",
    namespace: str = "default",
) -> dict[str, Any]:
    spec: dict[str, Any] = {}
    if match_labels is not None:
        spec["selector"] = {"matchLabels": match_labels}
    return {
        "apiVersion": api_version,
        "kind": kind,
        "metadata": {"name": name, "namespace": namespace},
        "spec": spec,
    }


@pytest.fixture
def make_node() -> Callable[..., dict[str, Any]]:
    return _node


@pytest.fixture
def make_pod() -> Callable[..., dict[str, Any]]:
    return _pod


@pytest.fixture
def make_workload() -> Callable[..., dict[str, Any]]:
    return _workload


class FakeKubectl:
    """Async stand-in for ``ClusterController._run_kubectl``.

    Serves ``kubectl get <resource> [NAME] [-n NS] [-l SEL] -o json`` from
    in-memory objects and records every call.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.objects: dict[str, list[dict[str, Any]]] = {}
        self.failures: dict[str, str] = {}

    def add(self, resource: str, *items: dict[str, Any]) -> FakeKubectl:
        self.objects.setdefault(resource, []).extend(items)
        return self

    def fail(self, resource: str, message: str = "connection refused") -> FakeKubectl:
        self.failures[resource] = message
        return self

    def count(self, resource: str) -> int:
        return sum(1 for args in self.calls if args[1] == resource)

    @staticmethod
    def _option(args: tuple[str, ...], flag: str) -> str | None:
        if flag in args:
            return args[args.index(flag) + 1]
        return None

    @staticmethod
    def _matches(obj: dict[str, Any], selector: str | None) -> bool:
        if not selector:
            return True
        labels = obj.get("metadata", {}).get("labels", {})
        for pair in selector.split(","):
            key, _, value = pair.partition("=")
            if labels.get(key) != value:
                return False
        return True

    async def __call__(self, args: tuple[str, ...]) -> str:
        self.calls.append(args)
        resource = args[1]
        if resource in self.failures:
            raise ClusterQueryError(self.failures[resource])

        namespace = self._option(args, "-n")
        selector = self._option(args, "-l")
        items = [
            obj
            for obj in self.objects.get(resource, [])
            if (namespace is None or obj["metadata"].get("namespace") in (None, namespace))
            and self._matches(obj, selector)
        ]

        name = args[2] if len(args) > 2 and not args[2].startswith("-") else None
        if name is not None:
            for obj in items:
                if obj["metadata"]["name"] == name:
                    return json.dumps(obj)
            raise ClusterQueryError(
                f'Error from server (NotFound): {resource} "{name}" not found'
            )
        return json.dumps({"apiVersion": "v1", "kind": "List", "items": items})


@pytest.fixture
def fake_kubectl() -> FakeKubectl:
    return FakeKubectl()


@pytest.fixture
def cluster_nodes() -> list[dict[str, Any]]:
    """Two nodes in zone a, one each in b and c, and one without a zone label."""
    return [
        _node("node-a1", "asia-northeast1-a"),
        _node("node-a2", "asia-northeast1-a"),
        _node("node-b1", "asia-northeast1-b"),
        _node("node-c1", "asia-northeast1-c"),
        _node("node-x1", None),
    ]
