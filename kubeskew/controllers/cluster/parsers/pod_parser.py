"""Pod parser for cluster controller - parses raw pod objects into PodInfo."""

from __future__ import annotations

from typing import Any

from kubeskew.models.core.pod_info import PodInfo


class PodParser:
    """Parses pod data into structured formats."""

    def parse_pod(self, pod: dict[str, Any]) -> PodInfo:
        """Parse a single pod into PodInfo.

        Pods without a status carry ``phase=None`` and never count as running.
        """
        metadata = pod.get("metadata") or {}
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}

        return PodInfo(
            name=metadata.get("name", "Unknown"),
            namespace=metadata.get("namespace", ""),
            phase=status.get("phase"),
            node_name=spec.get("nodeName") or None,
        )

    def parse_pods(self, items: list[dict[str, Any]]) -> list[PodInfo]:
        return [self.parse_pod(item) for item in items]
