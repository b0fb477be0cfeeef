"""Node parser for cluster controller - parses raw node objects into NodeInfo."""

from __future__ import annotations

from typing import Any

from kubeskew.constants.enums import NodeStatus
from kubeskew.models.core.node_info import NodeInfo


class NodeParser:
    """Parses node data into structured formats."""

    _READY_CONDITION = "Ready"

    def __init__(self) -> None:
        """Initialize node parser."""
        pass

    @staticmethod
    def _parse_conditions(status: dict[str, Any]) -> dict[str, str]:
        """Map condition type to its status string."""
        return {
            c["type"]: c["status"]
            for c in status.get("conditions") or []
            if "type" in c and "status" in c
        }

    def parse_node(self, node: dict[str, Any]) -> NodeInfo:
        """Parse a single node into NodeInfo.

        Args:
            node: Raw node dictionary from ``kubectl get nodes -o json``

        Returns:
            NodeInfo object.
        """
        metadata = node.get("metadata") or {}
        status = node.get("status") or {}
        labels = {str(k): str(v) for k, v in (metadata.get("labels") or {}).items()}

        conditions = self._parse_conditions(status)
        ready_status = conditions.get(self._READY_CONDITION)
        is_ready = ready_status == "True"
        if is_ready:
            node_status = NodeStatus.READY
        elif ready_status is None or ready_status == "Unknown":
            node_status = NodeStatus.UNKNOWN
        else:
            node_status = NodeStatus.NOT_READY

        return NodeInfo(
            name=metadata.get("name", "Unknown"),
            labels=labels,
            status=node_status,
            is_ready=is_ready,
        )

    def parse_nodes(self, items: list[dict[str, Any]]) -> list[NodeInfo]:
        """Parse a list of raw nodes."""
        return [self.parse_node(item) for item in items]
