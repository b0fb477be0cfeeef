"""Maps pods to the failure domains of the nodes they run on."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kubeskew.controllers.cluster.node_directory import NodeDirectory
from kubeskew.models.core.node_info import NodeInfo
from kubeskew.models.core.pod_info import PodInfo

logger = logging.getLogger(__name__)


class DomainResolver:
    """Resolves pods to ready nodes and nodes to topology domain values."""

    def __init__(self, node_directory: NodeDirectory) -> None:
        self._directory = node_directory

    def resolve_nodes(self, pods: Iterable[PodInfo]) -> list[NodeInfo]:
        """Return the ready node of each bound pod.

        One entry per pod, so pods sharing a node yield that node repeatedly.
        Unscheduled pods, pods on nodes missing from the snapshot and pods on
        not-ready nodes are dropped.
        """
        nodes: list[NodeInfo] = []
        for pod in pods:
            if not pod.node_name:
                continue
            node = self._directory.get(pod.node_name)
            if node is None:
                logger.warning(
                    "Pod %s/%s is bound to unknown node %s; skipping",
                    pod.namespace,
                    pod.name,
                    pod.node_name,
                )
                continue
            if not node.is_ready:
                logger.debug("Node %s is not ready; skipping pod %s", node.name, pod.name)
                continue
            nodes.append(node)
        return nodes

    def spreading_status(
        self, nodes: Iterable[NodeInfo], topology_key: str
    ) -> tuple[list[str], set[str]]:
        """Return observed domain values of ``nodes`` and all known domains.

        Nodes lacking ``topology_key`` contribute no value.
        """
        observed = [
            value for node in nodes if (value := node.domain(topology_key)) is not None
        ]
        return observed, self._directory.domains(topology_key)

    def resolve(
        self, pods: Iterable[PodInfo], topology_key: str
    ) -> tuple[list[str], set[str]]:
        return self.spreading_status(self.resolve_nodes(pods), topology_key)
