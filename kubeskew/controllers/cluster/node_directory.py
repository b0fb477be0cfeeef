"""Point-in-time snapshot of cluster nodes.

The directory is built from a single node listing at the start of an
invocation and is read-only afterwards. Lookups never reach the cluster: a
pod bound to a node missing from the snapshot is simply not resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from kubeskew.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from kubeskew.models.core.node_info import NodeInfo

logger = logging.getLogger(__name__)


class NodeDirectory:
    """Immutable name -> node snapshot with topology lookups."""

    def __init__(self, nodes: Iterable[NodeInfo]) -> None:
        self._nodes: Mapping[str, NodeInfo] = MappingProxyType(
            {node.name: node for node in nodes}
        )

    @classmethod
    async def initialize(cls, node_fetcher: NodeFetcher) -> NodeDirectory:
        """List all nodes once and build the snapshot.

        Raises:
            ClusterQueryError: If the node listing fails.
        """
        nodes = await node_fetcher.fetch_nodes()
        directory = cls(nodes)
        logger.debug("Node directory initialized with %d nodes", len(directory))
        return directory

    def get(self, name: str) -> NodeInfo | None:
        return self._nodes.get(name)

    def domains(self, topology_key: str) -> set[str]:
        """Distinct values of ``topology_key`` across the snapshot.

        Nodes without the label are skipped.
        """
        return {
            value
            for node in self._nodes.values()
            if (value := node.domain(topology_key)) is not None
        }

    def list(self, label_filter: Mapping[str, str] | None = None) -> list[NodeInfo]:
        """Nodes whose labels contain every ``label_filter`` entry.

        An empty filter matches all nodes. Results are ordered by node name.
        """
        label_filter = dict(label_filter or {})
        return [
            node
            for _, node in sorted(self._nodes.items())
            if node.matches_labels(label_filter)
        ]

    def __len__(self) -> int:
        return len(self._nodes)
