"""Node fetcher for cluster controller - lists nodes from the cluster."""

from __future__ import annotations

import logging

from kubeskew.controllers.cluster.fetchers.base_fetcher import KubectlFetcher, RunKubectl
from kubeskew.controllers.cluster.parsers.node_parser import NodeParser
from kubeskew.models.core.node_info import NodeInfo

logger = logging.getLogger(__name__)


class NodeFetcher(KubectlFetcher):
    """Fetches node data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: RunKubectl, parser: NodeParser | None = None) -> None:
        super().__init__(run_kubectl_func)
        self._parser = parser or NodeParser()

    async def fetch_nodes(self) -> list[NodeInfo]:
        """List every node in the cluster.

        Raises:
            ClusterQueryError: If the listing fails.
        """
        output = await self._run_kubectl(self._build_get_args("nodes"))
        nodes = self._parser.parse_nodes(self._decode_items(output, "nodes"))
        logger.debug("Listed %d nodes", len(nodes))
        return nodes
