"""Pod fetcher for cluster controller - lists running pods by label selector."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from kubeskew.controllers.cluster.fetchers.base_fetcher import KubectlFetcher, RunKubectl
from kubeskew.controllers.cluster.parsers.pod_parser import PodParser
from kubeskew.models.core.pod_info import PodInfo
from kubeskew.models.errors import ClusterQueryError

logger = logging.getLogger(__name__)


class PodFetcher(KubectlFetcher):
    """Fetches pod data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: RunKubectl, parser: PodParser | None = None) -> None:
        super().__init__(run_kubectl_func)
        self._parser = parser or PodParser()

    async def fetch_pods(self, selector: str, namespace: str | None) -> list[PodInfo]:
        """List pods matching ``selector`` in ``namespace``.

        An empty selector lists every pod in the namespace.
        """
        args = self._build_get_args("pods", namespace=namespace, selector=selector)
        try:
            output = await self._run_kubectl(args)
            items = self._decode_items(output, "pods")
        except ClusterQueryError as exc:
            raise ClusterQueryError(
                f"failed to list pods (namespace={namespace or 'default'}, "
                f"selector={selector!r}): {exc}"
            ) from exc
        return self._parser.parse_pods(items)

    async def fetch_running(
        self, selectors: Sequence[str], namespace: str | None
    ) -> list[PodInfo]:
        """List pods for every selector concurrently and keep running ones.

        All listings must succeed; the first failure propagates and no partial
        result is returned.
        """
        batches = await asyncio.gather(
            *(self.fetch_pods(selector, namespace) for selector in selectors)
        )
        pods = [pod for batch in batches for pod in batch]
        running = [pod for pod in pods if pod.is_running]
        logger.debug(
            "Fetched %d pods (%d running) for selectors %s",
            len(pods),
            len(running),
            list(selectors),
        )
        return running
