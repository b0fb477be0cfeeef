"""Shared kubectl plumbing for cluster fetchers."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kubeskew.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubeskew.models.errors import ClusterQueryError

logger = logging.getLogger(__name__)

RunKubectl = Callable[[tuple[str, ...]], Awaitable[str]]


class KubectlFetcher:
    """Base class for fetchers that read JSON from kubectl."""

    _REQUEST_TIMEOUT = CLUSTER_REQUEST_TIMEOUT

    def __init__(self, run_kubectl_func: RunKubectl) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    def _build_get_args(
        self,
        resource: str,
        *,
        name: str | None = None,
        namespace: str | None = None,
        selector: str | None = None,
    ) -> tuple[str, ...]:
        """Build ``kubectl get`` arguments requesting JSON output."""
        args: list[str] = ["get", resource]
        if name:
            args.append(name)
        if namespace:
            args.extend(["-n", namespace])
        if selector:
            args.extend(["-l", selector])
        args.extend(["-o", "json", f"--request-timeout={self._REQUEST_TIMEOUT}"])
        return tuple(args)

    @staticmethod
    def _decode(output: str, what: str) -> dict[str, Any]:
        """Decode kubectl JSON output into a dict."""
        if not output.strip():
            return {}
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ClusterQueryError(f"malformed response while listing {what}: {exc}") from exc
        if not isinstance(data, dict):
            raise ClusterQueryError(f"unexpected response while listing {what}")
        return data

    @classmethod
    def _decode_items(cls, output: str, what: str) -> list[dict[str, Any]]:
        """Decode a kubectl ``List`` response and return its items."""
        items = cls._decode(output, what).get("items") or []
        return [item for item in items if isinstance(item, dict)]
