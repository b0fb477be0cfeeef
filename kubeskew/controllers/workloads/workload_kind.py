"""Selector derivation per workload kind.

Each kind knows how to list its objects, how to turn an object's own
``spec.selector.matchLabels`` into a pod selector string, and how to name the
object as ``<apiVersion>/<kind>/<name>``.
"""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Iterable
from typing import Any, ClassVar

from kubeskew.controllers.cluster.fetchers.base_fetcher import KubectlFetcher
from kubeskew.models.core.workload_info import WorkloadSelector
from kubeskew.models.errors import ClusterQueryError, SelectorParseError
from kubeskew.utils.selector_parser import labels_to_selector

logger = logging.getLogger(__name__)


class WorkloadKind(KubectlFetcher, ABC):
    """Capability interface implemented once per workload kind."""

    resource: ClassVar[str]
    api_version: ClassVar[str]
    kind: ClassVar[str]

    async def list_objects(
        self,
        name: str | None = None,
        namespace: str | None = None,
        selector: str | None = None,
    ) -> list[dict[str, Any]]:
        """Get one object by name, or list objects matching ``selector``.

        Raises:
            ClusterQueryError: If kubectl fails, including a name not found.
        """
        if name:
            args = self._build_get_args(self.resource, name=name, namespace=namespace)
        else:
            args = self._build_get_args(self.resource, namespace=namespace, selector=selector)

        try:
            output = await self._run_kubectl(args)
        except ClusterQueryError as exc:
            target = f"{self.resource}/{name}" if name else self.resource
            raise ClusterQueryError(f"failed to get {target}: {exc}") from exc

        data = self._decode(output, self.resource)
        if name:
            return [data] if data else []
        items = data.get("items") or []
        logger.debug("Listed %d %s", len(items), self.resource)
        return [item for item in items if isinstance(item, dict)]

    def identity(self, obj: dict[str, Any]) -> str:
        name = (obj.get("metadata") or {}).get("name", "")
        return f"{self.api_version}/{self.kind.lower()}/{name}"

    def match_label_selector(self, obj: dict[str, Any]) -> str:
        """Render ``spec.selector.matchLabels`` as ``k=v,...`` in key order.

        Raises:
            SelectorParseError: If the object has no selector or no matchLabels.
        """
        selector = (obj.get("spec") or {}).get("selector")
        if not isinstance(selector, dict):
            raise SelectorParseError(f"No found label selector: {self.identity(obj)}")
        match_labels = selector.get("matchLabels")
        if not isinstance(match_labels, dict):
            raise SelectorParseError(f"No found selector: {self.identity(obj)}")
        return labels_to_selector({str(k): str(v) for k, v in match_labels.items()})

    def workload_selector(self, obj: dict[str, Any]) -> WorkloadSelector:
        return WorkloadSelector(
            identity=self.identity(obj), selector=self.match_label_selector(obj)
        )

    def labels_set_by(self, objects: Iterable[dict[str, Any]]) -> dict[str, str]:
        """Build the identity -> selector mapping for ``objects``."""
        mapping: dict[str, str] = {}
        for obj in objects:
            workload = self.workload_selector(obj)
            mapping[workload.identity] = workload.selector
        return mapping
