"""Cluster controller for topology skew queries.

This module is the orchestrator of the aggregation pipeline. It owns the
kubectl runner and, per invocation, one NodeDirectory snapshot shared
read-only by every entry it processes:

    selectors -> PodFetcher -> DomainResolver -> calculate_skew -> TopologyTables
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from collections.abc import Mapping

from kubeskew.constants.defaults import MAX_CONCURRENT_DEFAULT, TOPOLOGY_KEY_DEFAULT
from kubeskew.constants.timeouts import KUBECTL_COMMAND_TIMEOUT
from kubeskew.controllers.cluster.domain_resolver import DomainResolver
from kubeskew.controllers.cluster.fetchers import NodeFetcher, PodFetcher, RunKubectl
from kubeskew.controllers.cluster.node_directory import NodeDirectory
from kubeskew.controllers.workloads import WORKLOAD_KINDS, WorkloadKind
from kubeskew.models.errors import ClusterQueryError, NoMatchError
from kubeskew.models.topology import TopologyTable, TopologyTables
from kubeskew.utils.skew_calculator import calculate_skew

logger = logging.getLogger(__name__)


class ClusterController:
    """Topology skew queries against one cluster.

    Delegates to specialized collaborators:
    - NodeFetcher / NodeDirectory: node snapshot
    - PodFetcher: running pods per selector
    - DomainResolver: pod -> node -> domain value
    - WorkloadKind: selector derivation per workload kind
    """

    def __init__(
        self,
        context: str | None = None,
        cluster: str | None = None,
        user: str | None = None,
        *,
        max_concurrent: int = MAX_CONCURRENT_DEFAULT,
        run_kubectl_func: RunKubectl | None = None,
    ) -> None:
        self.context = context
        self.cluster = cluster
        self.user = user
        self.max_concurrent = max(1, max_concurrent)

        run_kubectl = run_kubectl_func or self._run_kubectl
        self._node_fetcher = NodeFetcher(run_kubectl)
        self._pod_fetcher = PodFetcher(run_kubectl)
        self._workload_kinds: dict[str, WorkloadKind] = {
            name: kind_cls(run_kubectl) for name, kind_cls in WORKLOAD_KINDS.items()
        }

    # =========================================================================
    # kubectl
    # =========================================================================

    def _kubectl_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        if self.cluster:
            cmd.extend(["--cluster", self.cluster])
        if self.user:
            cmd.extend(["--user", self.user])
        cmd.extend(args)
        return cmd

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._kubectl_command(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        except FileNotFoundError as exc:
            raise ClusterQueryError("kubectl executable not found in PATH") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClusterQueryError(
                f"kubectl timed out after {timeout}s: {' '.join(args)}"
            ) from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ClusterQueryError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    # =========================================================================
    # Aggregation
    # =========================================================================

    async def initialize_node_directory(self) -> NodeDirectory:
        return await NodeDirectory.initialize(self._node_fetcher)

    async def _topology_table(
        self,
        name: str,
        selector: str,
        namespace: str | None,
        topology_key: str,
        use_header: bool,
        resolver: DomainResolver,
    ) -> TopologyTable:
        """Fetch, resolve and count one named selector."""
        pods = await self._pod_fetcher.fetch_running([selector], namespace)
        nodes = resolver.resolve_nodes(pods)
        if not nodes:
            target = name or f"selector {selector!r}"
            raise NoMatchError(f"no objects found: {target}")

        values, domains = resolver.spreading_status(nodes, topology_key)
        rows = calculate_skew(values, domains)
        logger.debug("%s: %d pods over %d domains", name or selector, len(values), len(rows))
        return TopologyTable(header=name if use_header else None, rows=rows)

    async def aggregate(
        self,
        named_selectors: Mapping[str, str],
        namespace: str | None,
        topology_key: str = TOPOLOGY_KEY_DEFAULT,
        use_header: bool = True,
    ) -> TopologyTables:
        """Compute a topology table for every named selector.

        One node listing serves every entry. Entries run concurrently and the
        first failure cancels the entries still pending. The error of the
        first failed entry in name order is raised and no partial result is
        returned.

        Raises:
            ClusterQueryError: If a node or pod listing fails.
            NoMatchError: If an entry resolves to no running, ready, bound pod.
        """
        directory = await self.initialize_node_directory()
        resolver = DomainResolver(directory)
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def _process(name: str, selector: str) -> TopologyTable:
            async with semaphore:
                return await self._topology_table(
                    name, selector, namespace, topology_key, use_header, resolver
                )

        entries = sorted(named_selectors.items())
        tasks: list[asyncio.Task[TopologyTable]] = []
        try:
            async with asyncio.TaskGroup() as group:
                for name, selector in entries:
                    tasks.append(group.create_task(_process(name, selector)))
        except ExceptionGroup:
            for task in tasks:
                if not task.cancelled() and (error := task.exception()) is not None:
                    raise error from None
            raise

        tables = TopologyTables()
        for task in tasks:
            tables.insert(task.result())
        logger.info("Aggregated %d topology tables from %d entries", len(tables), len(entries))
        return tables

    # =========================================================================
    # Queries
    # =========================================================================

    async def pod_topology(
        self,
        namespace: str | None,
        selector: str = "",
        topology_key: str = TOPOLOGY_KEY_DEFAULT,
    ) -> TopologyTables:
        """Spread of pods matching ``selector`` as one headerless table."""
        return await self.aggregate({"": selector}, namespace, topology_key, use_header=False)

    async def node_topology(
        self,
        label_filter: Mapping[str, str] | None = None,
        topology_key: str = TOPOLOGY_KEY_DEFAULT,
    ) -> TopologyTables:
        """Spread of ready nodes matching ``label_filter``.

        Raises:
            NoMatchError: If no ready node matches.
        """
        directory = await self.initialize_node_directory()
        nodes = [node for node in directory.list(label_filter) if node.is_ready]
        if not nodes:
            raise NoMatchError("no nodes found")

        values, domains = DomainResolver(directory).spreading_status(nodes, topology_key)
        return TopologyTables([TopologyTable(rows=calculate_skew(values, domains))])

    async def workload_topology(
        self,
        kind: str,
        name: str | None = None,
        namespace: str | None = None,
        selector: str | None = None,
        topology_key: str = TOPOLOGY_KEY_DEFAULT,
    ) -> TopologyTables:
        """Spread of each workload of ``kind``.

        Tables carry the workload identity as header unless a single workload
        was requested by name.

        Raises:
            NoMatchError: If no workload of ``kind`` matches.
        """
        workload_kind = self._workload_kinds[kind]
        objects = await workload_kind.list_objects(name, namespace, selector)
        if not objects:
            raise NoMatchError(f"No found {workload_kind.resource}")

        labels_map = workload_kind.labels_set_by(objects)
        return await self.aggregate(labels_map, namespace, topology_key, use_header=name is None)

    async def all_topology(
        self,
        namespace: str | None = None,
        selector: str | None = None,
        topology_key: str = TOPOLOGY_KEY_DEFAULT,
    ) -> TopologyTables:
        """Spread of every deployment, statefulset, job and daemonset.

        Returns an empty result set when the namespace holds no workloads.
        """
        kinds = list(self._workload_kinds.values())
        object_lists = await asyncio.gather(
            *(kind.list_objects(None, namespace, selector) for kind in kinds)
        )

        labels_map: dict[str, str] = {}
        for kind, objects in zip(kinds, object_lists):
            labels_map.update(kind.labels_set_by(objects))

        if not labels_map:
            logger.info("No workloads found in namespace %s", namespace or "default")
            return TopologyTables()
        return await self.aggregate(labels_map, namespace, topology_key, use_header=True)
