"""Fetchers for cluster objects."""

from kubeskew.controllers.cluster.fetchers.base_fetcher import KubectlFetcher, RunKubectl
from kubeskew.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from kubeskew.controllers.cluster.fetchers.pod_fetcher import PodFetcher

__all__ = ["KubectlFetcher", "NodeFetcher", "PodFetcher", "RunKubectl"]
