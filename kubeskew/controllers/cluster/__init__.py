"""Init file for cluster module."""

from kubeskew.controllers.cluster.domain_resolver import DomainResolver
from kubeskew.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from kubeskew.controllers.cluster.node_directory import NodeDirectory
from kubeskew.controllers.cluster.parsers import NodeParser, PodParser

__all__ = [
    "DomainResolver",
    "NodeDirectory",
    "NodeFetcher",
    "NodeParser",
    "PodFetcher",
    "PodParser",
]
