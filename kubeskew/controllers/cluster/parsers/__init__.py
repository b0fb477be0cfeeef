"""Parsers for raw cluster objects."""

from kubeskew.controllers.cluster.parsers.node_parser import NodeParser
from kubeskew.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
