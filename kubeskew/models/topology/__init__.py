"""Topology skew result models."""

from kubeskew.models.topology.topology_info import (
    TopologyRow,
    TopologyTable,
    TopologyTables,
)

__all__ = ["TopologyRow", "TopologyTable", "TopologyTables"]
