"""Tests for node parser."""

from __future__ import annotations

import pytest

from kubeskew.constants.enums import NodeStatus
from kubeskew.controllers.cluster.parsers.node_parser import NodeParser


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    def test_parse_node(self, parser: NodeParser, make_node) -> None:
        """Test parse_node creates NodeInfo with labels and readiness."""
        result = parser.parse_node(make_node("node-a1", "us-east-1a"))

        assert result.name == "node-a1"
        assert result.labels["topology.kubernetes.io/zone"] == "us-east-1a"
        assert result.labels["topology.kubernetes.io/region"] == "us-east"
        assert result.is_ready is True
        assert result.status == NodeStatus.READY

    def test_parse_node_not_ready(self, parser: NodeParser, make_node) -> None:
        result = parser.parse_node(make_node("node-a1", "us-east-1a", ready="False"))

        assert result.is_ready is False
        assert result.status == NodeStatus.NOT_READY

    def test_parse_node_unknown_ready(self, parser: NodeParser, make_node) -> None:
        result = parser.parse_node(make_node("node-a1", "us-east-1a", ready="Unknown"))

        assert result.is_ready is False
        assert result.status == NodeStatus.UNKNOWN

    def test_parse_node_without_status(self, parser: NodeParser) -> None:
        """Nodes with no status or labels are parsed as not ready."""
        result = parser.parse_node({"metadata": {"name": "bare"}})

        assert result.name == "bare"
        assert result.labels == {}
        assert result.is_ready is False
        assert result.status == NodeStatus.UNKNOWN

    def test_parse_node_ignores_incomplete_conditions(self, parser: NodeParser) -> None:
        node = {
            "metadata": {"name": "n"},
            "status": {
                "conditions": [
                    {"type": "Ready"},
                    {"type": "DiskPressure", "status": "False"},
                ]
            },
        }
        result = parser.parse_node(node)

        assert result.is_ready is False
        assert result.status == NodeStatus.UNKNOWN

    def test_domain(self, parser: NodeParser, make_node) -> None:
        node = parser.parse_node(make_node("node-x", None))

        assert node.domain("topology.kubernetes.io/zone") is None
        assert node.domain("kubernetes.io/hostname") == "node-x"

    def test_parse_nodes(self, parser: NodeParser, make_node) -> None:
        nodes = parser.parse_nodes([make_node("a", "z-a"), make_node("b", "z-b")])
        assert [n.name for n in nodes] == ["a", "b"]
