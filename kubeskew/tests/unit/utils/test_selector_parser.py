"""Tests for label selector parsing."""

from __future__ import annotations

import pytest

from kubeskew.models.errors import SelectorParseError
from kubeskew.utils.selector_parser import (
    labels_to_selector,
    parse_label,
    parse_labels,
)


class TestParseLabel:
    """Tests for parse_label function."""

    def test_simple_pair(self) -> None:
        assert parse_label("app=web") == ("app", "web")

    def test_splits_on_first_equals(self) -> None:
        assert parse_label("note=a=b") == ("note", "a=b")

    def test_empty_value_allowed(self) -> None:
        assert parse_label("app=") == ("app", "")

    def test_prefixed_key(self) -> None:
        assert parse_label("kubernetes.io/os=linux") == ("kubernetes.io/os", "linux")

    def test_missing_equals(self) -> None:
        with pytest.raises(SelectorParseError, match="Not found `=`"):
            parse_label("app")

    def test_empty_key(self) -> None:
        with pytest.raises(SelectorParseError):
            parse_label("=web")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_label("broken")


class TestSelectorStrings:
    """Tests for joining and splitting selector strings."""

    def test_parse_labels_last_wins(self) -> None:
        assert parse_labels(["a=1", "a=2", "b=3"]) == {"a": "2", "b": "3"}

    def test_labels_to_selector_mapping_is_sorted(self) -> None:
        assert labels_to_selector({"tier": "web", "app": "shop"}) == "app=shop,tier=web"

    def test_labels_to_selector_pairs_keep_order(self) -> None:
        assert labels_to_selector([("tier", "web"), ("app", "shop")]) == "tier=web,app=shop"

    def test_labels_to_selector_empty(self) -> None:
        assert labels_to_selector({}) == ""
