"""Tests for the topology skew calculator."""

from __future__ import annotations

import random

import pytest

from kubeskew.models.topology import TopologyRow
from kubeskew.utils.skew_calculator import (
    calculate_skew,
    count_by_domain,
    global_minimum,
)

DOMAINS = {"z-a", "z-b", "z-c"}


def _rows(*triples: tuple[str, int, int]) -> tuple[TopologyRow, ...]:
    return tuple(TopologyRow(key=k, count=c, skew=s) for k, c, s in triples)


class TestCalculateSkewScenarios:
    """Known inputs and their expected rows."""

    def test_even_spread(self) -> None:
        """One pod per domain has zero skew everywhere."""
        result = calculate_skew(["z-a", "z-b", "z-c"], DOMAINS)
        assert result == _rows(("z-a", 1, 0), ("z-b", 1, 0), ("z-c", 1, 0))

    def test_uneven_spread(self) -> None:
        """Extra pods in one domain raise only that domain's skew."""
        result = calculate_skew(["z-a", "z-b", "z-c", "z-a", "z-a"], DOMAINS)
        assert result == _rows(("z-a", 3, 2), ("z-b", 1, 0), ("z-c", 1, 0))

    def test_no_pods(self) -> None:
        """Every known domain is reported at zero."""
        result = calculate_skew([], DOMAINS)
        assert result == _rows(("z-a", 0, 0), ("z-b", 0, 0), ("z-c", 0, 0))

    def test_empty_domains_set_global_minimum_to_zero(self) -> None:
        """Domains without pods pull the global minimum to zero."""
        result = calculate_skew(["z-a"], DOMAINS)
        assert result == _rows(("z-a", 1, 1), ("z-b", 0, 0), ("z-c", 0, 0))

    def test_nothing_at_all(self) -> None:
        assert calculate_skew([], set()) == ()

    def test_unknown_domain_is_added(self) -> None:
        """Observed values missing from the domain set become extra rows."""
        result = calculate_skew(["z-a", "z-d", "z-d"], {"z-a", "z-b"})
        assert result == _rows(("z-a", 1, 1), ("z-b", 0, 0), ("z-d", 2, 2))


class TestCalculateSkewProperties:
    """Invariants that hold for any input."""

    @pytest.mark.parametrize("seed", range(5))
    def test_skew_is_count_minus_minimum(self, seed: int) -> None:
        rng = random.Random(seed)
        domains = {f"zone-{i}" for i in range(rng.randint(1, 6))}
        observed = [rng.choice(sorted(domains)) for _ in range(rng.randint(0, 30))]

        rows = calculate_skew(observed, domains)
        minimum = min(row.count for row in rows)

        assert {row.key for row in rows} == domains
        assert all(row.skew == row.count - minimum >= 0 for row in rows)
        assert sum(row.count for row in rows) == len(observed)

    def test_rows_sorted_regardless_of_input_order(self) -> None:
        observed = ["c", "a", "b", "b"]
        forward = calculate_skew(observed, ["c", "b", "a"])
        backward = calculate_skew(list(reversed(observed)), ["a", "b", "c"])

        assert [row.key for row in forward] == ["a", "b", "c"]
        assert forward == backward

    def test_idempotent(self) -> None:
        observed = ["z-b", "z-a", "z-b"]
        assert calculate_skew(observed, DOMAINS) == calculate_skew(observed, DOMAINS)

    def test_accepts_generators(self) -> None:
        result = calculate_skew((v for v in ["z-a"]), (d for d in ["z-a", "z-b"]))
        assert result == _rows(("z-a", 1, 1), ("z-b", 0, 0))


class TestHelpers:
    """Tests for the counting helpers."""

    def test_count_by_domain_seeds_zero(self) -> None:
        assert count_by_domain(["z-a", "z-a"], ["z-a", "z-b"]) == {"z-a": 2, "z-b": 0}

    def test_global_minimum_empty(self) -> None:
        assert global_minimum({}) == 0

    def test_global_minimum(self) -> None:
        assert global_minimum({"z-a": 4, "z-b": 2}) == 2
