"""Topology skew calculation.

Implements the scheduler's "global minimum" spreading definition: the global
minimum is the smallest matching-pod count across all eligible domains, where
domains with no matching pods count as zero. Each domain's skew is its count
minus that minimum.
"""

from collections import Counter
from collections.abc import Iterable

from kubeskew.models.topology import TopologyRow


def count_by_domain(
    observed_values: Iterable[str], domain_set: Iterable[str]
) -> dict[str, int]:
    """Merge observed domain values over the complete domain set.

    Every member of ``domain_set`` is seeded at zero. Observed values missing
    from ``domain_set`` are added as new domains so nodes relabeled after the
    snapshot still show up.
    """
    counts = dict.fromkeys(domain_set, 0)
    counts.update(Counter(observed_values))
    return counts


def global_minimum(counts: dict[str, int]) -> int:
    """Smallest count across all domains, or 0 when there are none."""
    return min(counts.values(), default=0)


def calculate_skew(
    observed_values: Iterable[str], domain_set: Iterable[str]
) -> tuple[TopologyRow, ...]:
    """Compute per-domain count and skew rows ordered by domain key.

    Args:
        observed_values: Domain value of each matched pod's node (repeats count).
        domain_set: Every domain known in the cluster for the topology key.

    Returns:
        Rows sorted ascending by key, one per domain.
    """
    counts = count_by_domain(observed_values, domain_set)
    minimum = global_minimum(counts)
    return tuple(
        TopologyRow(key=key, count=count, skew=count - minimum)
        for key, count in sorted(counts.items())
    )
