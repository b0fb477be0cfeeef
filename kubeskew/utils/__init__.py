"""Utility functions for kubectl-topology-skew."""

from kubeskew.utils.output_renderer import render
from kubeskew.utils.selector_parser import (
    labels_to_selector,
    parse_label,
    parse_labels,
)
from kubeskew.utils.skew_calculator import calculate_skew

__all__ = [
    # Rendering
    "render",
    # Selectors
    "labels_to_selector",
    "parse_label",
    "parse_labels",
    # Skew
    "calculate_skew",
]
