"""Label selector parsing utilities.

Selectors are handled in two shapes:
- a single ``KEY=VALUE`` pair as typed on the command line
- a comma separated selector string (``app=web,tier=frontend``) as passed
  to ``kubectl -l``
"""

from collections.abc import Iterable, Mapping

from kubeskew.models.errors import SelectorParseError

_PAIR_SEPARATOR = "="
_SELECTOR_SEPARATOR = ","


def parse_label(pair: str) -> tuple[str, str]:
    """Parse one ``KEY=VALUE`` pair.

    Splits on the first ``=`` so values may themselves contain ``=``.

    Raises:
        SelectorParseError: If the pair has no ``=`` or an empty key.
    """
    key, sep, value = str(pair).partition(_PAIR_SEPARATOR)
    if not sep:
        raise SelectorParseError(
            f"Not found `=` in key value pair(KEY=VALUE): {pair!r}"
        )
    key = key.strip()
    if not key:
        raise SelectorParseError(f"Empty key in key value pair(KEY=VALUE): {pair!r}")
    return key, value.strip()


def parse_labels(pairs: Iterable[str]) -> dict[str, str]:
    """Parse several ``KEY=VALUE`` pairs into a mapping (later keys win)."""
    return dict(parse_label(pair) for pair in pairs)


def labels_to_selector(labels: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Join labels into a ``kubectl -l`` selector string.

    Mappings are joined in sorted key order so the same labels always yield
    the same selector string.
    """
    if isinstance(labels, Mapping):
        items = sorted(labels.items())
    else:
        items = list(labels)
    return _SELECTOR_SEPARATOR.join(f"{key}{_PAIR_SEPARATOR}{value}" for key, value in items)
