"""Output renderers for topology tables.

Renderers are pure formatters over a ``TopologyTables`` result set; they
perform no aggregation.
"""

from __future__ import annotations

import io
import json

import yaml
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table
from rich.tree import Tree

from kubeskew.constants.defaults import NO_RESOURCES_MESSAGE
from kubeskew.constants.enums import OutputFormat
from kubeskew.models.topology import TopologyTables

_RENDER_WIDTH = 240
_UNBOUNDED_WIDTH = 1_000_000
_TREE_ROOT_LABEL = "."


def _to_string(renderable: RenderableType) -> str:
    """Render a rich renderable to plain text without colors.

    The console is widened to the natural width of ``renderable`` so long
    names and domain keys are never cropped or wrapped.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=_RENDER_WIDTH,
        color_system=None,
        force_terminal=False,
        highlight=False,
        emoji=False,
    )
    natural = Measurement.get(
        console, console.options.update_width(_UNBOUNDED_WIDTH), renderable
    )
    console.width = max(_RENDER_WIDTH, natural.maximum)
    console.print(renderable)
    return "\n".join(line.rstrip() for line in buffer.getvalue().splitlines())


def render_text(tables: TopologyTables) -> str:
    """Borderless table with one line per domain."""
    has_header = tables.has_header()

    table = Table(box=None, pad_edge=False, show_edge=False, header_style=None)
    if has_header:
        table.add_column("NAME", no_wrap=True)
    table.add_column("TOPOLOGY", no_wrap=True)
    table.add_column("COUNT", no_wrap=True)
    table.add_column("SKEW", no_wrap=True)

    for topology_table in tables:
        name = escape(topology_table.header or "")
        for row in topology_table.rows:
            cells = [escape(row.key), str(row.count), str(row.skew)]
            if has_header:
                cells.insert(0, name)
            table.add_row(*cells)

    return _to_string(table)


def render_tree(tables: TopologyTables) -> str:
    """Tree rooted at ``.`` with one branch per named workload."""
    root = Tree(_TREE_ROOT_LABEL, guide_style="none")
    for topology_table in tables:
        if topology_table.header is not None:
            branch = root.add(escape(topology_table.header))
        else:
            branch = root
        for row in topology_table.rows:
            branch.add(escape(str(row)))
    return _to_string(root)


def render_json(tables: TopologyTables) -> str:
    return json.dumps(tables.to_list(), indent=2)


def render_yaml(tables: TopologyTables) -> str:
    return yaml.safe_dump(tables.to_list(), sort_keys=False).rstrip("\n")


_RENDERERS = {
    OutputFormat.TEXT: render_text,
    OutputFormat.TREE: render_tree,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
}


def render(tables: TopologyTables, output_format: OutputFormat | str) -> str:
    """Render ``tables`` in ``output_format``.

    An empty result set renders as the "No resources found." message in every
    format.
    """
    if tables.is_empty():
        return NO_RESOURCES_MESSAGE
    return _RENDERERS[OutputFormat(output_format)](tables)
