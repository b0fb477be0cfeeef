"""Command line entry point for kubectl-topology-skew.

Installed as ``kubectl-topology_skew`` so kubectl picks it up as the
``kubectl topology-skew`` plugin.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from kubeskew import __version__
from kubeskew.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    LOG_LEVEL_ENV_VAR,
    MAX_CONCURRENT_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    TOPOLOGY_KEY_DEFAULT,
)
from kubeskew.constants.enums import OutputFormat
from kubeskew.controllers.cluster.controller import ClusterController
from kubeskew.controllers.workloads import WORKLOAD_KINDS
from kubeskew.models.errors import SelectorParseError, TopologySkewError
from kubeskew.models.state.app_settings import AppSettings
from kubeskew.models.topology import TopologyTables
from kubeskew.utils.output_renderer import render
from kubeskew.utils.selector_parser import parse_label

logger = logging.getLogger(__name__)

PROG = "kubectl-topology_skew"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

_NESTED_VERBOSE_DEST = "subcommand_verbose"

_WORKLOAD_HELP = {
    "deployment": "Print deployment topology skew",
    "statefulset": "Print statefulset topology skew",
    "daemonset": "Print daemonset topology skew",
    "job": "Print job topology skew",
}


def _label_arg(value: str) -> str:
    """argparse type for ``KEY=VALUE`` selector items."""
    try:
        key, label_value = parse_label(value)
    except SelectorParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return f"{key}={label_value}"


def _add_global_options(parser: argparse.ArgumentParser, *, nested: bool) -> None:
    """Options accepted both before and after the subcommand.

    The nested copy suppresses defaults so it never overwrites a value given
    before the subcommand. Its ``-v`` count lands in a separate attribute so
    both counts add up.
    """

    def default(value: object) -> object:
        return argparse.SUPPRESS if nested else value

    parser.add_argument("--context", default=default(None), help="Kubernetes config context")
    parser.add_argument("--cluster", default=default(None), help="Kubernetes config cluster")
    parser.add_argument("--user", default=default(None), help="Kubernetes config user")
    parser.add_argument(
        "-o",
        "--output",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=default(OutputFormat(OUTPUT_FORMAT_DEFAULT)),
        help=f"Output format (default: {OUTPUT_FORMAT_DEFAULT})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest=_NESTED_VERBOSE_DEST if nested else "verbose",
        default=default(0),
        help="Increase log verbosity (-v info, -vv debug)",
    )


def _add_selector_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-l",
        "--selector",
        action="append",
        type=_label_arg,
        default=[],
        metavar="KEY=VALUE",
        help="Label selector (repeatable)",
    )


def _add_scope_options(parser: argparse.ArgumentParser, *, namespaced: bool = True) -> None:
    if namespaced:
        parser.add_argument("-n", "--namespace", default=None, help="Kubernetes namespace name")
    _add_selector_option(parser)
    parser.add_argument(
        "-t",
        "--topology-key",
        default=TOPOLOGY_KEY_DEFAULT,
        help=f"Node label used as topology domain (default: {TOPOLOGY_KEY_DEFAULT})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Display pod count and skew per topology domain",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_options(parser, nested=False)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    pod = subparsers.add_parser("pod", help="Print pod topology skew")
    _add_global_options(pod, nested=True)
    _add_scope_options(pod)

    node = subparsers.add_parser("node", help="Print node topology skew")
    _add_global_options(node, nested=True)
    _add_scope_options(node, namespaced=False)

    for kind, help_text in _WORKLOAD_HELP.items():
        sub = subparsers.add_parser(kind, help=help_text)
        _add_global_options(sub, nested=True)
        sub.add_argument("name", nargs="?", default=None, help=f"{kind} name")
        _add_scope_options(sub)

    all_parser = subparsers.add_parser(
        "all", help="Print topology skew of deployments, statefulsets, jobs and daemonsets"
    )
    _add_global_options(all_parser, nested=True)
    _add_scope_options(all_parser)

    return parser


def _verbosity(args: argparse.Namespace) -> int:
    """Total ``-v`` count given before and after the subcommand."""
    return args.verbose + getattr(args, _NESTED_VERBOSE_DEST, 0)


def _log_level(verbose: int) -> str:
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return os.environ.get(LOG_LEVEL_ENV_VAR, LOG_LEVEL_DEFAULT)


def configure_logging(level: str) -> None:
    """Route log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        context=args.context,
        cluster=args.cluster,
        user=args.user,
        namespace=getattr(args, "namespace", None),
        name=getattr(args, "name", None),
        selector=args.selector,
        topology_key=args.topology_key,
        output=args.output,
        log_level=_log_level(_verbosity(args)),
        max_concurrent=MAX_CONCURRENT_DEFAULT,
    )


async def run_command(
    command: str,
    settings: AppSettings,
    controller: ClusterController | None = None,
) -> TopologyTables:
    """Dispatch ``command`` to the matching controller query."""
    controller = controller or ClusterController(
        settings.context,
        settings.cluster,
        settings.user,
        max_concurrent=settings.max_concurrent,
    )
    selector = settings.selector_string
    topology_key = settings.topology_key

    if command == "pod":
        return await controller.pod_topology(settings.namespace, selector, topology_key)
    if command == "node":
        return await controller.node_topology(settings.label_filter, topology_key)
    if command == "all":
        return await controller.all_topology(settings.namespace, selector or None, topology_key)
    if command in WORKLOAD_KINDS:
        return await controller.workload_topology(
            command, settings.name, settings.namespace, selector or None, topology_key
        )
    raise ValueError(f"unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging(settings.log_level)
    logger.debug("Running %s with %s", args.command, settings.model_dump())

    try:
        tables = asyncio.run(run_command(args.command, settings))
    except TopologySkewError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print(render(tables, settings.output))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
