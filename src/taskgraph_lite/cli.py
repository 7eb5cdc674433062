"""taskgraph-lite CLI entry point.

Usage: taskgraph-lite [command]
"""
import argparse
import logging
import sys

log = logging.getLogger("taskgraph_lite.cli")


def _add_schedule_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "schedule",
        help="Run the scheduling pipeline on a JSON task graph.",
    )
    p.add_argument("path", help="Path to the graph JSON document.")
    p.add_argument(
        "--scc", choices=["tarjan", "kosaraju"], default="tarjan",
        help="SCC algorithm (default: tarjan)",
    )
    p.add_argument(
        "--topo", choices=["kahn", "dfs"], default="kahn",
        help="Topological sort algorithm (default: kahn)",
    )
    p.add_argument(
        "--source", type=int, default=None,
        help="Source task; overrides the document's source field.",
    )
    p.add_argument(
        "--summary-only", action="store_true",
        help="Print only the summary block.",
    )
    p.add_argument(
        "--critical", action="store_true",
        help="Also search every condensation vertex for the best critical path.",
    )


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "generate",
        help="Write the standard synthetic dataset suite.",
    )
    p.add_argument("directory", help="Output directory (created if missing).")
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible datasets (default: 42)",
    )


def _run_schedule(args: argparse.Namespace) -> int:
    from taskgraph_lite.graph.dag_paths import critical_path
    from taskgraph_lite.graph.topological import CyclicDependencyError
    from taskgraph_lite.scheduling.loader import load_graph
    from taskgraph_lite.scheduling.pipeline import build_schedule
    from taskgraph_lite.scheduling.report import (
        format_paths,
        format_schedule,
        format_summary,
    )

    try:
        data = load_graph(args.path)
        graph = data.build()
        source = args.source if args.source is not None else data.source
        schedule = build_schedule(
            graph, source=source, scc_algorithm=args.scc, topo_algorithm=args.topo,
        )
        best = None
        if args.critical and len(schedule.condensation) > 0:
            best = critical_path(schedule.condensation)
    except OSError as exc:
        log.error("cannot read %s: %s", args.path, exc)
        return 1
    except (ValueError, CyclicDependencyError) as exc:
        log.error("scheduling failed: %s", exc)
        return 1

    print(format_summary(schedule) if args.summary_only else format_schedule(schedule))
    if best is not None:
        print()
        print("--- Best critical path over all sources ---")
        print(format_paths(best))
    return 0


def _run_generate(args: argparse.Namespace) -> int:
    from taskgraph_lite.scheduling.generator import write_suite

    try:
        paths = write_suite(args.directory, seed=args.seed)
    except OSError as exc:
        log.error("cannot write datasets to %s: %s", args.directory, exc)
        return 1
    for path in paths:
        print(path)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="taskgraph-lite",
        description="Task graph scheduler -- SCCs, topological order, critical paths.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_schedule_parser(subparsers)
    _add_generate_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "schedule":
        sys.exit(_run_schedule(args))
    if args.command == "generate":
        sys.exit(_run_generate(args))
