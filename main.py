#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

This module provides the command-line demonstration for the graph and linked
list packages. It loads configuration, builds the sample digraph, prints the
vertices reachable from the configured sources, and then exercises the
linked list and prints its contents.
"""

import argparse
import sys

import structlog

from src.config import AppConfig, load_config
from src.errors import StructureError
from src.graph.digraph import Digraph
from src.graph.reachability import DirectedReachability
from src.linked_list import LinkedList
from src.log_config import bind_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)


def build_graph(config: AppConfig) -> Digraph:
    """Build the configured digraph.

    Args:
        config: Application configuration

    Returns:
        Digraph containing every configured edge
    """
    graph = Digraph.from_edges(config.graph.vertex_count, config.graph.edges)
    logger.info(
        "graph_built",
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
    )
    return graph


def run_reachability(graph: Digraph, sources: list[int]) -> DirectedReachability:
    """Run multi-source reachability and log a summary.

    Raises:
        OutOfRangeError: If a source is not a vertex of the graph
    """
    reachability = DirectedReachability(graph, sources)
    logger.info(
        "reachability_complete",
        sources=sources,
        reachable_count=reachability.count(),
    )
    return reachability


def run_linked_list_demo(values: list[int]) -> LinkedList:
    """Build a list from ``values`` and remove its tail.

    Returns:
        The list after the tail has been removed
    """
    linked_list = LinkedList.from_values(values)
    removed = linked_list.remove_from_end()
    logger.info(
        "linked_list_demo_complete",
        removed=removed.data if removed is not None else None,
        length=len(linked_list),
    )
    return linked_list


def run(args: argparse.Namespace) -> int:
    """Run the demonstration.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    exit_code = 0

    # Configure logging early so configuration errors are reported
    configure_logging(args.log_level or "INFO", json_logs=args.json_logs)

    try:
        config = load_config(args.config)

        # CLI flags take precedence over the configuration file
        level = args.log_level or config.logging_level
        configure_logging(level, json_logs=args.json_logs or config.json_logs)
        bind_context(command="demo")

        if args.dry_run:
            logger.info("dry_run_mode_complete", config_valid=True)
            return exit_code

        sources = args.sources if args.sources is not None else config.graph.sources
        graph = build_graph(config)
        reachability = run_reachability(graph, sources)
        print(" ".join(str(v) for v in reachability.reachable_vertices()))

        linked_list = run_linked_list_demo(config.linked_list.values)
        print(linked_list)

    except FileNotFoundError as e:
        logger.exception("configuration_file_not_found", error=str(e))
        exit_code = 1

    except StructureError as e:
        logger.exception("structure_error", error=e.message)
        exit_code = 1

    except ValueError as e:
        logger.exception("configuration_validation_error", error=str(e))
        exit_code = 1

    finally:
        clear_context()

    return exit_code


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Directed graph reachability and linked list demonstration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sample 13-vertex graph, sources 1 2 6
  python main.py

  # Custom sources
  python main.py --sources 0 7

  # Graph and list read from a configuration file
  python main.py --config config.yaml --log-level DEBUG
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (default: built-in sample)",
    )

    parser.add_argument(
        "-s",
        "--sources",
        type=int,
        nargs="+",
        default=None,
        help="Source vertices (default: from configuration)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default: from configuration)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render logs as JSON",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate configuration without running the demo",
    )

    return parser.parse_args(argv)


def main() -> None:
    """Main entry point for the demonstration."""
    args = parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
