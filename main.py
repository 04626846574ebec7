"""
State-Space Search - Entry Point

Solves the disc flipper puzzle with a selectable search strategy and
prints the solution path.

Example:
    python main.py
    python main.py --strategy backtrack --memory
    python main.py --strategy backtrack --depth-limit 8 --debug
"""

import sys
import logging
import argparse
from datetime import datetime
from typing import Any, Dict

from statesearch.search import Node, create_searcher, get_searcher_info, SearchResult
from statesearch.puzzles import DiscFlipper
from statesearch.settings import load_settings, save_settings
from statesearch.debug import save_debug_image


logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Log to both console and file; DEBUG traces every operator application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("search.log", mode='w', encoding='utf-8')
        ]
    )


def searcher_options(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Select the constructor options that apply to the configured strategy.

    Args:
        settings: Effective settings

    Returns:
        Keyword arguments for create_searcher()
    """
    if settings["strategy_name"] == "backtrack":
        return {
            "depth_limit": int(settings["depth_limit"]),
            "memory": bool(settings["memory"]),
        }
    if settings["strategy_name"] == "depth_first":
        return {"cycle_check": bool(settings["cycle_check"])}
    return {}


def run_search(settings: Dict[str, Any]) -> SearchResult:
    """
    Build the start node and searcher from settings and run the search.

    Args:
        settings: Effective settings

    Returns:
        Search result

    Raises:
        ValueError: If the strategy name or disc strings are invalid
    """
    state = DiscFlipper(settings["start"], settings["goal"])
    logger.info(f"Start state: {state}")

    start = Node.root(state)
    searcher = create_searcher(settings["strategy_name"], start, **searcher_options(settings))
    logger.info(f"Searcher: {searcher.description}")

    result = searcher.solve()
    searcher.print_solution(result.goal)

    metrics = result.metrics
    logger.info(
        f"{metrics.strategy_name}: {result.step_count} steps, "
        f"{metrics.nodes_expanded} expanded, {metrics.nodes_generated} generated, "
        f"{metrics.pruned_branches} pruned, {metrics.computation_time_ms:.1f}ms"
    )
    return result


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="State-space search - disc flipper puzzle solver"
    )
    parser.add_argument(
        "--strategy", "-s",
        help="Search strategy (see --list)"
    )
    parser.add_argument("--start", help="Initial disc sides, e.g. PPPPPPPPPPPPK")
    parser.add_argument("--goal", help="Goal disc sides, e.g. KPPPPPPPPPPPP")
    parser.add_argument(
        "--depth-limit", type=int,
        help="Backtracking depth limit (0 = unlimited)"
    )
    parser.add_argument(
        "--memory", action="store_true", default=None,
        help="Backtracking: fail on states repeating an ancestor"
    )
    parser.add_argument(
        "--no-cycle-check", dest="cycle_check", action="store_false", default=None,
        help="Depth-first: skip duplicate detection (acyclic graphs only)"
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", default=None,
        help="Save an image of the solution path under ./debug"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("--save", action="store_true", help="Persist effective settings to config.json")
    parser.add_argument("--list", action="store_true", help="List strategies and exit")
    return parser.parse_args()


def main():
    """Run a search configured by config.json and command line flags."""
    args = parse_args()
    configure_logging(args.verbose)

    if args.list:
        for info in get_searcher_info():
            print(f"{info['name']:<12} {info['description']}")
        return 0

    # CLI flags override saved settings
    settings = load_settings()
    overrides = {
        "strategy_name": args.strategy,
        "start": args.start,
        "goal": args.goal,
        "depth_limit": args.depth_limit,
        "memory": args.memory,
        "cycle_check": args.cycle_check,
        "debug_enabled": args.debug,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        result = run_search(settings)
    except ValueError as e:
        logger.error(str(e))
        return 2

    if settings["debug_enabled"] and result.found:
        filename = f"debug_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')[:-3]}.png"
        out_path = save_debug_image(result.path, filename)
        logger.info(f"Debug image saved: {out_path}")

    if args.save:
        save_settings(settings)

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
