"""
CLI commands - thin wrappers around infra_estimator.service.

Each command follows the same pattern:
1. Parse arguments
2. Load environment
3. Call the service
4. Print JSON to stdout
5. Return exit code (0 ok, 1 error, 130 interrupted)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from infra_estimator.core.errors import EstimatorError

REGIONS = ["brazil", "latam", "us", "europe", "global"]


def _load_env() -> None:
    """Load environment variables from a .env file, if present."""
    load_dotenv()


def _print_json(payload) -> None:
    if hasattr(payload, "model_dump"):
        print(payload.model_dump_json(indent=2))
    else:
        print(json.dumps(payload, indent=2, default=str))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


# ---------------------------------------------------------------------------
# COMMANDS
# ---------------------------------------------------------------------------


def run_direct_cli() -> int:
    """Estimate from an explicit category and MAU."""
    from infra_estimator.observability import init_tracing, shutdown_tracing
    from infra_estimator.service import estimate_direct

    _load_env()

    parser = argparse.ArgumentParser(description="Estimate infrastructure for a known category")
    parser.add_argument("category", help="Category id, e.g. saas-b2b")
    parser.add_argument("--mau", type=int, required=True, help="Target monthly active users")
    parser.add_argument(
        "--feature", "-f", action="append", default=[], dest="features",
        help="Feature id (repeatable)",
    )
    parser.add_argument("--media-upload", action="store_true", help="Users upload media")
    parser.add_argument("--media-size-mb", type=float, default=None, help="Average media size")
    parser.add_argument("--realtime", action="store_true", help="Realtime connections")
    parser.add_argument("--region", choices=REGIONS, default="us")
    _add_common(parser)
    args = parser.parse_args()

    _configure_logging(args.verbose)
    if args.mau <= 0:
        return _fail("--mau must be positive")

    init_tracing()
    try:
        response = estimate_direct(
            category=args.category,
            target_mau=args.mau,
            features=args.features,
            has_media_upload=args.media_upload,
            avg_media_size_mb=args.media_size_mb,
            has_realtime=args.realtime,
            region=args.region,
        )
    except EstimatorError as e:
        return _fail(str(e))
    finally:
        shutdown_tracing()

    _print_json(response)
    return 0


def run_describe_cli() -> int:
    """Estimate from a free-text product description."""
    from infra_estimator.observability import init_tracing, shutdown_tracing
    from infra_estimator.schemas.response import TargetUsers
    from infra_estimator.service import estimate

    _load_env()

    parser = argparse.ArgumentParser(description="Estimate infrastructure from a description")
    parser.add_argument("description", help="What the product does")
    parser.add_argument("--month6", type=int, required=True, help="Expected MAU at month 6")
    parser.add_argument(
        "--month12", type=int, default=None,
        help="Expected MAU at month 12 (default: same as month 6)",
    )
    parser.add_argument(
        "--reference", "-r", action="append", default=[], dest="reference_apps",
        help="Similar product name (repeatable)",
    )
    parser.add_argument("--region", choices=REGIONS, default="us")
    _add_common(parser)
    args = parser.parse_args()

    _configure_logging(args.verbose)
    month12 = args.month12 if args.month12 is not None else args.month6
    if args.month6 <= 0 or month12 <= 0:
        return _fail("user targets must be positive")

    init_tracing()
    try:
        response = estimate(
            args.description,
            TargetUsers(month6=args.month6, month12=month12),
            region=args.region,
            reference_apps=args.reference_apps or None,
        )
    except EstimatorError as e:
        return _fail(str(e))
    finally:
        shutdown_tracing()

    _print_json(response)
    return 0


def run_categories_cli() -> int:
    """List category ids, names and descriptions."""
    from infra_estimator.service import list_categories

    parser = argparse.ArgumentParser(description="List app categories")
    parser.parse_args()

    _print_json([c.model_dump() for c in list_categories()])
    return 0


def run_features_cli() -> int:
    """List feature ids with their impact multipliers."""
    from infra_estimator.service import list_features

    parser = argparse.ArgumentParser(description="List app features")
    parser.parse_args()

    _print_json([f.model_dump() for f in list_features()])
    return 0


def run_benchmarks_cli() -> int:
    """Show one benchmark, or all of them."""
    from infra_estimator.service import get_benchmark

    parser = argparse.ArgumentParser(description="Show usage benchmarks")
    parser.add_argument("--category", "-c", default=None, help="Single category id")
    args = parser.parse_args()

    try:
        result = get_benchmark(args.category)
    except EstimatorError as e:
        return _fail(str(e))

    if isinstance(result, list):
        _print_json([b.model_dump() for b in result])
    else:
        _print_json(result)
    return 0


def run_health_cli() -> int:
    """Report service status and classifier availability."""
    from infra_estimator.service import health

    _load_env()

    parser = argparse.ArgumentParser(description="Health check")
    parser.parse_args()

    _print_json(health())
    return 0


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        infra-estimate direct saas-b2b --mau 10000 -f auth
        infra-estimate describe "Marketplace for used bikes" --month6 5000
        infra-estimate categories
        infra-estimate features
        infra-estimate benchmarks [--category ecommerce]
        infra-estimate health
    """
    parser = argparse.ArgumentParser(
        description="Cloud infrastructure estimator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  direct      Estimate from a category id and MAU
  describe    Estimate from a free-text description
  categories  List app categories
  features    List app features
  benchmarks  Show usage benchmarks
  health      Health check
        """,
    )
    parser.add_argument(
        "command",
        choices=["direct", "describe", "categories", "features", "benchmarks", "health"],
        help="Command to run",
    )

    args, remaining = parser.parse_known_args()

    commands = {
        "direct": run_direct_cli,
        "describe": run_describe_cli,
        "categories": run_categories_cli,
        "features": run_features_cli,
        "benchmarks": run_benchmarks_cli,
        "health": run_health_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
