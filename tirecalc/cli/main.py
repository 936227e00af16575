"""
Command-line interface for the tire upgrade calculator.

Usage:
    python -m tirecalc make-example [--output example_input.json]
    python -m tirecalc compare --input example.json [--output result.json] [--readable]
    python -m tirecalc quick --current 265/70R17 --new 285/75R17 [--gear-ratio 3.909]
    python -m tirecalc suspension "Toyota Tacoma"
    python -m tirecalc serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tirecalc import __version__
from tirecalc.clearance.assessor import get_vehicle_suspension_type
from tirecalc.cli.readable_output import render_comparison
from tirecalc.engine.comparison import calculate_tire_comparison, compare_request
from tirecalc.logging_config import setup_logging
from tirecalc.models.inputs import (
    ComparisonRequest,
    DrivetrainConfig,
    TireSpec,
    UsageCategory,
    example_request,
)
from tirecalc.models.outputs import ComparisonResult


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tirecalc",
        description="Tire Upgrade Calculator - compare tire sizes for gearing, drivetrain stress "
                    "and clearance. Estimates only, always test fit before buying.",
    )
    parser.add_argument("--version", action="version", version=f"tirecalc {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example comparison request JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_input.json"),
        help="Output path for example file (default: example_input.json)",
    )

    # compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare two tires from a JSON request file",
    )
    compare_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON comparison request",
    )
    compare_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    compare_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a readable summary instead of JSON",
    )

    # quick command
    quick_parser = subparsers.add_parser(
        "quick",
        help="Compare two tire sizes from the command line",
    )
    quick_parser.add_argument("--current", "-c", required=True, help="Current tire size, e.g. 265/70R17")
    quick_parser.add_argument("--new", "-n", required=True, help="New tire size, e.g. 285/75R17 or 35x12.50R17")
    quick_parser.add_argument("--gear-ratio", "-g", type=float, default=None, help="Axle gear ratio, e.g. 4.10")
    quick_parser.add_argument("--vehicle", default=None, help="Vehicle name for suspension lookup")
    quick_parser.add_argument("--weight", type=float, default=None, help="Vehicle weight in lbs")
    quick_parser.add_argument("--lift", type=float, default=0.0, help="Installed lift in inches")
    quick_parser.add_argument(
        "--usage", "-u",
        choices=[u.value for u in UsageCategory],
        default=UsageCategory.WEEKEND_TRAIL.value,
        help="Primary use (default: weekend_trail)",
    )
    quick_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")

    # suspension command
    suspension_parser = subparsers.add_parser(
        "suspension",
        help="Look up the front suspension type of a vehicle",
    )
    suspension_parser.add_argument("vehicle", help="Vehicle name, e.g. 'Jeep Wrangler'")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _print_summary(result: ComparisonResult) -> None:
    """Short stderr summary after a comparison."""
    if result.differences:
        d = result.differences.diameter
        print(f"\nDiameter change: {d.absolute:+.2f}\" ({d.percentage:+.1f}%)", file=sys.stderr)
    if result.drivetrain_stress:
        stress = result.drivetrain_stress
        print(f"Drivetrain stress: {stress.score}/100 ({stress.classification.value})", file=sys.stderr)
    if result.clearance_probability:
        clearance = result.clearance_probability
        print(
            f"Clearance risk: {clearance.probability}% ({clearance.risk_class.value})",
            file=sys.stderr,
        )
    if result.compatibility_warnings:
        print("\nWarnings:", file=sys.stderr)
        for w in result.compatibility_warnings:
            print(f"  - {w.message}", file=sys.stderr)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example request JSON file."""
    output_json = example_request().model_dump_json(indent=2)

    with open(args.output, "w") as f:
        f.write(output_json)

    print(f"Created example input file: {args.output}")
    print("\nRun a comparison with:")
    print(f"  python -m tirecalc compare --input {args.output}")

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Compare two tires from a request file."""
    try:
        with open(args.input) as f:
            input_data = json.load(f)

        request = ComparisonRequest(**input_data)

        print("\nTire Upgrade Calculator", file=sys.stderr)
        print(
            f"{request.current_tire.size or 'current'} -> {request.new_tire.size or 'new'} "
            f"| usage: {request.usage_category.display_name}",
            file=sys.stderr,
        )

        result = compare_request(request)

        if args.readable:
            render_comparison(result.model_dump(mode="json"))
            return 0

        output_json = result.model_dump_json(indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output_json)
            print(f"\nResults saved to {args.output}", file=sys.stderr)
        else:
            print(output_json)

        _print_summary(result)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic's ValidationError is a ValueError
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_quick(args: argparse.Namespace) -> int:
    """Compare two sizes given on the command line."""
    try:
        drivetrain = DrivetrainConfig(
            axle_gear_ratio=args.gear_ratio,
            vehicle_weight=args.weight,
            vehicle_type=args.vehicle,
            lift_height=args.lift,
        )
        result = calculate_tire_comparison(
            TireSpec(size=args.current),
            TireSpec(size=args.new),
            drivetrain,
            None,
            args.usage,
        )
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    if result.current is None or result.new is None:
        print(
            f"Error: Could not determine a diameter for {args.current!r} or {args.new!r}",
            file=sys.stderr,
        )
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        render_comparison(result.model_dump(mode="json"))
    return 0


def cmd_suspension(args: argparse.Namespace) -> int:
    """Print the suspension type for a vehicle."""
    suspension = get_vehicle_suspension_type(args.vehicle)
    print(f"{args.vehicle}: {suspension.label} ({suspension.value})")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    import uvicorn

    print("\nStarting Tire Upgrade Calculator API", file=sys.stderr)
    print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
    print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "tirecalc.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def cli(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "compare": cmd_compare,
        "quick": cmd_quick,
        "suspension": cmd_suspension,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
