"""
Main entry point for parsing survey ship instruction files.

Usage:
    python -m src.main instructions.txt
    python -m src.main instructions.txt --config parser.yaml --output results/run1.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from .instructions import GridSizeError, InstructionParser, ParserConfig, load_config


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Parse and validate a survey ship instruction file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example instructions.txt:
  5 5
  1 2 N
  LFRFF
  3 3 E
  FFRFF

Example parser.yaml:
  max_instruction_length: 99
  orientations: NESW
  commands: LFR
        """
    )
    parser.add_argument(
        "input",
        help="Path to the instruction file"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML parser configuration"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the parse result as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = ParserConfig()

    try:
        result = InstructionParser(config).parse_file(args.input)
    except GridSizeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.source_missing:
        print(f"Error: Instruction file not found: {args.input}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2))

    # Print summary
    width, height = result.grid_coordinates()
    print("=== Survey Summary ===")
    print(f"Grid: {width} x {height}")
    print(f"Ships: {result.count_of_ships()}")
    for i, ship in enumerate(result.ships(), start=1):
        if not ship.valid:
            print(f"Ship {i}: Failed")
            continue
        x, y, orientation = ship.position
        print(f"Ship {i}: {x} {y} {orientation} -> {ship.commands or '(no instructions)'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
