#!/usr/bin/env python3
"""
Driver Payroll - Headless CLI Interface
Import a tour file, apply price and penalties, print or export the payroll
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from errors import PayrollError
from payroll_api import PayrollAutomator
from payroll_calculator import summary_to_dataframe
from payroll_controller import describe_error
from persistence import JsonFileStore, MemoryStore, default_state_path


def parse_penalty_args(values: List[str]) -> Dict[str, str]:
    """Turn ['Alice=50', 'Bob=12.5'] into {'Alice': '50', 'Bob': '12.5'}"""
    penalties = {}
    for value in values:
        if '=' not in value:
            raise argparse.ArgumentTypeError(f"Penalty must look like NAME=AMOUNT, got: {value}")
        name, amount = value.rsplit('=', 1)
        penalties[name.strip()] = amount
    return penalties


def print_summary(automator: PayrollAutomator) -> None:
    """Print the payroll table followed by the totals"""
    controller = automator.controller
    summary = controller.summary()

    print("\n" + "="*60)
    print("PAYROLL SUMMARY")
    if controller.state.file_name:
        print(f"Source file: {controller.state.file_name}")
    print(f"Price per tour: {summary.price_per_tour:,.2f}")
    print("="*60)

    if summary.rows:
        print(summary_to_dataframe(summary).to_string(index=False, float_format=lambda v: f"{v:,.2f}"))
    else:
        print("No tours loaded")

    orphans = controller.orphan_penalties()
    if orphans:
        print("\nPenalties included in the total for drivers without tours:")
        for name, amount in orphans.items():
            print(f"  - {name}: {amount:,.2f}")


def main(argv=None):
    """Main CLI interface"""
    parser = argparse.ArgumentParser(
        description="Driver Payroll - tour counts and payroll from a tour export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Payroll for one file at the default price
  python payroll_cli.py tours.xlsx

  # Custom price and penalties
  python payroll_cli.py tours.csv --price 85 --penalty "Alice=50" --penalty "Bob=20"

  # Keep state between runs and export the workbook
  python payroll_cli.py tours.xlsx --store state.json --export-dir ./exports

Expected columns: Date, Warehouse, Tour, Driver (first row is a header)
        """
    )

    parser.add_argument('file', nargs='?', help='Tour file to import (.xlsx, .xls or comma-separated text)')
    parser.add_argument('--price', '-p', help='Price per tour')
    parser.add_argument('--penalty', action='append', default=[], metavar='NAME=AMOUNT',
                        help='Penalty for a driver (repeatable)')
    parser.add_argument('--store', '-s',
                        help='State file to load and update (use "default" for the desktop app state)')
    parser.add_argument('--export-dir', '-o', help='Write the payroll workbook to this directory')
    parser.add_argument('--json', '-j', help='Write the summary as JSON to this file')
    parser.add_argument('--reset', action='store_true',
                        help='Clear records, penalties and file name before anything else')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress the summary printout')

    args = parser.parse_args(argv)

    try:
        penalties = parse_penalty_args(args.penalty)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    if args.store == 'default':
        store = JsonFileStore(default_state_path())
    elif args.store:
        store = JsonFileStore(Path(args.store))
    else:
        store = MemoryStore()

    automator = PayrollAutomator(store)

    try:
        if args.reset:
            automator.reset()

        if args.price is not None:
            automator.set_price(args.price)

        if args.file:
            result = automator.process_file(args.file)
            if not result['success']:
                print(f"Error: {result['error']}")
                return 1
            if not args.quiet:
                print(f"Imported {result['records']} tours from {Path(args.file).name}")

        automator.set_penalties(penalties)

        if not args.quiet:
            print_summary(automator)

        if args.export_dir:
            output_path = automator.export(args.export_dir)
            print(f"\nWorkbook exported to: {output_path}")

        if args.json:
            with open(args.json, 'w', encoding='utf-8') as f:
                json.dump(automator.get_summary(), f, indent=2, ensure_ascii=False)
            print(f"Summary exported to: {args.json}")

        return 0

    except PayrollError as e:
        print(f"Error: {describe_error(e)}")
        return 1
    except OSError as e:
        print(f"File error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1


if __name__ == '__main__':
    sys.exit(main())
