#!/usr/bin/env python3
"""
Catalog Compare

A CLI tool for comparing two JSON localization catalogs.

Usage:
    python -m catalog_compare.main compare <left> <right>        List key differences
    python -m catalog_compare.main count <file>                  Count keys in a catalog
    python -m catalog_compare.main tree <left> <right>           Show the reconciled tree
    python -m catalog_compare.main fill-missing <left> <right> --side right
                                                                 Copy missing keys and export

Statuses:
    missing-left     Key exists only in the right catalog
    missing-right    Key exists only in the left catalog
    identical        Same value on both sides
    different        Value differs between the catalogs
"""

import argparse
import json
import logging
import os
import sys

from catalog_compare.config import DEFAULT_OUTPUT_DIR, MAX_FILE_SIZE, MAX_KEY_COUNT
from catalog_compare.data_formats import (
    CatalogLoadError,
    export_side,
    format_file_size,
    load_catalog,
    truncate_value,
)
from catalog_compare.engine import (
    ComparisonStatus,
    EditKind,
    EditStore,
    Side,
    compare,
    filter_records,
    merge,
    summarize,
)

STATUS_MARKERS = {
    ComparisonStatus.MISSING_LEFT: '<',
    ComparisonStatus.MISSING_RIGHT: '>',
    ComparisonStatus.IDENTICAL: '=',
    ComparisonStatus.DIFFERENT: '~',
}

# Status that marks a key as missing on each side
MISSING_ON = {
    Side.LEFT: ComparisonStatus.MISSING_LEFT,
    Side.RIGHT: ComparisonStatus.MISSING_RIGHT,
}


def configure_logging(verbosity: int) -> None:
    """Configure root logging from the number of -v flags."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def check_path(path: str) -> None:
    """Exit with an error if path is missing or unreadable."""
    if not os.path.exists(path):
        print(f"Error: Path not found: {path}", file=sys.stderr)
        sys.exit(1)

    if not os.access(path, os.R_OK):
        print(f"Error: Permission denied: {path}", file=sys.stderr)
        sys.exit(1)


def load(path: str, args):
    """Load a catalog with the limits given on the command line."""
    check_path(path)
    return load_catalog(path, max_file_size=args.max_file_size, max_keys=args.max_keys)


def print_summary(summary: dict) -> None:
    print(
        f"Missing left: {summary['missing-left']}  "
        f"Missing right: {summary['missing-right']}  "
        f"Identical: {summary['identical']}  "
        f"Different: {summary['different']}"
    )


# ============== Commands ==============

def cmd_compare(args):
    """Compare two catalogs and list key differences."""
    left = load(args.left, args)
    right = load(args.right, args)

    records = compare(left.data, right.data)
    shown = filter_records(records, args.status)

    if args.json:
        print(json.dumps([record.to_dict() for record in shown], indent=2, ensure_ascii=False))
        return

    print(f"{left.file_name} ({left.key_count} keys)  <->  {right.file_name} ({right.key_count} keys)")
    print("-" * 60)
    for record in shown:
        marker = STATUS_MARKERS[record.status]
        print(
            f"{marker} {record.status.value:<14} {record.key_path}  "
            f"{truncate_value(record.left_value, 30)} -> {truncate_value(record.right_value, 30)}"
        )
    print("-" * 60)
    print_summary(summarize(records))


def cmd_count(args):
    """Count keys in a catalog."""
    catalog = load(args.file, args)
    if args.quiet:
        print(catalog.key_count)
        return
    print(f"{catalog.file_name}: {catalog.key_count:,} keys ({format_file_size(catalog.file_size)})")


def _print_tree(nodes, depth: int = 0) -> None:
    indent = "  " * depth
    for node in nodes:
        if node.is_container:
            sides = ("L" if node.has_left else "-") + ("R" if node.has_right else "-")
            print(f"{indent}{node.key}/ [{sides}]")
            _print_tree(node.children, depth + 1)
        else:
            marker = STATUS_MARKERS[node.status]
            print(
                f"{indent}{marker} {node.key}: "
                f"{truncate_value(node.left_value, 30)} | {truncate_value(node.right_value, 30)}"
            )


def cmd_tree(args):
    """Show the reconciled tree of both catalogs."""
    left = load(args.left, args)
    right = load(args.right, args)
    _print_tree(merge(left.data, right.data))


def cmd_fill_missing(args):
    """Add every key missing on one side with the other side's value, then export."""
    left = load(args.left, args)
    right = load(args.right, args)

    target = Side(args.side)
    catalogs = {Side.LEFT: left, Side.RIGHT: right}

    store = EditStore()
    for record in compare(left.data, right.data):
        if record.status is not MISSING_ON[target]:
            continue
        source_value = record.right_value if target is Side.LEFT else record.left_value
        store.record_edit(target, record.key_path, source_value, EditKind.ADD)

    added = len(store.edits_for(target))
    target_catalog = catalogs[target]
    output_path = export_side(
        store,
        target,
        target_catalog.data,
        output_dir=args.output_dir,
        source_filename=target_catalog.file_name,
        pretty=not args.compact,
    )
    print(f"Added {added} keys to {target_catalog.file_name}")
    print(f"Exported to {output_path}")


def _add_limit_args(parser):
    parser.add_argument(
        '--max-keys',
        type=int,
        default=MAX_KEY_COUNT,
        help=f'Maximum keys per catalog (default: {MAX_KEY_COUNT})'
    )
    parser.add_argument(
        '--max-file-size',
        type=int,
        default=MAX_FILE_SIZE,
        help=f'Maximum catalog size in bytes (default: {MAX_FILE_SIZE})'
    )


def main():
    parser = argparse.ArgumentParser(
        description="Catalog Compare - compare two JSON localization catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Increase log output')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Compare command
    compare_parser = subparsers.add_parser('compare', help='List key differences')
    compare_parser.add_argument('left', help='Left catalog (JSON)')
    compare_parser.add_argument('right', help='Right catalog (JSON)')
    compare_parser.add_argument(
        '-s', '--status',
        action='append',
        choices=[status.value for status in ComparisonStatus],
        help='Only show records with this status (repeatable)'
    )
    compare_parser.add_argument('--json', action='store_true', help='Output records as JSON')
    _add_limit_args(compare_parser)
    compare_parser.set_defaults(func=cmd_compare)

    # Count command
    count_parser = subparsers.add_parser('count', help='Count keys in a catalog')
    count_parser.add_argument('file', help='Catalog file (JSON)')
    count_parser.add_argument('-q', '--quiet', action='store_true', help='Print only the number')
    _add_limit_args(count_parser)
    count_parser.set_defaults(func=cmd_count)

    # Tree command
    tree_parser = subparsers.add_parser('tree', help='Show the reconciled tree')
    tree_parser.add_argument('left', help='Left catalog (JSON)')
    tree_parser.add_argument('right', help='Right catalog (JSON)')
    _add_limit_args(tree_parser)
    tree_parser.set_defaults(func=cmd_tree)

    # Fill-missing command
    fill_parser = subparsers.add_parser('fill-missing', help='Copy missing keys to one side and export')
    fill_parser.add_argument('left', help='Left catalog (JSON)')
    fill_parser.add_argument('right', help='Right catalog (JSON)')
    fill_parser.add_argument(
        '--side',
        required=True,
        choices=[side.value for side in Side],
        help='Side that receives the missing keys'
    )
    fill_parser.add_argument(
        '-O', '--output-dir',
        default=DEFAULT_OUTPUT_DIR,
        help=f'Output directory (default: {DEFAULT_OUTPUT_DIR})'
    )
    fill_parser.add_argument('--compact', action='store_true', help='Write compact JSON')
    _add_limit_args(fill_parser)
    fill_parser.set_defaults(func=cmd_fill_missing)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)

    try:
        args.func(args)
    except CatalogLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
