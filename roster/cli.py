"""
Command-line interface for the employee children registry.

Notes
-----
The CLI is intentionally thin. It parses arguments and delegates to the record
store. With no command it launches the desktop GUI.

Exit codes
----------
- 0: success
- 2: unknown employee or invalid input
"""

from __future__ import annotations

import argparse
from pathlib import Path

from roster_engine.logging_setup import setup_logging
from roster_engine.record_store.errors import RecordStoreError
from roster_engine.record_store.input_rules import split_names
from roster_engine.record_store.json_store import open_record_store


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Employees and their children",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Path to the JSON data file. Defaults to data.json in the working directory.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO.",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("gui", help="Launch the desktop application (default)")
    sub.add_parser("list", help="List employees with their child counts")

    children_p = sub.add_parser("children", help="List the children of one employee")
    children_p.add_argument("employee", type=int, help="Employee position as shown by 'list'")

    emp_p = sub.add_parser("add-employee", help="Add an employee")
    emp_p.add_argument("name", help="Employee name")
    emp_p.add_argument(
        "--children",
        default=None,
        help="Comma-separated child names, e.g. 'Anna, Bob'.",
    )

    child_p = sub.add_parser("add-child", help="Add a child to an employee")
    child_p.add_argument("employee", type=int, help="Employee position as shown by 'list'")
    child_p.add_argument("name", help="Child name")
    child_p.add_argument("--age", required=True, help="Age as a whole number")
    child_p.add_argument("--appearance", default="", help="Free-form appearance text")
    child_p.add_argument("--favorite-color", default="", help="Favorite color")
    child_p.add_argument("--comments", default="", help="Free-form comments")

    return parser


def _run_gui(data_file: Path | None) -> int:
    # Imported lazily so headless commands work without a Qt installation.
    from gui.app import main as gui_main

    return gui_main(data_file)


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command in (None, "gui"):
        return _run_gui(args.data_file)

    store = open_record_store(args.data_file)

    try:
        if args.command == "list":
            for ref, employee in enumerate(store.list_employees()):
                print(f"{ref}\t{employee.name}\t{employee.child_count} children")
            return 0

        if args.command == "children":
            for child in store.children(args.employee):
                print(
                    f"{child.name}\t{child.age}\t{child.appearance}\t"
                    f"{child.favorite_color}\t{child.comments}"
                )
            return 0

        if args.command == "add-employee":
            ref = store.add_employee(
                args.name, [] if args.children is None else split_names(args.children)
            )
            print(f"Added employee {ref}: {args.name}")
            return 0

        if args.command == "add-child":
            child = store.add_child(
                args.employee,
                args.name,
                args.age,
                appearance=args.appearance,
                favorite_color=args.favorite_color,
                comments=args.comments,
            )
            print(f"Added child {child.name} ({child.age})")
            return 0
    except RecordStoreError as exc:
        print(f"ERROR: {exc}")
        return 2

    parser.print_help()
    return 0
