#!/usr/bin/env python3
"""
Command-line interface for empstats.

Provides commands to collect employee records and to print aggregated
statistics over a records file.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from rich.logging import RichHandler

from empstats.aggregator import (
    AT_OR_ABOVE,
    UNDER,
    filter_joined_after,
    youngest_in_department_gender,
)
from empstats.builder import RecordBuilder, load_records, save_records
from empstats.config import Config
from empstats.employee import Employee
from empstats.exceptions import EmpstatsError, EmployeeNotFoundError
from empstats.output import OutputManager, Verbosity, get_output, set_output
from empstats.report import build_report

FORMATS = ("table", "yaml", "json")

# Report entries grouped by how they are displayed in table format
MAPPING_ENTRIES = [
    ("count_by_gender", "Employees by gender", "gender", "count"),
    ("average_age_by_gender", "Average age by gender", "gender", "average age"),
    ("count_by_department", "Employees by department", "department", "count"),
    ("average_salary_by_department", "Average salary by department", "department", "average salary"),
    ("average_salary_by_gender", "Average salary by gender", "gender", "average salary"),
    ("names_by_department", "Names by department", "department", "names"),
    ("gender_breakdown_for_departments", "Gender breakdown", "department", "genders"),
    ("total_and_average_salary", "Salary totals", "measure", "value"),
]

SINGLE_EMPLOYEE_ENTRIES = [
    ("max_salary_employee", "Highest paid employee"),
    ("most_experienced", "Most experienced employee"),
    ("oldest", "Oldest employee"),
    ("youngest_in_department_gender", "Youngest employee"),
]


def _resolve_records_file(file_arg: Optional[str]) -> Path:
    """Return the records file from --file, or the configured default."""
    if file_arg:
        return Path(file_arg).resolve()
    return Config.records_file()


def _load(file_arg: Optional[str]) -> List[Employee]:
    output = get_output()
    records_file = _resolve_records_file(file_arg)
    output.verbose(f"Loading records from {records_file}")
    employees = load_records(records_file)
    output.verbose(f"Loaded {len(employees)} employee record(s)")
    return employees


def _dump(data: Any, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False).rstrip("\n")


def display_report(report: Dict[str, Any]) -> None:
    """Print a report as a series of tables."""
    output = get_output()
    output.section(f"Report over {report['record_count']} employee(s)")

    output.mapping_table(
        "Departments",
        {str(index + 1): name for index, name in enumerate(report["distinct_departments"])},
        "#",
        "department",
    )
    for key, title, key_column, value_column in MAPPING_ENTRIES:
        if report.get(key) is not None:
            output.mapping_table(title, report[key], key_column, value_column)

    single = [(title, report[key]) for key, title in SINGLE_EMPLOYEE_ENTRIES if report.get(key)]
    for title, record in single:
        output.employee_table(title, [record])

    settings = report["settings"]
    output.employee_table(
        f"Joined after {settings['joined_after_year']}", report["joined_after"]
    )
    partition = report["partition_by_age_threshold"]
    output.employee_table(f"Under {settings['age_threshold']}", partition[UNDER])
    output.employee_table(f"{settings['age_threshold']} or older", partition[AT_OR_ABOVE])

    for key, message in report["errors"].items():
        output.warning(f"{key}: {message}")


def cmd_report(args: argparse.Namespace) -> None:
    """Handle the report subcommand."""
    output = get_output()
    try:
        settings = Config.settings()
        if getattr(args, "threshold", None) is not None:
            settings = settings._replace(age_threshold=args.threshold)
        if getattr(args, "year", None) is not None:
            settings = settings._replace(joined_after_year=args.year)

        employees = _load(args.file)
        if not employees:
            output.warning("No employee records found")

        report = build_report(employees, settings)
        fmt = getattr(args, "format", None) or "table"
        if fmt == "table":
            display_report(report)
        else:
            output.result(_dump(report, fmt))

    except FileNotFoundError as e:
        output.error(f"Error: {e}", suggestion="Pass --file or set EMPSTATS_RECORDS_FILE")
        sys.exit(1)
    except (EmpstatsError, ValueError) as e:
        output.error(f"Error: {e}")
        sys.exit(1)


def cmd_collect(args: argparse.Namespace) -> None:
    """Handle the collect subcommand."""
    output = get_output()
    try:
        destination = _resolve_records_file(args.output)
        builder = RecordBuilder(sys.stdin, output)
        output.info(f"Collecting employee records for {destination}")
        if args.count is None:
            output.prompt("enter number of employees")
        employees = builder.collect(args.count)
        save_records(employees, destination)
        output.success(f"Wrote {len(employees)} employee record(s) to {destination}")

    except (EmpstatsError, ValueError) as e:
        output.error(f"Error: {e}", suggestion="Enter whole numbers for id, age, year and salary")
        sys.exit(1)


def cmd_youngest(args: argparse.Namespace) -> None:
    """Handle the youngest subcommand."""
    output = get_output()
    try:
        employees = _load(args.file)
        employee = youngest_in_department_gender(employees, args.department, args.gender)
        if args.format == "table":
            output.employee_table("Youngest employee", [employee.to_dict()])
        else:
            output.result(_dump(employee.to_dict(), args.format))

    except FileNotFoundError as e:
        output.error(f"Error: {e}", suggestion="Pass --file or set EMPSTATS_RECORDS_FILE")
        sys.exit(1)
    except EmployeeNotFoundError as e:
        output.error(f"Error: {e}", suggestion="Check the department and gender spelling")
        sys.exit(1)
    except (EmpstatsError, ValueError) as e:
        output.error(f"Error: {e}")
        sys.exit(1)


def cmd_joined_after(args: argparse.Namespace) -> None:
    """Handle the joined-after subcommand."""
    output = get_output()
    try:
        year = args.year if args.year is not None else Config.joined_after_year()
        employees = filter_joined_after(_load(args.file), year)
        records = [employee.to_dict() for employee in employees]
        if args.format == "table":
            output.employee_table(f"Joined after {year}", records)
        else:
            output.result(_dump(records, args.format))

    except FileNotFoundError as e:
        output.error(f"Error: {e}", suggestion="Pass --file or set EMPSTATS_RECORDS_FILE")
        sys.exit(1)
    except (EmpstatsError, ValueError) as e:
        output.error(f"Error: {e}")
        sys.exit(1)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only show errors and final results",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed output including files read and debug logging",
    )


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        help="Path to the records file (defaults to ./employees.yaml or EMPSTATS_RECORDS_FILE)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="table",
        help="Output format (defaults to table)",
    )
    _add_common_arguments(parser)


def configure_logging(verbosity: Verbosity) -> None:
    """Route library logging through rich; DEBUG in verbose mode, WARNING otherwise."""
    level = logging.DEBUG if verbosity >= Verbosity.VERBOSE else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=get_output().error_console, show_path=False)],
        force=True,
    )


def main() -> None:
    """Main entry point for empstats CLI."""
    parser = argparse.ArgumentParser(
        description="empstats - Aggregate statistics over employee records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  empstats collect --output employees.yaml
  empstats report --file employees.yaml
  empstats report --format yaml --threshold 30
  empstats youngest --department sales --gender male
  empstats joined-after --year 2020 --format json

Records files are YAML or JSON, either a list of employees or a mapping
with an 'employees' list.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Report subcommand
    report_parser = subparsers.add_parser(
        "report",
        help="Print every aggregation over a records file",
    )
    _add_query_arguments(report_parser)
    report_parser.add_argument(
        "--threshold",
        type=int,
        help="Age threshold for the under/at-or-above split (defaults to 26 or EMPSTATS_AGE_THRESHOLD)",
    )
    report_parser.add_argument(
        "--year",
        type=int,
        help="Join year for the joined-after list (defaults to 2015 or EMPSTATS_JOINED_AFTER_YEAR)",
    )
    report_parser.set_defaults(func=cmd_report)

    # Collect subcommand
    collect_parser = subparsers.add_parser(
        "collect",
        help="Enter employee records interactively and save them to a records file",
    )
    collect_parser.add_argument(
        "--output",
        help="Records file to write (defaults to ./employees.yaml or EMPSTATS_RECORDS_FILE)",
    )
    collect_parser.add_argument(
        "--count",
        type=int,
        help="Number of employees to enter (asked for when omitted)",
    )
    _add_common_arguments(collect_parser)
    collect_parser.set_defaults(func=cmd_collect)

    # Youngest subcommand
    youngest_parser = subparsers.add_parser(
        "youngest",
        help="Find the youngest employee of a department and gender",
    )
    youngest_parser.add_argument("--department", required=True, help="Department to search")
    youngest_parser.add_argument("--gender", required=True, help="Gender to search")
    _add_query_arguments(youngest_parser)
    youngest_parser.set_defaults(func=cmd_youngest)

    # Joined-after subcommand
    joined_parser = subparsers.add_parser(
        "joined-after",
        help="List employees who joined after a given year",
    )
    joined_parser.add_argument(
        "--year",
        type=int,
        help="Join year (defaults to 2015 or EMPSTATS_JOINED_AFTER_YEAR)",
    )
    _add_query_arguments(joined_parser)
    joined_parser.set_defaults(func=cmd_joined_after)

    args = parser.parse_args()

    # Set up verbosity
    if getattr(args, "quiet", False):
        verbosity = Verbosity.QUIET
    elif getattr(args, "verbose", False):
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    output_manager = OutputManager(verbosity=verbosity)
    set_output(output_manager)
    configure_logging(verbosity)

    # Call the appropriate command handler
    args.func(args)


if __name__ == "__main__":
    main()
