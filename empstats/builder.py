"""
Building employee lists from interactive input and from record files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Union

import yaml

from empstats.employee import Employee
from empstats.exceptions import RecordError
from empstats.output import OutputManager, get_output

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

# (field, prompt, is_integer), in the order they are asked for
PROMPTS = [
    ("id", "enter id", True),
    ("name", "enter name", False),
    ("age", "enter age", True),
    ("gender", "enter gender", False),
    ("department", "enter department", False),
    ("year_of_joining", "enter year of joining", True),
    ("salary", "enter the salary", True),
]


def _check_count(count: int) -> int:
    if count < 0:
        raise RecordError(f"Number of employees must not be negative, got {count}")
    return count


class RecordBuilder:
    """
    Collects employee records from a line-oriented input source.

    The input source is any iterable of lines (a file object, sys.stdin, a
    list of strings). Integer answers skip blank lines; text answers take
    the next line as-is, minus surrounding whitespace.
    """

    def __init__(self, input_source: Iterable[str], output: Optional[OutputManager] = None):
        """
        Initialize the builder.

        Args:
            input_source: Iterable of input lines
            output: OutputManager used for prompts (defaults to the global one)
        """
        self._lines: Iterator[str] = iter(input_source)
        self.output = output or get_output()

    def _next_line(self, field: str) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise RecordError(f"Input ended while reading '{field}'") from None

    def read_int(self, field: str) -> int:
        """
        Read the next non-blank line as an integer.

        Raises:
            RecordError: If the line is not an integer or input runs out
        """
        line = self._next_line(field).strip()
        while not line:
            line = self._next_line(field).strip()
        try:
            return int(line)
        except ValueError:
            raise RecordError(f"Expected an integer for '{field}', got {line!r}") from None

    def read_text(self, field: str) -> str:
        """
        Read the next line as text.

        Raises:
            RecordError: If the line is blank or input runs out
        """
        value = self._next_line(field).strip()
        if not value:
            raise RecordError(f"Field '{field}' must not be empty")
        return value

    def read_count(self) -> int:
        """Read the number of records to collect."""
        return _check_count(self.read_int("count"))

    def read_employee(self) -> Employee:
        """Prompt for and read a single employee."""
        values = {}
        for field, prompt, is_integer in PROMPTS:
            self.output.prompt(prompt)
            values[field] = self.read_int(field) if is_integer else self.read_text(field)
        return Employee(**values)

    def collect(self, count: Optional[int] = None) -> List[Employee]:
        """
        Collect employees from the input source.

        Args:
            count: Number of employees to read; read from input when None

        Returns:
            List of employees in the order they were entered

        Raises:
            RecordError: If count is negative or the input is malformed
        """
        if count is None:
            count = self.read_count()
        else:
            count = _check_count(count)
        employees = [self.read_employee() for _ in range(count)]
        logger.debug(f"Collected {len(employees)} employee record(s)")
        return employees


def _parse_document(path: Path, content: str) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(content)
        if suffix in JSON_SUFFIXES:
            return json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RecordError(f"Could not parse records file {path}: {e}") from e
    raise ValueError(
        f"Records file must be YAML or JSON ({', '.join(YAML_SUFFIXES + JSON_SUFFIXES)}): {path}"
    )


def load_records(path: Union[str, Path]) -> List[Employee]:
    """
    Load employees from a YAML or JSON records file.

    The document is either a list of records or a mapping whose
    "employees" key holds that list. An empty document gives an empty list.

    Args:
        path: Path to the records file

    Returns:
        List of employees in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file suffix is not supported
        RecordError: If the document or one of its records is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    document = _parse_document(path, path.read_text())
    if document is None:
        records = []
    elif isinstance(document, dict):
        if "employees" not in document:
            raise RecordError(f"Records file {path} has no 'employees' key")
        records = document["employees"] or []
    else:
        records = document

    if not isinstance(records, list):
        raise RecordError(f"Records file {path} must hold a list of employees")

    employees = []
    for index, record in enumerate(records):
        try:
            employees.append(Employee.from_dict(record))
        except RecordError as e:
            raise RecordError(f"Record {index} in {path}: {e}") from e

    logger.debug(f"Loaded {len(employees)} employee record(s) from {path}")
    return employees


def save_records(employees: Iterable[Employee], path: Union[str, Path]) -> Path:
    """
    Write employees to a YAML or JSON records file.

    Args:
        employees: Employees to write
        path: Destination file; the suffix selects the format

    Returns:
        Path that was written

    Raises:
        ValueError: If the file suffix is not supported
    """
    path = Path(path)
    document = {"employees": [employee.to_dict() for employee in employees]}
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        content = yaml.safe_dump(document, sort_keys=False)
    elif suffix in JSON_SUFFIXES:
        content = json.dumps(document, indent=2) + "\n"
    else:
        raise ValueError(
            f"Records file must be YAML or JSON ({', '.join(YAML_SUFFIXES + JSON_SUFFIXES)}): {path}"
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    logger.debug(f"Wrote {len(document['employees'])} employee record(s) to {path}")
    return path
