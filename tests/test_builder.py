"""Unit tests for RecordBuilder and record files."""

import io
import json

import pytest
import yaml
from unittest.mock import MagicMock

from empstats.builder import RecordBuilder, load_records, save_records
from empstats.employee import Employee
from empstats.exceptions import RecordError

ANSWERS = """2
1
rakshith
23
male
development
2016
3500000
2
ramya
25
female
design
2023
34000
"""


class TestRecordBuilder:
    """Test cases for RecordBuilder class."""

    def test_collect_reads_count(self):
        """Test collecting with the count read from input."""
        output = MagicMock()
        builder = RecordBuilder(io.StringIO(ANSWERS), output)
        employees = builder.collect()
        assert employees == [
            Employee(1, "rakshith", 23, "male", "development", 2016, 3500000),
            Employee(2, "ramya", 25, "female", "design", 2023, 34000),
        ]

    def test_prompts_in_order(self):
        """Test that each field is prompted for in the fixed order."""
        output = MagicMock()
        builder = RecordBuilder(ANSWERS.splitlines()[1:9], output)
        builder.collect(1)
        prompts = [call.args[0] for call in output.prompt.call_args_list]
        assert prompts == [
            "enter id",
            "enter name",
            "enter age",
            "enter gender",
            "enter department",
            "enter year of joining",
            "enter the salary",
        ]

    def test_explicit_count(self):
        """Test that an explicit count skips reading it from input."""
        builder = RecordBuilder(ANSWERS.splitlines()[1:], MagicMock())
        employees = builder.collect(2)
        assert [e.name for e in employees] == ["rakshith", "ramya"]

    def test_blank_lines_before_integers(self):
        """Test that blank lines are skipped where an integer is expected."""
        lines = ["", "1", "", "7", "Ann Lee", "", "31", "female", "sales", "2019", "", "900"]
        employees = RecordBuilder(lines, MagicMock()).collect()
        assert employees == [Employee(7, "Ann Lee", 31, "female", "sales", 2019, 900)]

    def test_zero_count(self):
        """Test collecting no employees."""
        assert RecordBuilder(["0"], MagicMock()).collect() == []

    def test_non_integer(self):
        """Test that text where an integer is expected raises RecordError."""
        lines = ["1", "abc"]
        with pytest.raises(RecordError, match="'id'"):
            RecordBuilder(lines, MagicMock()).collect()

    def test_negative_count(self):
        """Test that a negative count raises RecordError."""
        with pytest.raises(RecordError, match="negative"):
            RecordBuilder(["-1"], MagicMock()).collect()

    def test_negative_explicit_count(self):
        """Test that a negative count passed to collect raises RecordError."""
        with pytest.raises(RecordError, match="negative"):
            RecordBuilder(ANSWERS.splitlines()[1:], MagicMock()).collect(-3)

    def test_input_ends_early(self):
        """Test that running out of input raises RecordError."""
        lines = ["1", "1", "rakshith"]
        with pytest.raises(RecordError, match="Input ended"):
            RecordBuilder(lines, MagicMock()).collect()

    def test_empty_name(self):
        """Test that a blank name raises RecordError."""
        lines = ["1", "1", "   "]
        with pytest.raises(RecordError, match="name"):
            RecordBuilder(lines, MagicMock()).collect()


class TestRecordFiles:
    """Test cases for load_records and save_records."""

    def test_load_yaml(self, records_file, employees):
        """Test loading the fixture from YAML."""
        assert load_records(records_file) == employees

    def test_load_json_list(self, tmp_path, employees):
        """Test loading a JSON list of records."""
        path = tmp_path / "staff.json"
        path.write_text(json.dumps([e.to_dict() for e in employees]))
        assert load_records(path) == employees

    def test_save_and_load(self, tmp_path, employees):
        """Test that saved records load back unchanged."""
        for name in ("out/staff.yaml", "out/staff.json"):
            path = save_records(employees, tmp_path / name)
            assert path.exists()
            assert load_records(path) == employees

    def test_saved_yaml_layout(self, tmp_path, employees):
        """Test that YAML output holds an employees list in input order."""
        path = save_records(employees[:2], tmp_path / "staff.yml")
        document = yaml.safe_load(path.read_text())
        assert [r["name"] for r in document["employees"]] == ["rakshith", "ramya"]

    def test_empty_document(self, tmp_path):
        """Test that an empty file gives no employees."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_records(path) == []

    def test_missing_file(self, tmp_path):
        """Test loading a non-existent file."""
        with pytest.raises(FileNotFoundError, match="Records file not found"):
            load_records(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        """Test loading a file that is neither YAML nor JSON."""
        path = tmp_path / "staff.csv"
        path.write_text("id,name\n")
        with pytest.raises(ValueError, match="must be YAML or JSON"):
            load_records(path)

    def test_save_unsupported_suffix(self, tmp_path, employees):
        """Test saving to an unsupported format."""
        with pytest.raises(ValueError, match="must be YAML or JSON"):
            save_records(employees, tmp_path / "staff.txt")

    def test_malformed_yaml(self, tmp_path):
        """Test that unparsable YAML raises RecordError."""
        path = tmp_path / "bad.yaml"
        path.write_text("employees: [unclosed\n")
        with pytest.raises(RecordError, match="Could not parse"):
            load_records(path)

    def test_mapping_without_employees(self, tmp_path):
        """Test that a mapping without an employees key raises RecordError."""
        path = tmp_path / "staff.yaml"
        path.write_text("staff: []\n")
        with pytest.raises(RecordError, match="employees"):
            load_records(path)

    def test_bad_record_reports_index(self, tmp_path):
        """Test that a malformed record is reported with its position."""
        path = tmp_path / "staff.yaml"
        path.write_text("- id: 1\n  name: x\n")
        with pytest.raises(RecordError, match="Record 0"):
            load_records(path)

    def test_numeric_department_rejected(self, tmp_path):
        """Test that a YAML number in a text field is reported instead of loaded."""
        path = tmp_path / "staff.yaml"
        path.write_text(
            "- {id: 1, name: a, age: 30, gender: male, department: 101, "
            "yearOfJoining: 2020, salary: 5}\n"
        )
        with pytest.raises(RecordError, match="department"):
            load_records(path)
