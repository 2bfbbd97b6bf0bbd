"""Pytest configuration and shared fixtures."""
import os
import sys
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from empstats.employee import Employee  # noqa: E402


def make_employees():
    return [
        Employee(1, "rakshith", 23, "male", "development", 2016, 3500000),
        Employee(2, "ramya", 25, "female", "design", 2023, 34000),
        Employee(3, "ranjini", 23, "female", "development", 2022, 350000),
        Employee(4, "kichha", 24, "male", "sales", 2022, 130000),
        Employee(5, "Dilip", 20, "male", "marketing", 2022, 300000),
    ]


@pytest.fixture
def employees():
    """The five-employee fixture list."""
    return make_employees()


@pytest.fixture
def records_file(tmp_path, employees):
    """A YAML records file holding the fixture employees."""
    path = tmp_path / "employees.yaml"
    lines = ["employees:"]
    for employee in employees:
        lines.append(f"  - id: {employee.id}")
        lines.append(f"    name: {employee.name}")
        lines.append(f"    age: {employee.age}")
        lines.append(f"    gender: {employee.gender}")
        lines.append(f"    department: {employee.department}")
        lines.append(f"    yearOfJoining: {employee.year_of_joining}")
        lines.append(f"    salary: {employee.salary}")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep EMPSTATS_* settings from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("EMPSTATS_"):
            monkeypatch.delenv(key, raising=False)
