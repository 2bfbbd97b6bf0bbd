"""
Full report over a list of employees.

Runs every aggregation and collects the results into one plain mapping
that serializes to YAML or JSON as-is.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

from empstats import aggregator
from empstats.config import ReportSettings
from empstats.employee import Employee
from empstats.exceptions import EmployeeNotFoundError, EmptyInputError

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    """Convert employees inside a result to mappings."""
    if isinstance(value, Employee):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def build_report(
    employees: Sequence[Employee], settings: Optional[ReportSettings] = None
) -> Dict[str, Any]:
    """
    Run every aggregation over employees.

    An aggregation that fails on this input (no employees, or no match for
    the youngest query) is reported as None, with its message under
    "errors"; the remaining entries are still computed.

    Args:
        employees: Employees to aggregate
        settings: Query parameters (defaults to ReportSettings())

    Returns:
        Report mapping with one entry per aggregation
    """
    settings = settings or ReportSettings()
    errors: Dict[str, str] = {}

    queries: Dict[str, Callable[[], Any]] = {
        "count_by_gender": lambda: aggregator.count_by_gender(employees),
        "distinct_departments": lambda: aggregator.distinct_departments(employees),
        "average_age_by_gender": lambda: aggregator.average_age_by_gender(employees),
        "max_salary_employee": lambda: aggregator.max_salary_employee(employees),
        "joined_after": lambda: aggregator.filter_joined_after(
            employees, settings.joined_after_year
        ),
        "count_by_department": lambda: aggregator.count_by_department(employees),
        "average_salary_by_department": lambda: aggregator.average_salary_by_department(
            employees
        ),
        "youngest_in_department_gender": lambda: aggregator.youngest_in_department_gender(
            employees, settings.youngest_department, settings.youngest_gender
        ),
        "most_experienced": lambda: aggregator.most_experienced(employees),
        "gender_breakdown_for_departments": lambda: aggregator.gender_breakdown_for_departments(
            employees, settings.breakdown_departments
        ),
        "average_salary_by_gender": lambda: aggregator.average_salary_by_gender(employees),
        "names_by_department": lambda: aggregator.names_by_department(employees),
        "total_and_average_salary": lambda: aggregator.total_and_average_salary(employees),
        "partition_by_age_threshold": lambda: aggregator.partition_by_age_threshold(
            employees, settings.age_threshold
        ),
        "oldest": lambda: aggregator.oldest(employees),
    }

    report: Dict[str, Any] = {"record_count": len(employees)}
    for name, query in queries.items():
        try:
            report[name] = _plain(query())
        except (EmptyInputError, EmployeeNotFoundError) as e:
            logger.debug(f"{name} failed: {e}")
            report[name] = None
            errors[name] = str(e)

    report["settings"] = {
        "age_threshold": settings.age_threshold,
        "joined_after_year": settings.joined_after_year,
        "breakdown_departments": list(settings.breakdown_departments),
        "youngest_department": settings.youngest_department,
        "youngest_gender": settings.youngest_gender,
    }
    report["errors"] = errors
    return report
