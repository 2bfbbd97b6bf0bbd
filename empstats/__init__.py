"""
empstats - Grouped statistics over in-memory employee records.
"""

from empstats.employee import Employee
from empstats.exceptions import EmpstatsError, EmployeeNotFoundError, EmptyInputError, RecordError
from empstats.aggregator import (
    count_by_gender,
    distinct_departments,
    average_age_by_gender,
    max_salary_employee,
    filter_joined_after,
    count_by_department,
    average_salary_by_department,
    youngest_in_department_gender,
    most_experienced,
    gender_breakdown_for_departments,
    average_salary_by_gender,
    names_by_department,
    total_and_average_salary,
    partition_by_age_threshold,
    oldest,
)
from empstats.builder import RecordBuilder, load_records, save_records
from empstats.config import Config, ReportSettings, config
from empstats.report import build_report

__all__ = [
    "Employee",
    "EmpstatsError",
    "EmployeeNotFoundError",
    "EmptyInputError",
    "RecordError",
    "count_by_gender",
    "distinct_departments",
    "average_age_by_gender",
    "max_salary_employee",
    "filter_joined_after",
    "count_by_department",
    "average_salary_by_department",
    "youngest_in_department_gender",
    "most_experienced",
    "gender_breakdown_for_departments",
    "average_salary_by_gender",
    "names_by_department",
    "total_and_average_salary",
    "partition_by_age_threshold",
    "oldest",
    "RecordBuilder",
    "load_records",
    "save_records",
    "Config",
    "ReportSettings",
    "config",
    "build_report",
]

__version__ = "0.1.0"
