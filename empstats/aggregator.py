"""
Aggregations over a list of employees.

Every function is read-only over its input and returns a fresh result.
Gender and department comparisons ignore case; a group is labelled with the
spelling of its first occurrence and groups are ordered by first occurrence.
"""

import logging
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Sequence

from empstats.config import (
    DEFAULT_AGE_THRESHOLD,
    DEFAULT_BREAKDOWN_DEPARTMENTS,
    DEFAULT_JOINED_AFTER_YEAR,
)
from empstats.employee import Employee
from empstats.exceptions import EmployeeNotFoundError, EmptyInputError
from empstats.grouping import (
    average_by,
    count_by,
    distinct,
    first_max,
    first_min,
    group_by,
    map_by,
    partition,
)

logger = logging.getLogger(__name__)

UNDER = "under"
AT_OR_ABOVE = "atOrAbove"

_gender = attrgetter("gender")
_department = attrgetter("department")
_age = attrgetter("age")
_salary = attrgetter("salary")
_year_of_joining = attrgetter("year_of_joining")


def count_by_gender(employees: Sequence[Employee]) -> Dict[str, int]:
    """Count employees per gender."""
    return count_by(employees, _gender)


def distinct_departments(employees: Sequence[Employee]) -> List[str]:
    """Return every department once, in order of first appearance."""
    return distinct(employee.department for employee in employees)


def average_age_by_gender(employees: Sequence[Employee]) -> Dict[str, float]:
    """Average age per gender, rounded to 2 decimals."""
    return average_by(employees, _gender, _age)


def max_salary_employee(employees: Sequence[Employee]) -> Employee:
    """
    Return the highest paid employee.

    Raises:
        EmptyInputError: If employees is empty
    """
    return first_max(employees, _salary, operation="max_salary_employee")


def filter_joined_after(
    employees: Sequence[Employee], year: int = DEFAULT_JOINED_AFTER_YEAR
) -> List[Employee]:
    """Employees whose year of joining is strictly after year, in input order."""
    return [employee for employee in employees if employee.year_of_joining > year]


def count_by_department(employees: Sequence[Employee]) -> Dict[str, int]:
    """Count employees per department."""
    return count_by(employees, _department)


def average_salary_by_department(employees: Sequence[Employee]) -> Dict[str, float]:
    """Average salary per department, rounded to 2 decimals."""
    return average_by(employees, _department, _salary)


def youngest_in_department_gender(
    employees: Sequence[Employee], department: str, gender: str
) -> Employee:
    """
    Return the youngest employee of the given department and gender.

    Both filters ignore case. The earliest employee wins a tie on age.

    Args:
        employees: Employees to search
        department: Department to match
        gender: Gender to match

    Returns:
        The youngest matching employee

    Raises:
        EmployeeNotFoundError: If no employee matches both filters
    """
    wanted_department = department.casefold()
    wanted_gender = gender.casefold()
    matches = [
        employee
        for employee in employees
        if employee.department.casefold() == wanted_department
        and employee.gender.casefold() == wanted_gender
    ]
    logger.debug(f"Found {len(matches)} {gender} employee(s) in {department}")
    if not matches:
        raise EmployeeNotFoundError(department)
    return first_min(matches, _age)


def most_experienced(employees: Sequence[Employee]) -> Employee:
    """
    Return the employee with the earliest year of joining.

    Raises:
        EmptyInputError: If employees is empty
    """
    return first_min(employees, _year_of_joining, operation="most_experienced")


def gender_breakdown_for_departments(
    employees: Sequence[Employee],
    departments: Iterable[str] = DEFAULT_BREAKDOWN_DEPARTMENTS,
) -> Dict[str, Dict[str, int]]:
    """
    Count employees per gender inside each requested department.

    The result has exactly the requested departments as keys, in request
    order. A department without employees maps to an empty dict.
    """
    by_department = {
        label.casefold(): group for label, group in group_by(employees, _department).items()
    }
    breakdown: Dict[str, Dict[str, int]] = {}
    for department in departments:
        members = by_department.get(department.casefold(), [])
        breakdown[department] = count_by(members, _gender)
    return breakdown


def average_salary_by_gender(employees: Sequence[Employee]) -> Dict[str, float]:
    """Average salary per gender, rounded to 2 decimals."""
    return average_by(employees, _gender, _salary)


def names_by_department(employees: Sequence[Employee]) -> Dict[str, List[str]]:
    """Employee names per department, in input order."""
    return map_by(employees, _department, attrgetter("name"))


def total_and_average_salary(employees: Sequence[Employee]) -> Dict[str, int]:
    """
    Return the total salary and its integer average.

    The average is total // count.

    Raises:
        EmptyInputError: If employees is empty
    """
    if not employees:
        raise EmptyInputError("total_and_average_salary")
    total = sum(employee.salary for employee in employees)
    return {"total": total, "average": total // len(employees)}


def partition_by_age_threshold(
    employees: Sequence[Employee], threshold: Optional[int] = DEFAULT_AGE_THRESHOLD
) -> Dict[str, List[Employee]]:
    """
    Split employees at an age threshold.

    Returns:
        Dictionary with "under" (age < threshold) and "atOrAbove" lists,
        each in input order
    """
    if threshold is None:
        threshold = DEFAULT_AGE_THRESHOLD
    under, at_or_above = partition(employees, lambda employee: employee.age < threshold)
    return {UNDER: under, AT_OR_ABOVE: at_or_above}


def oldest(employees: Sequence[Employee]) -> Employee:
    """
    Return the oldest employee.

    Raises:
        EmptyInputError: If employees is empty
    """
    return first_max(employees, _age, operation="oldest")
