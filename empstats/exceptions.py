"""
Error types raised by empstats.
"""


class EmpstatsError(Exception):
    """Base class for all empstats errors."""


class EmployeeNotFoundError(EmpstatsError, LookupError):
    """Raised when a filtered employee search yields no match."""

    def __init__(self, department: str):
        self.department = department
        super().__init__(f"there is no employee in the given department: {department}")


class EmptyInputError(EmpstatsError, ValueError):
    """Raised when an operation needs at least one employee and got none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires at least one employee")


class RecordError(EmpstatsError, ValueError):
    """Raised when an employee record cannot be built from its input."""
