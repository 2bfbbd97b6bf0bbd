"""
Centralized configuration management for empstats.

Provides a unified interface for accessing environment variables and
configuration with defaults and validation.
"""

import os
from pathlib import Path
from typing import NamedTuple, Optional, Tuple

DEFAULT_AGE_THRESHOLD = 26
DEFAULT_JOINED_AFTER_YEAR = 2015
DEFAULT_BREAKDOWN_DEPARTMENTS = ("sales", "marketing")
DEFAULT_YOUNGEST_DEPARTMENT = "productDevelopment"
DEFAULT_YOUNGEST_GENDER = "male"


class ReportSettings(NamedTuple):
    """Parameters for the queries that take arguments in a full report."""

    age_threshold: int = DEFAULT_AGE_THRESHOLD
    joined_after_year: int = DEFAULT_JOINED_AFTER_YEAR
    breakdown_departments: Tuple[str, ...] = DEFAULT_BREAKDOWN_DEPARTMENTS
    youngest_department: str = DEFAULT_YOUNGEST_DEPARTMENT
    youngest_gender: str = DEFAULT_YOUNGEST_GENDER


class Config:
    """
    Centralized configuration management.

    Provides access to environment variables and configuration with
    sensible defaults and validation.
    """

    @staticmethod
    def get(key: str, default: Optional[str] = None, required: bool = False) -> str:
        """
        Get an environment variable with optional default and validation.

        Args:
            key: Environment variable name
            default: Default value if not set
            required: If True, raise ValueError if not set

        Returns:
            Environment variable value or default

        Raises:
            ValueError: If required=True and variable is not set
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"Required environment variable {key} is not set")
        return value or ""

    @staticmethod
    def get_int(key: str, default: int) -> int:
        """
        Get an integer environment variable.

        Args:
            key: Environment variable name
            default: Default value if not set or empty

        Returns:
            Integer value

        Raises:
            ValueError: If the variable is set to a non-integer value
        """
        value = os.getenv(key, "").strip()
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Environment variable {key} must be an integer, got {value!r}")

    @staticmethod
    def get_list(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
        """
        Get a comma-separated environment variable as a tuple of strings.

        Blank items are dropped; an unset or blank variable gives the default.
        """
        value = os.getenv(key, "")
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    @staticmethod
    def records_file() -> Path:
        """
        Get the default employee records file.

        Checks EMPSTATS_RECORDS_FILE first, then defaults to employees.yaml
        in the current working directory.

        Returns:
            Path to the records file
        """
        env_file = os.getenv("EMPSTATS_RECORDS_FILE")
        if env_file:
            return Path(env_file).resolve()
        return Path.cwd() / "employees.yaml"

    @staticmethod
    def age_threshold() -> int:
        """Age below which an employee counts as 'under' (defaults to 26)."""
        return Config.get_int("EMPSTATS_AGE_THRESHOLD", DEFAULT_AGE_THRESHOLD)

    @staticmethod
    def joined_after_year() -> int:
        """Year used by the joined-after filter (defaults to 2015)."""
        return Config.get_int("EMPSTATS_JOINED_AFTER_YEAR", DEFAULT_JOINED_AFTER_YEAR)

    @staticmethod
    def breakdown_departments() -> Tuple[str, ...]:
        """Departments covered by the gender breakdown (defaults to sales, marketing)."""
        return Config.get_list("EMPSTATS_BREAKDOWN_DEPARTMENTS", DEFAULT_BREAKDOWN_DEPARTMENTS)

    @staticmethod
    def youngest_department() -> str:
        return Config.get("EMPSTATS_YOUNGEST_DEPARTMENT", DEFAULT_YOUNGEST_DEPARTMENT)

    @staticmethod
    def youngest_gender() -> str:
        return Config.get("EMPSTATS_YOUNGEST_GENDER", DEFAULT_YOUNGEST_GENDER)

    @staticmethod
    def settings() -> ReportSettings:
        """
        Collect the report settings from the environment.

        Raises:
            ValueError: If an integer setting is malformed
        """
        return ReportSettings(
            age_threshold=Config.age_threshold(),
            joined_after_year=Config.joined_after_year(),
            breakdown_departments=Config.breakdown_departments(),
            youngest_department=Config.youngest_department(),
            youngest_gender=Config.youngest_gender(),
        )


# Global config instance for convenience
config = Config()
