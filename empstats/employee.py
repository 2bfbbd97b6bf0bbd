from typing import Any, Dict, Mapping

from empstats.exceptions import RecordError

# Field name -> accepted keys in a record mapping, in lookup order
FIELD_KEYS = {
    "id": ("id",),
    "name": ("name",),
    "age": ("age",),
    "gender": ("gender",),
    "department": ("department",),
    "year_of_joining": ("year_of_joining", "yearOfJoining"),
    "salary": ("salary",),
}

INT_FIELDS = ("id", "age", "year_of_joining", "salary")
STR_FIELDS = ("name", "gender", "department")


class Employee:
    """An employee record. Values are fixed at construction."""

    __slots__ = ("_id", "_name", "_age", "_gender", "_department", "_year_of_joining", "_salary")

    def __init__(
        self,
        id: int,
        name: str,
        age: int,
        gender: str,
        department: str,
        year_of_joining: int,
        salary: int,
    ):
        self._id = id
        self._name = name
        self._age = age
        self._gender = gender
        self._department = department
        self._year_of_joining = year_of_joining
        self._salary = salary

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def gender(self) -> str:
        return self._gender

    @property
    def department(self) -> str:
        return self._department

    @property
    def year_of_joining(self) -> int:
        return self._year_of_joining

    @property
    def salary(self) -> int:
        return self._salary

    def _fields(self) -> tuple:
        return (
            self._id,
            self._name,
            self._age,
            self._gender,
            self._department,
            self._year_of_joining,
            self._salary,
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Employee):
            return False
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id}, name={self._name!r}, age={self._age}, "
            f"gender={self._gender!r}, department={self._department!r}, "
            f"year_of_joining={self._year_of_joining}, salary={self._salary})"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """
        Build an employee from a record mapping.

        Accepts both ``year_of_joining`` and ``yearOfJoining``. Integer fields
        are coerced with ``int()``.

        Args:
            data: Mapping holding the seven employee fields

        Returns:
            Employee instance

        Raises:
            RecordError: If a field is missing, an integer field is not numeric,
                or a text field is not a string
        """
        if not isinstance(data, Mapping):
            raise RecordError(f"Employee record must be a mapping, got {type(data).__name__}")

        values: Dict[str, Any] = {}
        for field, keys in FIELD_KEYS.items():
            for key in keys:
                if key in data and data[key] is not None:
                    values[field] = data[key]
                    break
            else:
                raise RecordError(f"Employee record is missing field '{field}'")

        for field in INT_FIELDS:
            try:
                values[field] = int(values[field])
            except (TypeError, ValueError) as e:
                raise RecordError(
                    f"Employee field '{field}' must be an integer, got {values[field]!r}"
                ) from e

        for field in STR_FIELDS:
            if not isinstance(values[field], str):
                raise RecordError(
                    f"Employee field '{field}' must be text, got {values[field]!r}"
                )

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a plain mapping."""
        return {
            "id": self._id,
            "name": self._name,
            "age": self._age,
            "gender": self._gender,
            "department": self._department,
            "year_of_joining": self._year_of_joining,
            "salary": self._salary,
        }
