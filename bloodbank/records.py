"""Donor records kept in a plain text file, one donor per line."""

from __future__ import annotations

import os
import random
import re
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MIN_CUSTOMER_ID = 1000
MAX_CUSTOMER_ID = 9999
_ID_WIDTH = 9
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_FIRST_FIELD = re.compile(r"\S*")


def _leading_int(line: str) -> int | None:
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def _text(value: object) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


class Gender(Enum):
    """Gender as stored in the records file."""

    MALE = "Male"
    FEMALE = "Female"
    NOT_SPECIFY = "Unspecified"

    @classmethod
    def parse(cls, text: str) -> Gender:
        """Read a gender from its first letter: M, F or N."""
        codes = {"M": cls.MALE, "F": cls.FEMALE, "N": cls.NOT_SPECIFY}
        try:
            return codes[text[:1]]
        except KeyError:
            raise ValueError("Invalid gender input.") from None


class BloodGroup(Enum):
    """The eight ABO/Rh blood groups."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

    @classmethod
    def parse(cls, text: str) -> BloodGroup:
        """Read a blood group written exactly as stored, e.g. ``AB-``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError("Invalid blood group input.") from None


def format_customer_info(customer_id, name, age, gender, blood_group) -> str:
    """Return the multi-line description of a donor."""
    return (
        f"ID: {customer_id}\n"
        f"Name: {name}\n"
        f"Age: {age}\n"
        f"Gender: {_text(gender)}\n"
        f"Blood Group: {_text(blood_group)}\n"
    )


@dataclass
class Donor:
    """One registered donor."""

    customer_id: int
    name: str
    age: int
    gender: str
    blood_group: str

    @classmethod
    def from_line(cls, line: str) -> Donor:
        """Parse a record line: ``id name age gender blood_group``."""
        fields = line.split()
        if len(fields) < 5:
            raise ValueError(f"malformed donor record: {line!r}")
        try:
            customer_id = int(fields[0])
            age = int(fields[2])
        except ValueError:
            raise ValueError(f"malformed donor record: {line!r}") from None
        return cls(customer_id, fields[1], age, fields[3], fields[4])

    def to_line(self) -> str:
        return (
            f"{self.customer_id} {self.name} {self.age} "
            f"{_text(self.gender)} {_text(self.blood_group)}"
        )

    def describe(self) -> str:
        return format_customer_info(
            self.customer_id, self.name, self.age, self.gender, self.blood_group
        )


class RecordStore:
    """The donor records file."""

    def __init__(self, path: str | os.PathLike = "records.txt") -> None:
        self.path = Path(path)

    def _lines(self) -> list[str]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                return handle.readlines()
        except FileNotFoundError:
            return []

    def existing_ids(self) -> list[str]:
        """The first field of every line, cut to nine characters."""
        return [
            _FIRST_FIELD.match(line).group()[:_ID_WIDTH] for line in self._lines()
        ]

    def is_registered(self, customer_id: int) -> bool:
        return str(customer_id) in self.existing_ids()

    def find(self, customer_id: int) -> Donor | None:
        """Return the first donor with this id, or None."""
        for line in self._lines():
            if _leading_int(line) == customer_id:
                return Donor.from_line(line)
        return None

    def append(self, donor: Donor) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write("\n" + donor.to_line())

    def replace(self, donor: Donor) -> None:
        """Rewrite every line of this donor's id; other lines stay as they are."""
        with self.path.open(encoding="utf-8") as handle:
            lines = handle.readlines()
        found = False
        updated = []
        for line in lines:
            if _leading_int(line) == donor.customer_id:
                updated.append(donor.to_line() + "\n")
                found = True
            else:
                updated.append(line)
        if not found:
            raise KeyError(donor.customer_id)
        _write_atomically(self.path, updated)

    def generate_customer_id(self, rng: random.Random | None = None) -> int:
        """Draw a random four-digit id that no record uses yet."""
        rng = rng or random.Random()
        taken = set(self.existing_ids())
        if all(
            str(n) in taken for n in range(MIN_CUSTOMER_ID, MAX_CUSTOMER_ID + 1)
        ):
            raise RuntimeError("no free customer id left")
        while True:
            candidate = rng.randint(MIN_CUSTOMER_ID, MAX_CUSTOMER_ID)
            if str(candidate) not in taken:
                return candidate


def _write_atomically(path: Path, lines: list[str]) -> None:
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", text=True)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.writelines(lines)
        os.replace(temp_name, path)
    except BaseException:
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise