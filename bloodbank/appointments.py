"""Donation centers, their slots, and the appointments file."""

from __future__ import annotations

import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

MAX_LISTED_SLOTS = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_DEFAULT_SLOTS = (
    "2025-04-20 10:00 open",
    "2025-04-20 11:00 open",
    "2025-04-21 09:00 open",
)
_CENTER_NAMES = ("Arlington", "FortWorth", "Denton", "Irving")


class AppointmentError(Exception):
    """An appointment could not be found, chosen or changed."""


def _leading_int(line: str) -> int | None:
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


@dataclass
class Slot:
    """A time slot at a center: date, time and status."""

    date: str
    time: str
    status: str

    @classmethod
    def parse(cls, text: str) -> Slot:
        fields = text.split()
        if len(fields) != 3:
            raise ValueError(f"malformed slot: {text!r}")
        return cls(*fields)

    def is_open(self) -> bool:
        return "open" in self.status

    def __str__(self) -> str:
        return f"{self.date} {self.time} {self.status}"


@dataclass
class AppointmentCenter:
    """A donation center and its slots."""

    name: str
    slots: list[Slot] = field(default_factory=list)

    def open_slots(self) -> list[Slot]:
        """Open slots among the first ten, in order."""
        return [slot for slot in self.slots[:MAX_LISTED_SLOTS] if slot.is_open()]


def default_centers() -> dict[str, AppointmentCenter]:
    """Fresh centers in menu order, each with the standard slots."""
    return {
        name: AppointmentCenter(name, [Slot.parse(text) for text in _DEFAULT_SLOTS])
        for name in _CENTER_NAMES
    }


def get_center(centers: dict[str, AppointmentCenter], name: str) -> AppointmentCenter:
    try:
        return centers[name]
    except KeyError:
        raise AppointmentError("Invalid center") from None


@dataclass
class Appointment:
    """A customer's booked appointment."""

    customer_id: int
    location: str
    date: str
    time: str

    @classmethod
    def from_line(cls, line: str) -> Appointment:
        """Parse ``id location date time``; anything after is ignored."""
        fields = line.split()
        if len(fields) < 4:
            raise ValueError(f"malformed appointment: {line!r}")
        try:
            customer_id = int(fields[0])
        except ValueError:
            raise ValueError(f"malformed appointment: {line!r}") from None
        return cls(customer_id, fields[1], fields[2], fields[3])

    def to_line(self) -> str:
        return f"{self.customer_id} {self.location} {self.date} {self.time}"

    def describe(self) -> str:
        return f"{self.date} at {self.time} at {self.location}"


class AppointmentBook:
    """The appointments file."""

    def __init__(self, path: str | os.PathLike = "appointments.txt") -> None:
        self.path = Path(path)

    def _lines(self) -> list[str]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                return handle.readlines()
        except FileNotFoundError:
            return []

    def find(self, customer_id: int) -> Appointment | None:
        """The customer's appointment, or None if there is none."""
        for line in self._lines():
            if _leading_int(line) == customer_id:
                return Appointment.from_line(line)
        return None

    def add(self, appointment: Appointment) -> None:
        existing = self.find(appointment.customer_id)
        if existing is not None:
            raise AppointmentError(
                f"You have an existing appointment on {existing.describe()}"
            )
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write("\n" + appointment.to_line())

    def reschedule(self, customer_id: int, date: str, time: str) -> Appointment:
        """Move the customer's appointment to a new date and time at the same center."""
        old = self.find(customer_id)
        if old is None:
            raise AppointmentError("You don't have an existing appointment")
        new = Appointment(customer_id, old.location, date, time)
        updated = [
            new.to_line() + "\n" if _leading_int(line) == customer_id else line
            for line in self._lines()
        ]
        _write_atomically(self.path, updated)
        return new


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