"""Interactive menu for registering donors and booking donation appointments."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from typing import TextIO

from bloodbank.appointments import (
    Appointment,
    AppointmentBook,
    AppointmentCenter,
    AppointmentError,
    Slot,
    default_centers,
    get_center,
)
from bloodbank.records import BloodGroup, Donor, Gender, RecordStore, format_customer_info

MIN_AGE = 18
_BOX_WIDTH = 60
_COLORS = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU_LINES = (
    "╔════════════════════════ MAIN MENU ═════════════════════════╗",
    "║                                                            ║",
    "║  1. Register                                               ║",
    "║  2. Schedule your appointment                              ║",
    "║  3. Change your appointment                                ║",
    "║  4. Update Donor                                           ║",
    "║  5. Exit                                                   ║",
    "║                                                            ║",
    "╚════════════════════════════════════════════════════════════╝",
)


class Console:
    """Line-oriented terminal input and output with optional ANSI colors."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        *,
        color: bool = True,
        delay: float = 0.3,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.color = color
        self.delay = delay

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, text: str) -> None:
        self._write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the next input line, stripped."""
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.strip()

    def ask_int(self, prompt: str) -> int:
        """Ask for a number; the answer must start with an integer."""
        answer = self.ask(prompt)
        match = _LEADING_INT.match(answer)
        if not match:
            raise ValueError(f"not a number: {answer!r}")
        return int(match.group(1))

    def box(self, text: str, color: str) -> None:
        """Print text inside a double-line frame."""
        rows = ["╔" + "═" * _BOX_WIDTH + "╗"]
        rows += ["║" + f"  {line}".ljust(_BOX_WIDTH) + "║" for line in text.split("\n")]
        rows.append("╚" + "═" * _BOX_WIDTH + "╝")
        self.say("")
        for row in rows:
            self.say(_paint(self, row, color))


def _paint(console: Console, text: str, color: str) -> str:
    if not console.color:
        return text
    return f"\033[1;{_COLORS[color]}m{text}\033[0m"


def _success(console: Console, message: str) -> None:
    console.box(f"✓  {message}", "green")


def _error(console: Console, message: str) -> None:
    console.box(f"✗  {message}", "red")


def _warn(console: Console, message: str) -> None:
    console.say(_paint(console, message, "yellow"))


def _divider(console: Console) -> None:
    console.say(_paint(console, "─" * 62, "cyan"))


def _progress(console: Console) -> None:
    console._write("\nProcessing")
    for _ in range(5):
        console._write(".")
        if console.delay:
            time.sleep(console.delay)
    console.say("")


def _ask_word(console: Console, prompt: str) -> str:
    """Ask until a non-blank answer comes; return its first word."""
    while True:
        words = console.ask(prompt).split()
        if words:
            return words[0]


def register_user(console: Console, records: RecordStore, rng: random.Random | None = None) -> Donor | None:
    """Run the registration form; return the new donor, or None if not eligible."""
    console.box("DONOR REGISTRATION FORM", "blue")
    name = _ask_word(console, _paint(console, "Enter your name: ", "cyan"))

    while True:
        try:
            age = console.ask_int(_paint(console, "Enter your age: ", "cyan"))
            break
        except ValueError:
            console.say(_paint(console, "Invalid age input.", "red"))
    if age < MIN_AGE:
        console.say(_paint(console, "You are not eligible", "red"))
        return None
    console.say(_paint(console, "You are eligible", "green"))

    while True:
        answer = _ask_word(
            console,
            _paint(console, "Enter gender (M: Male | F: Female | N: Not Specify): ", "cyan"),
        )
        try:
            gender = Gender.parse(answer)
            break
        except ValueError as exc:
            console.say(_paint(console, str(exc), "red"))

    while True:
        answer = _ask_word(console, _paint(console, "Enter blood group: ", "cyan"))
        try:
            blood_group = BloodGroup.parse(answer)
            break
        except ValueError as exc:
            console.say(_paint(console, str(exc), "red"))

    tattoos = _ask_word(
        console,
        _paint(console, "Have you had any piercings or tattoos in the last 6 months? (y/n): ", "cyan"),
    )
    if tattoos[0].lower() == "y":
        console.say(
            _paint(console, "You are not eligible due to recent tattoos or piercings.", "red")
        )
        return None

    _progress(console)
    donor = Donor(
        records.generate_customer_id(rng), name, age, gender.value, blood_group.value
    )
    console.box("You have been registered successfully!", "green")
    console.say(_paint(console, "Your Details: ", "yellow"))
    console._write(_paint(console, donor.describe(), "yellow"))
    records.append(donor)
    return donor


def choose_slot(console: Console, center: AppointmentCenter) -> Slot:
    """List a center's open slots and return the one picked."""
    console.box(f"Available Slots at {center.name}", "yellow")
    slots = center.open_slots()
    if not slots:
        raise AppointmentError("No open slots available")
    for number, slot in enumerate(slots, start=1):
        console.say(_paint(console, f"  {number}. {slot}", "cyan"))
    _divider(console)
    try:
        choice = console.ask_int(_paint(console, "Select a slot: ", "green"))
    except ValueError:
        raise AppointmentError("Invalid selection") from None
    if not 1 <= choice <= len(slots):
        raise AppointmentError("Invalid selection")
    return slots[choice - 1]


def schedule_appointment(
    console: Console,
    records: RecordStore,
    book: AppointmentBook,
    centers: dict[str, AppointmentCenter],
    customer_id: int,
) -> Appointment | None:
    """Book a first appointment for a registered donor."""
    console.box("APPOINTMENT MANAGEMENT", "cyan")
    donor = records.find(customer_id)
    if donor is None:
        _error(console, "Your customer ID doesn't match")
        _warn(console, "Returning to main menu.....")
        return None

    console.say(_paint(console, "┌────────────────────── USER DETAILS ───────────────────────┐", "yellow"))
    console._write(donor.describe())
    console.say(_paint(console, "└" + "─" * _BOX_WIDTH + "┘", "yellow"))

    existing = book.find(customer_id)
    if existing is not None:
        _warn(console, f"You have an existing appointment on {existing.describe()}")
        _warn(console, "Returning to main menu....")
        return None

    names = list(centers)
    _divider(console)
    console.say(_paint(console, "Choose an appointment center:", "cyan"))
    for number, name in enumerate(names, start=1):
        console.say(_paint(console, f"  {number}. {name}", "cyan"))
    try:
        choice = console.ask_int(_paint(console, "Enter your choice: ", "green"))
    except ValueError:
        choice = 0
    if not 1 <= choice <= len(names):
        _error(console, "Invalid choice")
        return None
    center = centers[names[choice - 1]]
    console.say(_paint(console, f"You have chosen the appointment center: {center.name}", "cyan"))

    try:
        slot = choose_slot(console, center)
    except AppointmentError as exc:
        _error(console, str(exc))
        return None

    _progress(console)
    appointment = Appointment(customer_id, center.name, slot.date, slot.time)
    book.add(appointment)
    _success(console, f"Appointment scheduled successfully at {center.name}")
    return appointment


def change_appointment(
    console: Console,
    book: AppointmentBook,
    centers: dict[str, AppointmentCenter],
    customer_id: int,
) -> Appointment | None:
    """Move an existing appointment to another slot at the same center."""
    console.box("APPOINTMENT MANAGEMENT", "cyan")
    old = book.find(customer_id)
    if old is None:
        _error(console, "You don't have an existing appointment")
        _warn(console, "Returning to main menu...")
        return None

    _warn(console, f"You have an existing appointment on: {old.describe()}")
    _divider(console)
    try:
        slot = choose_slot(console, get_center(centers, old.location))
    except AppointmentError as exc:
        _error(console, str(exc))
        _error(console, "Failed to select a new appointment")
        return None

    _progress(console)
    new = book.reschedule(customer_id, slot.date, slot.time)
    _success(console, f"Appointment updated to {new.date} at {new.time}")
    return new


def update_customer_info(console: Console, records: RecordStore, customer_id: int) -> Donor | None:
    """Edit a donor's details; blank answers keep the current values."""
    if not records.is_registered(customer_id):
        _error(console, "Enter a valid customer ID.")
        return None
    donor = records.find(customer_id)
    if donor is None:
        _error(console, "Enter a valid customer ID.")
        return None

    _warn(console, "Current Donor Information:")
    console._write(donor.describe())

    new_name = console.ask(
        _paint(console, "Enter new name (or press enter to keep current): ", "cyan")
    )
    if new_name:
        donor.name = new_name

    try:
        new_age = console.ask_int(
            _paint(console, "Enter new age (or 0 to keep current): ", "cyan")
        )
    except ValueError:
        new_age = 0
    if new_age > 0:
        donor.age = new_age

    while True:
        answer = console.ask(
            _paint(console, "Enter new gender (M/F/N or enter to keep current): ", "cyan")
        )
        if not answer:
            break
        try:
            donor.gender = Gender.parse(answer).value
            break
        except ValueError as exc:
            console.say(_paint(console, str(exc), "red"))

    while True:
        answer = console.ask(
            _paint(console, "Enter new blood group (or press enter to keep current): ", "cyan")
        )
        if not answer:
            break
        try:
            donor.blood_group = BloodGroup.parse(answer).value
            break
        except ValueError as exc:
            console.say(_paint(console, str(exc), "red"))

    records.replace(donor)
    console.box("Donor information updated successfully!", "green")
    _warn(console, "Updated Donor Information:")
    console._write(
        format_customer_info(
            donor.customer_id, donor.name, donor.age, donor.gender, donor.blood_group
        )
    )
    return donor


def _show_menu(console: Console) -> None:
    if console.color:
        console._write("\033[H\033[2J")
    console.box("\nBLOOD DONATION MANAGEMENT SYSTEM\n".replace("\n", "\n"), "red")
    console.say("")
    for line in _MENU_LINES:
        console.say(_paint(console, line, "cyan"))
    console.box("Your donation can save up to three lives. Thank you!", "yellow")


def _ask_customer_id(console: Console) -> int | None:
    try:
        return console.ask_int(_paint(console, "   ➤ Enter your customer ID: ", "green"))
    except ValueError:
        _error(console, "Enter a valid customer ID.")
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(prog="bloodbank", description=__doc__)
    parser.add_argument("--records", default="records.txt", help="donor records file")
    parser.add_argument(
        "--appointments", default="appointments.txt", help="appointments file"
    )
    parser.add_argument("--no-color", action="store_true", help="plain output")
    parser.add_argument(
        "--delay", type=float, default=0.3, help="seconds per progress dot"
    )
    args = parser.parse_args(argv)

    console = Console(color=not args.no_color, delay=args.delay)
    records = RecordStore(args.records)
    book = AppointmentBook(args.appointments)
    centers = default_centers()
    rng = random.Random()

    try:
        while True:
            _show_menu(console)
            try:
                choice = console.ask_int(_paint(console, "\n   ➤ Enter your choice: ", "green"))
            except ValueError:
                choice = 0
            if choice == 5:
                console.box(
                    "Thank you for using our services!\n       Have a great day!",
                    "magenta",
                )
                return 0
            if choice == 1:
                register_user(console, records, rng)
            elif choice in (2, 3, 4):
                customer_id = _ask_customer_id(console)
                if customer_id is not None:
                    _progress(console)
                    if choice == 2:
                        schedule_appointment(console, records, book, centers, customer_id)
                    elif choice == 3:
                        change_appointment(console, book, centers, customer_id)
                    else:
                        update_customer_info(console, records, customer_id)
            else:
                console.say(_paint(console, "   ⚠ Invalid choice. Please try again.", "red"))
            console.ask("\nPress Enter to continue...")
    except (EOFError, KeyboardInterrupt):
        console.say("")
        return 0


if __name__ == "__main__":
    sys.exit(main())