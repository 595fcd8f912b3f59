# bloodbank

A small interactive terminal program for running a blood donation drive.
It registers donors, books them into an open slot at one of four donation
centers (Arlington, FortWorth, Denton, Irving), lets them move an existing
booking to another slot at the same center, and lets them correct their
donor details.

## Installing

```
pip install .
```

## Running

```
bloodbank
```

By default the data files are `records.txt` and `appointments.txt` in the
current directory. Options:

- `--records PATH`: donor records file (default `records.txt`)
- `--appointments PATH`: appointments file (default `appointments.txt`)
- `--no-color`: plain output, no ANSI colors and no screen clearing
- `--delay SECONDS`: pause per dot of the "Processing" animation (default `0.3`)

The main menu offers:

1. **Register**: enter name, age, gender (M/F/N, read from the first letter)
   and blood group (A+, A-, B+, B-, AB+, AB-, O+, O-). Donors under 18, or
   with a tattoo or piercing in the last six months, are turned away. A new
   donor gets a random four-digit customer ID that is not already in use.
2. **Schedule your appointment**: pick a center and one of its open slots.
   Each donor can hold only one appointment.
3. **Change your appointment**: pick a new slot at the same center.
4. **Update Donor**: change name, age, gender or blood group. Press Enter
   (or give age 0) to keep a value as it is.
5. **Exit**

The program also ends quietly when input runs out or on Ctrl-C.

## Data files

- `records.txt`: one donor per line, `ID NAME AGE GENDER BLOODGROUP`,
  for example `4821 Alice 30 Female O+`.
- `appointments.txt`: one booking per line, `ID CENTER DATE TIME`,
  for example `4821 Denton 2025-04-20 10:00`.

New lines are appended; updates rewrite the file through a temporary file
in the same directory.

## Using it as a library

```python
from bloodbank.records import BloodGroup, Donor, Gender, RecordStore
from bloodbank.appointments import Appointment, AppointmentBook, default_centers, get_center

donor = Donor.from_line("4821 Alice 30 Female O+")
print(donor.describe())

center = get_center(default_centers(), "Denton")
for slot in center.open_slots():
    print(slot)
```

- `bloodbank.records`: `Gender`, `BloodGroup` (each with `parse`), `Donor`
  (`from_line`, `to_line`, `describe`), `format_customer_info`, and
  `RecordStore` (`existing_ids`, `is_registered`, `find`, `append`,
  `replace`, `generate_customer_id`).
- `bloodbank.appointments`: `Slot`, `AppointmentCenter`, `default_centers`,
  `get_center`, `Appointment`, and `AppointmentBook` (`find`, `add`,
  `reschedule`). An unknown center, a second booking for the same donor, or
  rescheduling a booking that does not exist raises `AppointmentError`.
- `bloodbank.cli`: `Console` and the menu actions `register_user`,
  `choose_slot`, `schedule_appointment`, `change_appointment`,
  `update_customer_info`, and `main`.

## What it does not do

- The centers and their slots are fixed in the program and not stored.
  Booking a slot does not close it, so several donors can book the same slot.
- There is no way to cancel an appointment or remove a donor.

## Tests

```
pip install .[test]
pytest
```