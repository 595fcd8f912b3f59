import pytest

from bloodbank.appointments import (
    Appointment,
    AppointmentBook,
    AppointmentCenter,
    AppointmentError,
    Slot,
    default_centers,
    get_center,
)


@pytest.fixture
def book(tmp_path):
    return AppointmentBook(tmp_path / "appointments.txt")


def test_slot_parse_and_str():
    slot = Slot.parse("2025-04-20 10:00 open")
    assert (slot.date, slot.time, slot.status) == ("2025-04-20", "10:00", "open")
    assert str(slot) == "2025-04-20 10:00 open"
    assert slot.is_open()


def test_closed_slot():
    assert not Slot("2025-04-20", "10:00", "closed").is_open()


@pytest.mark.parametrize("text", ["", "2025-04-20 10:00", "a b c d"])
def test_slot_parse_rejects(text):
    with pytest.raises(ValueError):
        Slot.parse(text)


def test_default_centers_order_and_slots():
    centers = default_centers()
    assert list(centers) == ["Arlington", "FortWorth", "Denton", "Irving"]
    for name, center in centers.items():
        assert center.name == name
        assert [str(s) for s in center.open_slots()] == [
            "2025-04-20 10:00 open",
            "2025-04-20 11:00 open",
            "2025-04-21 09:00 open",
        ]


def test_default_centers_are_independent():
    centers = default_centers()
    centers["Denton"].slots[0].status = "closed"
    assert len(centers["Denton"].open_slots()) == 2
    assert len(centers["Irving"].open_slots()) == 3
    assert len(default_centers()["Denton"].open_slots()) == 3


def test_open_slots_limited_to_first_ten():
    slots = [Slot("2025-05-01", f"{h:02d}:00", "open") for h in range(12)]
    center = AppointmentCenter("Test", slots)
    assert center.open_slots() == slots[:10]


def test_open_slots_skip_closed():
    slots = [Slot.parse("d1 t1 closed"), Slot.parse("d2 t2 open")]
    assert AppointmentCenter("Test", slots).open_slots() == [slots[1]]


def test_get_center():
    centers = default_centers()
    assert get_center(centers, "Irving") is centers["Irving"]
    with pytest.raises(AppointmentError):
        get_center(centers, "Dallas")


def test_appointment_round_trip():
    appt = Appointment(1234, "Denton", "2025-04-20", "10:00")
    assert Appointment.from_line(appt.to_line()) == appt
    assert appt.describe() == "2025-04-20 at 10:00 at Denton"


def test_appointment_from_line_ignores_status():
    appt = Appointment.from_line("1234 Irving 2025-04-21 09:00 open\n")
    assert appt == Appointment(1234, "Irving", "2025-04-21", "09:00")


@pytest.mark.parametrize("line", ["", "1234 Irving 2025-04-21", "x Irving d t"])
def test_appointment_from_line_rejects(line):
    with pytest.raises(ValueError):
        Appointment.from_line(line)


def test_missing_book_has_no_appointment(book):
    assert book.find(1234) is None


def test_add_and_find(book):
    appt = Appointment(1234, "Arlington", "2025-04-20", "11:00")
    book.add(appt)
    book.add(Appointment(5678, "Irving", "2025-04-21", "09:00"))
    assert book.find(1234) == appt
    assert book.find(5678).location == "Irving"
    assert book.find(9999) is None


def test_add_twice_raises(book):
    book.add(Appointment(1234, "Arlington", "2025-04-20", "11:00"))
    with pytest.raises(AppointmentError):
        book.add(Appointment(1234, "Denton", "2025-04-21", "09:00"))
    assert book.find(1234).location == "Arlington"


def test_reschedule_keeps_location(book):
    book.add(Appointment(1234, "Arlington", "2025-04-20", "11:00"))
    other = Appointment(5678, "Irving", "2025-04-21", "09:00")
    book.add(other)
    new = book.reschedule(1234, "2025-04-21", "09:00")
    assert new == Appointment(1234, "Arlington", "2025-04-21", "09:00")
    assert book.find(1234) == new
    assert book.find(5678) == other


def test_reschedule_without_appointment_raises(book):
    book.add(Appointment(5678, "Irving", "2025-04-21", "09:00"))
    with pytest.raises(AppointmentError):
        book.reschedule(1234, "2025-04-20", "10:00")