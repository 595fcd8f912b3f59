import random

import pytest

from bloodbank.records import (
    BloodGroup,
    Donor,
    Gender,
    RecordStore,
    format_customer_info,
)


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "records.txt")


def test_gender_parse_by_first_letter():
    assert Gender.parse("M") is Gender.MALE
    assert Gender.parse("Female") is Gender.FEMALE
    assert Gender.parse("N") is Gender.NOT_SPECIFY
    assert Gender.NOT_SPECIFY.value == "Unspecified"


@pytest.mark.parametrize("text", ["x", "", "m"])
def test_gender_parse_rejects(text):
    with pytest.raises(ValueError):
        Gender.parse(text)


def test_blood_group_round_trip():
    for group in BloodGroup:
        assert BloodGroup.parse(group.value) is group
    assert BloodGroup.parse("AB+") is BloodGroup.AB_POSITIVE


@pytest.mark.parametrize("text", ["C+", "a+", "", "AB"])
def test_blood_group_rejects(text):
    with pytest.raises(ValueError):
        BloodGroup.parse(text)


def test_donor_line_round_trip():
    donor = Donor(1234, "Alice", 30, "Female", "O-")
    assert Donor.from_line(donor.to_line()) == donor
    assert donor.to_line() == "1234 Alice 30 Female O-"


def test_donor_accepts_enums():
    donor = Donor(2000, "Bob", 40, Gender.MALE, BloodGroup.A_NEGATIVE)
    assert donor.to_line() == "2000 Bob 40 Male A-"


@pytest.mark.parametrize("line", ["", "1234 Alice", "abc Alice 30 Female O-"])
def test_donor_from_line_rejects(line):
    with pytest.raises(ValueError):
        Donor.from_line(line)


def test_describe_lists_fields():
    donor = Donor(1234, "Alice", 30, "Female", "O-")
    assert donor.describe().splitlines() == [
        "ID: 1234",
        "Name: Alice",
        "Age: 30",
        "Gender: Female",
        "Blood Group: O-",
    ]
    assert donor.describe() == format_customer_info(1234, "Alice", 30, "Female", "O-")


def test_missing_file_is_empty(store):
    assert store.existing_ids() == []
    assert store.find(1234) is None
    assert not store.is_registered(1234)


def test_append_and_find(store):
    alice = Donor(1234, "Alice", 30, "Female", "O-")
    bob = Donor(5678, "Bob", 41, "Male", "B+")
    store.append(alice)
    store.append(bob)
    assert store.path.read_text(encoding="utf-8").startswith("\n")
    assert store.existing_ids() == ["", "1234", "5678"]
    assert store.find(5678) == bob
    assert store.find(9999) is None
    assert store.is_registered(1234)
    assert not store.is_registered(4321)


def test_existing_ids_are_cut_to_nine_characters(store):
    store.path.write_text("12345678901 Ann 20 Female A+\n", encoding="utf-8")
    ids = store.existing_ids()
    assert len(ids) == 1
    assert len(ids[0]) == 9
    assert "12345678901".startswith(ids[0])


def test_replace_updates_only_matching_line(store):
    store.append(Donor(1234, "Alice", 30, "Female", "O-"))
    store.append(Donor(5678, "Bob", 41, "Male", "B+"))
    store.replace(Donor(1234, "Alicia", 31, "Female", "A+"))
    assert store.find(1234) == Donor(1234, "Alicia", 31, "Female", "A+")
    assert store.find(5678) == Donor(5678, "Bob", 41, "Male", "B+")
    assert store.existing_ids()[1:] == ["1234", "5678"]


def test_replace_unknown_raises(store):
    store.append(Donor(1234, "Alice", 30, "Female", "O-"))
    with pytest.raises(KeyError):
        store.replace(Donor(4321, "Zed", 50, "Male", "O+"))


def test_generate_customer_id_is_free_four_digit(store):
    store.append(Donor(1234, "Alice", 30, "Female", "O-"))
    rng = random.Random(7)
    for _ in range(50):
        new_id = store.generate_customer_id(rng)
        assert 1000 <= new_id <= 9999
        assert not store.is_registered(new_id)


def test_generate_customer_id_avoids_taken(store):
    lines = [f"{n} X 20 Male A+\n" for n in range(1000, 10000) if n != 4242]
    store.path.write_text("".join(lines), encoding="utf-8")
    assert store.generate_customer_id(random.Random(1)) == 4242


def test_generate_customer_id_exhausted(store):
    lines = [f"{n} X 20 Male A+\n" for n in range(1000, 10000)]
    store.path.write_text("".join(lines), encoding="utf-8")
    with pytest.raises(RuntimeError):
        store.generate_customer_id(random.Random(1))