import pytest
from hypothesis import given, strategies as st

from dronefarm.pesticide import (
    MAX_LISTED,
    RECORD_SIZE,
    Pesticide,
    PesticideStore,
    validate_period,
)


def _text(limit):
    return st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", max_size=limit)


@pytest.fixture
def store(tmp_path):
    (tmp_path / "alice").mkdir()
    return PesticideStore(tmp_path, "alice")


def test_record_layout():
    data = Pesticide("DDT", "7", "LOCUST").to_bytes()
    assert len(data) == RECORD_SIZE
    assert data[:3] == b"DDT"
    assert data[10:11] == b"7"
    assert data[20:26] == b"LOCUST"
    assert data[26:] == b"\0" * (RECORD_SIZE - 26)


@given(_text(9), _text(9), _text(19))
def test_round_trip(name, period, style):
    p = Pesticide(name, period, style)
    assert Pesticide.from_bytes(p.to_bytes()) == p


def test_field_too_long():
    with pytest.raises(ValueError):
        Pesticide("A" * 10, "1", "LOCUST").to_bytes()


def test_short_record_rejected():
    with pytest.raises(ValueError):
        Pesticide.from_bytes(b"\0" * (RECORD_SIZE - 1))


def test_is_complete():
    assert Pesticide("DDT", "7", "LADYBUG").is_complete() is True
    assert Pesticide("DDT", "", "LADYBUG").is_complete() is False
    assert Pesticide().is_complete() is False


def test_validate_period():
    assert validate_period("123") == "123"
    assert validate_period("") == ""
    with pytest.raises(ValueError, match="PLEASE INPUT THE NUMBER!"):
        validate_period("12a")


def test_save_and_load(store):
    p = Pesticide("DDT", "14", "LOCUST")
    path = store.save(p)
    assert path.name == "DDT.dat"
    assert store.load("DDT.dat") == p


def test_save_incomplete(store):
    with pytest.raises(ValueError, match="PLEASE FILL ALL BLANK!"):
        store.save(Pesticide("DDT", "", "LOCUST"))


def test_save_bad_period(store):
    with pytest.raises(ValueError):
        store.save(Pesticide("DDT", "x", "LOCUST"))


def test_load_missing(store):
    with pytest.raises(FileNotFoundError):
        store.load("NONE.dat")


def test_list_files(store):
    for name in ["B", "A", "C"]:
        store.save(Pesticide(name, "1", "LOCUST"))
    assert store.list_files() == ["A.dat", "B.dat", "C.dat"]


def test_list_files_capped(store):
    for k in range(MAX_LISTED + 3):
        store.save(Pesticide(f"P{k:02d}", "1", "LADYBUG"))
    listed = store.list_files()
    assert len(listed) == MAX_LISTED
    assert listed == sorted(listed)


def test_missing_user_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        PesticideStore(tmp_path, "nobody")