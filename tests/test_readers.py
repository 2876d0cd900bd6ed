import pytest

from syntaxgen.readers import (
    AddressBasedReader,
    AddressSpace,
    ByteArrayAddressSpace,
    ByteArrayReader,
)


def test_reading():
    reader = ByteArrayReader.from_string("Hi, this is data")
    assert reader.read_next() == ord("H")
    assert reader.read_next() == ord("i")
    assert reader.read_next() == ord(",")


def test_sequence_extraction():
    reader = ByteArrayReader.from_string("Hi, this is data")
    for _ in range(4):
        reader.read_next()
    reader.set_head()
    for _ in range(4):
        reader.read_next()
    reader.set_tail()
    assert bytes(reader.get_sequence()).decode("utf-8") == "this"


def test_reset_to_tail():
    reader = ByteArrayReader.from_string("Hi, this is data")
    reader.set_tail()
    reader.read_next()
    reader.restart_from_tail()
    assert reader.read_next() == ord("H")


def test_exhaustion_returns_none_and_keeps_cursor():
    reader = ByteArrayReader.from_bytes(b"ab")
    assert reader.read_next() == ord("a")
    assert reader.read_next() == ord("b")
    assert reader.read_next() is None
    assert reader.read_next() is None
    reader.set_tail()
    assert bytes(reader.get_sequence()) == b"ab"


def test_restart_from_tail_empties_sequence():
    reader = ByteArrayReader.from_bytes(b"xyz")
    reader.read_next()
    reader.set_tail()
    reader.read_next()
    reader.restart_from_tail()
    assert list(reader.get_sequence()) == []
    assert reader.read_next() == ord("y")


def test_from_string_encodes_utf8():
    reader = ByteArrayReader.from_string("é")
    assert reader.read_next() == 0xC3
    assert reader.read_next() == 0xA9
    assert reader.read_next() is None


def test_byte_array_address_space_bounds():
    space = ByteArrayAddressSpace(b"q")
    assert space.read_at(0) == ord("q")
    assert space.read_at(1) is None
    assert space.read_at(-1) is None


class _ShrinkingSpace(AddressSpace[str]):
    def __init__(self) -> None:
        self.items = ["a", "b", "c"]

    def read_at(self, address):
        return self.items[address] if address < len(self.items) else None


def test_address_based_reader_over_custom_space():
    space = _ShrinkingSpace()
    reader = AddressBasedReader(space)
    reader.read_next()
    reader.set_head()
    reader.read_next()
    reader.read_next()
    reader.set_tail()
    assert list(reader.get_sequence()) == ["b", "c"]


def test_missing_item_in_sequence_raises():
    space = _ShrinkingSpace()
    reader = AddressBasedReader(space)
    reader.read_next()
    reader.read_next()
    reader.set_tail()
    space.items = ["a"]
    with pytest.raises(LookupError):
        list(reader.get_sequence())