import json

import pytest

from ssixwallet.address_book import AddressBook, Column, Contact, header


@pytest.fixture
def book(tmp_path):
    return AddressBook(tmp_path / "addressbook.json")


def test_headers():
    assert header(Column.LABEL) == "Label"
    assert header(Column.ADDRESS) == "Address"
    assert header(Column.PAYMENT_ID) == "PaymentID"
    assert header(7) is None


def test_add_saves_compact_json(book):
    book.add("L", "A", "P")
    assert book.path.read_text(encoding="utf-8") == '[{"address":"A","label":"L","paymentid":"P"}]'


def test_round_trip(book, tmp_path):
    book.add("alice", "addr1", "")
    book.add("bob", "addr2", "ab" * 32)
    other = AddressBook(tmp_path / "addressbook.json")
    other.load()
    assert list(other) == list(book)
    assert len(other) == 2
    assert other[1] == Contact("bob", "addr2", "ab" * 32)


def test_non_ascii_round_trip(book, tmp_path):
    book.add("ключ", "addr", "")
    other = AddressBook(book.path)
    other.load()
    assert other[0].label == "ключ"


def test_remove(book):
    book.add("a", "x")
    book.add("b", "y")
    book.remove(0)
    assert [c.label for c in book] == ["b"]
    assert json.loads(book.path.read_text(encoding="utf-8"))[0]["label"] == "b"


def test_remove_out_of_range_is_ignored(book):
    book.add("a", "x")
    book.remove(5)
    book.remove(-1)
    assert len(book) == 1


def test_reset_keeps_file(book):
    book.add("a", "x")
    book.reset()
    assert len(book) == 0
    reloaded = AddressBook(book.path)
    reloaded.load()
    assert len(reloaded) == 1


def test_load_missing_file(book):
    book.load()
    assert len(book) == 0


def test_load_invalid_json_keeps_contents(book):
    book.add("a", "x")
    book.path.write_text("not json", encoding="utf-8")
    book.load()
    assert [c.label for c in book] == ["a"]


def test_load_object_gives_empty(book):
    book.add("a", "x")
    book.path.write_text('{"label": "a"}', encoding="utf-8")
    book.load()
    assert len(book) == 0


def test_load_missing_fields(book):
    book.path.write_text('[{"label": "only"}, 5]', encoding="utf-8")
    book.load()
    assert book[0] == Contact("only", "", "")
    assert book[1] == Contact("", "", "")


def test_display(book):
    book.add("lbl", "addr", "pid")
    assert book.display(0, Column.LABEL) == "lbl"
    assert book.display(0, Column.ADDRESS) == "addr"
    assert book.display(0, Column.PAYMENT_ID) == "pid"
    assert book.display(0, 9) is None


def test_find(book):
    book.add("a", "x")
    book.add("b", "y")
    assert book.find("y", Column.ADDRESS) == 1
    assert book.find("a", Column.LABEL) == 0
    assert book.find("Y", Column.ADDRESS) is None
    assert book.find("x", Column.LABEL) is None