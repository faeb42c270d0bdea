"""Address book of saved contacts, stored as a JSON array on disk."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path


@dataclass(frozen=True)
class Contact:
    """One address book entry."""

    label: str
    address: str
    payment_id: str = ""

    def to_json(self) -> dict[str, str]:
        return {"label": self.label, "address": self.address, "paymentid": self.payment_id}

    @classmethod
    def from_json(cls, entry: object) -> Contact:
        """Build a contact from a stored entry; missing fields become empty."""
        if not isinstance(entry, dict):
            entry = {}

        def text(key: str) -> str:
            value = entry.get(key, "")
            return value if isinstance(value, str) else ""

        return cls(text("label"), text("address"), text("paymentid"))


class Column(IntEnum):
    """Columns of the address book table."""

    LABEL = 0
    ADDRESS = 1
    PAYMENT_ID = 2


_HEADERS = {
    Column.LABEL: "Label",
    Column.ADDRESS: "Address",
    Column.PAYMENT_ID: "PaymentID",
}


def header(column: int) -> str | None:
    """Header text of a column, or None for an unknown column."""
    try:
        return _HEADERS[Column(column)]
    except ValueError:
        return None


class AddressBook:
    """Contacts kept in memory and written back to ``path`` on every change."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __getitem__(self, row: int) -> Contact:
        return self._contacts[row]

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def load(self) -> None:
        """Read contacts from the file.

        A missing or unreadable file leaves the book unchanged, as does a file
        that is not valid JSON. A JSON document that is not an array yields an
        empty book.
        """
        try:
            content = self.path.read_bytes()
        except OSError:
            return
        try:
            document = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            return
        if not isinstance(document, list):
            document = []
        self._contacts = [Contact.from_json(entry) for entry in document]

    def save(self) -> None:
        """Write all contacts as compact JSON; write failures are ignored."""
        content = json.dumps(
            [contact.to_json() for contact in self._contacts],
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
        )
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError:
            pass

    def add(self, label: str, address: str, payment_id: str = "") -> Contact:
        """Append a contact and save the book."""
        contact = Contact(label, address, payment_id)
        self._contacts.append(contact)
        self.save()
        return contact

    def remove(self, row: int) -> None:
        """Remove the contact at ``row`` and save; rows out of range are ignored."""
        if not 0 <= row < len(self._contacts):
            return
        del self._contacts[row]
        self.save()

    def reset(self) -> None:
        """Forget all contacts in memory without touching the file."""
        self._contacts.clear()

    def display(self, row: int, column: int) -> str | None:
        """Text shown for a cell, or None for an unknown column."""
        contact = self._contacts[row]
        try:
            column = Column(column)
        except ValueError:
            return None
        if column is Column.LABEL:
            return contact.label
        if column is Column.ADDRESS:
            return contact.address
        return contact.payment_id

    def find(self, text: str, column: int) -> int | None:
        """Row of the first contact whose cell in ``column`` equals ``text``."""
        for row in range(len(self._contacts)):
            if self.display(row, column) == text:
                return row
        return None