"""Wallet outputs table, its filters and the selection helpers of the coins view."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum

UINT32_MAX = 0xFFFFFFFF
NULL_HASH = bytes(32)


class OutputType(IntEnum):
    """Kind of a transaction output."""

    INVALID = 0
    KEY = 1
    MULTISIGNATURE = 2


class OutputState(IntEnum):
    """Whether an output has been spent."""

    SPENT = 0
    UNSPENT = 1


class Column(IntEnum):
    """Columns of the outputs table."""

    STATE = 0
    TYPE = 1
    OUTPUT_KEY = 2
    TX_HASH = 3
    AMOUNT = 4
    GLOBAL_OUTPUT_INDEX = 5
    OUTPUT_IN_TRANSACTION = 6
    TX_PUBLIC_KEY = 7
    REQ_SIG = 8
    SPENDING_BLOCK_HEIGHT = 9
    TIMESTAMP = 10
    SPENDING_TRANSACTION_HASH = 11
    KEY_IMAGE = 12
    INPUT_IN_TRANSACTION = 13


class StateFilter(IntEnum):
    """Choices of the output type selector."""

    ALL_TYPES = 0
    SPENT = 1
    UNSPENT = 2


_HEADERS = {
    Column.STATE: "Status",
    Column.TYPE: "Type",
    Column.OUTPUT_KEY: "Public key (stealth address)",
    Column.TX_HASH: "Transaction hash",
    Column.AMOUNT: "Amount",
    Column.GLOBAL_OUTPUT_INDEX: "Global index",
    Column.OUTPUT_IN_TRANSACTION: "Index in transaction",
    Column.TX_PUBLIC_KEY: "Transaction public key",
    Column.SPENDING_BLOCK_HEIGHT: "Spent at height",
    Column.TIMESTAMP: "Timestamp",
    Column.SPENDING_TRANSACTION_HASH: "Spent in transaction",
    Column.KEY_IMAGE: "Key image",
    Column.INPUT_IN_TRANSACTION: "As input",
}

_STATE_LABELS = {
    OutputState.SPENT: "Spent",
    OutputState.UNSPENT: "Unspent",
}


def header(column: int) -> str | int:
    """Header text of a column; columns without a title yield their own number."""
    try:
        return _HEADERS[Column(column)]
    except (ValueError, KeyError):
        return column


_FILTER_VALUES = {
    StateFilter.ALL_TYPES: -1,
    StateFilter.SPENT: 0,
    StateFilter.UNSPENT: 1,
}


def state_filter_value(state_filter: int) -> int:
    """State passed to the sorting model: -1 for all, 0 spent, 1 unspent."""
    return _FILTER_VALUES[StateFilter(state_filter)]


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def selected_amount(amount_texts: Iterable[str]) -> float:
    """Sum of displayed amounts; thousands separators are dropped, bad text counts as 0."""
    return sum((_to_float(text.replace(",", "")) for text in amount_texts), 0.0)


@dataclass(frozen=True)
class TransactionOutput:
    """An output owned by the wallet, with spending details when it is spent."""

    amount: int
    type: OutputType
    global_output_index: int
    output_in_transaction: int
    transaction_hash: bytes
    transaction_public_key: bytes
    output_key: bytes = NULL_HASH
    required_signatures: int = 0
    spending_block_height: int = UINT32_MAX
    spending_transaction_hash: bytes = NULL_HASH
    timestamp: int = 0
    key_image: bytes = NULL_HASH
    input_in_transaction: int = UINT32_MAX

    def state(self) -> OutputState:
        """SPENT when a spending transaction is known, otherwise UNSPENT."""
        if self.spending_transaction_hash != NULL_HASH:
            return OutputState.SPENT
        return OutputState.UNSPENT


def outputs_to_send(outputs: Iterable[TransactionOutput]) -> list[TransactionOutput]:
    """Selected outputs that can still be spent."""
    return [output for output in outputs if output.state() is not OutputState.SPENT]


def _hex(data: bytes) -> str:
    return data.hex().upper()


def _format_timestamp(timestamp: int) -> str:
    if timestamp <= 0:
        return "-"
    try:
        moment = datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return "-"
    return moment.strftime("%d-%m-%y %H:%M")


class OutputsTable:
    """All wallet outputs, spent and unspent, ordered by global index."""

    def __init__(self, amount_formatter: Callable[[int], str] = str) -> None:
        self._format_amount = amount_formatter
        self._outputs: list[TransactionOutput] = []

    def __len__(self) -> int:
        return len(self._outputs)

    def __getitem__(self, row: int) -> TransactionOutput:
        return self._outputs[row]

    def __iter__(self) -> Iterator[TransactionOutput]:
        return iter(self._outputs)

    def reload(
        self,
        unspent: Iterable[TransactionOutput],
        spent: Iterable[TransactionOutput],
    ) -> None:
        """Replace the rows with the wallet's current outputs."""
        self.reset()
        rows = list(spent)
        rows.extend(
            replace(
                output,
                spending_block_height=UINT32_MAX,
                spending_transaction_hash=NULL_HASH,
                timestamp=0,
                key_image=NULL_HASH,
                input_in_transaction=UINT32_MAX,
            )
            for output in unspent
        )
        rows.sort(key=lambda output: output.global_output_index)
        self._outputs = rows

    def reset(self) -> None:
        """Drop all rows."""
        self._outputs.clear()

    def tooltip(self, row: int) -> str:
        """Tooltip of a row: the label of the output's spending state."""
        output = self._outputs[row]
        return _STATE_LABELS[output.state()]

    def display(self, row: int, column: int) -> str | int | None:
        """Value shown for a cell, or None for a column without text."""
        output = self._outputs[row]
        try:
            column = Column(column)
        except ValueError:
            return None
        is_spent = output.state() is OutputState.SPENT

        if column is Column.STATE:
            return "Spent" if is_spent else "Unspent"
        if column is Column.TYPE:
            if output.type == OutputType.KEY:
                return "Key"
            if output.type == OutputType.MULTISIGNATURE:
                return "Multisignature"
            return "Invalid"
        if column is Column.OUTPUT_KEY:
            return _hex(output.output_key)
        if column is Column.TX_HASH:
            return _hex(output.transaction_hash)
        if column is Column.AMOUNT:
            return self._format_amount(output.amount)
        if column is Column.GLOBAL_OUTPUT_INDEX:
            if output.global_output_index == UINT32_MAX:
                return "Pending"
            return output.global_output_index
        if column is Column.OUTPUT_IN_TRANSACTION:
            return output.output_in_transaction
        if column is Column.TX_PUBLIC_KEY:
            if output.type == OutputType.KEY:
                return _hex(output.transaction_public_key)
            if output.type == OutputType.MULTISIGNATURE:
                return "-"
            # Outputs of an invalid type show the spending height here.
            column = Column.SPENDING_BLOCK_HEIGHT
        if column is Column.SPENDING_BLOCK_HEIGHT:
            if not is_spent:
                return "-"
            if output.spending_block_height == UINT32_MAX:
                return "Unconfirmed"
            return output.spending_block_height
        if column is Column.TIMESTAMP:
            return _format_timestamp(output.timestamp) if is_spent else "-"
        if column is Column.SPENDING_TRANSACTION_HASH:
            return _hex(output.spending_transaction_hash) if is_spent else "-"
        if column is Column.KEY_IMAGE:
            return _hex(output.key_image) if is_spent else "-"
        if column is Column.INPUT_IN_TRANSACTION:
            return output.input_in_transaction if is_spent else "-"
        return None