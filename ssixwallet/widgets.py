"""Logic behind the node info dialog, the animated sprite and the output details pager."""

from __future__ import annotations

from typing import NamedTuple


def connections_summary(total: int, outgoing: int, incoming: int) -> str:
    return f"{total} (Outgoing: {outgoing}, Incoming: {incoming})"


def peer_list_text(white: int, grey: int) -> str:
    return f"White: {white}, Grey: {grey}"


def height_text(known: int, local: int) -> str:
    return f"Known: {known}, Local: {local}"


def peer_address(host: str, port: int) -> str:
    """Address of a peer as copied to the clipboard."""
    return f"{host}:{port}"


class Frame(NamedTuple):
    """Rectangle of a sprite frame with inclusive corners."""

    left: int
    top: int
    right: int
    bottom: int


class SpriteAnimator:
    """Steps through the frames of a vertical sprite strip, wrapping at its end."""

    def __init__(
        self,
        sprite_height: int,
        frame_width: int,
        frame_height: int,
        vertical_space: int = 0,
        frequency: int = 1,
    ) -> None:
        if frequency <= 0:
            raise ValueError("frequency must be positive")
        self.sprite_height = sprite_height
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.vertical_space = vertical_space
        self.frequency = frequency
        self.active = False
        self._top = 0

    def interval_ms(self) -> int:
        """Milliseconds between two frames."""
        return 1000 // self.frequency

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False

    def tick(self) -> Frame:
        """Return the frame to show now and advance to the next one."""
        frame = Frame(0, self._top, self.frame_width, self._top + self.frame_height)
        self._top += self.vertical_space + self.frame_height
        if self._top + self.frame_height >= self.sprite_height:
            self._top = 0
        return frame


class RecordNavigator:
    """Position within a table browsed one record at a time."""

    def __init__(self, row: int, row_count: int) -> None:
        if row_count < 0:
            raise ValueError("row count must not be negative")
        if row_count and not 0 <= row < row_count:
            raise IndexError(f"row {row} out of range")
        self.row = row
        self.row_count = row_count

    def can_go_back(self) -> bool:
        return self.row > 0

    def can_go_forward(self) -> bool:
        return self.row < self.row_count - 1

    def previous(self) -> int:
        """Move one record back if possible; return the current row."""
        if self.can_go_back():
            self.row -= 1
        return self.row

    def next(self) -> int:
        """Move one record forward if possible; return the current row."""
        if self.can_go_forward():
            self.row += 1
        return self.row