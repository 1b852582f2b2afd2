"""Line editor for file content."""

from enum import Enum
from typing import Callable, Optional

from constants import MAX_FILE_SIZE, SAVE_SENTINEL, CANCEL_SENTINEL
from structures import Entry


class EditState(Enum):
    """States of an editing session. Everything but EDITING is terminal."""

    EDITING = "editing"
    SAVED = "saved"
    CANCELLED = "cancelled"
    SIZE_LIMIT_REACHED = "size_limit_reached"


class Editor:
    """Replaces the content of one file with lines typed by the user.

    Lines accumulate in a private buffer. Typing SAVE writes the buffer to the
    file; CANCEL, end of input, or hitting the size limit leave the file as it
    was. A line that would fill the buffer completely is dropped with a
    warning, so at most max_size - 1 bytes are ever accumulated.
    """

    def __init__(self, entry: Entry, max_size: int = MAX_FILE_SIZE):
        self.entry = entry
        self.max_size = min(max_size, entry.capacity)
        self.buffer = bytearray()
        self.state = EditState.EDITING

    @property
    def length(self) -> int:
        return len(self.buffer)

    def feed(self, line: str) -> EditState:
        """Process one input line and return the resulting state."""
        if self.state is not EditState.EDITING:
            raise RuntimeError(f"Editor already finished ({self.state.value})")

        text = line.rstrip("\r\n")
        if text == SAVE_SENTINEL:
            self.entry.replace(bytes(self.buffer))
            self.state = EditState.SAVED
            print("File saved.")
            return self.state

        if text == CANCEL_SENTINEL:
            self.state = EditState.CANCELLED
            print("Editing cancelled.")
            return self.state

        data = (text + "\n").encode("utf-8", errors="surrogateescape")
        if self.length + len(data) < self.max_size:
            self.buffer.extend(data)
        else:
            print("Not enough space to add more data.")

        self._check_limit()
        return self.state

    def run(self, read_line: Callable[[str], Optional[str]] = input) -> EditState:
        """Read lines until the session reaches a terminal state."""
        print(f"Editing file '{self.entry.name}'. Type '{SAVE_SENTINEL}' to save changes "
              f"and '{CANCEL_SENTINEL}' to discard changes.")

        while self.state is EditState.EDITING:
            if self._check_limit():
                break

            try:
                line = read_line(">> ")
            except EOFError:
                line = None
            except KeyboardInterrupt:
                print("\nEditing cancelled.")
                self.state = EditState.CANCELLED
                break

            if line is None:
                # End of input discards the session
                self.state = EditState.CANCELLED
                break

            self.feed(line)

        return self.state

    def _check_limit(self) -> bool:
        if self.state is EditState.EDITING and self.length >= self.max_size - 1:
            print("File size limit reached.")
            self.state = EditState.SIZE_LIMIT_REACHED
        return self.state is EditState.SIZE_LIMIT_REACHED
