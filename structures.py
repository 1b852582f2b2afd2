"""Data structures for the file system."""

import weakref
from typing import List, Optional, Tuple

from constants import MAX_NAME_LENGTH, MAX_FILES, MAX_FILE_SIZE


def truncate_name(name: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """Clip a name to the maximum name length."""
    return name[:max_length]


class Entry:
    """Represents a file: a name plus a fixed-capacity content buffer."""

    def __init__(self, name: str, data: bytes = b"", max_size: int = MAX_FILE_SIZE,
                 max_name_length: int = MAX_NAME_LENGTH):
        if len(data) > max_size:
            raise ValueError(f"Data must be at most {max_size} bytes")

        self.name = truncate_name(name, max_name_length)
        # Buffer is always allocated at full capacity so edits can never overrun it
        self.content = bytearray(max_size)
        self.content[:len(data)] = data
        self.size = len(data)

    @property
    def capacity(self) -> int:
        return len(self.content)

    @property
    def data(self) -> bytes:
        """Logical content of the file."""
        return bytes(self.content[:self.size])

    def replace(self, data: bytes):
        """Replace the whole content with new data."""
        if len(data) > self.capacity:
            raise ValueError(f"Data must be at most {self.capacity} bytes")

        self.content[:len(data)] = data
        # Terminate the content like the DOS buffer did
        if len(data) < self.capacity:
            self.content[len(data)] = 0
        self.size = len(data)

    def __repr__(self):
        return f"Entry(name={self.name!r}, size={self.size})"


class Container:
    """Represents a directory holding subdirectories and files."""

    def __init__(self, name: str, parent: Optional['Container'] = None,
                 max_children: int = MAX_FILES, max_entries: int = MAX_FILES,
                 max_name_length: int = MAX_NAME_LENGTH):
        self.name = truncate_name(name, max_name_length)
        self._parent = weakref.ref(parent) if parent is not None else None
        self.children: List['Container'] = []
        self.entries: List[Entry] = []
        self.max_children = max_children
        self.max_entries = max_entries

    @property
    def parent(self) -> Optional['Container']:
        """Enclosing directory, None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def has_room_for_child(self) -> bool:
        return len(self.children) < self.max_children

    def has_room_for_entry(self) -> bool:
        return len(self.entries) < self.max_entries

    def add_child(self, child: 'Container') -> bool:
        """Link a subdirectory if the directory is not full."""
        if child.parent is not self:
            raise ValueError(f"'{child.name}' does not belong to '{self.name}'")

        if not self.has_room_for_child():
            print("Cannot add more directories. Maximum limit reached.")
            return False

        self.children.append(child)
        return True

    def add_entry(self, entry: Entry) -> bool:
        """Link a file if the directory is not full."""
        if not self.has_room_for_entry():
            print("Cannot add more files. Maximum limit reached.")
            return False

        self.entries.append(entry)
        return True

    def find_child(self, name: str) -> Optional['Container']:
        """Find a subdirectory by exact name. First match wins."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_entry(self, name: str) -> Optional[Entry]:
        """Find a file by exact name. First match wins."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def list_contents(self) -> Tuple[List[str], List[str]]:
        """Return (file names, directory names) in insertion order."""
        return ([entry.name for entry in self.entries],
                [child.name for child in self.children])

    def __repr__(self):
        return (f"Container(name={self.name!r}, children={len(self.children)}, "
                f"entries={len(self.entries)})")
