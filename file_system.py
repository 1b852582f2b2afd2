"""Core file system implementation."""

from typing import Callable, List, Optional, Tuple, Union

from constants import (
    MAX_NAME_LENGTH, MAX_FILES, MAX_FILE_SIZE, RAM_SIZE,
    ROOT_NAME, UP_MARKER, PATH_SEPARATOR
)
from structures import Container, Entry, truncate_name
from editor import Editor, EditState
from memory import MemoryBudget, directory_footprint, entry_footprint


class FileSystem:
    """In-memory directory tree with a current-directory cursor."""

    def __init__(self, max_name_length: int = MAX_NAME_LENGTH,
                 max_children: int = MAX_FILES, max_entries: int = MAX_FILES,
                 max_file_size: int = MAX_FILE_SIZE, ram_size: int = RAM_SIZE):
        self.max_name_length = max_name_length
        self.max_children = max_children
        self.max_entries = max_entries
        self.max_file_size = max_file_size
        self.memory = MemoryBudget(ram_size)

        self.root = self.create_directory(None, ROOT_NAME)
        self.current_dir = self.root

    def create_directory(self, parent: Optional[Container], name: str) -> Container:
        """Allocate a directory under parent without linking it."""
        directory = Container(name, parent,
                              max_children=self.max_children,
                              max_entries=self.max_entries,
                              max_name_length=self.max_name_length)
        self.memory.charge(directory_footprint())
        return directory

    def create_entry(self, name: str, initial: Union[str, bytes]) -> Optional[Entry]:
        """Allocate a file holding initial content without linking it."""
        if isinstance(initial, str):
            data = initial.encode("utf-8", errors="surrogateescape")
        else:
            data = bytes(initial)
        if len(data) > self.max_file_size:
            print(f"Error: File size limit is {self.max_file_size} bytes")
            return None

        entry = Entry(name, data, max_size=self.max_file_size,
                      max_name_length=self.max_name_length)
        self.memory.charge(entry_footprint(entry.capacity))
        return entry

    def add_child(self, parent: Container, child: Container) -> bool:
        return parent.add_child(child)

    def add_entry(self, container: Container, entry: Entry) -> bool:
        return container.add_entry(entry)

    def mkdir(self, name: str) -> Optional[Container]:
        """Create a directory under the current directory."""
        # Check capacity before allocating so a rejected directory is never built
        if not self.current_dir.has_room_for_child():
            print("Cannot add more directories. Maximum limit reached.")
            return None

        directory = self.create_directory(self.current_dir, name)
        self.add_child(self.current_dir, directory)
        return directory

    def touch(self, name: str, data: Union[str, bytes]) -> Optional[Entry]:
        """Create a file in the current directory.

        The stored content is the data followed by a NUL terminator, which is
        left off only when the data alone fills the maximum file size.
        """
        if not self.current_dir.has_room_for_entry():
            print("Cannot add more files. Maximum limit reached.")
            return None

        if isinstance(data, str):
            raw = data.encode("utf-8", errors="surrogateescape")
        else:
            raw = bytes(data)
        if len(raw) < self.max_file_size:
            raw += b"\x00"
        entry = self.create_entry(name, raw)
        if entry is None:
            return None

        self.add_entry(self.current_dir, entry)
        return entry

    def ls(self, container: Optional[Container] = None) -> Tuple[List[str], List[str]]:
        """List (file names, directory names) of a directory."""
        if container is None:
            container = self.current_dir
        return container.list_contents()

    def cd(self, segment: str) -> bool:
        """Change current directory by one path segment."""
        if segment == UP_MARKER:
            parent = self.current_dir.parent
            if parent is None:
                print("Already at root directory.")
                return False
            self.current_dir = parent
            return True

        target = self.current_dir.find_child(truncate_name(segment, self.max_name_length))
        if target is None:
            print(f"Directory not found: {segment}")
            return False

        self.current_dir = target
        return True

    def current_path(self, container: Optional[Container] = None) -> str:
        """Path from the root to a directory, root name first (root/a/b)."""
        if container is None:
            container = self.current_dir

        segments = []
        node = container
        while node is not None:
            segments.append(node.name)
            node = node.parent
        segments.reverse()
        return PATH_SEPARATOR.join(segments)

    def pwd(self) -> str:
        return self.current_path(self.current_dir)

    def find_file(self, name: str) -> Optional[Entry]:
        """Find a file in the current directory by name."""
        return self.current_dir.find_entry(truncate_name(name, self.max_name_length))

    def edit_file(self, name: str,
                  read_line: Callable[[str], Optional[str]] = input) -> Optional[EditState]:
        """Run an interactive edit of a file in the current directory."""
        entry = self.find_file(name)
        if entry is None:
            print(f"File not found: {name}")
            return None

        return Editor(entry, self.max_file_size).run(read_line)

    def walk(self) -> List[Container]:
        """All directories in the tree, depth first from the root."""
        result = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            result.append(node)
            stack.extend(reversed(node.children))
        return result

    def get_stats(self) -> dict:
        """Counts and memory figures for the debug view."""
        directories = self.walk()
        files = [entry for d in directories for entry in d.entries]
        return {
            'directories': len(directories),
            'files': len(files),
            'content_bytes': sum(entry.size for entry in files),
            'ram_total': self.memory.total,
            'ram_used': self.memory.used,
            'ram_free': self.memory.free,
            'over_budget': self.memory.over_budget,
            'allocations': self.memory.allocations,
        }
