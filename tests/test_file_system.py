"""Tests for the directory tree, navigation and file creation."""

from constants import MAX_FILE_SIZE, MAX_FILES, ROOT_NAME
from file_system import FileSystem
from memory import entry_footprint


class TestFileSystemCreation:
    """A fresh file system."""

    def test_cursor_starts_at_root(self, fs):
        assert fs.current_dir is fs.root
        assert fs.root.name == ROOT_NAME
        assert fs.pwd() == "root"

    def test_root_is_empty(self, fs):
        assert fs.ls() == ([], [])

    def test_independent_instances(self):
        first = FileSystem()
        second = FileSystem()
        first.mkdir("a")
        assert second.ls() == ([], [])


class TestMkdir:
    """Directory creation and the fan-out limit."""

    def test_mkdir_links_under_cursor(self, fs):
        directory = fs.mkdir("docs")
        assert directory.parent is fs.root
        assert fs.ls() == ([], ["docs"])

    def test_fan_out_limit(self, fs, capsys):
        """The first MAX_FILES directories succeed, the rest are rejected."""
        for i in range(MAX_FILES + 3):
            fs.mkdir(f"d{i}")
        _, directories = fs.ls()
        assert directories == [f"d{i}" for i in range(MAX_FILES)]
        assert capsys.readouterr().out.count("Cannot add more directories") == 3

    def test_rejected_mkdir_allocates_nothing(self):
        fs = FileSystem(max_children=1)
        fs.mkdir("a")
        allocations = fs.memory.allocations
        assert fs.mkdir("b") is None
        assert fs.memory.allocations == allocations

    def test_long_name_truncated(self, fs):
        fs.mkdir("abcdefghijklmnop")
        assert fs.ls() == ([], ["abcdefghijkl"])

    def test_duplicate_directories_coexist(self, fs):
        first = fs.mkdir("a")
        fs.mkdir("a")
        assert fs.ls() == ([], ["a", "a"])
        fs.cd("a")
        assert fs.current_dir is first


class TestTouch:
    """File creation."""

    def test_touch_stores_terminator(self, fs):
        entry = fs.touch("a.txt", "hello")
        assert entry.size == len("hello") + 1
        assert entry.data == b"hello\x00"
        assert fs.ls() == (["a.txt"], [])

    def test_buffer_is_full_size(self, fs):
        entry = fs.touch("a.txt", "x")
        assert entry.capacity == MAX_FILE_SIZE

    def test_touch_at_max_size(self, fs):
        entry = fs.touch("big", "x" * (MAX_FILE_SIZE - 1))
        assert entry is not None
        assert entry.size == MAX_FILE_SIZE

    def test_touch_data_filling_buffer(self, fs):
        entry = fs.touch("big", "x" * MAX_FILE_SIZE)
        assert entry.size == MAX_FILE_SIZE

    def test_touch_over_max_size(self, fs, capsys):
        assert fs.touch("huge", "x" * (MAX_FILE_SIZE + 1)) is None
        assert fs.ls() == ([], [])
        assert "File size limit" in capsys.readouterr().out

    def test_file_limit(self, capsys):
        fs = FileSystem(max_entries=2)
        fs.touch("a", "1")
        fs.touch("b", "2")
        assert fs.touch("c", "3") is None
        assert fs.ls() == (["a", "b"], [])
        assert "Cannot add more files" in capsys.readouterr().out

    def test_find_file(self, fs):
        entry = fs.touch("notes", "x")
        assert fs.find_file("notes") is entry
        assert fs.find_file("missing") is None


class TestNavigation:
    """cd, pwd and path reconstruction."""

    def test_nested_path(self, fs):
        fs.mkdir("a")
        fs.cd("a")
        fs.mkdir("b")
        fs.cd("b")
        assert fs.pwd() == "root/a/b"

    def test_up_from_root(self, fs, capsys):
        assert not fs.cd("..")
        assert fs.current_dir is fs.root
        assert "Already at root directory." in capsys.readouterr().out

    def test_up_one_level(self, fs):
        a = fs.mkdir("a")
        fs.cd("a")
        fs.mkdir("b")
        fs.cd("b")
        assert fs.cd("..")
        assert fs.current_dir is a
        assert fs.pwd() == "root/a"

    def test_unknown_directory_leaves_cursor(self, fs, capsys):
        fs.mkdir("a")
        fs.cd("a")
        before = fs.pwd()
        assert not fs.cd("nope")
        assert fs.pwd() == before
        assert "Directory not found: nope" in capsys.readouterr().out

    def test_multi_segment_not_resolved(self, fs):
        fs.mkdir("a")
        fs.cd("a")
        fs.mkdir("b")
        fs.cd("..")
        assert not fs.cd("a/b")
        assert fs.current_dir is fs.root

    def test_cd_into_file_name_fails(self, fs):
        fs.touch("readme", "x")
        assert not fs.cd("readme")

    def test_current_path_of_other_directory(self, fs):
        a = fs.mkdir("a")
        assert fs.current_path(a) == "root/a"
        assert fs.pwd() == "root"

    def test_deep_path_without_recursion_limit(self):
        fs = FileSystem()
        for _ in range(3000):
            fs.mkdir("d")
            fs.cd("d")
        assert fs.pwd().count("/") == 3000


class TestStats:
    """Memory accounting and debug figures."""

    def test_budget_is_not_enforced(self):
        fs = FileSystem(ram_size=2048)
        for i in range(10):
            assert fs.mkdir(f"d{i}") is not None
        assert fs.memory.over_budget

    def test_stats(self, fs):
        fs.mkdir("a")
        fs.touch("f", "abc")
        stats = fs.get_stats()
        assert stats['directories'] == 2
        assert stats['files'] == 1
        assert stats['content_bytes'] == 4
        assert stats['ram_used'] > 0
        assert not stats['over_budget']

    def test_walk_order(self, fs):
        fs.mkdir("a")
        fs.cd("a")
        fs.mkdir("c")
        fs.cd("..")
        fs.mkdir("b")
        assert [d.name for d in fs.walk()] == ["root", "a", "c", "b"]


class TestMemoryAccounting:
    """Files are charged for their full buffer, not their logical size."""

    def test_file_charged_at_capacity(self, fs):
        before = fs.memory.used
        fs.touch("small", "x")
        assert fs.memory.used - before == entry_footprint(MAX_FILE_SIZE)

    def test_edit_does_not_change_charge(self, fs, feeder):
        fs.touch("notes", "x")
        used = fs.memory.used
        fs.edit_file("notes", feeder(["a much longer line of text", "SAVE"]))
        assert fs.memory.used == used

    def test_twenty_files_exceed_budget(self, fs):
        for i in range(20):
            fs.touch(f"f{i}", "x")
        assert fs.memory.over_budget
        assert len(fs.ls()[0]) == 20


class TestUndecodableText:
    """Text carrying surrogate escapes is stored as the original bytes."""

    def test_touch_surrogate_escape(self, fs):
        entry = fs.touch("raw", "a\udcffb")
        assert entry.data == b"a\xffb\x00"

    def test_create_entry_surrogate_escape(self, fs):
        assert fs.create_entry("raw", "\udc80").data == b"\x80"
