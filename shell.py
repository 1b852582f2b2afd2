"""Interactive shell for file system operations."""

import sys
from typing import Optional

from file_system import FileSystem
from editor import EditState


class Shell:
    """Interactive shell for file system operations."""

    def __init__(self, fs: Optional[FileSystem] = None, read_line=input):
        self.fs = fs if fs is not None else FileSystem()
        self.read_line = read_line
        self.running = True

    def run(self):
        """Run the shell."""
        print("File System CLI")
        print("Commands: mkdir <name>, touch <name> <data>, ls, cd <dir>, pwd, "
              "edit <file>, quit")
        self.print_constraints()

        while self.running:
            try:
                command = self.read_line(f"/{self.fs.pwd()}> ").strip()
                if not command:
                    continue

                self.execute_command(command)

            except KeyboardInterrupt:
                print("\nUse 'quit' to exit")
            except EOFError:
                break
            except MemoryError:
                print("Error: Out of memory")
                sys.exit(1)
            except Exception as e:
                print(f"Error: {e}")

    def print_constraints(self):
        """Display the MS-DOS memory and file size constraints."""
        print("\n--- MS-DOS Memory and File Size Constraints ---")
        print(f"RAM Size: {self.fs.memory.total // 1024} KB")
        print(f"File Size Limit: {self.fs.max_file_size // 1024} KB "
              f"(reflecting typical MS-DOS constraints)")
        print(f"Maximum Number of Files/Directories: {self.fs.max_entries}")
        print("------------------------------------------------")

    def execute_command(self, command: str):
        """Execute a shell command."""
        parts = command.split()
        if not parts:
            return

        cmd = parts[0]
        args = parts[1:]

        # Command routing
        commands = {
            'help': self.cmd_help,
            'debug': self.cmd_debug,
            'mkdir': self.cmd_mkdir,
            'touch': self.cmd_touch,
            'ls': self.cmd_ls,
            'cd': self.cmd_cd,
            'pwd': self.cmd_pwd,
            'cat': self.cmd_cat,
            'edit': self.cmd_edit,
            'exit': self.cmd_quit,
            'quit': self.cmd_quit,
        }

        if cmd in commands:
            commands[cmd](args)
        else:
            print(f"Unknown command: {cmd}")

    def cmd_help(self, args):
        """Display help information."""
        print("\nAvailable Commands:")
        print("  mkdir <dir>         - Create a new directory")
        print("  touch <file> <data> - Create a new file holding data")
        print("  ls                  - List files and directories")
        print("  cd <dir>            - Enter a directory ('..' goes up)")
        print("  pwd                 - Show the current directory path")
        print("  cat <file>          - Display file contents")
        print("  edit <file>         - Replace file contents line by line")
        print("  debug               - Show limits and memory use")
        print("  help                - Display this help message")
        print("  quit, exit          - Exit the shell\n")

    def cmd_debug(self, args):
        """Display file system statistics."""
        stats = self.fs.get_stats()
        print("\n=== File System Debug ===")
        print(f"  Directories:   {stats['directories']}")
        print(f"  Files:         {stats['files']}")
        print(f"  Content bytes: {stats['content_bytes']}")
        print(f"  RAM used:      {stats['ram_used']} / {stats['ram_total']} bytes "
              f"({self.fs.memory.usage_percent():.1f}%)")
        if stats['over_budget']:
            print("  Warning: nominal RAM budget exceeded (not enforced)")
        print()

    def cmd_mkdir(self, args):
        """Create a new directory."""
        if not args:
            print("Usage: mkdir <dirname>")
            return

        directory = self.fs.mkdir(args[0])
        if directory is not None:
            print(f"Directory '{directory.name}' created.")

    def cmd_touch(self, args):
        """Create a new file."""
        if len(args) < 2:
            print("Usage: touch <filename> <data>")
            return

        entry = self.fs.touch(args[0], ' '.join(args[1:]))
        if entry is not None:
            print(f"File '{entry.name}' created.")

    def cmd_ls(self, args):
        """List the current directory."""
        files, directories = self.fs.ls()
        print(f"Directory: {self.fs.current_dir.name}")
        for name in files:
            print(f"  File: {name}")
        for name in directories:
            print(f"  Directory: {name}")

    def cmd_cd(self, args):
        """Change directory."""
        if not args:
            print("Usage: cd <directory>")
            return

        self.fs.cd(args[0])

    def cmd_pwd(self, args):
        """Print the current directory."""
        print(f"Current directory: /{self.fs.pwd()}")

    def cmd_cat(self, args):
        """Display file contents."""
        if not args:
            print("Usage: cat <filename>")
            return

        entry = self.fs.find_file(args[0])
        if entry is None:
            print(f"File not found: {args[0]}")
            return

        data = entry.data.rstrip(b"\x00")
        if not data:
            print("(empty file)")
            return

        try:
            print(data.decode('utf-8'), end='' if data.endswith(b"\n") else '\n')
        except UnicodeDecodeError:
            print(f"(binary data, {len(data)} bytes)")

    def cmd_edit(self, args):
        """Interactive editor for a file."""
        if not args:
            print("Usage: edit <filename>")
            return

        state = self.fs.edit_file(args[0], self.read_line)
        if state is EditState.SIZE_LIMIT_REACHED:
            print("Changes were not saved.")

    def cmd_quit(self, args):
        """Exit the shell."""
        print("Exiting program.")
        self.running = False
