"""Main entry point for the file system simulator."""

from shell import Shell


def main():
    """Main entry point."""
    shell = Shell()
    shell.run()


if __name__ == "__main__":
    main()
