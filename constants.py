"""Global constants for the file system."""

# Capacity constants (MS-DOS style limits)
RAM_SIZE = 1024 * 640  # 640 KB nominal RAM, reported but never enforced
MAX_NAME_LENGTH = 12  # Names longer than this are truncated
MAX_FILES = 64  # Per directory, for files and subdirectories separately
MAX_FILE_SIZE = 1024 * 32  # 32 KB per file

# Nominal in-memory footprints used by the RAM accounting
POINTER_SIZE = 8
ENTRY_HEADER_SIZE = MAX_NAME_LENGTH + 2 * POINTER_SIZE  # name, data ptr, size
DIRECTORY_SIZE = MAX_NAME_LENGTH + POINTER_SIZE + 2 * MAX_FILES * POINTER_SIZE + 8

# Naming and navigation
ROOT_NAME = "root"
UP_MARKER = ".."
PATH_SEPARATOR = "/"

# Editor sentinels
SAVE_SENTINEL = "SAVE"
CANCEL_SENTINEL = "CANCEL"
