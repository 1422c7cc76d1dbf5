"""
Limits and defaults shared by the loader, exporter, CLI and TUI.

Values here are defaults; the CLI and TUI accept flags to override the
file size, key count and output directory per invocation.
"""

BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024

# Largest catalog accepted by the loader
MAX_FILE_SIZE = 1 * BYTES_PER_MB

# Key count quota (containers and leaves, see count_keys)
MAX_KEY_COUNT = 1000

# Sanitizer limits
MAX_KEYPATH_LENGTH = 1000
MAX_FILENAME_LENGTH = 255
MAX_SANITIZE_DEPTH = 100

# Catalog files must use one of these extensions
ALLOWED_EXTENSIONS = frozenset([".json"])

# Where edited catalogs are written
DEFAULT_OUTPUT_DIR = "edited_catalogs"
EXPORT_SUFFIX = "edited"
