"""
Configuration constants for diagnostic rendering
"""

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Error reporting constants
ERROR_POINTER_CHAR = "^"
HEADER_SEPARATOR = " | "

# Path display constants (OS-agnostic, see shared/paths.py)
PATH_SEPARATOR = "/"

# Colour selection (see Styling.from_environment)
NO_COLOR_ENV_VAR = "NO_COLOR"
COLOR_ENV_VAR = "ANTE_COLOR"
COLOR_DISABLED_VALUES = ("0", "false", "no", "never")
COLOR_FORCED_VALUES = ("1", "true", "yes", "always")

# Exit status reported by the driver
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
