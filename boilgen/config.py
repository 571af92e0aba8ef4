"""Configuration constants for boilgen."""

# Conventional per-workspace configuration directory. A catalog path inside
# this directory is seeded with the default catalog when missing.
CONFIG_DIR_NAME = ".vscode"

DEFAULT_TEMPLATES_FILE = "boilgen.templates.json"

# Settings file, looked up at the workspace root first, then in CONFIG_DIR_NAME
SETTINGS_FILE = "boilgen.yaml"
SETTINGS_TEMPLATES_PATH_KEY = "templates_path"

TEMPLATES_PATH_ENV = "BOILGEN_TEMPLATES_PATH"

# Directory/file markers that identify a workspace root
WORKSPACE_MARKERS = (CONFIG_DIR_NAME, ".git", SETTINGS_FILE)

CATALOG_ENCODING = "utf-8"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130
