from os import getenv
from pathlib import Path

# database root, override to read a chroot or a copied database
DB_ROOT = Path(getenv("PACREADER_DB_ROOT", "/var/lib/pacman"))
LOCAL_DB_DIR = DB_ROOT / "local"
SYNC_DB_DIR = DB_ROOT / "sync"

# the local database layout changes are gated on this marker
DB_VERSION_FILE = "ALPM_DB_VERSION"
SUPPORTED_DB_VERSION = "9"

LOG_LEVEL = getenv("PACREADER_LOG_LEVEL", "INFO").upper()

# Repositories to read, in the order they should take precedence
DEFAULT_SYNC_REPOS = [
    "core-testing",
    "core",
    "extra-testing",
    "extra",
    "multilib-testing",
    "multilib",
]
