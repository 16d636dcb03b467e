import logging

from rich.logging import RichHandler

from pacreader.constants import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)

from pacreader.database import (  # noqa: E402
    LoadResult,
    RecordError,
    find_package,
    read_local_db,
    read_sync_db,
    read_sync_dbs,
)
from pacreader.deps import find_providers, find_satisfiers, optional_for, required_by  # noqa: E402
from pacreader.errors import (  # noqa: E402
    DbVersionMismatchError,
    InvalidFieldError,
    MalformedDependencyError,
    MissingFieldError,
    PackageNotFoundError,
    PacreaderError,
    RecordParseError,
    UnversionedCandidateError,
)
from pacreader.models import (  # noqa: E402
    Comparison,
    Dependency,
    InstallReason,
    OptionalDependency,
    Package,
    PackageDescription,
    Validation,
    VersionConstraint,
    satisfies,
)
from pacreader.parser import parse_description  # noqa: E402

__all__ = [
    "Comparison",
    "DbVersionMismatchError",
    "Dependency",
    "InstallReason",
    "InvalidFieldError",
    "LoadResult",
    "MalformedDependencyError",
    "MissingFieldError",
    "OptionalDependency",
    "Package",
    "PackageDescription",
    "PackageNotFoundError",
    "PacreaderError",
    "RecordError",
    "RecordParseError",
    "UnversionedCandidateError",
    "Validation",
    "VersionConstraint",
    "find_package",
    "find_providers",
    "find_satisfiers",
    "optional_for",
    "parse_description",
    "read_local_db",
    "read_sync_db",
    "read_sync_dbs",
    "required_by",
    "satisfies",
]
