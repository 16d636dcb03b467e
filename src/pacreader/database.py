"""Readers for the local and sync package databases."""

import logging
import tarfile
from collections.abc import Iterable, Iterator
from itertools import islice, takewhile
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict

from pacreader.constants import (
    DB_VERSION_FILE,
    DEFAULT_SYNC_REPOS,
    LOCAL_DB_DIR,
    SUPPORTED_DB_VERSION,
    SYNC_DB_DIR,
)
from pacreader.errors import DbVersionMismatchError, PackageNotFoundError, RecordParseError
from pacreader.models import Package
from pacreader.parser import parse_description, split_lines

logger = logging.getLogger(__name__)

DESC_FILE = "desc"
FILES_FILE = "files"
INSTALL_FILE = "install"


class RecordError(BaseModel):
    """A record that was skipped while loading a database."""

    model_config = ConfigDict(frozen=True)

    source: str
    message: str


class LoadResult(BaseModel):
    """Packages read from one database, plus the records that failed to parse."""

    model_config = ConfigDict(frozen=True)

    packages: tuple[Package, ...] = ()
    errors: tuple[RecordError, ...] = ()


def _read_files_list(path: Path) -> tuple[str, ...]:
    """Read the owned file paths from a local ``files`` record.

    The first line is the ``%FILES%`` header; the list ends at the first blank line.
    """
    lines = split_lines(path.read_bytes().decode("utf-8"))
    return tuple(takewhile(bool, islice(lines, 1, None)))


def check_db_version(db_dir: Path = LOCAL_DB_DIR) -> None:
    """Raise `DbVersionMismatchError` unless the local database has the supported layout version."""
    found = (db_dir / DB_VERSION_FILE).read_text(encoding="utf-8").strip()
    if found != SUPPORTED_DB_VERSION:
        raise DbVersionMismatchError(SUPPORTED_DB_VERSION, found)


def read_local_db(db_dir: Path = LOCAL_DB_DIR) -> LoadResult:
    """Read the installed package database.

    Args:
        db_dir: The local database directory (e.g. /var/lib/pacman/local)

    Returns:
        The installed packages with their file lists, and any records that could not be parsed

    Raises:
        DbVersionMismatchError: If the database version marker is not the supported version
        OSError: If a database file cannot be read
    """
    check_db_version(db_dir)

    packages: list[Package] = []
    errors: list[RecordError] = []
    for entry in sorted(db_dir.iterdir()):
        if not entry.is_dir():
            continue
        desc_path = entry / DESC_FILE
        try:
            desc = parse_description(
                desc_path.read_bytes().decode("utf-8"),
                install_script=(entry / INSTALL_FILE).exists(),
            )
        except (RecordParseError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {desc_path}: {e}")
            errors.append(RecordError(source=str(desc_path), message=str(e)))
            continue
        packages.append(Package(desc=desc, files=_read_files_list(entry / FILES_FILE)))

    logger.info(f"Loaded {len(packages)} installed packages from {db_dir}")
    return LoadResult(packages=tuple(packages), errors=tuple(errors))


def read_sync_db(name: str, sync_dir: Path = SYNC_DB_DIR) -> LoadResult:
    """Read a repository sync database (``<sync_dir>/<name>.db``).

    Only ``desc`` members are parsed; sync records carry no file lists.

    Raises:
        OSError: If the archive cannot be opened
        tarfile.ReadError: If the archive is not a gzip-compressed tarball
    """
    db_path = sync_dir / f"{name}.db"
    packages: list[Package] = []
    errors: list[RecordError] = []
    with tarfile.open(db_path, "r:gz") as archive:
        for member in archive:
            if not member.isfile() or PurePosixPath(member.name).name != DESC_FILE:
                logger.debug(f"Skipping archive member {member.name}")
                continue
            source = f"{db_path}:{member.name}"
            with archive.extractfile(member) as handle:
                data = handle.read()
            try:
                desc = parse_description(data.decode("utf-8"))
            except (RecordParseError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping {source}: {e}")
                errors.append(RecordError(source=source, message=str(e)))
                continue
            packages.append(Package(desc=desc))

    logger.info(f"Loaded {len(packages)} packages from sync database '{name}'")
    return LoadResult(packages=tuple(packages), errors=tuple(errors))


def read_sync_dbs(
    names: Iterable[str] = DEFAULT_SYNC_REPOS,
    sync_dir: Path = SYNC_DB_DIR,
) -> Iterator[tuple[str, LoadResult]]:
    """Read several sync databases in order, yielding ``(name, result)`` for each."""
    for name in names:
        yield name, read_sync_db(name, sync_dir)


def find_package(packages: Iterable[Package], name: str) -> Package:
    """Return the first package called ``name``.

    Raises:
        PackageNotFoundError: If no package has that name
    """
    for pkg in packages:
        if pkg.name == name:
            return pkg
    raise PackageNotFoundError(name)
