"""Parser for pacman ``desc`` records.

A record is a sequence of sections. Each section starts with a ``%HEADER%`` line, holds one value per
line and ends at a blank line::

    %NAME%
    glibc

    %DEPENDS%
    linux-api-headers>=4.10
    tzdata

`SECTION_HANDLERS` maps every understood header to the handler that stores its lines; any other section
is skipped.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeAlias

from pacreader.errors import InvalidFieldError, MissingFieldError
from pacreader.models import Dependency, InstallReason, OptionalDependency, PackageDescription, Validation

logger = logging.getLogger(__name__)

MANDATORY_FIELDS = ("name", "version", "architecture")
OPT_DEPEND_SEPARATOR = ": "


class _RecordBuilder:
    """Accumulates section values until the whole record has been read."""

    def __init__(self):
        self.scalars: dict[str, Any] = {}
        self.sequences: defaultdict[str, list[Any]] = defaultdict(list)

    def build(self, install_script: bool) -> PackageDescription:
        for field in MANDATORY_FIELDS:
            if field not in self.scalars:
                raise MissingFieldError(field)
        sequences = {field: tuple(values) for field, values in self.sequences.items()}
        return PackageDescription(**self.scalars, **sequences, install_script=install_script)


SectionHandler: TypeAlias = Callable[[_RecordBuilder, str, str], None]


def _scalar(field: str) -> SectionHandler:
    def handle(record: _RecordBuilder, section: str, line: str) -> None:
        record.scalars[field] = line

    return handle


def _integer(field: str) -> SectionHandler:
    def handle(record: _RecordBuilder, section: str, line: str) -> None:
        if not (line.isascii() and line.isdigit()):
            raise InvalidFieldError(section, line)
        record.scalars[field] = int(line)

    return handle


def _sequence(field: str, convert: Callable[[str], Any] = str) -> SectionHandler:
    def handle(record: _RecordBuilder, section: str, line: str) -> None:
        record.sequences[field].append(convert(line))

    return handle


def _validation(kind: Validation) -> SectionHandler:
    def handle(record: _RecordBuilder, section: str, line: str) -> None:
        record.sequences["validations"].append(kind)

    return handle


def _opt_depend(record: _RecordBuilder, section: str, line: str) -> None:
    spec, sep, reason = line.partition(OPT_DEPEND_SEPARATOR)
    record.sequences["opt_depends"].append(
        OptionalDependency(dependency=Dependency.parse(spec), reason=reason if sep else None)
    )


def _install_reason(record: _RecordBuilder, section: str, line: str) -> None:
    record.scalars["install_reason"] = InstallReason.EXPLICIT if line == "0" else InstallReason.DEPENDENCY


def _declared_validation(record: _RecordBuilder, section: str, line: str) -> None:
    # "sha256" and "md5" here only repeat the checksum sections
    if line == "pgp":
        record.sequences["validations"].append(Validation.SIGNATURE)


def split_lines(text: str) -> list[str]:
    """Split a record into lines on LF only, dropping one trailing CR per line.

    Form feeds, U+2028 and the other boundaries `str.splitlines` knows are part of the value.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


SECTION_HANDLERS: dict[str, SectionHandler] = {
    "NAME": _scalar("name"),
    "VERSION": _scalar("version"),
    "ARCH": _scalar("architecture"),
    "DESC": _scalar("description"),
    "URL": _scalar("url"),
    "PACKAGER": _scalar("packager"),
    "LICENSE": _sequence("licenses"),
    "DEPENDS": _sequence("depends", Dependency.parse),
    "OPTDEPENDS": _opt_depend,
    "PROVIDES": _sequence("provides", Dependency.parse),
    "CONFLICTS": _sequence("conflicts"),
    "REPLACES": _sequence("replaces"),
    "GROUPS": _sequence("groups"),
    "SIZE": _integer("size"),
    "ISIZE": _integer("size"),
    "CSIZE": _integer("compressed_size"),
    "BUILDDATE": _integer("build_date"),
    "INSTALLDATE": _integer("install_date"),
    "REASON": _install_reason,
    "VALIDATION": _declared_validation,
    "SHA256SUM": _validation(Validation.SHA256),
    "MD5SUM": _validation(Validation.MD5),
    "PGPSIG": _validation(Validation.SIGNATURE),
}


def parse_description(text: str, install_script: bool = False) -> PackageDescription:
    """Parse the text of a ``desc`` record.

    Args:
        text: Contents of the record
        install_script: Whether the package ships an install scriptlet. This is not part of the record,
            the caller knows it from the database layout.

    Returns:
        The parsed package description

    Raises:
        MissingFieldError: If the record has no NAME, VERSION or ARCH section
        MalformedDependencyError: If a dependency specifier has an unknown operator
        InvalidFieldError: If a numeric section holds something other than a non-negative integer
    """
    record = _RecordBuilder()
    section: str | None = None
    for line in split_lines(text):
        if not line:
            section = None
            continue
        if section is None:
            # outside a section every line is taken to be a %HEADER%
            section = line[1:-1]
            if section not in SECTION_HANDLERS:
                logger.debug(f"Ignoring section {line!r}")
            continue
        if handler := SECTION_HANDLERS.get(section):
            handler(record, section, line)
    return record.build(install_script)
