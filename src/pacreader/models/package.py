"""Models for parsed package descriptions."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel, ByteSize, ConfigDict, computed_field

from pacreader.models.depend import Comparison, Dependency, OptionalDependency, VersionConstraint

OptionalStr: TypeAlias = str | None


class InstallReason(StrEnum):
    EXPLICIT = "explicit"
    DEPENDENCY = "dependency"


class Validation(StrEnum):
    """Validation mechanisms a package declares. They are listed, never checked."""

    SIGNATURE = "signature"
    SHA256 = "sha256"
    MD5 = "md5"


class PackageDescription(BaseModel):
    """Metadata from a package's ``desc`` record."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    architecture: str
    description: OptionalStr = None
    url: OptionalStr = None
    licenses: tuple[str, ...] = ()
    depends: tuple[Dependency, ...] = ()
    opt_depends: tuple[OptionalDependency, ...] = ()
    provides: tuple[Dependency, ...] = ()
    conflicts: tuple[str, ...] = ()
    replaces: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()
    size: ByteSize = ByteSize(0)
    compressed_size: ByteSize = ByteSize(0)
    packager: OptionalStr = None
    build_date: int = 0
    install_date: int = 0
    install_reason: InstallReason = InstallReason.EXPLICIT
    install_script: bool = False
    validations: tuple[Validation, ...] = ()

    @computed_field
    @property
    def built_at(self) -> datetime:
        """Build date as a UTC datetime."""
        return datetime.fromtimestamp(self.build_date, tz=UTC)

    @computed_field
    @property
    def installed_at(self) -> datetime | None:
        """Install date as a UTC datetime, None for records that were never installed."""
        if not self.install_date:
            return None
        return datetime.fromtimestamp(self.install_date, tz=UTC)

    def as_dependency(self) -> Dependency:
        """This package as a candidate with its exact version, for `Dependency.satisfies`."""
        return Dependency(
            name=self.name,
            constraint=VersionConstraint(comparison=Comparison.EQ, version=self.version),
        )


class Package(BaseModel):
    """A package description plus the files it owns (local database only)."""

    model_config = ConfigDict(frozen=True)

    desc: PackageDescription
    files: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.desc.name
