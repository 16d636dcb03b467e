"""Dependency specifiers and version constraint checks."""

import operator
from enum import StrEnum
from typing import Self, TypeAlias

from pydantic import BaseModel, ConfigDict

from pacreader.errors import MalformedDependencyError, UnversionedCandidateError

OptionalStr: TypeAlias = str | None

# any of these starts the operator part of a specifier
OPERATOR_CHARS = "<>="


class Comparison(StrEnum):
    """Comparison operator of a versioned dependency."""

    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "="


# two-character operators must be tried before their one-character prefixes
_OPERATOR_PREFIXES = (
    Comparison.LE,
    Comparison.LT,
    Comparison.GE,
    Comparison.GT,
    Comparison.EQ,
)

# versions are compared as plain strings, so "1.10" < "1.2"
_COMPARE = {
    Comparison.LT: operator.lt,
    Comparison.LE: operator.le,
    Comparison.GT: operator.gt,
    Comparison.GE: operator.ge,
    Comparison.EQ: operator.eq,
}


class VersionConstraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    comparison: Comparison
    version: str

    def __str__(self) -> str:
        return f"{self.comparison}{self.version}"


class Dependency(BaseModel):
    """A package name with an optional version constraint, e.g. ``glibc>=2.38``."""

    model_config = ConfigDict(frozen=True)

    name: str
    constraint: VersionConstraint | None = None

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a single dependency specifier.

        The text must already be trimmed; surrounding whitespace ends up in the name or version.

        Args:
            text: The specifier, e.g. ``name``, ``name=1.0`` or ``name>=1.0``

        Returns:
            The parsed dependency

        Raises:
            MalformedDependencyError: If an operator character starts an unknown operator
        """
        pos = next((i for i, ch in enumerate(text) if ch in OPERATOR_CHARS), None)
        if pos is None:
            return cls(name=text)

        op_part = text[pos:]
        for comparison in _OPERATOR_PREFIXES:
            if op_part.startswith(comparison.value):
                version = op_part[len(comparison.value) :]
                return cls(
                    name=text[:pos],
                    constraint=VersionConstraint(comparison=comparison, version=version),
                )
        raise MalformedDependencyError(text)

    @property
    def version(self) -> OptionalStr:
        return self.constraint.version if self.constraint else None

    def satisfies(self, requirement: "Dependency") -> bool:
        """Check whether this dependency, as a provider, satisfies ``requirement``.

        Only the version of this dependency is used; its own operator is ignored.

        Raises:
            UnversionedCandidateError: If the requirement is versioned but this dependency is not
        """
        if self.name != requirement.name:
            return False
        if requirement.constraint is None:
            return True
        if self.constraint is None:
            raise UnversionedCandidateError(str(self), str(requirement))
        compare = _COMPARE[requirement.constraint.comparison]
        return compare(self.constraint.version, requirement.constraint.version)

    def __str__(self) -> str:
        if self.constraint is None:
            return self.name
        return f"{self.name}{self.constraint}"


class OptionalDependency(BaseModel):
    """An optional dependency with the reason the package suggests it."""

    model_config = ConfigDict(frozen=True)

    dependency: Dependency
    reason: OptionalStr = None

    @property
    def name(self) -> str:
        return self.dependency.name

    def __str__(self) -> str:
        if self.reason is None:
            return str(self.dependency)
        return f"{self.dependency}: {self.reason}"


def satisfies(candidate: Dependency, requirement: Dependency) -> bool:
    """Check whether ``candidate`` satisfies ``requirement``. See `Dependency.satisfies`."""
    return candidate.satisfies(requirement)
