"""Expose package models."""

from .depend import Comparison, Dependency, OptionalDependency, VersionConstraint, satisfies
from .package import InstallReason, Package, PackageDescription, Validation

__all__ = [
    "Comparison",
    "Dependency",
    "InstallReason",
    "OptionalDependency",
    "Package",
    "PackageDescription",
    "Validation",
    "VersionConstraint",
    "satisfies",
]
