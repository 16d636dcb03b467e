"""Reverse dependency queries over a loaded package collection.

Queries are plain linear scans; collections are immutable snapshots so nothing is cached between calls.
"""

from collections.abc import Iterable, Iterator

from pacreader.models import Dependency, Package, PackageDescription


def _desc(pkg: Package | PackageDescription) -> PackageDescription:
    return pkg.desc if isinstance(pkg, Package) else pkg


def _names(target: PackageDescription) -> set[str]:
    """Names a dependency can use to refer to ``target``."""
    return {target.name, *(provide.name for provide in target.provides)}


def depends_on(target: Package | PackageDescription, dependent: Package | PackageDescription) -> bool:
    """Check if ``dependent`` lists ``target``, or something it provides, in its dependencies.

    Versions are not checked: this only asks whether the dependency edge exists.
    """
    names = _names(_desc(target))
    return any(dep.name in names for dep in _desc(dependent).depends)


def optionally_depends_on(
    target: Package | PackageDescription, dependent: Package | PackageDescription
) -> bool:
    """Like `depends_on`, for optional dependencies."""
    names = _names(_desc(target))
    return any(opt_dep.name in names for opt_dep in _desc(dependent).opt_depends)


def required_by(target: Package | PackageDescription, candidates: Iterable[Package]) -> Iterator[Package]:
    """Yield the candidates that depend on ``target``, in candidate order."""
    desc = _desc(target)
    return (pkg for pkg in candidates if depends_on(desc, pkg))


def optional_for(target: Package | PackageDescription, candidates: Iterable[Package]) -> Iterator[Package]:
    """Yield the candidates that optionally depend on ``target``, in candidate order."""
    desc = _desc(target)
    return (pkg for pkg in candidates if optionally_depends_on(desc, pkg))


def find_providers(name: str, packages: Iterable[Package]) -> Iterator[Package]:
    """Yield packages called ``name`` or providing ``name``."""
    for pkg in packages:
        if pkg.name == name or any(provide.name == name for provide in pkg.desc.provides):
            yield pkg


def find_satisfiers(requirement: Dependency, packages: Iterable[Package]) -> Iterator[Package]:
    """Yield packages that satisfy ``requirement``, version constraint included.

    A package matches through its own name and version or through one of its provides. Provides without
    a version never satisfy a versioned requirement.
    """
    for pkg in packages:
        if pkg.desc.as_dependency().satisfies(requirement):
            yield pkg
            continue
        for provide in pkg.desc.provides:
            if requirement.constraint is not None and provide.constraint is None:
                continue
            if provide.satisfies(requirement):
                yield pkg
                break
