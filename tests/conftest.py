import io
import tarfile
from pathlib import Path

import pytest

from pacreader import Dependency, OptionalDependency, Package, PackageDescription

GLIBC_DESC = """\
%NAME%
glibc

%VERSION%
2.40+r16+gaa533d58ff-2

%BASE%
glibc

%DESC%
GNU C Library

%URL%
https://www.gnu.org/software/libc

%ARCH%
x86_64

%BUILDDATE%
1730000000

%INSTALLDATE%
1730500000

%PACKAGER%
Frederik Schwan <freswa@archlinux.org>

%SIZE%
48328704

%REASON%
1

%LICENSE%
GPL-2.0-or-later
LGPL-2.1-or-later

%VALIDATION%
pgp

%DEPENDS%
linux-api-headers>=4.10
tzdata
filesystem

%OPTDEPENDS%
gd: for memusagestat
perl: for mtrace

%PROVIDES%
libc.so=6-64

"""

GLIBC_FILES = """\
%FILES%
etc/
etc/ld.so.conf
usr/lib/libc.so.6

%BACKUP%
etc/ld.so.conf\tabc123
"""


def minimal_desc(name: str, version: str = "1.0-1", arch: str = "x86_64", extra: str = "") -> str:
    return f"%NAME%\n{name}\n\n%VERSION%\n{version}\n\n%ARCH%\n{arch}\n\n{extra}"


def make_package(
    name: str,
    version: str = "1.0-1",
    depends: tuple[str, ...] = (),
    opt_depends: tuple[str, ...] = (),
    provides: tuple[str, ...] = (),
) -> Package:
    return Package(
        desc=PackageDescription(
            name=name,
            version=version,
            architecture="x86_64",
            depends=tuple(Dependency.parse(d) for d in depends),
            opt_depends=tuple(OptionalDependency(dependency=Dependency.parse(d)) for d in opt_depends),
            provides=tuple(Dependency.parse(p) for p in provides),
        )
    )


@pytest.fixture
def glibc_desc() -> str:
    return GLIBC_DESC


@pytest.fixture
def local_db(tmp_path: Path) -> Path:
    """A local database with glibc and a package depending on it."""
    db_dir = tmp_path / "local"
    db_dir.mkdir()
    (db_dir / "ALPM_DB_VERSION").write_text("9\n")

    glibc = db_dir / "glibc-2.40+r16+gaa533d58ff-2"
    glibc.mkdir()
    (glibc / "desc").write_text(GLIBC_DESC)
    (glibc / "files").write_text(GLIBC_FILES)
    (glibc / "install").write_text("post_upgrade() { :; }\n")

    bash = db_dir / "bash-5.2.037-1"
    bash.mkdir()
    (bash / "desc").write_text(minimal_desc("bash", "5.2.037-1", extra="%DEPENDS%\nglibc\nreadline>=7.0\n\n"))
    (bash / "files").write_text("%FILES%\nusr/\nusr/bin/bash\n")
    return db_dir


def write_sync_db(path: Path, members: dict[str, str]) -> Path:
    """Write a gzip-compressed tar sync database holding ``members`` (name -> text)."""
    with tarfile.open(path, "w:gz") as archive:
        for name, text in members.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            archive.addfile(info, io.BytesIO(data))
    return path
