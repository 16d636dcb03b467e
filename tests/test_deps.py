from conftest import make_package

from pacreader import Dependency, find_providers, find_satisfiers, optional_for, required_by
from pacreader.deps import depends_on, optionally_depends_on


def test_required_by_and_optional_for():
    a = make_package("a")
    b = make_package("b", depends=("a",))
    c = make_package("c", opt_depends=("a",))
    pkgs = [a, b, c]

    assert list(required_by(a, pkgs)) == [b]
    assert list(optional_for(a, pkgs)) == [c]


def test_required_by_ignores_version_constraints():
    a = make_package("a", version="1.0")
    b = make_package("b", depends=("a>=9.0",))
    assert list(required_by(a, [b])) == [b]


def test_required_by_through_provides():
    d = make_package("d", provides=("a-compat=1.0",))
    e = make_package("e", depends=("a-compat",))
    f = make_package("f", depends=("a-compat>=2",))
    g = make_package("g", opt_depends=("a-compat",))
    pkgs = [d, e, f, g]

    assert list(required_by(d, pkgs)) == [e, f]
    assert list(optional_for(d, pkgs)) == [g]


def test_required_by_keeps_candidate_order():
    a = make_package("a")
    pkgs = [make_package(name, depends=("a",)) for name in ("zsh", "bash", "mksh")]
    assert [pkg.name for pkg in required_by(a, pkgs)] == ["zsh", "bash", "mksh"]


def test_required_by_accepts_description():
    a = make_package("a")
    b = make_package("b", depends=("a",))
    assert list(required_by(a.desc, [a, b])) == [b]


def test_edge_predicates():
    a = make_package("a")
    b = make_package("b", depends=("x", "a"), opt_depends=("y",))
    assert depends_on(a, b)
    assert not depends_on(b, a)
    assert not optionally_depends_on(a, b)


def test_find_providers():
    sh = make_package("bash", provides=("sh",))
    dash = make_package("dash", provides=("sh",))
    other = make_package("zsh")
    pkgs = [sh, dash, other]

    assert list(find_providers("sh", pkgs)) == [sh, dash]
    assert list(find_providers("zsh", pkgs)) == [other]
    assert list(find_providers("fish", pkgs)) == []


def test_find_satisfiers():
    old = make_package("python", version="3.11.9-1")
    new = make_package("python", version="3.12.7-1")
    alias = make_package("pypy3", version="7.3.17-1", provides=("python=3.10",))
    unversioned = make_package("python-shim", provides=("python",))
    pkgs = [old, new, alias, unversioned]

    assert list(find_satisfiers(Dependency.parse("python>=3.12"), pkgs)) == [new]
    assert list(find_satisfiers(Dependency.parse("python<3.11"), pkgs)) == [alias]
    assert list(find_satisfiers(Dependency.parse("python"), pkgs)) == pkgs
