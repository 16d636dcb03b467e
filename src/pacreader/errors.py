"""Exceptions raised while reading package databases."""


class PacreaderError(Exception):
    """Base class for all pacreader errors."""


class DbVersionMismatchError(PacreaderError):
    """The local database was written by an unsupported pacman version."""

    def __init__(self, supported: str, found: str):
        self.supported = supported
        self.found = found
        super().__init__(f"Supported DB version mismatch. Expected: {supported}, got {found!r}")


class RecordParseError(PacreaderError, ValueError):
    """A single package record could not be parsed."""


class MissingFieldError(RecordParseError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Package description is missing mandatory field '{field}'")


class MalformedDependencyError(RecordParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unknown version requirement in dependency '{text}'")


class InvalidFieldError(RecordParseError):
    def __init__(self, section: str, value: str):
        self.section = section
        self.value = value
        super().__init__(f"Invalid value {value!r} for section %{section}%")


class UnversionedCandidateError(PacreaderError, TypeError):
    """A versioned requirement was checked against a candidate with no version."""

    def __init__(self, candidate: str, requirement: str):
        self.candidate = candidate
        self.requirement = requirement
        super().__init__(f"Cannot check '{candidate}' against versioned requirement '{requirement}'")


class PackageNotFoundError(PacreaderError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No such package: {name}")
