"""
Exceptions raised by DocSeeker.

Only ExtractionError is recoverable inside the indexer (the document is
skipped); every other error propagates to whoever called the operation.
"""


class DocSeekerError(Exception):
    """Base class for all DocSeeker errors."""


class ExtractionError(DocSeekerError):
    """A document could not be opened or its markup could not be parsed."""

    def __init__(self, path, reason, position=None):
        """
        Args:
            path: Path of the document that failed
            reason: Human readable description of the failure
            position: Optional (line, column) of a parse failure
        """
        self.path = str(path)
        self.reason = str(reason)
        self.position = position
        super().__init__(str(self))

    def __str__(self):
        if self.position:
            line, column = self.position
            return f"{self.path}:{line}:{column}: {self.reason}"
        return f"{self.path}: {self.reason}"


class DirectoryWalkError(DocSeekerError):
    """A directory could not be listed or an entry's type could not be read."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = str(reason)
        super().__init__(f"could not walk {self.path}: {self.reason}")


class PersistError(DocSeekerError):
    """The index could not be written."""

    def __init__(self, target, reason):
        self.target = str(target)
        self.reason = str(reason)
        super().__init__(f"could not save index to {self.target}: {self.reason}")


class LoadError(DocSeekerError):
    """The index could not be read or is structurally invalid."""

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = str(reason)
        super().__init__(f"could not load index from {self.source}: {self.reason}")


class QueryEncodingError(DocSeekerError):
    """A query was not valid UTF-8 text."""


class ConfigError(DocSeekerError):
    """An explicitly requested configuration file could not be used."""
