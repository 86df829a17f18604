class DirTreeError(Exception):
    """Base class for failures that end a run."""


class RootDirectoryError(DirTreeError):
    """The root path does not exist or is not a directory."""


class RootAccessError(DirTreeError):
    """The root directory itself cannot be enumerated."""


class ReportWriteError(DirTreeError):
    """The report file could not be written."""
