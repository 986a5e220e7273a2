"""Fatal I/O errors raised while assembling a document"""


class AssemblyError(Exception):
    """Base class for errors that abort an assembly run."""


class ReadFailure(AssemblyError):
    """The template file or standard input could not be read."""


class WriteFailure(AssemblyError):
    """The output file could not be created or written."""
