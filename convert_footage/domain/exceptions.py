"""
Defines custom exception types for convert-footage.

These exceptions separate the two kinds of failure the tool knows about:
problems with what the user asked for (`UsageError`, `NotFoundError`), which are
reported at the CLI boundary, and failures of the external tools the tool relies
on (`CollaboratorFailure`), which abort the whole run.

All custom exceptions inherit from the base `ConvertFootageException`.
"""


class ConvertFootageException(Exception):
    """Base class for all custom exceptions in convert-footage."""

    pass


# --- Argument / Target Exceptions ---
class UsageError(ConvertFootageException):
    """
    Raised when the command line cannot be turned into a valid request.

    Covers unrecognised flags, a missing or surplus path argument, and quality
    values that are not an integer literal between the configured bounds. The
    CLI reports the message together with the usage text.
    """

    pass


class NotFoundError(ConvertFootageException):
    """Raised when the target path is neither a regular file nor a directory."""

    def __init__(self, path):
        super().__init__(f"File or folder '{path}' doesn't exist.")
        self.path = path


# --- External Tool Exceptions ---
class CollaboratorFailure(ConvertFootageException):
    """
    Base class for failures of an external tool (FFmpeg or libmagic).

    These are never recovered from locally. They travel up to the entry point,
    which stops the run. Outputs already written by earlier conversions are left
    on disk.
    """

    pass


class TranscoderFailure(CollaboratorFailure):
    """Raised when FFmpeg cannot be started or exits with a non-zero status."""

    def __init__(self, source, message: str):
        super().__init__(f"Conversion of '{source}' failed: {message}")
        self.source = source


class ClassifierFailure(CollaboratorFailure):
    """Raised when the MIME type of a file cannot be determined."""

    def __init__(self, path, message: str):
        super().__init__(f"Could not detect the file type of '{path}': {message}")
        self.path = path
