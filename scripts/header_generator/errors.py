#------------------------------------------------------------
#                          errors.py
#        Error types raised by the header generator.
#   Every one of them is fatal for the run (exit code 1).


class HeaderGeneratorError(Exception):
    """Base class for all failures that abort a header generation run."""


class ConfigurationError(HeaderGeneratorError):
    """The username or token is missing from the environment."""


class TransportError(HeaderGeneratorError):
    """The request to GitHub never produced a response."""


class RemoteRejectionError(HeaderGeneratorError):
    """GitHub answered with an error payload instead of data."""

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details


class ResponseFormatError(HeaderGeneratorError):
    """The response body does not have the expected structure."""


class FileFormatError(HeaderGeneratorError):
    """The SVG template lacks the contribution grid markers."""


class FileIOError(HeaderGeneratorError):
    """Reading or writing the SVG template failed."""
