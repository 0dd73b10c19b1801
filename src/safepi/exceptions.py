"""Error types raised while scanning domains and writing reports."""

import typer


class ArgumentError(typer.BadParameter):
    """Malformed command-line input. Always fatal, exits with code 1.

    Built on typer's own exception classes so it is reported with the same
    usage block as typer's parsing errors.
    """

    def format_message(self) -> str:
        return self.message


class SafePIError(Exception):
    """Base class for scan and report errors."""


class TransportError(SafePIError):
    """The API could not be reached or the connection failed."""


class RequestTimeoutError(TransportError):
    """The API did not answer within the request timeout."""


class ResponseTooLargeError(TransportError):
    """The API response exceeded the size cap and the connection was aborted."""


class ApiError(SafePIError):
    """The API answered, but not with a usable scan result."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(ApiError):
    """The API response body was not valid JSON or not a scan payload."""


class OutputError(SafePIError):
    """The HTML report could not be written."""


class PathTraversalError(OutputError):
    """The output directory escapes the working directory."""
