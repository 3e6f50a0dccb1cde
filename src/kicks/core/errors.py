"""Error types raised by kicks operations.

Every error is raised at the point of detection and converted into a labeled
message plus process exit status by ``cli_error_boundary``. Nothing in kicks
retries or recovers from these errors.
"""


class KicksError(Exception):
    """Base class for errors that terminate a kicks invocation."""

    label = "error"
    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(KicksError):
    """A required configuration key is missing or the config file is malformed."""

    label = "configuration"


class MissingFileError(KicksError):
    """An expected path is absent (local source, project config, archive, workspace)."""

    label = "missing file"


class MissingEnvironmentError(KicksError):
    """A required environment variable is unset."""

    label = "environment"


class UsageError(KicksError):
    """The invocation is missing a required argument or combines exclusive options."""

    label = "usage"


class SafetyValidationError(KicksError):
    """The generated tenant config does not carry the safety marker."""

    label = "safety"


class UnrecognizedInputError(KicksError):
    """A confirmation prompt was answered with neither yes nor no."""

    label = "input"


class ExternalCommandError(KicksError):
    """An external command exited with a nonzero status.

    The exit status of the failed command becomes the exit status of kicks.
    """

    label = "external command"

    def __init__(self, message: str, returncode: int) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
