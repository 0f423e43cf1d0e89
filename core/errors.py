"""Error kinds raised by the npmmeta engine and its collaborators."""


class NpmMetaError(Exception):
    """Base class for all npmmeta errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidFormat(NpmMetaError):
    """Input text could not be parsed as JSON."""


class InvalidPackageMetadata(NpmMetaError):
    """The document parsed, but a field derivation failed on it.

    Args:
        message: Human-readable error message
        field: Output field whose derivation failed (e.g. "sourceUrl")
        cause: The original exception, if any
    """

    def __init__(self, message: str, field: str | None = None, cause: Exception | None = None):
        super().__init__(message, cause)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


class RegistryError(NpmMetaError):
    """The registry could not be reached or answered with an error."""

    def __init__(self, message: str, package: str | None = None, cause: Exception | None = None):
        super().__init__(message, cause)
        self.package = package


class PackageNotFound(RegistryError):
    """The registry has no document for the requested package."""


class AccessCommandFailed(NpmMetaError):
    """`npm access` failed for a reason other than an unscoped package."""

    def __init__(self, message: str, package: str | None = None, output: str = "", cause: Exception | None = None):
        super().__init__(message, cause)
        self.package = package
        self.output = output


class UnscopedPackage(AccessCommandFailed):
    """Access level of an unscoped package (e.g. "lodash") cannot be changed."""
