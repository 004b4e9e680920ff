class MissingArgumentError(ValueError):
    """Raised when no base version is given."""

    def __init__(self, message="Version parameter required"):
        super().__init__(message)


class VersionFieldNotFoundError(ValueError):
    """Raised when the target file has no `version:` line."""

    def __init__(self, filename="pubspec.yaml"):
        super().__init__(f"Version field not found in {filename}")


class UsageError(ValueError):
    """Raised for malformed command-line arguments."""
