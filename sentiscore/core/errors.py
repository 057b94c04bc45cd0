"""
Error kinds raised or emitted by the scorer.

Load-time problems raise ConfigurationError; per-call anomalies only warn.
"""


class ConfigurationError(Exception):
    """Lexicon or rules resource is missing, unreadable or malformed."""

    def __init__(self, message: str, resource: str = ""):
        self.resource = resource
        if resource:
            message = f"{message} ({resource})"
        super().__init__(message)


class InvalidInputWarning(UserWarning):
    """A non-text value was passed to score(); it is scored as an empty string."""
