"""
Exceptions raised by the composer tooling
"""


class ComposerError(Exception):
    """Base class for composer tooling errors"""


class ConfigError(ComposerError, ValueError):
    """A mandatory setup value is missing"""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class SubmissionError(ComposerError):
    """The chain client failed to build, send or confirm a transaction"""

    def __init__(self, message: str, tx_hash: str = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class ArtifactError(ComposerError, LookupError):
    """No ABI or bytecode is registered for a contract name"""
