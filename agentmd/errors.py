"""Exception types raised by agentmd.

The text-processing core never raises for string input; these cover the
configuration surface around it (source kinds, profiles).
"""

from __future__ import annotations


class AgentMDError(RuntimeError):
    """Base class for all agentmd errors."""


class SourceKindError(AgentMDError, ValueError):
    """Raised when a source kind other than ``document``/``social`` is requested.

    Attributes:
        source -- the rejected value
    """

    def __init__(self, source: object) -> None:
        super().__init__(
            f"Unknown source kind {source!r}. Use 'document' or 'social'.",
        )
        self.source = source


class ProfileError(AgentMDError):
    """Raised when a YAML profile cannot be read or has the wrong shape.

    Attributes:
        path -- the profile path that failed
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
