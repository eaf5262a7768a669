"""Result types for provider attempts and console input parsing."""

from dataclasses import dataclass
from typing import NamedTuple, Optional


@dataclass
class AttemptResult:
    """Outcome of a single provider attempt.

    Attributes:
        success: Whether the provider filled the credential set.
        source: Label of the provider that made the attempt.
        reason: Why the attempt failed. Never contains secret values.

    Example:
        >>> AttemptResult(success=True, source="environment variables")
        >>>
        >>> AttemptResult(
        ...     success=False,
        ...     source="credentials file",
        ...     reason="aws_session_token not found",
        ... )
    """

    success: bool
    source: str
    reason: Optional[str] = None


class ParsedLine(NamedTuple):
    """One line of console input split into an optional key and a value."""

    key: Optional[str]
    value: str
