"""Base definitions for credential providers."""

from typing import Protocol

from credential_sdk.credentials.results import AttemptResult
from credential_sdk.credentials.types import CredentialSet


class CredentialProvider(Protocol):
    """Protocol defining the interface for credential providers."""

    name: str
    source: str

    async def attempt(self, credentials: CredentialSet) -> AttemptResult:
        """
        Try to fill the credential set from this provider's source.

        A provider either sets all three values together with its source
        label, or leaves the credential set untouched.

        Args:
            credentials (CredentialSet): The credential set to fill.

        Returns:
            AttemptResult: Whether the attempt succeeded, and why not.
        """
        ...
