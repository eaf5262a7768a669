"""Credential set value object.

The credential set is owned by the caller for the lifetime of the process.
It starts empty and is filled in a single step by whichever provider
succeeds first.

Example:
    >>> from credential_sdk.credentials import CredentialSet
    >>>
    >>> credentials = CredentialSet()
    >>> credentials.valid()
    False
    >>> credentials.set_credentials("AKIA...", "secret", "token", "console input")
    >>> credentials.valid()
    True
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from credential_sdk.constants import (
    AWS_ACCESS_KEY_ID_ENV,
    AWS_ACCESS_KEY_ID_KEY,
    AWS_SECRET_ACCESS_KEY_ENV,
    AWS_SECRET_ACCESS_KEY_KEY,
    AWS_SESSION_TOKEN_ENV,
    AWS_SESSION_TOKEN_KEY,
    UNKNOWN_SOURCE,
)
from credential_sdk.credentials.exceptions import CredentialValidationError


class CredentialSet(BaseModel):
    """Temporary AWS credentials plus the label of the source that produced them.

    Attributes:
        access_key_id: AWS access key id, unset until resolved.
        secret_access_key: AWS secret access key, unset until resolved.
        session_token: AWS session token, unset until resolved.
        source: Human-readable label of the provider that filled the set.
    """

    model_config = ConfigDict(validate_assignment=True)

    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    source: str = UNKNOWN_SOURCE

    def valid(self) -> bool:
        """Return True only when all three values are non-empty strings."""
        return bool(self.access_key_id and self.secret_access_key and self.session_token)

    def missing_fields(self) -> List[str]:
        """Names of the values that are still unset or empty."""
        values = {
            AWS_ACCESS_KEY_ID_KEY: self.access_key_id,
            AWS_SECRET_ACCESS_KEY_KEY: self.secret_access_key,
            AWS_SESSION_TOKEN_KEY: self.session_token,
        }
        return [name for name, value in values.items() if not value]

    def set_credentials(
        self,
        access_key_id: str,
        secret_access_key: str,
        session_token: str,
        source: str,
    ) -> None:
        """Set all three values together with the source label."""
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token
        self.source = source

    def to_environment(self) -> Dict[str, str]:
        """
        Build the environment variables the resolved credentials map to.

        The caller decides whether to write them into ``os.environ``.

        Returns:
            Dict[str, str]: Variable name to value for the three credentials.

        Raises:
            CredentialValidationError: If the set is not valid.
        """
        if not self.valid():
            missing = self.missing_fields()
            raise CredentialValidationError(
                "Credentials are incomplete",
                errors=[f"{name} is required" for name in missing],
            )

        return {
            AWS_ACCESS_KEY_ID_ENV: self.access_key_id,
            AWS_SECRET_ACCESS_KEY_ENV: self.secret_access_key,
            AWS_SESSION_TOKEN_ENV: self.session_token,
        }

    def __repr__(self) -> str:
        set_fields = [
            name
            for name in (AWS_ACCESS_KEY_ID_KEY, AWS_SECRET_ACCESS_KEY_KEY, AWS_SESSION_TOKEN_KEY)
            if name not in self.missing_fields()
        ]
        return f"CredentialSet(source={self.source!r}, set={set_fields})"

    def __str__(self) -> str:
        return self.__repr__()
