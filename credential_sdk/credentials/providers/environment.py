"""Environment variable credential provider implementation."""

import os
from typing import Mapping, Optional, Tuple

from credential_sdk.constants import (
    AWS_ACCESS_KEY_ID_ENV,
    AWS_SECRET_ACCESS_KEY_ENV,
    AWS_SESSION_TOKEN_ENV,
    ENVIRONMENT_SOURCE,
)
from credential_sdk.credentials.exceptions import SourceUnavailableError
from credential_sdk.credentials.results import AttemptResult
from credential_sdk.credentials.types import CredentialSet
from credential_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class EnvironmentCredentialProvider:
    """Provider for credentials exported as environment variables."""

    name = "environment"
    source = ENVIRONMENT_SOURCE

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            environ (Optional[Mapping[str, str]]): Variables to read from.
                Defaults to ``os.environ``.
        """
        if environ is None:
            environ = os.environ
        self.environ = environ

    async def attempt(self, credentials: CredentialSet) -> AttemptResult:
        try:
            access_key_id, secret_access_key, session_token = self._read_variables()
        except SourceUnavailableError as e:
            logger.debug(f"No credentials from {self.source}: {e.message}")
            return AttemptResult(success=False, source=self.source, reason=e.message)

        credentials.set_credentials(
            access_key_id, secret_access_key, session_token, self.source
        )
        return AttemptResult(success=True, source=self.source)

    def _read_variables(self) -> Tuple[str, str, str]:
        """
        Read the three variables, all of which must be present and non-empty.

        Raises:
            SourceUnavailableError: If any variable is missing or empty.
        """
        names = (AWS_ACCESS_KEY_ID_ENV, AWS_SECRET_ACCESS_KEY_ENV, AWS_SESSION_TOKEN_ENV)
        missing = [name for name in names if not self.environ.get(name)]
        if missing:
            raise SourceUnavailableError(f"{', '.join(missing)} not set")

        return (
            self.environ[AWS_ACCESS_KEY_ID_ENV],
            self.environ[AWS_SECRET_ACCESS_KEY_ENV],
            self.environ[AWS_SESSION_TOKEN_ENV],
        )
