"""Shared credentials file provider implementation."""

from pathlib import Path
from typing import Dict, Optional, Union

from credential_sdk.constants import (
    AWS_ACCESS_KEY_ID_KEY,
    AWS_SECRET_ACCESS_KEY_KEY,
    AWS_SESSION_TOKEN_KEY,
    CREDENTIAL_KEYS,
    CREDENTIALS_FILE_PATH,
    CREDENTIALS_FILE_SOURCE,
)
from credential_sdk.credentials.exceptions import SourceUnavailableError
from credential_sdk.credentials.results import AttemptResult
from credential_sdk.credentials.types import CredentialSet
from credential_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


def parse_credentials_file(contents: str) -> Dict[str, str]:
    """
    Pick the credential keys out of ``key = value`` lines.

    Section headers and unknown keys are ignored, and a later line for the
    same key wins. Keys are matched exactly.

    Args:
        contents (str): Text of the credentials file.

    Returns:
        Dict[str, str]: Credential key to value, for the keys that were found.
    """
    values: Dict[str, str] = {}
    for line in contents.splitlines():
        key, separator, value = line.partition("=")
        if not separator:
            continue

        key = key.strip(" ")
        if key in CREDENTIAL_KEYS:
            values[key] = value.strip(" ")

    return values


class CredentialsFileProvider:
    """Provider for credentials stored in the AWS shared credentials file."""

    name = "credentials_file"
    source = CREDENTIALS_FILE_SOURCE

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path (Optional[Union[str, Path]]): Credentials file to read.
                Defaults to ``~/.aws/credentials``.
        """
        self.path = Path(path) if path is not None else Path(CREDENTIALS_FILE_PATH)

    async def attempt(self, credentials: CredentialSet) -> AttemptResult:
        try:
            values = self._read_values()
        except SourceUnavailableError as e:
            logger.debug(f"No credentials from {self.source}: {e.message}")
            return AttemptResult(success=False, source=self.source, reason=e.message)

        credentials.set_credentials(
            values[AWS_ACCESS_KEY_ID_KEY],
            values[AWS_SECRET_ACCESS_KEY_KEY],
            values[AWS_SESSION_TOKEN_KEY],
            self.source,
        )
        return AttemptResult(success=True, source=self.source)

    def _read_values(self) -> Dict[str, str]:
        """
        Read the file and check that all three keys have values.

        Raises:
            SourceUnavailableError: If the file cannot be read or is incomplete.
        """
        try:
            contents = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Cannot read {self.path}: {e}") from e

        values = parse_credentials_file(contents)
        missing = [key for key in CREDENTIAL_KEYS if not values.get(key)]
        if missing:
            raise SourceUnavailableError(
                f"{', '.join(missing)} not found in {self.path}"
            )

        return values
