"""Round-based credential resolution.

Each round tries the non-interactive providers in priority order. A provider
that fails is dropped for good, so looping callers never repeat work. Only
once every provider has failed does a round fall through to the console.
"""

from typing import List, Optional

from credential_sdk.constants import MAX_RESOLUTION_ROUNDS
from credential_sdk.credentials.base import CredentialProvider
from credential_sdk.credentials.exceptions import CredentialResolutionError
from credential_sdk.credentials.factory import CredentialProviderFactory
from credential_sdk.credentials.providers.console import ConsoleCredentialProvider
from credential_sdk.credentials.types import CredentialSet
from credential_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class CredentialResolver:
    """Resolves a credential set from the provider chain or the console.

    Example:
        >>> resolver = CredentialResolver()
        >>> while not resolver.valid():
        ...     await resolver.read_credentials()
        >>> os.environ.update(resolver.credentials.to_environment())
    """

    def __init__(
        self,
        providers: Optional[List[CredentialProvider]] = None,
        console: Optional[ConsoleCredentialProvider] = None,
        credentials: Optional[CredentialSet] = None,
    ):
        """
        Args:
            providers (Optional[List[CredentialProvider]]): Non-interactive
                providers, highest priority first. Defaults to environment
                variables then the credentials file.
            console (Optional[ConsoleCredentialProvider]): Interactive fallback.
            credentials (Optional[CredentialSet]): Credential set to fill.
        """
        if providers is None:
            providers = CredentialProviderFactory.build_chain()
        self._providers: List[CredentialProvider] = list(providers)
        self._console = console if console is not None else ConsoleCredentialProvider()
        self.credentials = credentials if credentials is not None else CredentialSet()

    @property
    def remaining_providers(self) -> List[str]:
        """Names of the providers not yet tried, in order."""
        return [provider.name for provider in self._providers]

    def valid(self) -> bool:
        return self.credentials.valid()

    async def read_credentials(self) -> None:
        """
        Run one resolution round.

        Does nothing if the credentials are already valid.

        Raises:
            IncompleteInteractiveInputError: If console input ends before all
                three values are entered.
        """
        if self.valid():
            return

        while self._providers:
            provider = self._providers[0]
            logger.debug(f"Trying credentials from {provider.source}")
            result = await provider.attempt(self.credentials)
            if result.success:
                logger.info(f"Credentials read from {result.source}")
                return

            self._providers.pop(0)

        result = await self._console.attempt(self.credentials)
        logger.info(f"Credentials read from {result.source}")

    async def resolve(self, max_rounds: int = MAX_RESOLUTION_ROUNDS) -> CredentialSet:
        """
        Run rounds until the credential set is valid.

        Args:
            max_rounds (int): Upper bound on the number of rounds.

        Returns:
            CredentialSet: The resolved credential set.

        Raises:
            IncompleteInteractiveInputError: If console input ends early.
            CredentialResolutionError: If no round produces valid credentials.
        """
        for _ in range(max_rounds):
            if self.valid():
                break
            await self.read_credentials()

        if not self.valid():
            raise CredentialResolutionError(
                f"No valid credentials after {max_rounds} rounds, "
                f"missing: {', '.join(self.credentials.missing_fields())}"
            )

        return self.credentials
