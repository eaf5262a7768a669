"""Factory for creating credential providers."""

from typing import Any, Dict, Iterable, List, Type

from credential_sdk.constants import DEFAULT_PROVIDER_CHAIN
from credential_sdk.credentials.base import CredentialProvider
from credential_sdk.credentials.exceptions import UnsupportedProviderError
from credential_sdk.credentials.providers.credentials_file import (
    CredentialsFileProvider,
)
from credential_sdk.credentials.providers.environment import (
    EnvironmentCredentialProvider,
)


class CredentialProviderFactory:
    """Factory for creating non-interactive credential providers by name."""

    # Storage for registered providers
    _providers: Dict[str, Type[CredentialProvider]] = {
        "environment": EnvironmentCredentialProvider,
        "credentials_file": CredentialsFileProvider,
    }

    @classmethod
    def register_provider(
        cls, source_type: str, provider_class: Type[CredentialProvider]
    ):
        """
        Register a new credential provider.

        Args:
            source_type (str): The credential source type identifier.
            provider_class (Type[CredentialProvider]): The provider class to register.
        """
        cls._providers[source_type] = provider_class

    @classmethod
    def get_provider(cls, source_type: str, **kwargs: Any) -> CredentialProvider:
        """
        Get the appropriate credential provider for a source type.

        Args:
            source_type (str): The credential source type.
            **kwargs: Passed to the provider's constructor.

        Returns:
            CredentialProvider: The credential provider instance.

        Raises:
            UnsupportedProviderError: If the source type is not supported.
        """
        provider_class = cls._providers.get(source_type)
        if not provider_class:
            raise UnsupportedProviderError(f"Unsupported credential source: {source_type}")

        return provider_class(**kwargs)

    @classmethod
    def build_chain(
        cls, source_types: Iterable[str] = DEFAULT_PROVIDER_CHAIN
    ) -> List[CredentialProvider]:
        """
        Build an ordered provider chain, highest priority first.

        Args:
            source_types (Iterable[str]): Registered source type names.

        Returns:
            List[CredentialProvider]: One provider instance per name, in order.
        """
        return [cls.get_provider(source_type) for source_type in source_types]
