"""Temporary AWS credential resolution.

Credentials are looked up, in order, from:

- **Environment variables**: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY,
  AWS_SESSION_TOKEN
- **Credentials file**: ~/.aws/credentials
- **Console input**: pasted by the operator, echo disabled

Quick Start:
    >>> from credential_sdk.credentials import CredentialResolver
    >>>
    >>> resolver = CredentialResolver()
    >>> credentials = await resolver.resolve()
    >>> os.environ.update(credentials.to_environment())
"""

# Provider protocol
from credential_sdk.credentials.base import CredentialProvider

# Exceptions
from credential_sdk.credentials.exceptions import (
    CredentialError,
    CredentialResolutionError,
    CredentialValidationError,
    IncompleteInteractiveInputError,
    SourceUnavailableError,
    UnsupportedProviderError,
)

# Factory
from credential_sdk.credentials.factory import CredentialProviderFactory

# Console input parsing
from credential_sdk.credentials.parser import parse_console_input

# Providers
from credential_sdk.credentials.providers import (
    ConsoleCredentialProvider,
    CredentialsFileProvider,
    EnvironmentCredentialProvider,
    InteractiveCollector,
)

# Resolver
from credential_sdk.credentials.resolver import CredentialResolver

# Result types
from credential_sdk.credentials.results import AttemptResult, ParsedLine

# Credential set
from credential_sdk.credentials.types import CredentialSet

__all__ = [
    # Credential set
    "CredentialSet",
    # Result types
    "AttemptResult",
    "ParsedLine",
    # Exceptions
    "CredentialError",
    "CredentialResolutionError",
    "CredentialValidationError",
    "IncompleteInteractiveInputError",
    "SourceUnavailableError",
    "UnsupportedProviderError",
    # Providers
    "CredentialProvider",
    "CredentialProviderFactory",
    "ConsoleCredentialProvider",
    "CredentialsFileProvider",
    "EnvironmentCredentialProvider",
    "InteractiveCollector",
    # Parsing
    "parse_console_input",
    # Resolver
    "CredentialResolver",
]
