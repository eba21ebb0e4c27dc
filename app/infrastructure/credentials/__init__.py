"""Credential store collaborator.

Usage:
    from infrastructure.credentials import (
        Domain,
        InMemoryCredentialsStore,
        StringCredentials,
        SystemCredentialsProvider,
    )

    store = InMemoryCredentialsStore()
    store.add_credentials(Domain.global_(), StringCredentials(id="slack", secret="xoxb-1"))
    provider = SystemCredentialsProvider(store)
"""

from infrastructure.credentials.models import (
    Credentials,
    Domain,
    StringCredentials,
    UsernamePasswordCredentials,
)
from infrastructure.credentials.store import (
    CredentialsProvider,
    CredentialsStore,
    InMemoryCredentialsStore,
    SystemCredentialsProvider,
)

__all__ = [
    "Credentials",
    "Domain",
    "StringCredentials",
    "UsernamePasswordCredentials",
    "CredentialsProvider",
    "CredentialsStore",
    "InMemoryCredentialsStore",
    "SystemCredentialsProvider",
]
