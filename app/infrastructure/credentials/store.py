"""Credential stores and providers.

A provider hands out a store for a given host runtime; a store groups
credentials into domains. The system provider keeps a single in-memory
store, loaded from the SYSTEM_CREDENTIALS setting.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from infrastructure.credentials.models import (
    Credentials,
    Domain,
    StringCredentials,
    UsernamePasswordCredentials,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CredentialsStore(ABC):
    """Read access to credentials grouped by domain."""

    @abstractmethod
    def get_domains(self) -> List[Domain]:
        """List domains in store order."""

    @abstractmethod
    def get_credentials(self, domain: Domain) -> List[Credentials]:
        """List credentials of a domain in store order."""


class CredentialsProvider(ABC):
    """Hands out the credentials store visible from a host runtime."""

    @abstractmethod
    def get_store(self, runtime: Any) -> Optional[CredentialsStore]:
        """Return the store for the runtime, or None when there is none."""


class InMemoryCredentialsStore(CredentialsStore):
    """Credentials store backed by an ordered list of domains."""

    def __init__(
        self, domains: Optional[Iterable[Tuple[Domain, List[Credentials]]]] = None
    ):
        self._domains: Dict[Domain, List[Credentials]] = {}
        for domain, credentials in domains or []:
            self._domains[domain] = list(credentials)

    def add_credentials(self, domain: Domain, credentials: Credentials) -> None:
        self._domains.setdefault(domain, []).append(credentials)

    def get_domains(self) -> List[Domain]:
        return list(self._domains.keys())

    def get_credentials(self, domain: Domain) -> List[Credentials]:
        return list(self._domains.get(domain, []))


class SystemCredentialsProvider(CredentialsProvider):
    """Provider exposing one process-wide store."""

    def __init__(self, store: Optional[CredentialsStore] = None):
        self._store = store

    def get_store(self, runtime: Any) -> Optional[CredentialsStore]:
        return self._store

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, List[Mapping[str, str]]]
    ) -> "SystemCredentialsProvider":
        """Build a provider from SYSTEM_CREDENTIALS style data.

        Args:
            data: Domain name to list of credential entries. Each entry has an
                "id" and a "type" of "string" (with "secret") or
                "usernamePassword" (with "username" and "password").

        Raises:
            ValueError: If an entry has an unknown type.
        """
        store = InMemoryCredentialsStore()
        for domain_name, entries in data.items():
            domain = Domain(name=domain_name)
            for entry in entries:
                store.add_credentials(domain, _credentials_from_entry(entry))
        logger.info(
            "system_credentials_loaded",
            domain_count=len(store.get_domains()),
        )
        return cls(store)


def _credentials_from_entry(entry: Mapping[str, str]) -> Credentials:
    kind = entry.get("type", "string")
    if kind == "string":
        return StringCredentials(
            id=entry["id"],
            description=entry.get("description"),
            secret=entry["secret"],
        )
    if kind == "usernamePassword":
        return UsernamePasswordCredentials(
            id=entry["id"],
            description=entry.get("description"),
            username=entry["username"],
            password=entry["password"],
        )
    raise ValueError(f"Unknown credential type: {kind}")
