"""Unit tests for credential models, stores and providers."""

import pytest
from pydantic import ValidationError

from infrastructure.credentials import (
    Domain,
    InMemoryCredentialsStore,
    StringCredentials,
    SystemCredentialsProvider,
    UsernamePasswordCredentials,
)


@pytest.mark.unit
class TestCredentialModels:
    def test_secret_is_masked_in_repr(self):
        credentials = StringCredentials(id="slack-token", secret="xoxb-secret")

        assert "xoxb-secret" not in repr(credentials)
        assert "xoxb-secret" not in str(credentials.model_dump())
        assert credentials.secret.get_secret_value() == "xoxb-secret"

    def test_password_is_masked_in_repr(self):
        credentials = UsernamePasswordCredentials(
            id="jenkins", username="bot", password="hunter2"
        )

        assert "hunter2" not in repr(credentials)

    def test_id_is_required(self):
        with pytest.raises(ValidationError):
            StringCredentials(id="", secret="x")

    def test_global_domain(self):
        assert Domain.global_() == Domain(name="")


@pytest.mark.unit
class TestInMemoryCredentialsStore:
    def test_keeps_domain_and_credential_order(self):
        store = InMemoryCredentialsStore()
        first = StringCredentials(id="a", secret="1")
        second = StringCredentials(id="b", secret="2")
        store.add_credentials(Domain(name="chat"), first)
        store.add_credentials(Domain.global_(), second)
        store.add_credentials(Domain(name="chat"), second)

        assert [d.name for d in store.get_domains()] == ["chat", ""]
        assert store.get_credentials(Domain(name="chat")) == [first, second]

    def test_unknown_domain_is_empty(self):
        assert InMemoryCredentialsStore().get_credentials(Domain(name="x")) == []

    def test_constructor_accepts_domains(self):
        credentials = StringCredentials(id="a", secret="1")
        store = InMemoryCredentialsStore([(Domain.global_(), [credentials])])

        assert store.get_credentials(Domain.global_()) == [credentials]


@pytest.mark.unit
class TestSystemCredentialsProvider:
    def test_returns_store_for_any_runtime(self, credentials_store):
        provider = SystemCredentialsProvider(credentials_store)

        assert provider.get_store(object()) is credentials_store

    def test_without_store(self):
        assert SystemCredentialsProvider().get_store(None) is None

    def test_from_mapping(self):
        provider = SystemCredentialsProvider.from_mapping(
            {
                "": [
                    {"id": "slack-token", "type": "string", "secret": "xoxb"},
                    {
                        "id": "jenkins",
                        "type": "usernamePassword",
                        "username": "bot",
                        "password": "pw",
                    },
                ],
                "chat": [{"id": "other", "secret": "s"}],
            }
        )
        store = provider.get_store(None)

        global_credentials = store.get_credentials(Domain.global_())
        assert isinstance(global_credentials[0], StringCredentials)
        assert isinstance(global_credentials[1], UsernamePasswordCredentials)
        assert store.get_credentials(Domain(name="chat"))[0].id == "other"

    def test_from_mapping_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown credential type"):
            SystemCredentialsProvider.from_mapping(
                {"": [{"id": "cert", "type": "certificate"}]}
            )

    def test_from_empty_mapping(self):
        store = SystemCredentialsProvider.from_mapping({}).get_store(None)

        assert store.get_domains() == []
