"""Credential models.

Secrets are held as pydantic SecretStr so they render as '**********' in
reprs, model dumps and log lines. Use get_secret_value() only at the point
where the plaintext is handed to a client.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr


class Domain(BaseModel):
    """A credentials domain. The global domain has an empty name."""

    name: str = ""
    description: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def global_(cls) -> "Domain":
        return cls(name="")


class Credentials(BaseModel):
    """Base class for every credential kept in a store."""

    id: str = Field(..., min_length=1)
    description: Optional[str] = None

    model_config = {"frozen": True}


class StringCredentials(Credentials):
    """A single secret string, such as an API token."""

    secret: SecretStr


class UsernamePasswordCredentials(Credentials):
    """A username and password pair."""

    username: str
    password: SecretStr
