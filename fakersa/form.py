"""Credential payload for the legacy SSO login form.

The page concatenates username, password and the one-time ``lt`` ticket,
runs them through the cascade cipher under a fixed key ring and posts the
hex result as ``rsa`` together with the plain field lengths. Fetching the
page and posting the form belong to the caller.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from .cipher.cascade import encrypt_string
from .config import load_settings

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginForm(BaseModel):
    """Fields of the ``application/x-www-form-urlencoded`` login body, in page order."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    rsa: str = Field(..., pattern=r"^[0-9A-F]*$")
    ul: str
    pl: str
    sl: str = Field(default="0")
    lt: str
    execution: str
    event_id: str = Field(default="submit", alias="_eventId")

    def to_form_data(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)

    def encode(self) -> str:
        return urlencode(self.to_form_data())


def build_login_form(
    username: str,
    password: str,
    lt: str,
    execution: str,
    key_ring: Optional[Sequence[str]] = None,
) -> LoginForm:
    creds = Credentials(username=username, password=password)
    ring = list(key_ring) if key_ring is not None else load_settings().key_ring
    logger.debug("Building login form for %d-char username with %d keys", len(creds.username), len(ring))
    return LoginForm(
        rsa=encrypt_string(creds.username + creds.password + lt, ring),
        ul=str(len(creds.username)),
        pl=str(len(creds.password)),
        lt=lt,
        execution=execution,
    )
