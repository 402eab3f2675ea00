"""Credenciais Slack e montagem do header Authorization.

Tokens e secrets nunca aparecem em repr/logs.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Literal

SlackTokenType = Literal["bot", "user", "app"]


@dataclass(frozen=True)
class SlackApiToken:
    """Token de API Slack (xoxb-, xoxp-, xapp-).

    Attributes:
        token_value: Valor bruto do token (mascarado no repr)
        token_type: Tipo do token, apenas para diagnóstico
    """

    token_value: str = field(repr=False)
    token_type: SlackTokenType | None = None

    def __post_init__(self) -> None:
        if not self.token_value or not self.token_value.strip():
            raise ValueError("token_value não pode ser vazio")


@dataclass(frozen=True)
class SlackClientCredentials:
    """Par client_id/client_secret do app Slack (troca OAuth)."""

    client_id: str
    client_secret: str = field(repr=False)


def bearer_auth_headers(token: SlackApiToken | None) -> dict[str, str]:
    """Retorna header Bearer para o token (vazio se token ausente)."""
    if token is None:
        return {}
    return {"Authorization": f"Bearer {token.token_value}"}


def basic_auth_headers(credentials: SlackClientCredentials) -> dict[str, str]:
    """Retorna header Basic com client_id como usuário e secret como senha."""
    raw = f"{credentials.client_id}:{credentials.client_secret}".encode()
    return {"Authorization": f"Basic {base64.b64encode(raw).decode('ascii')}"}
