"""Protocolos HTTP usados pelo cliente Slack.

Qualquer transporte (pool httpx, fake de testes) implementa o contrato
por estrutura, sem herança.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from api.connectors.slack.auth import SlackApiToken, SlackClientCredentials

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class SlackHttpConnectorProtocol(Protocol):
    """Contrato mínimo de transporte da Slack Web API."""

    async def get(
        self,
        method_name: str,
        params: Sequence[tuple[str, str | None]],
        response_type: type[ResponseT],
        token: SlackApiToken | None = None,
    ) -> ResponseT: ...

    async def get_with_client_credentials(
        self,
        method_name: str,
        params: Sequence[tuple[str, str | None]],
        response_type: type[ResponseT],
        credentials: SlackClientCredentials,
    ) -> ResponseT: ...

    async def post(
        self,
        method_name: str,
        request_body: BaseModel | Mapping[str, Any],
        response_type: type[ResponseT],
        token: SlackApiToken | None = None,
    ) -> ResponseT: ...
