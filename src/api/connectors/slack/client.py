"""Cliente e sessão da Slack Web API.

SlackClient guarda o connector (transporte compartilhado); cada sessão
associa um token ao client. O estado de cada chamada (params, cursor,
resposta) é local: várias sessões podem usar o mesmo connector em paralelo.

Uso:
    async with SlackHttpClient() as connector:
        client = SlackClient(connector)
        session = client.open_session(SlackApiToken("xoxb-..."))
        info = await session.files_info(SlackApiFilesInfoRequest(file="F123"))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .models import (
    SlackApiFilesInfoRequest,
    SlackApiFilesInfoResponse,
    SlackApiFilesListRequest,
    SlackApiFilesListResponse,
    SlackOAuthV2AccessRequest,
    SlackOAuthV2AccessResponse,
)
from .scroller import SlackApiResponseScroller

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel

    from app.protocols.http_client import ResponseT, SlackHttpConnectorProtocol

    from .auth import SlackApiToken, SlackClientCredentials
    from .http_client import QueryParams

logger = logging.getLogger(__name__)


class SlackFilesApiMixin:
    """Métodos files.* (https://api.slack.com/methods#files).

    Requer `http_get` na classe hospedeira (SlackClientSession).
    """

    async def files_info(self, request: SlackApiFilesInfoRequest) -> SlackApiFilesInfoResponse:
        """files.info: metadados de um arquivo e seus comentários."""
        return await self.http_get(  # type: ignore[attr-defined]
            "files.info",
            request.to_query_params(),
            SlackApiFilesInfoResponse,
        )

    async def files_list(self, request: SlackApiFilesListRequest) -> SlackApiFilesListResponse:
        """files.list: arquivos visíveis para o token."""
        return await self.http_get(  # type: ignore[attr-defined]
            "files.list",
            request.to_query_params(),
            SlackApiFilesListResponse,
        )


class SlackClientSession(SlackFilesApiMixin):
    """Sessão = client + token; todas as chamadas levam o mesmo token."""

    def __init__(self, client: SlackClient, token: SlackApiToken) -> None:
        self._client = client
        self._token = token

    @property
    def client(self) -> SlackClient:
        return self._client

    async def http_get(
        self,
        method_name: str,
        params: QueryParams,
        response_type: type[ResponseT],
    ) -> ResponseT:
        return await self._client.connector.get(
            method_name,
            params,
            response_type,
            token=self._token,
        )

    async def http_post(
        self,
        method_name: str,
        request_body: BaseModel | Mapping[str, Any],
        response_type: type[ResponseT],
    ) -> ResponseT:
        return await self._client.connector.post(
            method_name,
            request_body,
            response_type,
            token=self._token,
        )

    def scroller(self, request: Any) -> SlackApiResponseScroller[Any]:
        """Cria scroller para um request paginável por cursor."""
        return SlackApiResponseScroller(request, self)


class SlackClient:
    """Ponto de entrada do cliente Slack."""

    def __init__(self, connector: SlackHttpConnectorProtocol) -> None:
        self._connector = connector

    @property
    def connector(self) -> SlackHttpConnectorProtocol:
        return self._connector

    def open_session(self, token: SlackApiToken) -> SlackClientSession:
        return SlackClientSession(self, token)

    async def oauth2_access(
        self,
        credentials: SlackClientCredentials,
        request: SlackOAuthV2AccessRequest,
    ) -> SlackOAuthV2AccessResponse:
        """oauth.v2.access: troca o code OAuth por tokens (auth Basic)."""
        logger.info("slack_oauth_access", extra={"client_id": credentials.client_id})
        return await self._connector.get_with_client_credentials(
            "oauth.v2.access",
            request.to_query_params(),
            SlackOAuthV2AccessResponse,
            credentials,
        )
