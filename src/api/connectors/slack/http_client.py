"""Connector HTTP da Slack Web API.

Responsável por:
- Montar requests autenticados (Bearer ou Basic)
- Despachar GET/POST sobre um httpx.AsyncClient compartilhado (pool)
- Decodificar o envelope `{ok, error, warnings}` para o tipo da resposta

Fluxo de resposta:
- 200 + JSON (ou sem content-type) + corpo → envelope → tipo ou SlackApiError
- 200 sem corpo ou com content-type não-JSON → valor zero do tipo
- qualquer outro status → SlackHttpError (sem decodificar envelope)
- falha de rede → SlackTransportError

Sem retry/backoff: cada falha sobe imediatamente para o chamador.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import BaseModel

from config.settings.slack import SLACK_API_BASE_URL

from .auth import SlackApiToken, SlackClientCredentials, basic_auth_headers, bearer_auth_headers
from .envelope import ResponseT, decode_envelope, empty_response
from .errors import SlackApiError, SlackHttpError, SlackTransportError
from .slack_logging import log_api_error, log_http_error, log_success, log_transport_error

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

QueryParams = Sequence[tuple[str, str | None]]


@dataclass
class SlackHttpClientConfig:
    """Configuração do connector HTTP."""

    api_base_url: str = SLACK_API_BASE_URL
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def to_query_value(value: Any) -> str | None:
    """Converte valor opcional de campo em valor de query string.

    None continua None (parâmetro omitido); bool vira true/false;
    sequências viram lista separada por vírgula.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def _is_json_content_type(content_type: str | None) -> bool:
    # Ausência de content-type é tratada como JSON
    if not content_type:
        return True
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json"


def _serialize_body(request_body: BaseModel | Mapping[str, Any]) -> bytes:
    if isinstance(request_body, BaseModel):
        return request_body.model_dump_json(exclude_none=True).encode("utf-8")
    payload = {key: value for key, value in request_body.items() if value is not None}
    return json.dumps(payload).encode("utf-8")


class SlackHttpClient:
    """Connector httpx para a Slack Web API.

    O httpx.AsyncClient é o único recurso compartilhado e é seguro para uso
    concorrente. Pode ser injetado (testes, pool externo) ou é criado sob
    demanda e fechado em `aclose()`.
    """

    def __init__(
        self,
        config: SlackHttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or SlackHttpClientConfig()
        self._http_client = http_client
        self._owns_http_client = http_client is None

    async def __aenter__(self) -> SlackHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Fecha o pool HTTP se ele foi criado por este connector."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            )
            self._owns_http_client = True
        return self._http_client

    def build_url(self, method_name: str) -> str:
        """Monta URL completa do método (ex: https://slack.com/api/files.info)."""
        if not method_name or not method_name.strip():
            raise ValueError("method_name não pode ser vazio")
        return f"{self._config.api_base_url.rstrip('/')}/{method_name}"

    async def get(
        self,
        method_name: str,
        params: QueryParams,
        response_type: type[ResponseT],
        token: SlackApiToken | None = None,
    ) -> ResponseT:
        """GET autenticado por token (opcional)."""
        return await self._send(
            "GET",
            method_name,
            response_type,
            params=params,
            headers=bearer_auth_headers(token),
        )

    async def get_with_client_credentials(
        self,
        method_name: str,
        params: QueryParams,
        response_type: type[ResponseT],
        credentials: SlackClientCredentials,
    ) -> ResponseT:
        """GET autenticado por Basic (client_id/client_secret)."""
        return await self._send(
            "GET",
            method_name,
            response_type,
            params=params,
            headers=basic_auth_headers(credentials),
        )

    async def post(
        self,
        method_name: str,
        request_body: BaseModel | Mapping[str, Any],
        response_type: type[ResponseT],
        token: SlackApiToken | None = None,
    ) -> ResponseT:
        """POST com corpo JSON autenticado por token (opcional)."""
        headers = {"Content-Type": JSON_CONTENT_TYPE, **bearer_auth_headers(token)}
        return await self._send(
            "POST",
            method_name,
            response_type,
            headers=headers,
            content=_serialize_body(request_body),
        )

    async def _send(
        self,
        http_method: str,
        method_name: str,
        response_type: type[ResponseT],
        *,
        headers: dict[str, str],
        params: QueryParams | None = None,
        content: bytes | None = None,
    ) -> ResponseT:
        url = self.build_url(method_name)
        query = [(name, value) for name, value in (params or ()) if value is not None]
        merged_headers = {
            **self._config.default_headers,
            "Accept-Charset": "utf-8",
            **headers,
        }

        client = await self._get_http_client()
        try:
            async with client.stream(
                http_method,
                url,
                params=query or None,
                headers=merged_headers,
                content=content,
            ) as response:
                await response.aread()
        except httpx.HTTPError as exc:
            error = SlackTransportError(f"slack_transport_error: {method_name}", cause=exc)
            log_transport_error(error, http_method, method_name)
            raise error from exc

        return self._process_response(response, http_method, method_name, response_type)

    def _process_response(
        self,
        response: httpx.Response,
        http_method: str,
        method_name: str,
        response_type: type[ResponseT],
    ) -> ResponseT:
        body = response.text

        if response.status_code != httpx.codes.OK:
            http_error = SlackHttpError(response.status_code, http_response_body=body)
            log_http_error(http_error, http_method, method_name)
            raise http_error

        if not body.strip() or not _is_json_content_type(response.headers.get("content-type")):
            log_success(http_method, method_name, response.status_code)
            return empty_response(response_type)

        try:
            result = decode_envelope(body, response_type)
        except SlackApiError as exc:
            log_api_error(exc, http_method, method_name)
            raise

        log_success(http_method, method_name, response.status_code)
        return result
