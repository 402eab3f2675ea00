"""Connector da Slack Web API.

Componentes:
- auth: credenciais e header Authorization
- envelope: decodificação `{ok, error, warnings}`
- http_client: transporte httpx (GET/POST tipados)
- signature / webhook: verificação de requests assinados
- scroller: paginação por cursor
- client: SlackClient / SlackClientSession e métodos de endpoint
"""

from .auth import SlackApiToken, SlackClientCredentials, basic_auth_headers, bearer_auth_headers
from .client import SlackClient, SlackClientSession
from .envelope import SlackEnvelope, decode_envelope
from .errors import (
    InvalidEncodingError,
    InvalidJsonError,
    SlackApiError,
    SlackClientError,
    SlackDecodeError,
    SlackHttpError,
    SlackSignatureError,
    SlackTransportError,
    WebhookRequestError,
)
from .http_client import SlackHttpClient, SlackHttpClientConfig, to_query_value
from .models import (
    SlackApiFilesInfoRequest,
    SlackApiFilesInfoResponse,
    SlackApiFilesListRequest,
    SlackApiFilesListResponse,
    SlackFile,
    SlackFileComment,
    SlackOAuthV2AccessRequest,
    SlackOAuthV2AccessResponse,
    SlackResponseMetadata,
)
from .scroller import SlackApiResponseScroller
from .signature import SlackEventSignatureVerifier
from .webhook import decode_signed_request, parse_signed_request

__all__ = [
    "InvalidEncodingError",
    "InvalidJsonError",
    "SlackApiError",
    "SlackApiFilesInfoRequest",
    "SlackApiFilesInfoResponse",
    "SlackApiFilesListRequest",
    "SlackApiFilesListResponse",
    "SlackApiResponseScroller",
    "SlackApiToken",
    "SlackClient",
    "SlackClientCredentials",
    "SlackClientError",
    "SlackClientSession",
    "SlackDecodeError",
    "SlackEnvelope",
    "SlackEventSignatureVerifier",
    "SlackFile",
    "SlackFileComment",
    "SlackHttpClient",
    "SlackHttpClientConfig",
    "SlackHttpError",
    "SlackOAuthV2AccessRequest",
    "SlackOAuthV2AccessResponse",
    "SlackResponseMetadata",
    "SlackSignatureError",
    "SlackTransportError",
    "WebhookRequestError",
    "basic_auth_headers",
    "bearer_auth_headers",
    "decode_envelope",
    "decode_signed_request",
    "parse_signed_request",
    "to_query_value",
]
