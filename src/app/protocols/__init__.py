"""Protocolos e contratos do core da aplicação."""

from .http_client import SlackHttpConnectorProtocol

__all__ = [
    "SlackHttpConnectorProtocol",
]
