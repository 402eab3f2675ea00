"""Bootstrap do cliente Slack — inicialização e wiring.

Composition root: configura logging, valida settings e constrói o
connector, o client e o verificador de assinatura a partir das settings.

Uso:
    from app.bootstrap import initialize_app, create_slack_client

    initialize_app()
    client = create_slack_client()
"""

from __future__ import annotations

import logging

from app.bootstrap.clients import (
    create_client_credentials,
    create_signature_verifier,
    create_slack_client,
    create_slack_http_client,
    open_bot_session,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_slack_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_client_credentials",
    "create_signature_verifier",
    "create_slack_client",
    "create_slack_http_client",
    "initialize_app",
    "open_bot_session",
    "validate_runtime_settings",
]
