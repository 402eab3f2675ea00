"""Connectors — adapters de borda para APIs externas.

Estrutura:
- slack/: Slack Web API (transporte, assinatura de webhooks, paginação)
"""

__all__: list[str] = []
