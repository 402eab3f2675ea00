"""App — composição e contratos do cliente.

Subpastas:
- bootstrap/: composition root (factories a partir de settings)
- protocols/: contratos/interfaces (transporte HTTP)
- observability/: correlation_id para logs estruturados

Padrão: app compõe; api adapta; config configura.
"""
