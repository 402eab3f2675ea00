"""API — camada de borda e adapters de serviços externos.

Responsabilidades:
- Montar e despachar chamadas autenticadas para APIs externas
- Decodificar respostas para modelos tipados
- Validar assinaturas de requests recebidos (webhooks)

Subpastas:
- connectors/: adapters HTTP por serviço

NÃO PODE conter: wiring de settings (fica em app/bootstrap).
"""
