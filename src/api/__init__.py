"""API: camada de borda com a Meta Graph API.

Responsabilidades:
- Construir o envelope JSON de envio
- Executar o POST HTTP e decodificar respostas
- Parsing de erros da Graph API

Subpastas:
- connectors/: transporte HTTP, headers e erros por canal
- payload_builders/: construção de payloads para APIs externas

NÃO PODE conter: orquestração de use cases.
"""
