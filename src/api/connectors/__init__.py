"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Cloud API (transporte, headers, erros Meta)
"""

__all__: list[str] = []
