"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Cloud API (envelope, mídia, templates, carrosséis)
"""

__all__: list[str] = []
