"""Enums de domínio para mensagens outbound WhatsApp."""

from __future__ import annotations

from enum import StrEnum

# Valores fixos do envelope Graph API
MESSAGING_PRODUCT = "whatsapp"
RECIPIENT_TYPE = "individual"


class MessageType(StrEnum):
    """Tipos de mensagem que o envelope outbound suporta."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    TEMPLATE = "template"
    INTERACTIVE = "interactive"
    LOCATION = "location"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas."""

    BUTTON = "button"
    LIST = "list"


class ParameterType(StrEnum):
    """Tipos de parâmetro aceitos em componentes de template."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    PAYLOAD = "payload"
    PRODUCT = "product"
    ACTION = "action"


class ComponentType(StrEnum):
    """Tipos de componente de template/carrossel."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"
    CAROUSEL = "carousel"


class ButtonSubType(StrEnum):
    """Subtipos de botão em componentes de template."""

    QUICK_REPLY = "quick_reply"
    URL = "url"
    CATALOG = "CATALOG"


class TokenType(StrEnum):
    """Tipos de token aceitos no header Authorization."""

    BEARER = "Bearer"
    OAUTH = "OAuth"


class LanguageCode(StrEnum):
    """Códigos de idioma mais usados em templates.

    A API aceita qualquer código aprovado para o template; o enum
    cobre apenas os usuais.
    """

    EN = "en"
    EN_US = "en_US"
    EN_GB = "en_GB"
    ES = "es"
    ES_MX = "es_MX"
    ES_AR = "es_AR"
    FR = "fr"
    FR_FR = "fr_FR"
    DE = "de"
    PT_BR = "pt_BR"
    PT_PT = "pt_PT"
    HI = "hi"
    AR = "ar"
    ZH_CN = "zh_CN"
    ZH_TW = "zh_TW"
