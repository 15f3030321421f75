"""Configuração do pytest para o projeto wa_outbound."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Isola testes que leem settings do ambiente (lru_cache)."""
    from config.settings import get_base_settings, get_whatsapp_settings

    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()
