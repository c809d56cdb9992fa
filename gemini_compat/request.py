from typing import Any, Mapping, Optional

from gemini_compat.config.defaults import THINKING_CONFIG_KEYS
from gemini_compat.thinking import normalize_thinking_config


def apply_thinking_config(generation_config: Optional[Mapping[str, Any]]) -> dict:
    """
    Return a copy of an outbound generationConfig with a normalized thinkingConfig.

    The raw value is read from ``thinkingConfig`` or ``thinking_config``. When
    normalization yields nothing the field is left out entirely so Gemini falls
    back to its own default thinking behaviour. The input is never mutated.
    """
    prepared = dict(generation_config) if generation_config else {}

    raw_config = None
    for key in THINKING_CONFIG_KEYS:
        value = prepared.pop(key, None)
        if raw_config is None and value is not None:
            raw_config = value

    normalized = normalize_thinking_config(raw_config)
    if normalized is not None:
        prepared["thinkingConfig"] = normalized.to_dict()

    return prepared
