from .thinking import (
    ThinkingConfig,
    normalize_thinking_config,
    parse_thinking_level,
    map_reasoning_effort_to_thinking_level,
)
from .request import apply_thinking_config
from .responses import (
    UsageMetadata,
    parse_gemini_api_body,
    extract_usage_metadata,
    extract_usage_from_sse_payload,
)
from .exceptions import (
    ThinkingConfigError,
    ThinkingConfigConflictError,
    InvalidThinkingLevelError,
    InvalidThinkingBudgetError,
)

__all__ = [
    "ThinkingConfig",
    "normalize_thinking_config",
    "parse_thinking_level",
    "map_reasoning_effort_to_thinking_level",
    "apply_thinking_config",
    "UsageMetadata",
    "parse_gemini_api_body",
    "extract_usage_metadata",
    "extract_usage_from_sse_payload",
    "ThinkingConfigError",
    "ThinkingConfigConflictError",
    "InvalidThinkingLevelError",
    "InvalidThinkingBudgetError",
]
