from .defaults import (
    LOG_LEVEL,
    THINKING_LEVELS,
    REASONING_EFFORT_TO_THINKING_LEVEL,
    THINKING_LEVEL_KEYS,
    REASONING_EFFORT_KEYS,
    THINKING_BUDGET_KEYS,
    INCLUDE_THOUGHTS_KEYS,
    THINKING_CONFIG_KEYS,
    SSE_DATA_PREFIX,
)
