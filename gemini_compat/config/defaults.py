import os

LOG_LEVEL = os.getenv("GC_LOG_LEVEL") or "WARNING"

# Gemini 3+ thinking levels, lowercase as sent on the wire
THINKING_LEVELS = ("low", "high")

# OpenAI reasoning_effort -> Gemini thinkingLevel, medium maps to high per Google docs
REASONING_EFFORT_TO_THINKING_LEVEL = {
    "low": "low",
    "medium": "high",
    "high": "high",
}

# Accepted request keys per logical field, first present key wins
THINKING_LEVEL_KEYS = ("thinkingLevel", "thinking_level")
REASONING_EFFORT_KEYS = ("reasoningEffort", "reasoning_effort")
THINKING_BUDGET_KEYS = ("thinkingBudget", "thinking_budget")
INCLUDE_THOUGHTS_KEYS = ("includeThoughts", "include_thoughts")

THINKING_CONFIG_KEYS = ("thinkingConfig", "thinking_config")

SSE_DATA_PREFIX = "data:"
