"""
Thinking configuration normalization for Gemini requests.

Clients describe the thinking feature in three overlapping dialects:

- Gemini 2.5 sends a numeric ``thinkingBudget``
- Gemini 3+ sends a discrete ``thinkingLevel`` ("low" | "high")
- OpenAI-style clients send ``reasoning_effort`` ("low" | "medium" | "high")

``normalize_thinking_config`` folds all of them into a single ``ThinkingConfig``
that can be sent to Gemini as-is, or returns None when there is nothing to send.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from gemini_compat.config.defaults import (
    INCLUDE_THOUGHTS_KEYS,
    REASONING_EFFORT_KEYS,
    REASONING_EFFORT_TO_THINKING_LEVEL,
    THINKING_BUDGET_KEYS,
    THINKING_LEVEL_KEYS,
    THINKING_LEVELS,
)
from gemini_compat.exceptions import (
    InvalidThinkingBudgetError,
    InvalidThinkingLevelError,
    ThinkingConfigConflictError,
)
from gemini_compat.logger import logger_thinking

try:
    from google.genai import types

    google_genai_available = True
except ImportError:
    google_genai_available = False


@dataclass
class ThinkingConfig:
    """
    Normalized thinking configuration accepted by Gemini.

    thinking_level and thinking_budget are mutually exclusive, Gemini answers
    with a 400 if both are present in the same request.
    """

    thinking_level: Optional[str] = None
    thinking_budget: Optional[Union[int, float]] = None
    include_thoughts: bool = False

    def __post_init__(self):
        if self.thinking_level is not None and self.thinking_budget is not None:
            raise ThinkingConfigConflictError(
                "Cannot set both thinking_level and thinking_budget"
            )

        if (
            self.thinking_level is not None
            and self.thinking_level not in THINKING_LEVELS
        ):
            raise InvalidThinkingLevelError(
                f"thinking_level must be one of {', '.join(THINKING_LEVELS)}, got {self.thinking_level!r}"
            )

        if self.thinking_budget is not None and not _is_finite_number(
            self.thinking_budget
        ):
            raise InvalidThinkingBudgetError(
                f"thinking_budget must be a finite number, got {type(self.thinking_budget).__name__}"
            )

    def to_dict(self) -> dict:
        payload = {}
        if self.thinking_level is not None:
            payload["thinkingLevel"] = self.thinking_level
        elif self.thinking_budget is not None:
            payload["thinkingBudget"] = self.thinking_budget
        payload["includeThoughts"] = self.include_thoughts
        return payload

    def to_genai(self):
        if not google_genai_available:
            raise ImportError(
                "The google-genai package is not installed. "
                "Please install it with `pip install google-genai`"
            )

        kwargs = {"include_thoughts": self.include_thoughts}
        if self.thinking_level is not None:
            kwargs["thinking_level"] = self.thinking_level.upper()
        elif self.thinking_budget is not None:
            kwargs["thinking_budget"] = int(self.thinking_budget)

        return types.ThinkingConfig(**kwargs)


def _first_present(record: Mapping[str, Any], keys: Sequence[str]) -> Any:
    # None behaves like a missing key so a JSON null never shadows the alias
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints past the float range count as infinite, like the same JSON in a browser
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def parse_thinking_level(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    normalized = value.lower()
    if normalized in THINKING_LEVELS:
        return normalized
    return None


def map_reasoning_effort_to_thinking_level(effort: Any) -> Optional[str]:
    """
    Maps OpenAI reasoning_effort values to Gemini thinking levels.

    "low" maps to "low", both "medium" and "high" map to "high".
    """
    if not isinstance(effort, str):
        return None
    return REASONING_EFFORT_TO_THINKING_LEVEL.get(effort.lower())


def normalize_thinking_config(config: Any) -> Optional[ThinkingConfig]:
    """
    Normalize a client supplied thinking configuration for Gemini.

    The input is untrusted and may have any shape. Every field that is missing,
    mistyped or out of range is treated as not provided, this function never
    raises.

    Resolution rules:
    1. thinkingLevel wins over reasoning_effort, which is only consulted when
       the native level is missing or invalid
    2. thinkingBudget is only emitted when no level was resolved
    3. thinking counts as enabled when a level is set or the budget is above 0
    4. includeThoughts is forced to False unless thinking is enabled

    Args:
        config: The raw thinking configuration from the inbound request

    Returns:
        A ThinkingConfig to send to Gemini, or None if the thinkingConfig field
        should be omitted from the outbound request entirely
    """
    if not isinstance(config, Mapping):
        return None

    level_raw = _first_present(config, THINKING_LEVEL_KEYS)
    effort_raw = _first_present(config, REASONING_EFFORT_KEYS)
    budget_raw = _first_present(config, THINKING_BUDGET_KEYS)
    include_raw = _first_present(config, INCLUDE_THOUGHTS_KEYS)

    thinking_level = parse_thinking_level(level_raw)
    if thinking_level is None:
        if level_raw is not None:
            logger_thinking.debug(f"Ignoring invalid thinking level {level_raw!r}")
        thinking_level = map_reasoning_effort_to_thinking_level(effort_raw)
        if thinking_level is None and effort_raw is not None:
            logger_thinking.debug(f"Ignoring invalid reasoning effort {effort_raw!r}")

    thinking_budget = budget_raw if _is_finite_number(budget_raw) else None
    if thinking_budget is None and budget_raw is not None:
        logger_thinking.debug(
            f"Ignoring invalid thinking budget of type {type(budget_raw).__name__}"
        )

    include_thoughts = include_raw if isinstance(include_raw, bool) else None
    if include_thoughts is None and include_raw is not None:
        logger_thinking.debug(f"Ignoring non-boolean include thoughts {include_raw!r}")

    enable_thinking = thinking_level is not None or (
        thinking_budget is not None and thinking_budget > 0
    )

    final_include = bool(include_thoughts) if enable_thinking else False

    if (
        not enable_thinking
        and not final_include
        and thinking_level is None
        and thinking_budget is None
        and include_thoughts is None
    ):
        return None

    if thinking_level is not None:
        if thinking_budget is not None:
            logger_thinking.debug(
                f"Dropping thinking budget {thinking_budget} in favour of thinking level {thinking_level!r}"
            )
        return ThinkingConfig(
            thinking_level=thinking_level, include_thoughts=final_include
        )

    return ThinkingConfig(
        thinking_budget=thinking_budget, include_thoughts=final_include
    )
