class ThinkingConfigError(ValueError):
    pass


class ThinkingConfigConflictError(ThinkingConfigError):
    """Raised when a ThinkingConfig carries both a thinking level and a budget.

    Gemini rejects requests that set thinkingLevel and thinkingBudget together
    with a 400, so the record refuses to hold both.
    """

    pass


class InvalidThinkingLevelError(ThinkingConfigError):
    pass


class InvalidThinkingBudgetError(ThinkingConfigError):
    pass
