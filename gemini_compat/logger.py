import logging

from gemini_compat.config.defaults import LOG_LEVEL


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName hands back "Level <name>" for names it does not know
    if not isinstance(level, int):
        return logging.WARNING
    return level


logger = logging.getLogger("gemini_compat")
logger_thinking = logging.getLogger("gemini_compat.thinking")

logger.setLevel(resolve_log_level(LOG_LEVEL))
logger_thinking.setLevel(resolve_log_level(LOG_LEVEL))

logger_handler = logging.StreamHandler()
logger.addHandler(logger_handler)

logger_thinking_handler = logging.StreamHandler()
logger_thinking.addHandler(logger_thinking_handler)

logger_thinking.propagate = False
