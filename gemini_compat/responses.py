"""
Helpers for inspecting raw Gemini HTTP responses.

Bodies come straight off the wire, so nothing here trusts their shape: malformed
input yields None instead of raising.
"""

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from gemini_compat.config.defaults import SSE_DATA_PREFIX
from gemini_compat.logger import logger

Number = Union[int, float]


@dataclass
class UsageMetadata:
    total_token_count: Optional[Number] = None
    prompt_token_count: Optional[Number] = None
    candidates_token_count: Optional[Number] = None
    cached_content_token_count: Optional[Number] = None

    def to_dict(self) -> dict:
        fields = {
            "totalTokenCount": self.total_token_count,
            "promptTokenCount": self.prompt_token_count,
            "candidatesTokenCount": self.candidates_token_count,
            "cachedContentTokenCount": self.cached_content_token_count,
        }
        return {key: value for key, value in fields.items() if value is not None}


def _to_number(value: Any) -> Optional[Number]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return value if math.isfinite(value) else None
    except OverflowError:
        return None


def parse_gemini_api_body(raw_text: str) -> Optional[dict]:
    """
    Parse a Gemini API body, unwrapping the array-wrapped form the API sometimes returns.
    """
    try:
        parsed = json.loads(raw_text)
    except (ValueError, TypeError, RecursionError) as error:
        logger.debug(f"Could not parse Gemini response body: {error}")
        return None

    if isinstance(parsed, list):
        for item in parsed:
            if isinstance(item, dict):
                return item
        return None

    if isinstance(parsed, dict):
        return parsed

    return None


def extract_usage_metadata(body: Mapping[str, Any]) -> Optional[UsageMetadata]:
    response = body.get("response") if isinstance(body, Mapping) else None
    if not isinstance(response, Mapping):
        return None

    usage = response.get("usageMetadata")
    if not isinstance(usage, Mapping):
        return None

    return UsageMetadata(
        total_token_count=_to_number(usage.get("totalTokenCount")),
        prompt_token_count=_to_number(usage.get("promptTokenCount")),
        candidates_token_count=_to_number(usage.get("candidatesTokenCount")),
        cached_content_token_count=_to_number(usage.get("cachedContentTokenCount")),
    )


def extract_usage_from_sse_payload(payload: str) -> Optional[UsageMetadata]:
    """
    Walk the data lines of an SSE payload and return the first usage-bearing chunk.

    Lines that are not ``data:`` lines, carry no text or hold invalid JSON are
    skipped.
    """
    for line in payload.split("\n"):
        if not line.startswith(SSE_DATA_PREFIX):
            continue

        json_text = line[len(SSE_DATA_PREFIX) :].strip()
        if not json_text:
            continue

        try:
            parsed = json.loads(json_text)
        except (ValueError, RecursionError):
            logger.debug(f"Skipping SSE data line with invalid JSON: {json_text[:80]}")
            continue

        if isinstance(parsed, dict):
            usage = extract_usage_metadata({"response": parsed.get("response")})
            if usage is not None:
                return usage

    return None
