"""Repair model output into a JSON object."""

import json
from typing import Any

from toolscout.core.exceptions import MalformedResponse

CODE_FENCE_MARKERS = ("```json", "```")


def normalize(raw_text: str) -> dict[str, Any]:
    """
    Extract and parse the JSON object embedded in model output.

    Code fences are removed and the text between the first ``{`` and the last
    ``}`` is parsed, so commentary before or after the object is ignored. The
    parsed object is returned as-is, without schema validation.

    Raises:
        MalformedResponse: If no JSON object can be extracted
    """
    text = raw_text
    for marker in CODE_FENCE_MARKERS:
        text = text.replace(marker, "")

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise MalformedResponse(
            "Failed to parse model response",
            details="No JSON object found in model output",
        )

    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise MalformedResponse("Failed to parse model response", details=str(e)) from e
