import json
import logging
import re

logger = logging.getLogger(__name__)

# ```json ... ``` or bare ``` ... ```
_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


class ParseError(ValueError):
    """The model reply did not contain a usable JSON object."""

    def __init__(self, message: str, raw: str = None):
        super().__init__(message)
        self.raw = raw


def _fenced_object(text: str):
    match = _FENCE_RE.search(text)
    if not match:
        return None
    try:
        data = json.loads(match.group(1))
    except ValueError:
        logger.debug("Fenced block is not valid JSON, falling back to brace match")
        return None
    return data if isinstance(data, dict) else None


def extract_json(text: str) -> dict:
    """Recover the JSON object embedded in a model reply.

    A fenced code block wins when its interior parses to an object; otherwise
    the span from the first ``{`` to the last ``}`` is parsed, so surrounding
    prose is ignored and nested objects stay intact.
    """
    if text is None or not text.strip():
        raise ParseError("Empty response from model", raw=text)

    data = _fenced_object(text)
    if data is not None:
        return data

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise ParseError("No JSON object found in response", raw=text)
    try:
        return json.loads(text[start:end + 1])
    except ValueError as e:
        raise ParseError(f"Invalid JSON in response: {e}", raw=text) from e
