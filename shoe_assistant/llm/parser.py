import json
import re

from pydantic import ValidationError

from shoe_assistant.schemas import StructuredDescription

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def parse_description_output(raw_text: str) -> StructuredDescription:
    text = (raw_text or "").strip()
    if not text:
        return StructuredDescription()

    fenced = _FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return StructuredDescription()
    if not isinstance(payload, dict):
        return StructuredDescription()

    try:
        return StructuredDescription.model_validate(payload)
    except ValidationError:
        return StructuredDescription()
