"""Parse Item Body: raw request bytes -> validated item name, no IO.

Invariants:
    - Malformed JSON (including an empty body) raises InvalidJsonError
    - Non-object JSON, missing name, non-string name, or "" raises NameRequiredError
    - Syntactically valid JSON that pydantic still rejects as json_invalid
      (lone UTF-16 surrogates such as "\\ud800") raises NameRequiredError
    - Names are returned exactly as sent (no strip, no normalization)
"""

import json

from pydantic import ValidationError

from items_api.core.errors import InvalidJsonError, NameRequiredError
from items_api.schemas.item import ItemWrite


def parse_item_name(raw_body: bytes) -> str:
    """Extract the item name from a CREATE/UPDATE request body."""
    try:
        payload = ItemWrite.model_validate_json(raw_body)
    except ValidationError as e:
        if _is_json_syntax_error(e, raw_body):
            raise InvalidJsonError() from e
        raise NameRequiredError() from e
    return payload.name


def _is_json_syntax_error(error: ValidationError, raw_body: bytes) -> bool:
    if not any(err["type"] == "json_invalid" for err in error.errors()):
        return False
    try:
        json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError:
        return True
    return False


def _reject_constant(name: str) -> None:
    # NaN / Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"invalid JSON constant: {name}")
