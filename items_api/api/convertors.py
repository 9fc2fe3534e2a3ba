"""Path Convertors: URL segment -> value, evaluated during route matching.

Invariants:
    - item_id matches one or more ASCII digits, nothing else
    - convert() never raises: ids longer than the id column can hold map to
      MAX_ITEM_ID + 1, which the store treats as absent
"""

from starlette.convertors import Convertor

from items_api.core.domain_types import MAX_ITEM_ID

MAX_ITEM_ID_DIGITS = len(str(MAX_ITEM_ID))


class ItemIdConvertor(Convertor[int]):
    """Digits-only id segment, bounded before int() sees it."""
    regex = "[0-9]+"

    def convert(self, value: str) -> int:
        digits = value.lstrip("0") or "0"
        if len(digits) > MAX_ITEM_ID_DIGITS:
            return MAX_ITEM_ID + 1
        return int(digits)

    def to_string(self, value: int) -> str:
        return str(value)
