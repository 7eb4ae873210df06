"""Sort Directive Parsing: turns repeated `sort` query values into SortKeys.

Invariants:
    - Each value is `field[,field...][,direction]`; a trailing direction applies to every field in it
    - Direction is case-insensitive and defaults to ascending
    - Unknown fields raise RoomValidationError(field="sort")
    - Values carrying no field (e.g. "" or "desc") are ignored
"""

from roomfinder.core.domain_types import RoomField, SortDirection, SortKey
from roomfinder.core.errors import RoomValidationError


_FIELDS_BY_NAME: dict[str, RoomField] = {f.value: f for f in RoomField}
_DIRECTIONS: dict[str, SortDirection] = {d.value: d for d in SortDirection}


def parse_sort(values: list[str] | None) -> list[SortKey]:
    """Parse raw `sort` query values, preserving their order."""
    keys: list[SortKey] = []
    for raw in values or []:
        tokens = [t.strip() for t in raw.split(",") if t.strip()]
        if not tokens:
            continue
        direction = SortDirection.ASC
        if tokens[-1].lower() in _DIRECTIONS:
            direction = _DIRECTIONS[tokens.pop().lower()]
        for token in tokens:
            keys.append(SortKey(_resolve_field(token), direction))
    return keys


def _resolve_field(name: str) -> RoomField:
    field = _FIELDS_BY_NAME.get(name)
    if field is None:
        allowed = ", ".join(_FIELDS_BY_NAME)
        raise RoomValidationError(
            f"Unknown sort property '{name}'. Allowed: {allowed}", "sort",
        )
    return field
