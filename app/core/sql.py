"""
Helpers for composing parameterized SQL.
"""

from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from app.core.errors import BadRequestError


class PartialUpdate(NamedTuple):
    """SET clause and the values bound to its placeholders, in order."""
    set_cols: str
    values: List[Any]

    @property
    def params(self) -> Dict[str, Any]:
        """Bind parameters keyed by placeholder name (p1, p2, ...)."""
        return {f"p{idx}": value for idx, value in enumerate(self.values, start=1)}

    @property
    def next_placeholder(self) -> int:
        """Index of the first placeholder free for the caller's WHERE clause."""
        return len(self.values) + 1


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None
) -> PartialUpdate:
    """
    Build the SET clause for an UPDATE that only touches the given fields.

    Args:
        data_to_update: Field name -> new value. Only these columns change.
        js_to_sql: Optional field name -> column name table for fields whose
            public name differs from the column, e.g. {"logoUrl": "logo_url"}

    Returns:
        PartialUpdate, e.g. for ({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}):
        set_cols '"first_name"=:p1, "age"=:p2' and values ['Aliya', 32]

    Raises:
        BadRequestError: If data_to_update is empty
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}

    # {"firstName": "Aliya", "age": 32} => ['"first_name"=:p1', '"age"=:p2']
    cols = [
        f"{quote_identifier(js_to_sql.get(name, name))}=:p{idx}"
        for idx, name in enumerate(keys, start=1)
    ]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[name] for name in keys],
    )
