"""
SQL fragment helpers shared by the data-access services.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from jobly.core.exceptions import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Dict[str, str]] = None,
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause and bound values for a partial UPDATE.

    `data_to_update` maps field names (as the API sees them) to new values.
    `js_to_sql` maps API field names to column names where they differ;
    any key it does not mention is used as the column name verbatim.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        ('"first_name"=:1, "age"=:2', ['Aliya', 32])

    Placeholders are numbered from 1 in key order and line up with the
    returned values, so callers can append their own parameters starting
    at ``len(values) + 1``.

    Raises BadRequestError if there is nothing to update.
    """
    keys = list(data_to_update.keys())
    if len(keys) == 0:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    cols = [
        f'"{js_to_sql.get(col_name, col_name)}"=:{idx + 1}'
        for idx, col_name in enumerate(keys)
    ]

    return ", ".join(cols), [data_to_update[key] for key in keys]


def bind_params(values: List[Any]) -> Dict[str, Any]:
    """Map positional values onto the ``:1``, ``:2`` ... names used above."""
    return {str(idx + 1): value for idx, value in enumerate(values)}
