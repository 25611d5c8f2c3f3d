"""
SQL assembly helpers shared by the repositories.
"""
from typing import Any, List, Mapping, Tuple

from jobly.core.exceptions import NoFieldsProvidedException


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data_to_update: external field name -> new value, e.g.
            {"firstName": "Aliya", "age": 32}
        js_to_sql: external field name -> column name, e.g.
            {"firstName": "first_name"}. Fields missing from the map are
            used as column names unchanged.

    Returns:
        ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    The caller binds any trailing placeholder (the WHERE key) at
    ``len(values) + 1``.

    Raises:
        NoFieldsProvidedException: If data_to_update is empty.
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise NoFieldsProvidedException()

    cols = [
        f'"{js_to_sql.get(name, name)}"=${idx}'
        for idx, name in enumerate(keys, start=1)
    ]
    values = [data_to_update[name] for name in keys]

    return ", ".join(cols), values


def like_escape(term: str) -> str:
    """Escape LIKE metacharacters so user input matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
