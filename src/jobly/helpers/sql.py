"""Parameterized SQL fragments built from plain field/value mappings.

Both builders emit PostgreSQL positional placeholders (``$1``, ``$2``, ...)
and return the values to bind in the same order, so the result can be handed
straight to :meth:`jobly.core.database.Database.query`.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jobly.core.exceptions import InvalidRequestError

# Filter keys that bind their value, with the comparison each one produces.
BOUND_FILTERS: dict[str, str] = {
    "name": "LIKE",
    "title": "LIKE",
    "minEmployees": ">=",
    "minSalary": ">=",
    "maxEmployees": "<=",
}
EQUITY_FILTER = "hasEquity"


class ColumnNames:
    """Maps application field names to storage column names.

    The mapping is total: a field without an explicit rename is stored in a
    column of the same name.
    """

    def __init__(self, renames: Mapping[str, str] | None = None) -> None:
        self._renames = dict(renames or {})

    def __call__(self, field_name: str) -> str:
        return self._renames.get(field_name, field_name)

    @classmethod
    def of(cls, field_map: "Mapping[str, str] | ColumnNames | None") -> "ColumnNames":
        if isinstance(field_map, ColumnNames):
            return field_map
        return cls(field_map)


@dataclass(frozen=True)
class UpdateFragment:
    set_cols: str
    values: list[Any]


@dataclass(frozen=True)
class FilterFragment:
    set_filters: str
    values: list[Any]


def like_substring(value: str) -> str:
    """Turn ``value`` into a LIKE pattern matching it literally anywhere in a column.

    ``%`` and ``_`` in ``value`` are escaped with PostgreSQL's default LIKE
    escape character ``\\``.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def sql_for_partial_update(
    data: Mapping[str, Any],
    field_map: Mapping[str, str] | ColumnNames | None = None,
) -> UpdateFragment:
    """Build the ``SET`` column list for a partial update.

    ``{"firstName": "Aliya", "age": 32}`` with ``{"firstName": "first_name"}``
    gives ``'"first_name"=$1, "age"=$2'`` and ``["Aliya", 32]``. ``None``
    values are kept, so the column is written as NULL.

    Raises:
        InvalidRequestError: ``data`` is empty.
    """
    if not data:
        raise InvalidRequestError("No data")

    column = ColumnNames.of(field_map)
    cols = [f'"{column(name)}"=${idx}' for idx, name in enumerate(data, start=1)]
    return UpdateFragment(set_cols=", ".join(cols), values=list(data.values()))


def sql_for_filtering(
    criteria: Mapping[str, Any],
    field_map: Mapping[str, str] | ColumnNames | None = None,
) -> FilterFragment:
    """Build a ``WHERE`` clause from filter criteria.

    Placeholders are numbered only for the criteria that actually bind a
    value, in the order they appear in ``criteria``, so ``values`` always
    lines up with the emitted ``$n``. ``hasEquity`` never binds: a truthy
    value adds ``"<col>" > 0`` and a falsy one adds nothing. Unrecognized
    keys are ignored. When no condition is emitted ``set_filters`` is ``""``.

    ``criteria`` is left untouched.

    Raises:
        InvalidRequestError: ``criteria`` is empty, has no recognized key, or
            asks for more minimum than maximum employees.
    """
    if not criteria:
        raise InvalidRequestError("No data")

    recognized = [key for key in criteria if key in BOUND_FILTERS or key == EQUITY_FILTER]
    if not recognized:
        raise InvalidRequestError(f"No recognized filters in: {', '.join(criteria)}")

    min_employees = criteria.get("minEmployees")
    max_employees = criteria.get("maxEmployees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidRequestError(
            "Minimum number of employees cannot be greater than maximum number of employees"
        )

    column = ColumnNames.of(field_map)
    conditions: list[str] = []
    values: list[Any] = []
    for key in recognized:
        if key == EQUITY_FILTER:
            if criteria[key]:
                conditions.append(f'"{column(key)}" > 0')
            continue
        values.append(criteria[key])
        conditions.append(f'"{column(key)}" {BOUND_FILTERS[key]} ${len(values)}')

    if not conditions:
        return FilterFragment(set_filters="", values=[])
    return FilterFragment(set_filters="WHERE " + " AND ".join(conditions), values=values)
