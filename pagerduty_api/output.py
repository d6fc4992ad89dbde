"""Render CLI results as a table, a markdown table, JSON or YAML.

Table columns are dotted paths into the dumped models, e.g. ``service.name``
for the name of an incident's service.
"""

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

import yaml
from tabulate import tabulate

OUTPUT_FORMATS = ("table", "md", "json", "yaml")


def lookup(item: Mapping[str, Any], column: str) -> Any:
    """Return the value at the dotted ``column`` path, None if any part is missing."""
    value: Any = item
    for key in column.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _format_cell(value: Any, table_format: str) -> Any:
    if value is None:
        return ""
    if isinstance(value, list):
        separator = "<br />" if table_format == "github" else "\n"
        value = separator.join(str(v) for v in value)
    elif isinstance(value, Mapping):
        value = json.dumps(value, sort_keys=True)
    if table_format == "github" and isinstance(value, str):
        return value.replace("|", "&#124;")
    return value


def format_table(
    content: Iterable[Mapping[str, Any]],
    columns: Iterable[str],
    table_format: str = "simple",
) -> str:
    columns = list(columns)
    headers = [column.upper() for column in columns]
    table_data = [
        [_format_cell(lookup(item, column), table_format) for column in columns]
        for item in content
    ]
    return tabulate(table_data, headers=headers, tablefmt=table_format)


def render(
    content: list[dict[str, Any]],
    columns: Iterable[str],
    output: str = "table",
) -> str:
    """Render ``content`` in one of ``OUTPUT_FORMATS``.

    Only the table formats are restricted to ``columns``; JSON and YAML
    carry every field.

    Raises:
        ValueError: If ``output`` is not a known format
    """
    match output:
        case "table":
            return format_table(content, columns)
        case "md":
            return re.sub(
                r" +", " ", format_table(content, columns, table_format="github")
            )
        case "json":
            return json.dumps(content)
        case "yaml":
            return yaml.safe_dump(content)
    raise ValueError(f"unknown output type {output!r}")


def print_output(
    content: list[dict[str, Any]],
    columns: Iterable[str],
    output: str = "table",
    *,
    sort: bool = False,
) -> str:
    """Print ``content`` and return the printed text.

    With ``sort``, rows are ordered by their column values.
    """
    columns = list(columns)
    if sort:
        content = sorted(
            content,
            key=lambda item: tuple(str(lookup(item, c) or "") for c in columns),
        )
    formatted_content = render(content, columns, output)
    print(formatted_content)
    return formatted_content
