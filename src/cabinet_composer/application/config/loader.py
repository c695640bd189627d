"""Reading layout files.

Every way a layout file can fail surfaces as one ConfigError. Schema
problems are reported against the placement they belong to, so a message
reads "placement 3 (drawer), path[1]" rather than a bare pydantic location.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_composer.application.config.schema import LayoutConfiguration


class ConfigError(Exception):
    """A layout file could not be read or does not describe a layout.

    Attributes:
        message: Summary of every problem found
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: The layout file, when loading from disk
        details: One dict per problem. JSON syntax errors carry line,
            column and message; schema errors carry path (a JSON path),
            where (the placement or section in layout terms), message
            and value.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Join a pydantic location into a JSON path.

    Examples:
        >>> _json_path(("placements", 0, "path", 2))
        'placements[0].path[2]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _where(loc: tuple[str | int, ...], data: Any) -> str:
    """Name the part of the layout a pydantic location points into."""
    if len(loc) >= 2 and loc[0] == "placements" and isinstance(loc[1], int):
        index = loc[1]
        label = f"placement {index + 1}"
        try:
            label += f" ({data['placements'][index]['kind']})"
        except (KeyError, IndexError, TypeError):
            pass
        rest = _json_path(loc[2:])
        return f"{label}, {rest}" if rest else label
    if loc and loc[0] == "cabinet":
        rest = _json_path(loc[1:])
        return f"cabinet {rest}" if rest else "cabinet"
    return _json_path(loc) or "layout"


def _validate(data: Any, path: Path | None = None) -> LayoutConfiguration:
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = []
        for err in e.errors():
            value = err.get("input")
            details.append(
                {
                    "path": _json_path(err["loc"]),
                    "where": _where(err["loc"], data),
                    "message": err["msg"],
                    "value": None if isinstance(value, (dict, list)) else value,
                }
            )
        lines = [f"Layout has {len(details)} problem(s):"]
        lines.extend(f"  - {d['where']}: {d['message']}" for d in details)
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        ) from None


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout file.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or does not
            describe a layout.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Layout file not found: {path}", "file_not_found", path) from None
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading layout file: {path}", "permission_denied", path
        ) from None
    except OSError as e:
        raise ConfigError(
            f"Error reading layout file {path}: {e}", "file_read_error", path
        ) from None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Layout file {path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from None

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Validate an already-parsed layout.

    Raises:
        ConfigError: If the data does not describe a layout.
    """
    return _validate(data)
