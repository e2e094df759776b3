# formatting.py - text rendering shared by every tool handler
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from fulcrum_mcp.errors import FormattingError

MISSING = (None, "")


def pluck(record: Any, *paths: str, default: Any = None) -> Any:
    """First non-empty value found at any of the dotted ``paths`` in ``record``."""
    for path in paths:
        value = record
        for key in path.split("."):
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(key)
        if value not in MISSING:
            return value
    return default


def dollars(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"${value:,.2f}"
    try:
        return f"${float(value):,.2f}"
    except (TypeError, ValueError):
        return f"${value}"


@dataclass(frozen=True)
class Field:
    label: str
    paths: Tuple[str, ...]
    default: Any
    render: Optional[Callable[[Any], str]] = None

    def line(self, record: Dict[str, Any]) -> str:
        value = pluck(record, *self.paths, default=self.default)
        return f"{self.label}: {self.render(value) if self.render else value}"


def field(label: str, *paths: str, default: Any = "Unknown", render: Optional[Callable[[Any], str]] = None) -> Field:
    return Field(label, paths, default, render)


def extract_records(result: Any, *keys: str) -> List[Dict[str, Any]]:
    """Pull the record list out of a list response (``data`` or a resource-named key)."""
    if isinstance(result, list):
        return result
    if result is None:
        return []
    if not isinstance(result, dict):
        raise FormattingError(f"Expected a JSON object or array, got {type(result).__name__}")
    for key in keys:
        records = result.get(key)
        if records is None:
            continue
        if not isinstance(records, list):
            raise FormattingError(f"Expected '{key}' to be an array, got {type(records).__name__}")
        if records:
            return records
    return []


def render_records(
    title: str,
    records: Sequence[Dict[str, Any]],
    heading: Callable[[Dict[str, Any]], str],
    fields: Sequence[Field],
) -> str:
    blocks = []
    for rec in records:
        lines = [heading(rec)] + [f.line(rec) for f in fields]
        blocks.append("\n".join(lines) + "\n")
    return f"**{title}:**\n\n" + "\n".join(blocks)


def render_json(title: str, payload: Any) -> str:
    return f"**{title}:**\n```json\n{json.dumps(payload, indent=2, ensure_ascii=False)}\n```"
