from typing import Any, Dict, List, Mapping, Optional, Tuple

from fulcrum_mcp.catalog import ParamSpec, ToolSpec
from fulcrum_mcp.errors import ValidationError


def _bad(spec: ToolSpec, p: ParamSpec, value: Any, expected: str) -> ValidationError:
    return ValidationError(f"Argument '{p.name}' of tool '{spec.name}' must be {expected}, got {value!r}")


def _to_number(spec: ToolSpec, p: ParamSpec, value: Any, integer: bool) -> Any:
    if isinstance(value, bool):
        raise _bad(spec, p, value, "an integer" if integer else "a number")
    if isinstance(value, str):
        v = value.strip()
        try:
            value = float(v) if "." in v or "e" in v.lower() else int(v)
        except ValueError:
            raise _bad(spec, p, value, "an integer" if integer else "a number") from None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, (int, float)) or (integer and not isinstance(value, int)):
        raise _bad(spec, p, value, "an integer" if integer else "a number")
    return value


def _to_bool(spec: ToolSpec, p: ParamSpec, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise _bad(spec, p, value, "a boolean")


def _to_str(spec: ToolSpec, p: ParamSpec, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise _bad(spec, p, value, "a string")


def _coerce(spec: ToolSpec, p: ParamSpec, value: Any) -> Any:
    if p.type == "number":
        return _to_number(spec, p, value, integer=False)
    if p.type == "integer":
        return _to_number(spec, p, value, integer=True)
    if p.type == "boolean":
        return _to_bool(spec, p, value)
    if p.type == "string":
        return _to_str(spec, p, value)
    if p.type == "array":
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise _bad(spec, p, value, "an array")
        if p.items == "string":
            return [_to_str(spec, p, v) for v in value]
        return list(value)
    return value


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def validate_arguments(spec: ToolSpec, arguments: Optional[Mapping[str, Any]]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Bind raw tool arguments to ``spec``.

    Returns ``(clean, notes)``: ``clean`` holds every declared parameter that
    was supplied or has a default; ``notes`` lists defaulted ("added"),
    dropped unknown ("removed") and coerced ("type_fixed") arguments.
    """
    payload = dict(arguments or {})
    notes: Dict[str, Any] = {"removed": [], "added": [], "type_fixed": {}}
    clean: Dict[str, Any] = {}

    for p in spec.params:
        value = payload.get(p.name)
        if p.required and _is_blank(value):
            raise ValidationError(f"Missing required argument '{p.name}' for tool '{spec.name}'")
        if value is None:
            if p.default is not None:
                clean[p.name] = p.default
                notes["added"].append(p.name)
            continue

        new = _coerce(spec, p, value)
        if new != value or type(new) is not type(value):
            notes["type_fixed"][p.name] = new
        if p.enum and new not in p.enum:
            raise _bad(spec, p, value, "one of " + ", ".join(map(str, p.enum)))
        if p.minimum is not None and new < p.minimum:
            raise _bad(spec, p, value, f">= {p.minimum:g}")
        clean[p.name] = new

    removed: List[str] = [k for k in payload if spec.param(k) is None]
    notes["removed"].extend(removed)
    return clean, notes
