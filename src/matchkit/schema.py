"""Generate JSON Schema and docs for the check file YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from matchkit.config import CheckFileConfig

_MATCHER_MODELS = [
    "EqualToSpec",
    "OneOfSpec",
    "EveryItemSpec",
    "AnyItemSpec",
    "ItemSpec",
    "ItemInSpec",
    "ItemsSpec",
    "SequenceSpec",
]

_NESTED_KEYS = {"every_item", "any_item"}
_LIST_KEYS = {"one_of", "item_in", "items", "sequence"}


def _matchers_first(defs: dict) -> dict:
    """Reorder ``$defs`` so matcher specs come first, in the order users see them."""
    ordered = {name: defs[name] for name in _MATCHER_MODELS if name in defs}
    ordered.update((name, d) for name, d in defs.items() if name not in ordered)
    return ordered


def generate_json_schema() -> dict:
    schema = CheckFileConfig.model_json_schema()
    if "$defs" in schema:
        schema["$defs"] = _matchers_first(schema["$defs"])
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = []
    lines.append("# matchkit check file schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    lines.append("- `checks`: list of check definitions (must not be empty).")
    lines.append("")
    lines.append("## Check")
    lines.append("- `name`: string (required, unique)")
    lines.append("- `actual`: any value to test inline")
    lines.append("- `actual_file`: path to a YAML or JSON file holding the value")
    lines.append("- `matcher`: matcher spec (required)")
    lines.append("")
    lines.append("Exactly one of `actual` and `actual_file` must be set.")
    lines.append("")
    lines.append("## Matchers")
    for model_name in _MATCHER_MODELS:
        props = defs.get(model_name, {}).get("properties", {})
        if not props:
            continue
        key = next(iter(props))
        if key in _NESTED_KEYS:
            lines.append(f"- `{key}`: matcher spec")
        elif key in _LIST_KEYS:
            lines.append(f"- `{key}`: non-empty list of values")
        else:
            lines.append(f"- `{key}`: any value")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_schema_doc())
