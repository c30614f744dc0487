from __future__ import annotations
import json, re
from pathlib import Path
from jsonschema import Draft202012Validator

_SCHEMA_DIR = Path(__file__).with_name("schemas")
_validator_cache = {}
_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_args(payload: dict | None) -> dict:
    """Accept camelCase keys from the shell (sourcePath -> source_path)."""
    return {_CAMEL.sub("_", k).lower(): v for k, v in (payload or {}).items()}


def validate_input(command: str, payload: dict):
    schema_path = _SCHEMA_DIR / f"{command}.json"
    if not schema_path.exists():
        return  # no schema -> accept
    if command not in _validator_cache:
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        _validator_cache[command] = Draft202012Validator(schema)
    v = _validator_cache[command]
    errors = sorted(v.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        msgs = [f"{'/'.join([str(p) for p in e.path])}: {e.message}" for e in errors]
        raise ValueError("Schema validation failed: " + "; ".join(msgs))
