from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import FormatChecker

from ..codec.numeric import DecodeError

TX_RECEIPT_SCHEMA = "tx.receipt.schema.json"

# Bundled with the package, next to this module
SCHEMA_ROOT = Path(__file__).resolve().parent / "schema_files" / "v1"


class SchemaValidationError(DecodeError):
    def __init__(self, message: str, errors: list[str] | None = None, value: Any = None) -> None:
        super().__init__(message, value)
        self.errors = errors or []


@lru_cache(maxsize=8)
def _compiled_validator(path: Path) -> jsonschema.Validator:
    with path.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema, format_checker=FormatChecker())


@dataclass(frozen=True)
class SchemaRegistry:
    schema_root: Path

    @classmethod
    def default(cls) -> "SchemaRegistry":
        return _default_registry()

    def schema_path(self, schema_filename: str) -> Path:
        return self.schema_root / schema_filename

    def validator_for(self, schema_filename: str) -> jsonschema.Validator:
        return _compiled_validator(self.schema_path(schema_filename))

    def validate_instance(self, instance: Any, schema_filename: str) -> None:
        validator = self.validator_for(schema_filename)
        errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
        if errors:
            formatted = [self._format_error(err) for err in errors]
            raise SchemaValidationError(
                f"Schema validation failed for {schema_filename}: {formatted[0]}",
                errors=formatted,
                value=instance,
            )

    @staticmethod
    def _format_error(error: jsonschema.ValidationError) -> str:
        location = "/".join(str(part) for part in error.path) or "<root>"
        return f"{location}: {error.message}"


@lru_cache(maxsize=1)
def _default_registry() -> SchemaRegistry:
    return SchemaRegistry(schema_root=SCHEMA_ROOT)
