"""
Application record contract

Stored application records are checked against schema/application.json
(JSON Schema Draft 2020-12) before they are parsed into domain models.
Every violation in a record is reported, ordered by its location.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Loads and meta-validates schemas from a directory, caching by name."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Schema name without extension (e.g. 'application')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


# =============================================================================
# APPLICATION CONTRACT
# =============================================================================


@dataclass(frozen=True)
class ContractViolation:
    """One schema violation in a record."""

    path: str  # "/"-joined location inside the record, "" for the record itself
    message: str


class ApplicationValidator:
    """Checks stored application records against the application contract."""

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or SchemaLoader()).load_schema("application")
        self._validator = Draft202012Validator(schema)

    def violations(self, record: Dict[str, Any]) -> List[ContractViolation]:
        """
        Every contract violation in a record.

        Args:
            record: Record as decoded from JSON

        Returns:
            Violations ordered by location, empty when the record conforms
        """
        found = [
            ContractViolation(
                path="/".join(str(part) for part in error.absolute_path),
                message=error.message,
            )
            for error in self._validator.iter_errors(record)
        ]
        return sorted(found, key=lambda violation: violation.path)
