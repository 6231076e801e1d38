"""
Application stores.

InMemoryApplicationStore holds already-parsed records; JsonApplicationStore
loads a JSON file of records, validating each one against the application
contract before parsing it.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
from uuid import UUID

from pydantic import ValidationError

from appdocs.core.contracts import ApplicationValidator
from appdocs.core.domain.application import Application
from appdocs.documents.exceptions import ContractViolationError

logger = logging.getLogger(__name__)


def _as_uuid(application_id: Union[UUID, str]) -> Optional[UUID]:
    if isinstance(application_id, UUID):
        return application_id
    try:
        return UUID(str(application_id))
    except ValueError:
        return None


class InMemoryApplicationStore:
    """Read-only store over a fixed set of applications."""

    def __init__(self, applications: Iterable[Application] = ()):
        self._applications: Dict[UUID, Application] = {app.id: app for app in applications}

    def __len__(self) -> int:
        return len(self._applications)

    def find_by_id(self, application_id: Union[UUID, str]) -> Optional[Application]:
        """
        Look up an application.

        Args:
            application_id: UUID or its string form

        Returns:
            The application, or None if unknown (including malformed ids)
        """
        key = _as_uuid(application_id)
        if key is None:
            return None
        return self._applications.get(key)


class JsonApplicationStore(InMemoryApplicationStore):
    """
    Store loaded from a JSON file.

    The file holds either a list of records or {"applications": [...]}.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Raises:
            OSError: If the file cannot be read
            json.JSONDecodeError: If the file is not valid JSON
            ContractViolationError: If a record fails the application contract
                or cannot be parsed into an Application
        """
        self.path = Path(path)
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)

        records = data.get("applications", []) if isinstance(data, dict) else data
        validator = ApplicationValidator()

        applications = []
        for index, record in enumerate(records):
            applications.append(self._parse_record(index, record, validator))

        super().__init__(applications)
        logger.info(f"Loaded {len(applications)} applications from {self.path}")

    def _parse_record(self, index: int, record, validator: ApplicationValidator) -> Application:
        violations = validator.violations(record)
        if violations:
            details = "; ".join(
                f"{v.path or '<record>'}: {v.message}" for v in violations
            )
            raise ContractViolationError(
                f"Record {index} in {self.path} violates the application contract: {details}",
                path=_record_path(index, violations[0].path),
            )

        # Values the schema cannot express, e.g. calendar dates like 2024-02-30
        try:
            return Application.model_validate(record)
        except ValidationError as e:
            error = e.errors()[0]
            location = "/".join(str(part) for part in error["loc"])
            raise ContractViolationError(
                f"Record {index} in {self.path} cannot be parsed: {location}: {error['msg']}",
                path=_record_path(index, location),
            ) from e


def _record_path(index: int, location: str) -> str:
    return f"{index}/{location}" if location else str(index)
