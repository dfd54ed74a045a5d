# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Storage exceptions.

- StorageError: Base exception for all storage errors
- RecordNotFoundError: Referenced record does not exist
- DuplicateRecordError: A uniqueness constraint would be violated
"""


class StorageError(Exception):
    """Base exception for storage errors."""

    pass


class RecordNotFoundError(StorageError):
    """Raised when a record to update or look up is absent.

    Attributes:
        entity: Human readable entity name (e.g. "Module").
        record_id: Identifier that was looked up.
    """

    def __init__(self, entity: str, record_id: int | None = None) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class DuplicateRecordError(StorageError):
    """Raised when a unique field value is already taken.

    Attributes:
        entity: Entity name.
        field: Name of the unique field.
        value: The conflicting value.
    """

    def __init__(self, entity: str, field: str, value: str) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")
