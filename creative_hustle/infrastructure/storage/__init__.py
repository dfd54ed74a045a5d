# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity storage.

This package provides the Storage interface, its in-memory backend and the
demo seed loader.
"""

from creative_hustle.infrastructure.storage.base import Storage
from creative_hustle.infrastructure.storage.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    StorageError,
)
from creative_hustle.infrastructure.storage.memory import MemoryStorage
from creative_hustle.infrastructure.storage.seeds import seed_storage

__all__ = [
    "Storage",
    "MemoryStorage",
    "seed_storage",
    "StorageError",
    "RecordNotFoundError",
    "DuplicateRecordError",
]
