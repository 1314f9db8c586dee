"""Database layer for fitness-tracker."""

from .engine import (
    KeyValueBackend,
    MemoryBackend,
    SQLiteBackend,
    StorageError,
    StorageQuotaExceededError,
    StorageUnavailableError,
    get_data_dir,
    get_db_path,
    init_db,
)
from .repositories import (
    DietLogRepository,
    LocalStorage,
    ProgressLogRepository,
    RecordRepository,
    TodoRepository,
    UserProfileRepository,
    WorkoutPlanRepository,
    WritePolicy,
)

__all__ = [
    "DietLogRepository",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "KeyValueBackend",
    "LocalStorage",
    "MemoryBackend",
    "ProgressLogRepository",
    "RecordRepository",
    "SQLiteBackend",
    "StorageError",
    "StorageQuotaExceededError",
    "StorageUnavailableError",
    "TodoRepository",
    "UserProfileRepository",
    "WorkoutPlanRepository",
    "WritePolicy",
]
