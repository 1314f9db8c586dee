"""Data access layer for fitness-tracker.

Each record kind lives as one JSON array under a fixed storage key. Every
write reads the whole array, changes it in memory and writes it back with a
single ``set`` on the backend.
"""

import json
import logging
from enum import Enum
from typing import Generic, TypeVar

from ..models.diet import DietLog
from ..models.progress import ProgressLog
from ..models.todo import Todo
from ..models.user_profile import UserAccount, UserProfile
from ..models.workout import WorkoutPlan
from .engine import KeyValueBackend, SQLiteBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Storage keys
WORKOUT_PLANS_KEY = "fitness_tracker_workout_plans"
DIET_LOGS_KEY = "fitness_tracker_diet_logs"
PROGRESS_LOGS_KEY = "fitness_tracker_progress_logs"
TODOS_KEY = "fitness_tracker_todos"
USER_PROFILES_KEY = "fitness_tracker_user_profiles"

STORAGE_KEYS = [
    WORKOUT_PLANS_KEY,
    DIET_LOGS_KEY,
    PROGRESS_LOGS_KEY,
    TODOS_KEY,
    USER_PROFILES_KEY,
]


class WritePolicy(str, Enum):
    """How ``save`` treats a record whose id is already stored."""

    UPSERT = "upsert"  # Replace the stored entry in place
    APPEND = "append"  # Always add a new entry


def read_collection(backend: KeyValueBackend, key: str) -> list:
    """Read the raw JSON array stored under ``key``.

    Missing, unparseable or non-array values read as an empty list.
    """
    raw = backend.get(key)
    if raw is None:
        return []
    try:
        entries = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Discarding unparseable collection '%s': %s", key, e)
        return []
    if not isinstance(entries, list):
        logger.warning(
            "Discarding collection '%s': expected a JSON array, got %s",
            key,
            type(entries).__name__,
        )
        return []
    return entries


def write_collection(backend: KeyValueBackend, key: str, entries: list) -> None:
    """Overwrite ``key`` with ``entries`` serialized as a JSON array."""
    backend.set(key, json.dumps(entries))
    logger.debug("Wrote %d entries to '%s'", len(entries), key)


def load_collection(backend: KeyValueBackend, key: str, record_type: type) -> tuple[list, list]:
    """Read ``key`` as (raw entries, decoded records).

    If any entry fails to decode, the whole collection reads as empty for
    both readers and writers, so the next write replaces it.
    """
    entries = read_collection(backend, key)
    try:
        records = [record_type.from_dict(entry) for entry in entries]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Discarding collection '%s': malformed entry (%s)", key, e)
        return [], []
    return entries, records


def _entry_id(entry) -> object:
    return entry.get("id") if isinstance(entry, dict) else None


class RecordRepository(Generic[T]):
    """Repository for one record kind, scoped by owner on read."""

    key: str
    policy: WritePolicy
    record_type: type

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def _decode_all(self) -> list[T]:
        return load_collection(self.backend, self.key, self.record_type)[1]

    def list(self, owner_id: str) -> list[T]:
        """List records belonging to ``owner_id`` in stored order."""
        return [record for record in self._decode_all() if record.user_id == owner_id]

    def get(self, record_id: str) -> T | None:
        """Get a record by id, or None."""
        for record in self._decode_all():
            if record.id == record_id:
                return record
        return None

    def save(self, record: T) -> None:
        """Store a record according to the repository's write policy."""
        entries = load_collection(self.backend, self.key, self.record_type)[0]
        data = record.to_dict()

        if self.policy == WritePolicy.UPSERT:
            for index, entry in enumerate(entries):
                if _entry_id(entry) == record.id:
                    entries[index] = data
                    break
            else:
                entries.append(data)
        else:
            entries.append(data)

        write_collection(self.backend, self.key, entries)

    def delete(self, record_id: str) -> None:
        """Delete the record(s) with ``record_id``. Missing ids are a no-op."""
        entries = load_collection(self.backend, self.key, self.record_type)[0]
        remaining = [entry for entry in entries if _entry_id(entry) != record_id]
        if len(remaining) == len(entries):
            return
        write_collection(self.backend, self.key, remaining)


class WorkoutPlanRepository(RecordRepository[WorkoutPlan]):
    """Repository for workout plans."""

    key = WORKOUT_PLANS_KEY
    policy = WritePolicy.UPSERT
    record_type = WorkoutPlan


class DietLogRepository(RecordRepository[DietLog]):
    """Repository for diet logs."""

    key = DIET_LOGS_KEY
    policy = WritePolicy.APPEND
    record_type = DietLog


class ProgressLogRepository(RecordRepository[ProgressLog]):
    """Repository for progress logs."""

    key = PROGRESS_LOGS_KEY
    policy = WritePolicy.APPEND
    record_type = ProgressLog


class TodoRepository(RecordRepository[Todo]):
    """Repository for to-do items."""

    key = TODOS_KEY
    policy = WritePolicy.UPSERT
    record_type = Todo


class UserProfileRepository:
    """Repository for user profiles, stored inside account containers."""

    key = USER_PROFILES_KEY

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def _accounts(self) -> list[UserAccount]:
        return load_collection(self.backend, self.key, UserAccount)[1]

    def get_account(self, owner_id: str) -> UserAccount | None:
        """Get the account container for ``owner_id``."""
        for account in self._accounts():
            if account.id == owner_id:
                return account
        return None

    def get(self, owner_id: str) -> UserProfile | None:
        """Get the profile of ``owner_id``, or None."""
        account = self.get_account(owner_id)
        return account.profile if account else None

    def save(self, owner_id: str, profile: UserProfile) -> None:
        """Save or replace the profile of ``owner_id``.

        A container is created with an empty email if none exists yet.
        """
        entries = load_collection(self.backend, self.key, UserAccount)[0]
        for entry in entries:
            if _entry_id(entry) == owner_id:
                entry["profile"] = profile.to_dict()
                break
        else:
            entries.append(UserAccount(id=owner_id, email="", profile=profile).to_dict())

        write_collection(self.backend, self.key, entries)


class LocalStorage:
    """Facade bundling every record repository over one backend."""

    def __init__(self, backend: KeyValueBackend | None = None):
        self.backend = backend or SQLiteBackend()
        self.workout_plans = WorkoutPlanRepository(self.backend)
        self.diet_logs = DietLogRepository(self.backend)
        self.progress_logs = ProgressLogRepository(self.backend)
        self.todos = TodoRepository(self.backend)
        self.profiles = UserProfileRepository(self.backend)

    # Workout plans
    def get_workout_plans(self, user_id: str) -> list[WorkoutPlan]:
        return self.workout_plans.list(user_id)

    def save_workout_plan(self, plan: WorkoutPlan) -> None:
        self.workout_plans.save(plan)

    def delete_workout_plan(self, plan_id: str) -> None:
        self.workout_plans.delete(plan_id)

    # Diet logs
    def get_diet_logs(self, user_id: str) -> list[DietLog]:
        return self.diet_logs.list(user_id)

    def save_diet_log(self, log: DietLog) -> None:
        self.diet_logs.save(log)

    def delete_diet_log(self, log_id: str) -> None:
        self.diet_logs.delete(log_id)

    # Progress logs
    def get_progress_logs(self, user_id: str) -> list[ProgressLog]:
        return self.progress_logs.list(user_id)

    def save_progress_log(self, log: ProgressLog) -> None:
        self.progress_logs.save(log)

    def delete_progress_log(self, log_id: str) -> None:
        self.progress_logs.delete(log_id)

    # Todos
    def get_todos(self, user_id: str) -> list[Todo]:
        return self.todos.list(user_id)

    def save_todo(self, todo: Todo) -> None:
        self.todos.save(todo)

    def delete_todo(self, todo_id: str) -> None:
        self.todos.delete(todo_id)

    # User profile
    def get_user_profile(self, user_id: str) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_user_profile(self, user_id: str, profile: UserProfile) -> None:
        self.profiles.save(user_id, profile)

    def clear(self) -> None:
        """Remove every record collection."""
        for key in STORAGE_KEYS:
            self.backend.remove(key)
