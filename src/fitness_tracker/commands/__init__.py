"""CLI commands for fitness-tracker."""

from .diet import diet
from .export import export
from .init import init
from .profile import profile
from .progress import progress
from .todos import todos
from .workouts import workouts

__all__ = [
    "diet",
    "export",
    "init",
    "profile",
    "progress",
    "todos",
    "workouts",
]
