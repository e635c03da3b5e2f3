"""Registries.

Registries replace factory if/else sprawl. The core idea is:
- add a new trainer extension
- register it
- the rest of the system stays closed for modification
"""

from .trainers import (
    find_trainer_name,
    get_task,
    get_trainer_extension,
    get_trainer_name,
    get_trainers,
    list_trainer_names,
    register_trainer_extension,
)

__all__ = [
    "find_trainer_name",
    "get_task",
    "get_trainer_extension",
    "get_trainer_name",
    "get_trainers",
    "list_trainer_names",
    "register_trainer_extension",
]
