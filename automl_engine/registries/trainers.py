from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

from automl_engine.components.interfaces import TrainerExtension
from automl_engine.contracts.choices import TaskKind
from automl_engine.core.errors import UnknownTrainerError
from automl_engine.registries.base import Registry

logger = logging.getLogger(__name__)

_EXTENSIONS: Registry[str, Type[Any]] = Registry(_name="trainer_extensions")
_TASKS: Registry[str, str] = Registry(_name="trainer_tasks")
_NAMES_BY_TYPE: Registry[Type[Any], str] = Registry(_name="trainer_names_by_type")

# One shared, read-only instance per trainer name.
_INSTANCES: Dict[str, TrainerExtension] = {}
_INSTANCES_LOCK = threading.Lock()

_BUILTINS_LOADED = False


def register_trainer_extension(name: str, *, task: TaskKind) -> Callable[[Type[Any]], Type[Any]]:
    """Decorator to register a trainer extension class under a stable name.

    Parameters
    ----------
    name:
        Trainer identifier (e.g. "LbfgsMaximumEntropyMulti"). Pipeline nodes
        record this name.
    task:
        Learning task the extension is enumerated under.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        _EXTENSIONS.register(name)(cls)
        _TASKS.register(name)(str(task))
        _NAMES_BY_TYPE.register(cls)(name)
        return cls

    return deco


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from automl_engine.registries.builtins import trainers as _  # noqa: F401

    _BUILTINS_LOADED = True


def get_trainer_extension(name: str) -> TrainerExtension:
    """Return the shared extension instance registered under ``name``."""
    _ensure_builtins()

    cls = _EXTENSIONS.try_get(name)
    if cls is None:
        raise UnknownTrainerError(f"Unknown trainer: {name!r}")

    with _INSTANCES_LOCK:
        inst = _INSTANCES.get(name)
        if inst is None:
            inst = cls()
            _INSTANCES[name] = inst
            logger.debug("instantiated trainer extension %s", name)
    return inst


def find_trainer_name(extension: Any) -> Optional[str]:
    """Name of a registered extension (instance or class), else None."""
    _ensure_builtins()

    t = extension if isinstance(extension, type) else type(extension)
    name = _NAMES_BY_TYPE.try_get(t)
    if name is None:
        # Allow subclassing a registered extension via MRO fallback.
        for base in t.mro()[1:]:
            name = _NAMES_BY_TYPE.try_get(base)
            if name is not None:
                break
    return name


def get_trainer_name(extension: Any) -> str:
    name = find_trainer_name(extension)
    if name is None:
        t = extension if isinstance(extension, type) else type(extension)
        raise UnknownTrainerError(f"{t.__name__} is not a registered trainer extension")
    return name


def get_task(name: str) -> str:
    _ensure_builtins()
    task = _TASKS.try_get(name)
    if task is None:
        raise UnknownTrainerError(f"Unknown trainer: {name!r}")
    return task


def list_trainer_names(task: Optional[TaskKind] = None) -> List[str]:
    _ensure_builtins()
    if task is None:
        return sorted(_EXTENSIONS.keys())
    return sorted(n for n, t in _TASKS.items() if t == task)


def get_trainers(task: TaskKind, allowlist: Optional[Iterable[str]] = None) -> List[TrainerExtension]:
    """Extensions for a learning task, optionally restricted to an allowlist.

    Allowlisted names must exist and belong to ``task``; a typo should fail
    loudly rather than quietly shrink the search space.
    """
    names = list_trainer_names(task)
    if allowlist is None:
        return [get_trainer_extension(n) for n in names]

    wanted = list(dict.fromkeys(allowlist))
    for n in wanted:
        if get_task(n) != task:
            raise UnknownTrainerError(f"Trainer {n!r} is not a {task} trainer")
    return [get_trainer_extension(n) for n in names if n in wanted]
