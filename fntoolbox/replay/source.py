"""
Replay inputs: JSON-lines action logs and reducers given by import path.
"""

import importlib
import json
from pathlib import Path
from typing import Iterator, List, Union

from ..core.errors import ActionFormatError, ActionLogError, ReducerLoadError
from ..redux.action import Action
from ..redux.reducer import Reducer


def iter_actions(path: Union[str, Path]) -> Iterator[Action]:
    """
    Iterate actions stored one JSON object per line.

    Line format:
        {"type": "add", "payload": 5, "meta": {"by": "alice"}}

    Blank lines are skipped.

    Raises:
        FileNotFoundError: If the log does not exist
        ActionLogError: If a line is not a JSON object with a `type`
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError as e:
                raise ActionLogError(f"{path}:{lineno}: invalid JSON: {e.msg}") from e
            if not isinstance(rec, dict):
                raise ActionLogError(f"{path}:{lineno}: expected JSON object, got {type(rec).__name__}")
            try:
                yield Action.from_dict(rec)
            except ActionFormatError as e:
                raise ActionLogError(f"{path}:{lineno}: {e}") from e


def read_actions(path: Union[str, Path]) -> List[Action]:
    """Read a whole action log. See iter_actions()."""
    return list(iter_actions(path))


def load_reducer(target: str) -> Reducer:
    """
    Resolve a reducer from "package.module:attribute".

    Dotted attributes are followed ("pkg.mod:Counter.reducer").

    Raises:
        ReducerLoadError: If the module or attribute cannot be found, or
            the resolved object is not callable
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ReducerLoadError(f"Expected 'module:attribute', got {target!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ReducerLoadError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise ReducerLoadError(f"{module_name!r} has no attribute {attr_path!r}") from None

    if not callable(obj):
        raise ReducerLoadError(f"{target!r} is not callable")
    return obj
