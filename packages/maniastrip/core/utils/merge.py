"""Deep merge of option overrides onto an option tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Merge an override mapping onto an option tree, returning a new dict.

    A mapping in ``patch`` merges key-wise into the matching sub-tree of
    ``base``; a nested model found there is expanded with
    :func:`model_to_tree` first, so overrides can target a sub-tree that is
    still a model. Every other patch value (lists, tuples, scalars, model or
    renderer instances) replaces the base value wholesale. Neither argument
    is modified.

    Args:
        base: Option tree to merge into.
        patch: Partial override tree.

    Returns:
        A new tree with plain dicts wherever a merge happened.

    Example:
        >>> deep_merge({"strip": {"mode": "num", "num": 8}}, {"strip": {"num": 4}})
        {'strip': {'mode': 'num', 'num': 4}}
    """
    result = {str(key): _copy_tree(value) for key, value in base.items()}

    for raw_key, patch_value in patch.items():
        key = str(raw_key)
        current = result.get(key)
        if isinstance(patch_value, Mapping):
            if isinstance(current, BaseModel):
                current = model_to_tree(current)
            if isinstance(current, dict):
                result[key] = deep_merge(current, patch_value)
                continue
        result[key] = _copy_tree(patch_value)

    return result


def model_to_tree(model: BaseModel) -> dict[str, Any]:
    """Convert a model into a nested dict of its field values.

    Nested models become dicts; every other value (including arbitrary
    objects such as renderer instances) is carried over untouched.
    """
    tree: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        tree[name] = model_to_tree(value) if isinstance(value, BaseModel) else value
    return tree


def _copy_tree(value: Any) -> Any:
    """Copy mappings (as dicts) and lists; everything else is shared."""
    if isinstance(value, Mapping):
        return {str(k): _copy_tree(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy_tree(item) for item in value]
    return value


__all__ = [
    "deep_merge",
    "model_to_tree",
]
