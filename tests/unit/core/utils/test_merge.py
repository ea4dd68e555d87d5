"""Unit tests for deep merge helpers."""

from __future__ import annotations

from types import MappingProxyType

from maniastrip.core.config.options import RenderOptions, StripOptions
from maniastrip.core.rendering.elements import RectNoteRenderer
from maniastrip.core.utils.merge import deep_merge, model_to_tree


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_nested_merge(self) -> None:
        base = {"strip": {"mode": "num", "num": 8}, "note": {"width": 20}}
        result = deep_merge(base, {"strip": {"num": 4}})
        assert result == {"strip": {"mode": "num", "num": 4}, "note": {"width": 20}}

    def test_lists_replace(self) -> None:
        result = deep_merge({"margin": [10, 10]}, {"margin": [5]})
        assert result == {"margin": [5]}

    def test_dict_replaces_scalar(self) -> None:
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_scalar_replaces_dict(self) -> None:
        assert deep_merge({"a": {"b": 2}}, {"a": None}) == {"a": None}

    def test_new_keys_added(self) -> None:
        assert deep_merge({"a": 1}, {"b": {"c": 2}}) == {"a": 1, "b": {"c": 2}}

    def test_inputs_not_mutated(self) -> None:
        base = {"a": {"b": [1, 2]}}
        patch = {"a": {"c": 3}}
        result = deep_merge(base, patch)
        result["a"]["b"].append(3)
        assert base == {"a": {"b": [1, 2]}}
        assert patch == {"a": {"c": 3}}

    def test_objects_shared(self) -> None:
        renderer = RectNoteRenderer()
        result = deep_merge({"renderer": None}, {"renderer": renderer})
        assert result["renderer"] is renderer

    def test_nested_model_expanded_for_mapping_patch(self) -> None:
        result = deep_merge({"strip": StripOptions()}, {"strip": {"num": 3}})
        assert isinstance(result["strip"], dict)
        assert result["strip"]["num"] == 3
        assert result["strip"]["spacing"] == 30

    def test_model_replaced_by_non_mapping(self) -> None:
        replacement = StripOptions(num=2)
        result = deep_merge({"strip": StripOptions()}, {"strip": replacement})
        assert result["strip"] is replacement

    def test_read_only_mapping_patch(self) -> None:
        patch = MappingProxyType({"strip": MappingProxyType({"num": 4})})
        result = deep_merge({"strip": {"num": 8, "mode": "num"}}, patch)
        assert result == {"strip": {"num": 4, "mode": "num"}}
        assert type(result["strip"]) is dict


class TestModelToTree:
    """Tests for model_to_tree."""

    def test_nested_models_become_dicts(self) -> None:
        tree = model_to_tree(RenderOptions())
        assert isinstance(tree["strip"], dict)
        assert tree["strip"]["num"] == 8
        assert isinstance(tree["axis"]["minute"], dict)
        assert tree["axis"]["minute"]["font_weight"] == "bold"

    def test_renderers_kept_as_objects(self) -> None:
        options = RenderOptions()
        tree = model_to_tree(options)
        assert tree["note"]["renderer"] is options.note.renderer

    def test_round_trip(self) -> None:
        options = RenderOptions()
        assert RenderOptions.model_validate(model_to_tree(options)) == options
