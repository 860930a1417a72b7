"""Override merge policy tests."""

from cms_bootstrap.snapshot.merge import as_mapping, deep_merge


class TestDeepMerge:
    def test_override_scalar_wins(self):
        base = {"variables": {"site_title": None, "site_theme": "Frontend"}}
        merged = deep_merge(base, {"variables": {"site_title": "X"}})
        assert merged == {"variables": {"site_title": "X", "site_theme": "Frontend"}}

    def test_maps_are_extended_not_replaced(self):
        base = {"languages": {"en-us": {"name": "English"}}}
        merged = deep_merge(base, {"languages": {"es": {"name": "Spanish"}}})
        assert set(merged["languages"]) == {"en-us", "es"}

    def test_nested_maps_merge_recursively(self):
        base = {"languages": {"en-us": {"name": "English", "status": 1}}}
        merged = deep_merge(base, {"languages": {"en-us": {"status": 0}}})
        assert merged["languages"]["en-us"] == {"name": "English", "status": 0}

    def test_lists_are_replaced_wholesale(self):
        base = {"node_types": ["article", "page"]}
        merged = deep_merge(base, {"node_types": ["event"]})
        assert merged["node_types"] == ["event"]

    def test_empty_list_override_clears_list(self):
        merged = deep_merge({"node_types": ["article"]}, {"node_types": []})
        assert merged["node_types"] == []

    def test_none_override_is_a_value(self):
        merged = deep_merge({"variables": {"site_theme": "Frontend"}}, {"variables": {"site_theme": None}})
        assert merged["variables"]["site_theme"] is None

    def test_scalar_replaces_map_and_map_replaces_scalar(self):
        assert deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}
        assert deep_merge({"a": 2}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_new_top_level_keys_are_added(self):
        merged = deep_merge({"variables": {}}, {"custom": {"enabled": True}})
        assert merged["custom"] == {"enabled": True}

    def test_inputs_are_not_mutated(self):
        base = {"variables": {"site_title": None}, "node_types": ["a"]}
        override = {"variables": {"site_title": "X"}, "node_types": ["b"]}
        merged = deep_merge(base, override)

        merged["node_types"].append("c")
        merged["variables"]["site_title"] = "Y"
        assert base == {"variables": {"site_title": None}, "node_types": ["a"]}
        assert override == {"variables": {"site_title": "X"}, "node_types": ["b"]}

    def test_none_or_empty_override_returns_copy(self):
        base = {"variables": {"site_title": "A"}}
        assert deep_merge(base, None) == base
        assert deep_merge(base, {}) is not base

    def test_list_override_is_coerced_to_indexed_keys(self):
        merged = deep_merge({"variables": {}}, ["x", "y"])
        assert merged == {"variables": {}, "0": "x", "1": "y"}

    def test_scalar_override_is_coerced(self):
        assert deep_merge({"variables": {}}, "x") == {"variables": {}, "0": "x"}


class TestAsMapping:
    def test_mapping_is_copied(self):
        original = {"a": 1}
        result = as_mapping(original)
        assert result == original
        assert result is not original

    def test_tuple_uses_string_indexes(self):
        assert as_mapping(("a", "b")) == {"0": "a", "1": "b"}
