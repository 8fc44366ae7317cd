"""Tests for settings parsing and fallbacks."""

import logging

from zettel_graph.config import ZettelConfig, load_config


class TestZettelConfig:
    def test_defaults(self):
        config = ZettelConfig()
        assert config.enabled is True
        assert config.auto_link_keywords is False
        assert config.highlight_bidirectional is True
        assert config.show_backlinks is True
        assert config.keyword_min_length == 3
        assert config.graph_node_threshold == 50

    def test_camel_case_mapping(self):
        config = ZettelConfig.from_mapping({"autoLinkKeywords": True, "keywordMinLength": "5"})
        assert config.auto_link_keywords is True
        assert config.keyword_min_length == 5

    def test_invalid_values_fall_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = ZettelConfig.from_mapping(
                {"keywordMinLength": "abc", "showBacklinks": "maybe", "graphNodeThreshold": -1}
            )
        assert config == ZettelConfig()
        assert "Invalid value" in caplog.text

    def test_unknown_keys_ignored(self):
        assert ZettelConfig.from_mapping({"theme": "dark"}) == ZettelConfig()

    def test_corrupted_blob(self):
        assert ZettelConfig.from_json("{not json") == ZettelConfig()
        assert ZettelConfig.from_json("[1, 2]") == ZettelConfig()
        assert ZettelConfig.from_json(None) == ZettelConfig()

    def test_json_blob(self):
        config = ZettelConfig.from_json('{"enabled": false, "basePath": "/wiki-hub"}')
        assert config.enabled is False
        assert config.base_path == "/wiki-hub"


class TestLoadConfig:
    def test_environment(self):
        config = load_config(
            {"ZETTEL_ENABLED": "false", "ZETTEL_GRAPH_NODE_THRESHOLD": "10", "OTHER": "x"}
        )
        assert config.enabled is False
        assert config.graph_node_threshold == 10

    def test_bad_environment_value(self):
        assert load_config({"ZETTEL_CACHE_TTL_SECONDS": "soon"}).cache_ttl_seconds == 300
