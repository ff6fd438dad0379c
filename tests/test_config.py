# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Defaults, env overrides, and the lazily cached global instance

from backloggd_snippet.config import DEFAULT_EXPORT_LINK_STYLE, Config, get_config, reload_config


class TestConfig:
    def test_defaults(self):
        config = Config(_env_file=None)

        assert config.include_image is True
        assert config.attribution is True
        assert config.request_timeout == 10.0
        assert config.export_link_style == DEFAULT_EXPORT_LINK_STYLE
        assert config.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BACKLOGGD_SNIPPET_ATTRIBUTION", "false")
        monkeypatch.setenv("BACKLOGGD_SNIPPET_EXPORT_LINK_STYLE", "color: red")

        config = reload_config()

        assert config.attribution is False
        assert config.export_link_style == "color: red"

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_replaces_instance(self):
        first = get_config()

        assert reload_config() is not first
