"""
Tests for Configuration
=======================
Tests for shared/config.py TOML loading and defaults.
"""

import pytest

from shared.config import ForgeConfig, get_config


class TestForgeConfigDefaults:
    """Defaults apply when no file is given."""

    def test_section_defaults(self):
        config = ForgeConfig()
        assert config.generator.default_length == 16
        assert config.generator.use_symbols is False
        assert config.passphrase.word_count == 4
        assert config.passphrase.separator == "-"
        assert config.passphrase.capitalize is True
        assert config.passphrase.append_number is False
        assert config.analyzer.guesses_per_second == 1e9
        assert config.breach.timeout == 5.0
        assert config.breach.api_url.endswith("/range/")
        assert config.global_settings.log_level == "WARNING"
        assert config.global_settings.batch_limit == 1000

    def test_to_dict(self):
        data = ForgeConfig().to_dict()
        assert set(data) == {"global_settings", "generator", "passphrase", "analyzer", "breach"}
        assert data["passphrase"]["separator"] == "-"


class TestForgeConfigLoad:
    """TOML overrides."""

    def test_load_overrides(self, tmp_path):
        path = tmp_path / "passforge.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "\n"
            "[generator]\n"
            "default_length = 24\n"
            "use_symbols = true\n"
            "\n"
            "[passphrase]\n"
            'separator = "_"\n'
            "word_count = 6\n"
            "\n"
            "[breach]\n"
            "timeout = 2.5\n",
            encoding="utf-8",
        )
        config = ForgeConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.generator.default_length == 24
        assert config.generator.use_symbols is True
        assert config.generator.use_upper is True
        assert config.passphrase.separator == "_"
        assert config.passphrase.word_count == 6
        assert config.breach.timeout == 2.5
        assert config.analyzer.guesses_per_second == 1e9

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "passforge.toml"
        path.write_text("[generator]\nshiny = 1\ndefault_length = 10\n\n[extra]\nx = 1\n")
        config = ForgeConfig.load(path)
        assert config.generator.default_length == 10

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ForgeConfig.load(tmp_path / "nope.toml")

    def test_get_config_caches(self, tmp_path):
        path = tmp_path / "passforge.toml"
        path.write_text("[passphrase]\nword_count = 5\n")
        try:
            first = get_config(path)
            assert first.passphrase.word_count == 5
            assert get_config() is first
        finally:
            del get_config._cached
