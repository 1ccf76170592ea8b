"""Tests for settings loading."""

from pathlib import Path

import pytest
import yaml

from echopath.config import GameSettings, load_settings


@pytest.fixture
def no_env_file(tmp_path):
    return tmp_path / "missing.env"


class TestDefaults:
    """GameSettings defaults."""

    def test_defaults(self):
        settings = GameSettings()
        assert settings.default_theme == "Dog"
        assert settings.animals == ["Dog", "Cat", "Horse"]
        assert settings.success_message == "Correct!"
        assert settings.failure_message == "Incorrect. Try again."
        assert settings.shuffle_seed is None
        assert settings.log_level == "INFO"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            GameSettings(log_level="LOUD")

    def test_load_without_sources(self, no_env_file):
        assert load_settings(env_file=no_env_file) == GameSettings()


class TestYamlFile:
    """Settings from a YAML file."""

    def test_yaml_values(self, tmp_path, no_env_file):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "default_theme: Cat\nshuffle_seed: 9\nanimals: [Cat, Owl]\n",
            encoding="utf-8",
        )
        settings = load_settings(path, env_file=no_env_file)
        assert settings.default_theme == "Cat"
        assert settings.shuffle_seed == 9
        assert settings.animals == ["Cat", "Owl"]

    def test_config_path_from_env(self, tmp_path, no_env_file, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("failure_message: Try again!\n", encoding="utf-8")
        monkeypatch.setenv("ECHOPATH_CONFIG", str(path))
        assert load_settings(env_file=no_env_file).failure_message == "Try again!"

    def test_missing_file(self, tmp_path, no_env_file):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml", env_file=no_env_file)

    def test_not_a_mapping(self, tmp_path, no_env_file):
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path, env_file=no_env_file)

    def test_bad_yaml(self, tmp_path, no_env_file):
        path = tmp_path / "settings.yaml"
        path.write_text("default_theme: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_settings(path, env_file=no_env_file)

    def test_invalid_value(self, tmp_path, no_env_file):
        path = tmp_path / "settings.yaml"
        path.write_text("shuffle_seed: not-a-number\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path, env_file=no_env_file)


class TestEnvironment:
    """ECHOPATH_* overrides and .env files."""

    def test_env_overrides_yaml(self, tmp_path, no_env_file, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("default_theme: Cat\n", encoding="utf-8")
        monkeypatch.setenv("ECHOPATH_DEFAULT_THEME", "Horse")
        monkeypatch.setenv("ECHOPATH_ANIMALS", "Horse, Pony ,")
        monkeypatch.setenv("ECHOPATH_SHUFFLE_SEED", "42")
        monkeypatch.setenv("ECHOPATH_LOG_LEVEL", "debug")
        settings = load_settings(path, env_file=no_env_file)
        assert settings.default_theme == "Horse"
        assert settings.animals == ["Horse", "Pony"]
        assert settings.shuffle_seed == 42
        assert settings.log_level == "DEBUG"

    def test_blank_seed_means_unseeded(self, no_env_file, monkeypatch):
        monkeypatch.setenv("ECHOPATH_SHUFFLE_SEED", "")
        assert load_settings(env_file=no_env_file).shuffle_seed is None

    def test_templates_path(self, no_env_file, monkeypatch):
        monkeypatch.setenv("ECHOPATH_LESSON_TEMPLATES_PATH", "content/first_words.yaml")
        settings = load_settings(env_file=no_env_file)
        assert settings.lesson_templates_path == Path("content/first_words.yaml")

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ECHOPATH_SUCCESS_MESSAGE=Well done!\n", encoding="utf-8")
        assert load_settings(env_file=env_file).success_message == "Well done!"
