"""Tests for YAML settings loading and user overrides."""

import pytest

from lift_log.core.config import SERIES_POINT_LIMIT
from lift_log.core.config_loader import Settings, get_bundled_settings_path, load_settings


class TestLoadSettings:

    def test_bundled_defaults(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings == Settings()
        assert settings.series_limit == SERIES_POINT_LIMIT
        assert settings.recompute_prs_on_delete is False

    def test_bundled_file_is_shipped(self):
        path = get_bundled_settings_path()
        assert path is not None
        assert path.name == "settings.yaml"

    def test_user_override_merges(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("series_limit: 5\nrecompute_prs_on_delete: true\n")
        settings = load_settings(tmp_path)
        assert settings.series_limit == 5
        assert settings.recompute_prs_on_delete is True
        assert settings.chart_width == Settings().chart_width

    def test_unparseable_override_warns_and_is_ignored(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("series_limit: [5\n")
        with pytest.warns(UserWarning, match="ignoring settings file"):
            settings = load_settings(tmp_path)
        assert settings == Settings()

    def test_wrong_type_warns(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("series_limit: lots\n")
        with pytest.warns(UserWarning, match="must be int"):
            settings = load_settings(tmp_path)
        assert settings.series_limit == SERIES_POINT_LIMIT

    def test_unknown_key_warns(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("colour: blue\n")
        with pytest.warns(UserWarning, match="unknown setting"):
            load_settings(tmp_path)

    def test_invalid_value_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("series_limit: 0\n")
        with pytest.warns(UserWarning, match="invalid settings"):
            settings = load_settings(tmp_path)
        assert settings == Settings()
