"""
Tests for site configuration loading.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from calcverse.site import SiteConfig, load_site_config


class TestLoadSiteConfig:
    def test_defaults(self) -> None:
        config = SiteConfig()
        assert config.site.name == "CalcVerse"
        assert config.calculator_pages.related_limit == 4
        assert config.generation.package == "calcverse_site"

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text(
            "site:\n  base_url: https://example.test/\ncalculator_pages:\n  related_limit: 2\n",
            encoding="utf-8",
        )

        config = load_site_config(path)

        assert config.site.base_url == "https://example.test"
        assert config.site.title_suffix == " - CalcVerse"
        assert config.calculator_pages.related_limit == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text("", encoding="utf-8")
        assert load_site_config(path) == SiteConfig()

    def test_repository_config_loads(self) -> None:
        config = load_site_config(Path(__file__).parents[2] / "site.yaml")
        assert config.generation.output_dir == "calcverse_site"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_site_config(tmp_path / "site.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text("site: [", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_site_config(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "site.yaml"
        path.write_text("calculator_pages:\n  related_limit: -1\n", encoding="utf-8")
        with pytest.raises(ValueError, match="validation failed"):
            load_site_config(path)
