"""Unit tests for GeneratorConfig (skaberen.config).

Tests cover:
- Defaults
- save/load round trip
- from_env parsing of flags and strings
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from skaberen.config import GeneratorConfig


class TestGeneratorConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.use_result_proc is False
        assert config.use_util_class is True
        assert config.base_package == ""
        assert config.external_utils_package == "uft.utils"
        assert config.template_dir is None

    @pytest.mark.unit
    def test_invalid_flag_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(use_result_proc="definitely")


class TestGeneratorConfigPersistence:
    @pytest.mark.unit
    def test_save_creates_parents(self, tmp_path: Path):
        target = tmp_path / "nested" / "skaberen.json"
        written = GeneratorConfig(base_package="com.acme").save(target)
        assert written == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["base_package"] == "com.acme"

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        original = GeneratorConfig(
            use_result_proc=True,
            use_util_class=False,
            external_utils_package="org.shared",
            template_dir=tmp_path / "templates",
        )
        loaded = GeneratorConfig.load(original.save(tmp_path / "config.json"))
        assert loaded == original


class TestGeneratorConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env_gives_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            assert GeneratorConfig.from_env() == GeneratorConfig()

    @pytest.mark.unit
    def test_reads_all_variables(self, tmp_path: Path):
        env = {
            "SKABEREN_USE_RESULT_PROC": "true",
            "SKABEREN_USE_UTIL_CLASS": "no",
            "SKABEREN_BASE_PACKAGE": "com.acme",
            "SKABEREN_EXTERNAL_UTILS_PACKAGE": "org.shared",
            "SKABEREN_TEMPLATE_DIR": str(tmp_path),
        }
        with patch.dict("os.environ", env, clear=True):
            config = GeneratorConfig.from_env()
        assert config.use_result_proc is True
        assert config.use_util_class is False
        assert config.base_package == "com.acme"
        assert config.external_utils_package == "org.shared"
        assert config.template_dir == tmp_path

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1", "TRUE", "yes", "on"])
    def test_truthy_flags(self, value):
        with patch.dict("os.environ", {"SKABEREN_USE_RESULT_PROC": value}, clear=True):
            assert GeneratorConfig.from_env().use_result_proc is True
