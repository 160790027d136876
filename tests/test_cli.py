"""Tests for the ``skaberen`` command-line entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from skaberen.cli import main


pytestmark = pytest.mark.unit


class TestMain:
    def test_generates_with_flags(self, target_dir: Path):
        with patch("skaberen.cli.print_success") as mock_success:
            main([str(target_dir), "-e", "order", "-t", "long", "--methods", "findAll,findById"])
        mock_success.assert_called_once_with("Success! Code Order generated successfully")
        controller = (target_dir / "controllers" / "OrderController.java").read_text(encoding="utf-8")
        assert "findById" in controller
        assert "deleteById" not in controller

    def test_result_proc_without_utils(self, target_dir: Path):
        main([str(target_dir), "-e", "Order", "-t", "int", "--result-proc", "--no-util-class"])
        assert not (target_dir / "utils").exists()
        assert (target_dir / "services" / "impl" / "OrderService.java").is_file()

    def test_invalid_target(self, tmp_path: Path):
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(tmp_path / "missing"), "-e", "Order", "-t", "long"])
        assert exc_info.value.code == 1
        mock_error.assert_called_once_with("Please select a valid directory")

    def test_blank_entity_name(self, target_dir: Path):
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit):
                main([str(target_dir), "-e", "  ", "-t", "long"])
        mock_error.assert_called_once_with("The class name must not be empty!")

    def test_generation_failure_exits(self, target_dir: Path):
        (target_dir / "entities").write_text("", encoding="utf-8")
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(target_dir), "-e", "Order", "-t", "long"])
        assert exc_info.value.code == 1
        assert mock_error.call_args.args[0].startswith("Error: ")

    def test_prompts_for_missing_values(self, target_dir: Path):
        answers = iter(["invoice", "other", "UUID"])
        with patch("skaberen.cli.Prompt.ask", side_effect=lambda *a, **kw: next(answers)):
            main([str(target_dir), "--no-result-proc"])
        repo = (target_dir / "repositories" / "IInvoiceRepository.java").read_text(encoding="utf-8")
        assert "JpaRepository<Invoice, UUID>" in repo

    def test_unknown_methods_warned(self, target_dir: Path):
        with patch("skaberen.cli.print_warning") as mock_warning:
            main([str(target_dir), "-e", "Order", "-t", "long", "--methods", "findAll,explode"])
        mock_warning.assert_any_call("Ignoring unknown methods: explode")

    def test_config_file(self, target_dir: Path, tmp_path: Path):
        config_path = tmp_path / "skaberen.json"
        config_path.write_text(
            '{"use_result_proc": true, "use_util_class": false, "external_utils_package": "org.shared"}',
            encoding="utf-8",
        )
        main([str(target_dir), "-e", "Order", "-t", "long", "--config", str(config_path)])
        impl = (target_dir / "services" / "impl" / "OrderService.java").read_text(encoding="utf-8")
        assert "import org.shared.ResultadoProc;" in impl

    def test_missing_config_file(self, target_dir: Path, tmp_path: Path):
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(target_dir), "-e", "Order", "-t", "long", "--config", str(tmp_path / "absent.json")])
        assert exc_info.value.code == 1
        assert mock_error.call_args.args[0].startswith("Error: ")
        assert not (target_dir / "entities").exists()

    def test_malformed_config_file(self, target_dir: Path, tmp_path: Path):
        config_path = tmp_path / "skaberen.json"
        config_path.write_text("{not json", encoding="utf-8")
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(target_dir), "-e", "Order", "-t", "long", "--config", str(config_path)])
        assert exc_info.value.code == 1
        assert mock_error.call_args.args[0].startswith("Error: ")

    def test_path_like_entity_name_writes_nothing(self, target_dir: Path):
        with patch("skaberen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(target_dir), "-e", "../../escaped", "-t", "long"])
        assert exc_info.value.code == 1
        assert "path segments" in mock_error.call_args.args[0]
        assert not (target_dir.parent / "escaped.java").exists()
        assert not any(target_dir.iterdir())
