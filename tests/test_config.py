"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdtree.cli import build_parser, load_config, main, resolve_options
from mdtree.errors import ConfigError


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[output]\nformat = "text"\n')
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"format": "text"}

    def test_auto_discover_mdtree_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mdtree.toml"
        cfg.write_text("[output]\nindent = 4\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"indent": 4}

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "mdtree.toml"
        cfg.write_text("[output\n")
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(None, tmp_path)


class TestConfigMerge:
    def _resolve(self, tmp_path: Path, *flags: str):
        doc = tmp_path / "doc.md"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc), *flags])
        return resolve_options(ns)

    def test_defaults(self, tmp_path: Path) -> None:
        opts = self._resolve(tmp_path)
        assert opts.format == "json"
        assert opts.indent == 2

    def test_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text('[output]\nformat = "tree"\n')
        assert self._resolve(tmp_path).format == "tree"

    def test_cli_overrides_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text('[output]\nformat = "tree"\n')
        assert self._resolve(tmp_path, "-f", "text").format == "text"

    def test_config_indent(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text("[output]\nindent = 0\n")
        assert self._resolve(tmp_path).indent == 0

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[output]\nformat = "text"\n')
        assert self._resolve(tmp_path, "--config", str(cfg)).format == "text"


class TestConfigErrors:
    def test_unknown_format(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text('[output]\nformat = "html"\n')
        doc = tmp_path / "doc.md"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        with pytest.raises(ConfigError) as exc_info:
            resolve_options(ns)
        assert exc_info.value.key == "output.format"
        assert "html" in exc_info.value.format()

    def test_bool_indent_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text("[output]\nindent = true\n")
        doc = tmp_path / "doc.md"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        with pytest.raises(ConfigError, match="integer"):
            resolve_options(ns)

    def test_output_not_a_table(self, tmp_path: Path) -> None:
        (tmp_path / "mdtree.toml").write_text('output = "json"\n')
        doc = tmp_path / "doc.md"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        with pytest.raises(ConfigError, match="table"):
            resolve_options(ns)

    def test_main_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "mdtree.toml").write_text('[output]\nformat = "html"\n')
        doc = tmp_path / "doc.md"
        doc.write_text("x")
        assert main([str(doc)]) == 2
        err = capsys.readouterr().err
        assert err.startswith("error: unknown format")
        assert "mdtree.toml" in err


class TestConfigErrorFormat:
    def test_format_with_key(self) -> None:
        err = ConfigError("bad", Path("mdtree.toml"), "output.format")
        assert err.format() == "error: bad\n  --> mdtree.toml [output.format]"

    def test_format_without_key(self) -> None:
        err = ConfigError("bad", Path("x.toml"))
        assert str(err) == "error: bad\n  --> x.toml"
