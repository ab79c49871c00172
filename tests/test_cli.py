"""Tests for the symbol-autoloader CLI."""

from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

from symbol_autoloader.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    lib = tmp_path / "lib"
    (lib / "shop").mkdir(parents=True)
    (lib / "shop" / "cart.py").write_text(
        dedent("""
            __namespace__ = "Shop"

            class Cart:
                pass
        """)
    )
    config = tmp_path / "autoload.yaml"
    config.write_text(
        dedent(f"""
            convention_roots: [{lib}]
            aliases:
              Cart: Shop.Cart
            bundles:
              Admin:
                location: {tmp_path / "bundles" / "admin"}
        """)
    )
    return tmp_path


def invoke(runner, project, *args):
    return runner.invoke(cli, ["--config", str(project / "autoload.yaml"), *args])


def test_help_without_command(runner):
    result = runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "explain" in result.output


def test_paths(runner, project):
    result = invoke(runner, project, "paths")

    assert result.exit_code == 0
    assert "Convention Roots" in result.output


def test_paths_empty(runner, tmp_path: Path):
    config = tmp_path / "empty.yaml"
    config.write_text("{}\n")

    result = runner.invoke(cli, ["--config", str(config), "paths"])

    assert result.exit_code == 0
    assert "No convention roots registered" in result.output


def test_show(runner, project):
    result = invoke(runner, project, "show")

    assert result.exit_code == 0
    assert "Aliases" in result.output
    assert "Shop.Cart" in result.output
    assert "Admin" in result.output
    assert "No mappings registered" in result.output


def test_explain_found(runner, project):
    result = invoke(runner, project, "explain", "Shop.Cart")

    assert result.exit_code == 0
    assert "found via convention" in result.output
    assert "probes:" in result.output


def test_explain_not_found_exits_nonzero(runner, project):
    result = invoke(runner, project, "explain", "Nope")

    assert result.exit_code == 1
    assert "not_found via convention" in result.output


def test_explain_pending_bundle(runner, project):
    result = invoke(runner, project, "explain", "Admin.Panel", "--no-probes")

    assert result.exit_code == 1
    assert "would activate bundle: Admin" in result.output
    assert "probes:" not in result.output


def test_resolve_through_alias(runner, project):
    result = invoke(runner, project, "resolve", "Cart")

    assert result.exit_code == 0
    assert "aliased via alias" in result.output
    assert "found via convention" in result.output
    assert "Resolved" in result.output


def test_resolve_missing(runner, project):
    result = invoke(runner, project, "resolve", "Nope")

    assert result.exit_code == 1
    assert "Symbol 'Nope' not found" in result.output


def test_invalid_config(runner, tmp_path: Path):
    config = tmp_path / "bad.yaml"
    config.write_text("- not\n- a mapping\n")

    result = runner.invoke(cli, ["--config", str(config), "paths"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_resolve_reports_load_failure(runner, tmp_path: Path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "user.py").write_text("class User(:\n    pass\n")
    config = tmp_path / "autoload.yaml"
    config.write_text(f"convention_roots: [{lib}]\n")

    result = runner.invoke(cli, ["--config", str(config), "resolve", "User"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "SyntaxError" in result.output
