"""Tests for BundleManager activation."""

from pathlib import Path
from textwrap import dedent

import pytest

from symbol_autoloader.bundles import BundleManager
from symbol_autoloader.bundles import NullGate
from symbol_autoloader.errors import BundleActivationError
from symbol_autoloader.errors import BundleNotFoundError
from symbol_autoloader.registry import Registry


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    location = tmp_path / "bundles" / "admin"
    location.mkdir(parents=True)
    return location


@pytest.fixture
def bundles(registry: Registry) -> BundleManager:
    return BundleManager(registry)


class TestLifecycle:
    def test_unregistered_bundle(self, bundles):
        assert not bundles.exists("Admin")
        with pytest.raises(BundleNotFoundError):
            bundles.activate("Admin")

    def test_register_then_activate(self, bundles, bundle_dir):
        bundles.register("Admin", str(bundle_dir))

        assert bundles.exists("Admin")
        assert not bundles.is_activated("Admin")

        bundles.activate("Admin")

        assert bundles.is_activated("Admin")
        assert bundles.started("Admin")
        assert bundles.activated() == ["Admin"]

    def test_activate_twice_is_noop(self, bundles, registry, bundle_dir):
        bundles.register("Admin", str(bundle_dir), {"mappings": {"Admin.Panel": "panel.py"}})
        bundles.activate("Admin")
        registry.register_mappings({"Admin.Panel": "/override.py"})

        bundles.activate("Admin")

        assert registry.mapping_for("Admin.Panel") == "/override.py"
        assert bundles.activated() == ["Admin"]


class TestAutoloads:
    def test_relative_paths_resolved_under_location(self, bundles, registry, bundle_dir):
        bundles.register(
            "Admin",
            str(bundle_dir),
            {
                "mappings": {"Admin.Panel": "panel.py", "Admin.Abs": "/abs/file.py"},
                "namespaces": {"Admin": "lib"},
                "convention_roots": ["vendor"],
                "aliases": {"Panel": "Admin.Panel"},
            },
        )

        assert registry.mapping_for("Admin.Panel") is None

        bundles.activate("Admin")

        assert registry.mapping_for("Admin.Panel") == str(bundle_dir / "panel.py")
        assert registry.mapping_for("Admin.Abs") == "/abs/file.py"
        assert registry.namespace_directory("Admin") == str(bundle_dir / "lib")
        assert registry.convention_roots == [str(bundle_dir / "vendor") + "/"]
        assert registry.alias_for("Panel") == "Admin.Panel"


class TestStartScript:
    def test_start_script_can_register_symbols(self, bundles, registry, bundle_dir):
        (bundle_dir / "start.py").write_text(
            dedent("""
                registry.register_mappings({"Admin.Panel": bundle.location + "/panel.py"})
            """)
        )
        bundles.register("Admin", str(bundle_dir))

        bundles.activate("Admin")

        assert registry.mapping_for("Admin.Panel") == f"{bundle_dir}/panel.py"

    def test_start_script_failure_wrapped(self, bundles, bundle_dir):
        (bundle_dir / "start.py").write_text("raise ValueError('bad config')\n")
        bundles.register("Admin", str(bundle_dir))

        with pytest.raises(BundleActivationError, match="bad config") as exc_info:
            bundles.activate("Admin")

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert bundles.is_activated("Admin")


class TestNullGate:
    def test_has_no_bundles(self):
        gate = NullGate()
        assert not gate.exists("Admin")
        assert not gate.is_activated("Admin")
        with pytest.raises(BundleNotFoundError):
            gate.activate("Admin")
