"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import sys
import importlib
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 10), f"Python 3.10+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "psutil",
        "pytest",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_project_structure():
    """Test that required directories exist."""
    required_dirs = [
        "src",
        "src/core",
        "src/configurations",
        "tests",
        "scripts",
    ]

    missing_dirs = [name for name in required_dirs if not (ROOT / name).is_dir()]
    if missing_dirs:
        pytest.fail(f"Missing required directories: {missing_dirs}")


def test_source_modules():
    """Test that every source module is importable."""
    modules = [
        "src.core.cell",
        "src.core.configuration",
        "src.core.errors",
        "src.core.rules",
        "src.core.settings",
        "src.core.world",
        "src.patterns.library",
        "src.ui.paint",
        "src.ui.render",
    ]

    for module in modules:
        try:
            importlib.import_module(module)
        except ImportError as e:
            pytest.fail(f"Cannot import {module}: {e}")


def test_tool_config_files():
    """Test that tool configuration files exist."""
    assert (ROOT / "pyproject.toml").exists(), "pyproject.toml missing"
