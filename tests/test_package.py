"""Basic smoke tests for the opwrap package."""

import importlib


def test_package_imports() -> None:
    pkg = importlib.import_module("opwrap")
    assert pkg.__version__ == "0.1.0"


def test_public_names() -> None:
    pkg = importlib.import_module("opwrap")
    for name in pkg.__all__:
        assert hasattr(pkg, name), name
