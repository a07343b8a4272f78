"""Tests for the package's public surface."""

import fluentrest
import fluentrest._internal
from fluentrest._version import __version__


class TestPackageImports:
    """Tests for top-level imports."""

    def test_internal_package_imports(self):
        """The internal package should import and carry its docstring."""
        assert "request" in fluentrest._internal.__doc__

    def test_public_exports(self):
        """Every name in __all__ should be importable from the package."""
        for name in fluentrest.__all__:
            assert hasattr(fluentrest, name), name

    def test_version(self):
        """The package should expose its version."""
        assert fluentrest.__version__ == __version__
