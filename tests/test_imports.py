"""
Import tests for all PySineNoise modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pysinenoise package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main package can be imported."""
        import pysinenoise
        assert hasattr(pysinenoise, '__version__')
        assert hasattr(pysinenoise, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pysinenoise.constants as cte
        assert cte.DEFAULT_SIZE == 200
        assert cte.DEFAULT_OCTAVES == 200
        assert cte.DEFAULT_FALL_OFF == 0.98


class TestSubmoduleImports:
    """Test that each submodule exposes its public API."""

    @pytest.mark.importtest
    @pytest.mark.parametrize("module, names", [
        ("field", ["sine_field", "scale", "fractal_field", "Sine", "Scaled", "Sum", "field_from_dict"]),
        ("grid", ["sample_field", "normalize_grid", "sample_and_normalize", "lattice"]),
        ("colormap", ["grayscale", "terracolor", "terrain_band", "colorize", "TERRAIN_BANDS"]),
        ("render", ["RenderError", "write_png", "render", "render_grid"]),
        ("driver", ["RenderJob", "RenderResult", "run_job", "run_jobs", "reference_jobs"]),
        ("misc", ["preview_grid"]),
    ])
    def test_submodule_api(self, module, names):
        """Test submodule import and its exported names."""
        import importlib
        mod = importlib.import_module(f"pysinenoise.{module}")
        for name in names:
            assert hasattr(mod, name), f"pysinenoise.{module} is missing {name}"


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_lazy_attributes(self):
        """CLI commands are reachable through the lazy package attributes."""
        import pysinenoise
        assert callable(pysinenoise.cli.render_reference)
        assert callable(pysinenoise.cli.fractal)

    @pytest.mark.importtest
    def test_cli_unknown_attribute(self):
        """Unknown CLI attributes raise AttributeError."""
        import pysinenoise.cli
        with pytest.raises(AttributeError):
            pysinenoise.cli.does_not_exist
