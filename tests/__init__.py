"""
Test suite for PySineNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for fields, sampling, colour mapping, rendering, driver and CLI
- Integration tests for the complete reference workflow
- Taichi backend tests (skipped when Taichi is unavailable)

Run with: pytest
"""
