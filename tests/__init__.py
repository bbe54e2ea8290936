"""Test suite for fxcurve.

Test Structure:
- unit/curves/: Generators, manipulators, presets, codec and rendering
- unit/config/: Config loading and validation
- unit/utils/: Logging and JSON helpers
- unit/cli/: Command-line interface
- conftest.py: Shared fixtures
"""
