"""Test suite for maniastrip.

Test Structure:
- unit/: Unit tests mirroring the package layout
  - core/: models, config, theming, layout, rendering, parsers, utils
  - cli/: command-line interface
- fixtures/: Test data files (sample beatmaps, option files)
- conftest.py: Shared fixtures
"""
