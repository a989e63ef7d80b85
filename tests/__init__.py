"""Test suite for assetsym.

Test Structure:
- unit/: Unit tests for individual components
  - symbols/: Sanitizer and symbol set construction
  - catalog/: Catalog directory reading
  - emit/: Dialect rendering, parsing and writing
  - config/, logging/, cli/: Ambient layers
- conftest.py: Shared fixtures (catalog names, temporary catalog factory)
"""
