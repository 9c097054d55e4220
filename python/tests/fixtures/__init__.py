"""
Pytest fixtures for lexshift tests.

Fixtures are organized by test category:
- inflection.py: Engine and YAML config fixtures
- inflection_cases.py: Word tables (plain data, no fixtures)
"""
