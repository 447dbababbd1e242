"""
Conquest Support test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (no I/O, fast)
    tests/integration/  CLI tests through click's CliRunner
    tests/safety/       Guards on pinned default values

Run all tests:
    pytest

Run with coverage:
    pytest --cov=conquest_support
"""
