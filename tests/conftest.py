# pytest configuration

import pytest

from natural_order import Culture, NaturalOrderComparer


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-slow"):
        # without --run-slow option: skip all slow tests
        skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture
def german_locale(monkeypatch):
    """Make the current locale use German number formatting."""
    conventions = {"decimal_point": ",", "thousands_sep": "."}
    monkeypatch.setattr("locale.localeconv", lambda: conventions)
    return conventions


@pytest.fixture
def invariant_comparer():
    return NaturalOrderComparer(Culture.invariant())
