import os

import pytest

from fraction_calc.calculator import Calculator


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture(autouse=True)
def clean_calc_env(monkeypatch):
    # Keep a developer's FRACTION_CALC_* settings out of the tests
    for key in list(os.environ):
        if key.startswith("FRACTION_CALC_"):
            monkeypatch.delenv(key)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
