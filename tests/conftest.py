import pytest


def pytest_configure(config):
    config.addinivalue_line('markers', 'unit: tests of a single pure function or class')
    config.addinivalue_line('markers', 'cli: tests that run a command-line tool')


def pytest_addoption(parser):
    # Add option to skip command-line tool tests.
    parser.addoption('--skip-cli', action='store_true', help='skip command-line tool tests')


def pytest_runtest_setup(item):
    if 'cli' in item.keywords and item.config.getoption('--skip-cli'):
        pytest.skip('skipping command-line tool test (--skip-cli given)')
