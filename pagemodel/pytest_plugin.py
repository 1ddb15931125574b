"""pytest fixtures for writing UI tests with page objects

This plugin is registered through the ``pytest11`` entry point, so it
is active whenever pagemodel is installed.

    def test_echo(page_objects):
        home = page_objects.wait_for_page_object("Home", "EchoApp")
        echo = home.open_echo_box()
        echo.save_message("Hello")
        assert echo.saved_message() == "Hello"

Tests that use ``ui_session`` (directly or through ``page_objects``)
are skipped unless a remote url is configured, either in
pagemodel.yml or with --pagemodel-remote-url. They are also marked
``ui``, so ``-m "not ui"`` leaves them out.
"""

import pytest

from pagemodel.core.config import load_settings
from pagemodel.core.logger import init_logger
from pagemodel.pageobjects import PageObjects
from pagemodel.session import open_session


def pytest_addoption(parser, pluginmanager):
    """Pytest magic method: add --pagemodel-config, --pagemodel-remote-url and --pagemodel-debug"""
    group = parser.getgroup("pagemodel")
    group.addoption(
        "--pagemodel-config",
        action="store",
        default=None,
        help="Path to a pagemodel.yml file.",
    )
    group.addoption(
        "--pagemodel-remote-url",
        action="store",
        default=None,
        help="Selenium grid or Appium server to open sessions on.",
    )
    group.addoption(
        "--pagemodel-debug",
        action="store_true",
        default=False,
        help="Log every driver interaction.",
    )


def pytest_configure(config):
    """Pytest magic method: add pytest markers and set up logging"""
    config.addinivalue_line(
        "markers", "ui(): a test that drives a real UI through a remote session"
    )
    if config.getoption("--pagemodel-debug"):
        init_logger(debug=True)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """Pytest magic method: mark every test that uses a remote session with ``ui``

    Runs before deselection, so ``-m "not ui"`` leaves those tests out.
    """
    for item in items:
        if "ui_session" in getattr(item, "fixturenames", ()):
            item.add_marker("ui")


@pytest.fixture(scope="session")
def pagemodel_settings(request):
    """Settings from pagemodel.yml, with command line overrides applied"""
    return load_settings(
        request.config.getoption("--pagemodel-config"),
        remote_url=request.config.getoption("--pagemodel-remote-url"),
    )


@pytest.fixture
def ui_session(pagemodel_settings):
    """A remote session that is quit when the test finishes"""
    if not pagemodel_settings.remote_url:
        pytest.skip("ui_session: test requires a remote_url")
    session = open_session(pagemodel_settings)
    try:
        yield session
    finally:
        session.quit()


@pytest.fixture
def page_objects(ui_session):
    """A PageObjects registry bound to ui_session"""
    return PageObjects(session=ui_session)
