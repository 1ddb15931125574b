"""Tests for the PageObjects keyword library

Testing notes:

The PageObjects library uses robot's BuiltIn library. However, using
most of its keywords will throw an error if done outside the context
of a running robot test. To work around that, these tests mock out
the _get_context method to fool the BuiltIn library into not
complaining, and mock get_library_instance to return a fake
SeleniumLibrary whose driver is a FakeDriver.
"""

from unittest import mock

import pytest

from pagemodel.core.config import Settings
from pagemodel.core.exceptions import PageNotFound
from pagemodel.robotframework.PageObjects import PageObjects
from pagemodel.tests.util import FakeDriver


class MockGetLibraryInstance:
    """Mock robot's get_library_instance method"""

    def __init__(self):
        self.libs = {"SeleniumLibrary": mock.Mock(driver=FakeDriver())}

    def __call__(self, libname):
        if libname in self.libs:
            return self.libs[libname]
        else:
            raise Exception("unknown library: {}".format(libname))


@pytest.fixture
def selenium_library():
    get_library_instance = MockGetLibraryInstance()
    with mock.patch(
        "robot.libraries.BuiltIn.BuiltIn.get_library_instance",
        side_effect=get_library_instance,
    ), mock.patch("robot.libraries.BuiltIn.BuiltIn._get_context") as get_context:
        get_context.return_value.namespace.set_search_order.return_value = [
            "SeleniumLibrary",
            "PageObjects",
        ]
        yield get_library_instance.libs["SeleniumLibrary"]


@pytest.fixture
def polib(selenium_library, tmp_path):
    config = tmp_path / "pagemodel.yml"
    config.write_text(f"timeout: 0.2\npoll_frequency: 0.01\nscreenshot_dir: {tmp_path}\n")
    return PageObjects("pagemodel.examples.echo", config=str(config))


class TestPageObjectsLibrary:
    def test_keywords(self, polib):
        assert polib.get_keyword_names() == [
            "current_page_should_be",
            "get_page_object",
            "go_to_page",
            "load_page_object",
            "log_page_object_keywords",
            "wait_for_page_object",
        ]

    def test_settings_from_config(self, polib):
        assert polib.session.settings.timeout == 0.2

    def test_default_settings(self, selenium_library, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert PageObjects().session.settings == Settings()

    def test_session_uses_selenium_driver(self, polib, selenium_library):
        session = polib.session
        assert session.driver is selenium_library.driver
        assert polib.session is session

    def test_new_driver_new_session(self, polib, selenium_library):
        session = polib.session
        selenium_library.driver = FakeDriver()
        assert polib.session is not session
        assert polib.session.driver is selenium_library.driver

    def test_page_keywords_become_available(self, polib):
        polib.wait_for_page_object("Home", "EchoApp")
        assert "open_echo_box" in polib.get_keyword_names()

        polib.open_echo_box()
        polib.load_page_object("Echo", "EchoApp")
        polib.save_message("Hello")
        polib.saved_message_should_be("Hello")

    def test_search_order(self, polib):
        with mock.patch.object(polib.builtin, "set_library_search_order") as order:
            order.return_value = ["SeleniumLibrary", "PageObjects"]
            polib.load_page_object("Home", "EchoApp")
        order.assert_called_with("PageObjects", "SeleniumLibrary")

    def test_current_page_should_be_fails(self, polib, selenium_library):
        with pytest.raises(PageNotFound):
            polib.current_page_should_be("Echo", "EchoApp")
        assert len(selenium_library.driver.screenshots) == 1

    def test_log_page_object_keywords(self, polib):
        with mock.patch("pagemodel.robotframework.PageObjects.logger") as logger:
            polib.log_page_object_keywords()
        messages = [call[0][0] for call in logger.info.call_args_list]
        assert (
            "('Home', 'EchoApp'): go_back, log_current_page_object, open_echo_box"
            in messages
        )


def test_outside_of_robot():
    """The library can be created when robot isn't running (eg: by libdoc)"""
    polib = PageObjects()
    assert polib.current_page_object is None
