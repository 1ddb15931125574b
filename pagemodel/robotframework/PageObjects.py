from robot.api import logger
from robot.libraries.BuiltIn import BuiltIn, RobotNotRunningError

from pagemodel.core.config import load_settings
from pagemodel.pageobjects.PageObjects import PageObjects as _PageObjects
from pagemodel.pageobjects.PageObjects import get_keyword_names
from pagemodel.session import Session


class PageObjects(_PageObjects):
    """Keyword library for importing and using page objects

    When importing, you can include one or more paths to python
    files that define page objects. For example, if you have a set
    of classes in tests/pages/echo.py, you can import this library
    into a test case like this:

    | Library  SeleniumLibrary
    | Library  pagemodel.robotframework.PageObjects
    | ...  tests/pages/echo.py
    | ...  config=pagemodel.yml

    The session used by the page objects wraps the driver of the
    browser (or app) currently open in SeleniumLibrary.

    The public methods of the current page object are available as
    keywords. A page object becomes current when it is loaded with
    `Load page object`, `Go to page`, `Current page should be` or
    `Wait for page object`.

    Example:

    | Wait for page object    Home    EchoApp
    | Open echo box
    | Load page object    Echo    EchoApp
    | Save message    Hello
    | Saved message should be    Hello
    """

    ROBOT_LIBRARY_SCOPE = "TEST SUITE"

    def __init__(self, *args, config=None):
        self.builtin = BuiltIn()
        logger.debug("initializing PageObjects...")
        super().__init__(*args)
        self._settings = load_settings(config)

        # Start with this library at the front of the library search order;
        # that may change as other libraries are loaded.
        try:
            self.builtin.set_library_search_order("PageObjects")
        except RobotNotRunningError:
            # this should only happen when trying to load this library
            # via libdoc, in which case we don't care.
            pass

    @property
    def selenium(self):
        """Returns the instance of the imported SeleniumLibrary library"""
        return self.builtin.get_library_instance("SeleniumLibrary")

    @property
    def session(self):
        """A session wrapping SeleniumLibrary's current driver

        A new session is created whenever SeleniumLibrary switches
        to a different driver.
        """
        driver = self.selenium.driver
        if self._session is None or self._session.driver is not driver:
            self._session = Session(driver, self._settings)
        return self._session

    def log_page_object_keywords(self):
        """Logs page objects and their keywords for all page objects
        which have been imported into the current suite.
        """
        for key in sorted(self.registry.keys()):
            pobj = self.registry[key]
            keywords = get_keyword_names(pobj)
            logger.info("{}: {}".format(key, ", ".join(keywords)))

    def _set_current_page_object(self, pobj):
        """Make the page object current and this library first in the search order

        Page object keywords are served by this library, so it is moved
        to the front of robot's library search order. Note: this search
        order gets reset at the start of every suite.
        """
        self.current_page_object = pobj
        logger.debug("current page object: {!r}".format(pobj))

        libname = self.__class__.__name__
        old_order = list(self.builtin.set_library_search_order())
        if libname in old_order:
            old_order.remove(libname)
        new_order = [libname] + old_order
        logger.debug("new search order: {}".format(new_order))
        self.builtin.set_library_search_order(*new_order)
        return pobj
