import re
from logging import getLogger

from pagemodel.core.exceptions import (
    ElementNotFound,
    PageModelUsageError,
    PageNotFound,
)
from pagemodel.locator_manager import LocatorRegistry

logger = getLogger(__name__)


class BasePage:
    """Base class for all page objects

    A page object represents one screen of the application. Its public
    methods are user actions (eg: ``save_message``) and high-level
    queries (eg: ``saved_message``). Anything that deals with locators
    or the session belongs in a private method.

    Subclasses declare their locators in the class attribute
    ``locators``. Locators declared on a base class are inherited and
    may be overridden. A locator named ``page`` identifies the page
    itself; it is used by the default implementations of
    ``_wait_to_appear`` and ``_is_current_page``.

    Subclasses may also define:

    _go_to_page

      called by PageObjects.go_to_page. The default raises
      NotImplementedError, since most screens can only be reached
      by navigating from another screen.

    _is_current_page

      called by PageObjects.current_page_should_be. It should raise
      an exception if the current screen is not this page.

    _wait_to_appear

      called by PageObjects.wait_for_page_object.
    """

    _page_type = None
    _object_name = None
    locators = {}

    def __init__(self, session, object_name=None):
        self.session = session
        if object_name:
            self._object_name = object_name
        self._locators = self._collect_locators()

    @classmethod
    def _collect_locators(cls):
        registry = LocatorRegistry(name=cls.__name__)
        for klass in reversed(cls.__mro__):
            locators = klass.__dict__.get("locators")
            if locators:
                registry.merge(locators)
        return registry

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._page_type} {self.object_name}>"

    @property
    def object_name(self):
        return self._object_name

    @property
    def pagename(self):
        """Returns a readable form of the page object name

        A space is added before each string of one or more capital
        letters.  For example, 'SurfingSafariHomePage' will become
        'Surfing Safari Home Page'
        """
        return re.sub("(?!^)([A-Z][a-z]+)", r" \1", self.__class__.__name__)

    def _locator(self, name, *args):
        return self._locators.translate(name, *args)

    def _element(self, name, *args, timeout=None):
        return self.session.find(self._locator(name, *args), timeout=timeout)

    def _click(self, name, *args):
        self.session.click(self._locator(name, *args))

    def _type(self, name, text, *args):
        self.session.type_text(self._locator(name, *args), text)

    def _read(self, name, *args):
        return self.session.read_text(self._locator(name, *args))

    def _is_visible(self, name, *args):
        return self.session.is_present(self._locator(name, *args))

    def _go_to_page(self, **kwargs):
        raise NotImplementedError(
            f"{self.pagename} cannot be opened directly; navigate to it from another page"
        )

    def _is_current_page(self, **kwargs):
        if "page" not in self._locators:
            raise PageModelUsageError(
                f"{self.pagename} does not define a 'page' locator"
            )
        if not self._is_visible("page"):
            raise PageNotFound(f"The current page is not {self.pagename}")

    def _wait_to_appear(self, timeout=None):
        """Wait for the element identified by the 'page' locator"""
        if "page" not in self._locators:
            logger.debug(f"{self.pagename} has no 'page' locator; not waiting")
            return
        timeout = self.session.settings.timeout if timeout is None else timeout
        try:
            self.session.wait_until_present(self._locator("page"), timeout=timeout)
        except ElementNotFound as e:
            logger.debug(str(e))
            raise PageNotFound(
                f"Page object {self._page_type} {self.object_name} did not appear before timeout ({timeout}s) expired."
            )

    def go_back(self):
        """Navigate back to the previous screen"""
        self.session.back()

    def log_current_page_object(self):
        """Logs the name of the current page object"""
        logger.info(f"current page object: {self.pagename} ({self!r})")
        return self
