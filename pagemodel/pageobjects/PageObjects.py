import importlib
import importlib.util
import inspect
import os
import sys
from logging import getLogger

from pagemodel.core.exceptions import PageModelUsageError, PageObjectNotFound
from pagemodel.utils import capture_screenshot_on_error

logger = getLogger(__name__)


def get_keyword_names(obj):
    """Returns a list of method names for the given object

    This excludes methods that begin with an underscore, and
    also excludes the special method `get_keyword_names`.
    """
    # inspect the class so that properties are not evaluated
    cls = obj if inspect.isclass(obj) else type(obj)
    names = [
        member[0]
        for member in inspect.getmembers(cls, inspect.isroutine)
        if (not member[0].startswith("_")) and member[0] != "get_keyword_names"
    ]
    return names


def pageobject(page_type, object_name=None):
    """A decorator to designate a class as a page object"""
    logger.debug("importing page object {} {}".format(page_type, object_name))

    def wrapper(cls):
        key = (page_type, object_name if object_name else "")
        PageObjects.registry[key] = cls
        cls._page_type = page_type
        if "_object_name" not in cls.__dict__:
            cls._object_name = object_name
        return cls

    return wrapper


def import_page_objects(name):
    """Import a module of page objects, given a file path or a dotted module name

    Relative file paths that don't exist relative to the current
    working directory are looked up on sys.path.
    """
    if not name.endswith(".py"):
        try:
            return importlib.import_module(name)
        except ImportError as e:
            raise ImportError(f"Unable to import page object '{name}': {e}") from e

    path = _find_file(name)
    if path is None:
        raise ImportError(f"Unable to find page object file '{name}'")

    module_name = os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(module_name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise ImportError(f"Unable to import page object '{name}': {e}") from e
    logger.debug("imported page object {}".format(path))
    return module


def _find_file(name):
    if os.path.isabs(name):
        return name if os.path.exists(name) else None
    for directory in [os.getcwd()] + sys.path:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return os.path.abspath(candidate)
    return None


class PageObjects(object):
    """Registry of page objects, and the starting point for a test

    When constructing, you can include one or more paths to python
    files (or dotted module names) that define page objects:

    | po = PageObjects("tests/pages/echo.py", session=session)
    | home = po.load_page_object("Home", "EchoApp")

    Page object classes need to use the @pageobject decorator from
    pagemodel.pageobjects. The decorator takes two parameters:
    page_type and object_name. Both are arbitrary strings, but
    together should uniquely identify a page.

    Examples of page_type are Home, Listing, Detail, etc. The object
    name is usually the name of the app or of the record type shown
    on the page.

    Example:

    | from pagemodel.pageobjects import BasePage
    | from pagemodel.pageobjects import pageobject
    | ...
    | @pageobject(page_type="Echo", object_name="EchoApp")
    | class EchoPage(BasePage):
    |     ...
    """

    registry = {}

    def __init__(self, *args, session=None):
        self._session = session
        for name in args:
            import_page_objects(name)
        self.current_page_object = None

    @classmethod
    def _reset(cls):
        """Reset the internal data structures used to manage page objects

        This is to aid testing. It probably shouldn't be used at any other time.
        """
        for pobj in cls.registry.values():
            if pobj.__module__ in sys.modules:
                del sys.modules[pobj.__module__]
        cls.registry = {}

    @property
    def session(self):
        if self._session is None:
            raise PageModelUsageError("PageObjects was created without a session")
        return self._session

    def __getattr__(self, name):
        """Return the keyword from the current page object"""
        if name.startswith("_") or self.__dict__.get("current_page_object") is None:
            raise AttributeError(name)
        return getattr(self.current_page_object, name)

    def get_keyword_names(self):
        names = get_keyword_names(self)
        if self.current_page_object is not None:
            names = names + get_keyword_names(self.current_page_object)
        return names

    def log_page_object_keywords(self):
        """Logs page objects and their keywords for all page objects
        which have been imported.
        """
        for key in sorted(self.registry.keys()):
            pobj = self.registry[key]
            keywords = get_keyword_names(pobj)
            logger.info("{}: {}".format(key, ", ".join(keywords)))

    def get_page_object(self, page_type, object_name=None):
        """Return an instance of a page object, bound to the session

        If no page object was registered for the exact page type and
        object name, a generic page object registered for the page
        type alone is used, with the object name passed to it.
        """
        key = (page_type, object_name or "")
        if key in self.registry:
            return self.registry[key](self.session)

        generic = self.registry.get((page_type, ""))
        if generic is not None:
            return generic(self.session, object_name)

        raise PageObjectNotFound(
            "Unable to find a page object for '{} {}'".format(page_type, object_name)
        )

    @capture_screenshot_on_error
    def go_to_page(self, page_type, object_name=None, **kwargs):
        """Go to the page of the given page object.

        Custom page objects define `_go_to_page`, which is passed
        all of the keyword arguments from this method.

        The page object becomes the current page object.
        """
        pobj = self.get_page_object(page_type, object_name)
        pobj._go_to_page(**kwargs)
        return self._set_current_page_object(pobj)

    @capture_screenshot_on_error
    def current_page_should_be(self, page_type, object_name=None, **kwargs):
        """Verifies that the page appears to be the requested page

        This calls the page object's `_is_current_page`, which raises
        an exception if the current screen isn't the page. On success
        the page object becomes the current page object.
        """
        pobj = self.get_page_object(page_type, object_name)
        pobj._is_current_page(**kwargs)
        return self._set_current_page_object(pobj)

    def load_page_object(self, page_type, object_name=None):
        """Make the page object identified by the type and object name current

        The page type / object name pair must have been registered
        using the pagemodel.pageobjects.pageobject decorator.
        """
        pobj = self.get_page_object(page_type, object_name)
        return self._set_current_page_object(pobj)

    @capture_screenshot_on_error
    def wait_for_page_object(self, page_type, object_name=None, timeout=None):
        """Wait for a page to appear, then make it the current page object"""
        pobj = self.get_page_object(page_type, object_name)
        pobj._wait_to_appear(timeout=timeout)
        return self._set_current_page_object(pobj)

    def _set_current_page_object(self, pobj):
        logger.debug("current page object: {!r}".format(pobj))
        self.current_page_object = pobj
        return pobj
