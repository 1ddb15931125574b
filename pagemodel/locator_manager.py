"""
This module supports keeping all of the locators for one page in
one place. It works like this:

1. A page object declares a dictionary of locators as the class
   attribute ``locators``. Keys may be nested; leaves are locator
   strings of the form "<strategy>:<identifier>"

2. The page object wraps that dictionary in a LocatorRegistry, which
   is private to the page. Subclasses inherit their parent's locators
   and may add to or override them.

3. Page methods refer to locators with dot notation, optionally
   followed by positional arguments for any format fields.

Example:

    | class EchoPage(BasePage):
    |     locators = {
    |         "message": {"input": "accessibility id:messageInput"},
    |         "saved": "xpath://*[@text='{}']",
    |     }
    |
    |     def save_message(self, text):
    |         self._type("message.input", text)

Supported strategies are listed in STRATEGIES. A locator string that
starts with "/" or "(" is treated as xpath, which matches what
SeleniumLibrary does.
"""

import copy
import re
from dataclasses import dataclass
from logging import getLogger

from pagemodel.core.exceptions import LocatorError, LocatorNotFound
from pagemodel.core.utils import dictmerge

logger = getLogger(__name__)

# strategy name => the "by" value understood by selenium and appium
STRATEGIES = {
    "accessibility id": "accessibility id",
    "id": "id",
    "name": "name",
    "xpath": "xpath",
    "css": "css selector",
    "class name": "class name",
    "link text": "link text",
    "text": "xpath",
}


@dataclass(frozen=True)
class Locator:
    """A strategy and an identifier used to find one UI element"""

    strategy: str
    identifier: str

    def as_selenium(self):
        """Return the (by, value) pair accepted by ``driver.find_element``"""
        if self.strategy == "text":
            return (STRATEGIES["text"], _text_xpath(self.identifier))
        return (STRATEGIES[self.strategy], self.identifier)

    def __str__(self):
        return f"{self.strategy}:{self.identifier}"


def _text_xpath(text):
    # xpath 1.0 has no escape for quotes; concat() handles text with both kinds
    if "'" not in text:
        literal = f"'{text}'"
    elif '"' not in text:
        literal = f'"{text}"'
    else:
        parts = text.split("'")
        literal = "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"
    return f"//*[text()={literal} or @text={literal}]"


def parse_locator(locator):
    """Convert a locator string into a Locator

    The string must be "<strategy>:<identifier>", where strategy is one
    of the keys of STRATEGIES (case insensitive), or an xpath beginning
    with "/" or "(".
    """
    if isinstance(locator, Locator):
        return locator
    if not isinstance(locator, str):
        raise LocatorError(
            f"Expected locator to be of type string, but was {type(locator)}"
        )

    locator = locator.strip()
    if locator.startswith(("/", "(")):
        return Locator("xpath", locator)

    if ":" in locator:
        strategy, identifier = locator.split(":", 1)
        strategy = strategy.strip().lower()
        if strategy in STRATEGIES:
            return Locator(strategy, identifier.strip())

    raise LocatorError(
        f"Unable to determine the strategy for locator '{locator}'. "
        f"Expected one of: {', '.join(STRATEGIES)}"
    )


def apply_formatting(locator, args):
    """Apply formatting to the locator

    If there are no named fields in the locator this is just a simple
    call to .format. Named fields are assigned positional arguments
    in the order in which each name first appears. Indexed fields
    such as {0} are left to .format.

    Example:

    Given the locator "//*[@title='{title}' or @name='{title}']//{tag}"
    and args of ['foo', 'bar'], 'foo' is assigned to 'title' and
    'bar' to 'tag'.
    """
    args = list(args)
    kwargs = {}
    try:
        for match in re.finditer(r"\{([^}]+)\}", locator):
            name = match.group(1)
            if name and not name.isdigit() and name not in kwargs:
                kwargs[name] = args.pop(0)
        return locator.format(*args, **kwargs)
    except IndexError:
        raise LocatorError("Not enough arguments were supplied")


def _drop_replaced_groups(existing, new):
    for key, value in new.items():
        current = existing.get(key)
        if isinstance(current, dict):
            if isinstance(value, dict):
                _drop_replaced_groups(current, value)
            else:
                del existing[key]


class LocatorRegistry:
    """The locators belonging to a single page object"""

    def __init__(self, locators=None, name=None):
        self.name = name or "locators"
        self._locators = {}
        if locators:
            self.merge(locators)

    def merge(self, locators):
        """Deep-merge more locators into this registry

        Existing leaves with the same path are replaced, and so is an
        existing group when the new value at its path is a single locator.
        """
        locators = copy.deepcopy(locators)
        _drop_replaced_groups(self._locators, locators)
        dictmerge(self._locators, locators, name=self.name)
        return self

    def __contains__(self, path):
        try:
            self._lookup(path)
        except LocatorNotFound:
            return False
        return True

    def translate(self, path, *args):
        """Return the Locator for the dotted path, formatted with args"""
        template = self._lookup(path)
        if not isinstance(template, str):
            raise TypeError(
                f"Expected locator to be of type string, but was {type(template)}"
            )
        locator = parse_locator(template)
        if args or "{" in locator.identifier:
            locator = Locator(
                locator.strategy,
                apply_formatting(locator.identifier, [str(arg) for arg in args]),
            )
        logger.debug(f"locator: '{self.name}:{path}' => '{locator}'")
        return locator

    def _lookup(self, path):
        loc = self._locators
        breadcrumbs = []
        try:
            for key in path.split("."):
                breadcrumbs.append(key.strip())
                # a TypeError means we hit a leaf with keys still remaining
                loc = loc[key.strip()]
        except (KeyError, TypeError):
            breadcrumb_path = ".".join(breadcrumbs)
            raise LocatorNotFound(f"locator {self.name}:{breadcrumb_path} not found")
        return loc

    def paths(self):
        """Return the dotted paths of every leaf, sorted"""

        def walk(node, prefix):
            for key, value in node.items():
                path = f"{prefix}.{key}" if prefix else key
                if isinstance(value, dict):
                    yield from walk(value, path)
                else:
                    yield path

        return sorted(walk(self._locators, ""))
