class PageModelException(Exception):
    """ Base class for all pagemodel Exceptions """

    pass


class PageModelUsageError(PageModelException):
    """ An exception thrown due to improper usage which should be resolvable by proper usage """

    pass


class PageModelFailure(PageModelException, AssertionError):
    """ An exception representing a failure of the application under test.  Test runners report these as failures rather than errors """

    pass


class ElementNotFound(PageModelFailure):
    """ Raised when a UI element is not present before the wait expires """

    def __init__(self, message=None, locator=None, timeout=None):
        super().__init__(message)
        self.message = message
        self.locator = locator
        self.timeout = timeout

    def __str__(self):
        if self.message:
            return self.message
        if self.timeout is not None:
            return f"UI element not found: {self.locator} (waited {self.timeout}s)"
        return f"UI element not found: {self.locator}"


class PageNotFound(PageModelFailure):
    """ Raised when the current screen is not the expected page """

    pass


class LocatorError(PageModelUsageError):
    """ Raised when a locator is malformed or cannot be formatted """

    pass


class LocatorNotFound(LocatorError):
    """ Raised when a locator path is not present in a registry """

    pass


class PageObjectNotFound(PageModelUsageError):
    """ Raised when no page object is registered for a page type and object name """

    pass


class ConfigError(PageModelUsageError):
    """ Raised when a configuration enounters an error """

    def __init__(self, message=None, config_name=None):
        super(ConfigError, self).__init__(message)
        self.message = message
        self.config_name = config_name

    def __str__(self):
        return f"{self.message} for config {self.config_name}"


class ConfigMergeError(ConfigError):
    """ Raised when merging configuration fails. """

    pass
