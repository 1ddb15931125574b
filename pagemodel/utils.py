import functools
from logging import getLogger

logger = getLogger(__name__)


def capture_screenshot_on_error(func):
    """Decorator for capturing a screenshot if a page action throws an error

    The decorated function must be a method of an object with a
    ``session`` attribute (eg: a page object).

    If a screenshot cannot be taken for any reason, the screenshot error
    will be logged before the original exception is re-raised.
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except Exception:
            try:
                session = self.session
            except Exception as e:
                logger.debug(f"unable to get a session for a screenshot: {e}")
                session = None
            if session is not None:
                session.safe_screenshot(
                    f"{self.__class__.__name__}.{func.__name__}"
                )
            else:
                logger.debug(f"no session; skipping screenshot for {func.__name__}")
            raise

    return wrapper
