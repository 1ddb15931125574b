"""The driver/session capability used by page objects

Session is the only code in pagemodel that talks to the WebDriver.
Page objects borrow a session; whoever created it is responsible for
calling ``quit``.
"""

import re
from contextlib import contextmanager
from datetime import datetime
from logging import getLogger
from pathlib import Path

from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from pagemodel.core.config import Settings
from pagemodel.core.exceptions import ElementNotFound, PageModelFailure
from pagemodel.locator_manager import parse_locator

logger = getLogger(__name__)


class Session:
    """Wraps a Selenium or Appium WebDriver

    Every method that interacts with an element first waits for the
    element to be present, for up to ``settings.timeout`` seconds.

    Each interaction is appended to ``history`` as a tuple of
    (command, locator, args), which makes the sequence of low-level
    interactions behind a user action observable.
    """

    def __init__(self, driver, settings=None):
        self.driver = driver
        self.settings = settings or Settings()
        self.history = []
        self._implicit_wait = self.settings.implicit_wait

    def _record(self, command, locator=None, *args):
        entry = (command, str(locator) if locator is not None else None, args)
        self.history.append(entry)
        logger.debug(f"{command} {entry[1] or ''} {' '.join(map(repr, args))}".strip())

    def find(self, locator, timeout=None):
        """Wait for the element to be present and return it

        Raises ElementNotFound if the element does not appear before
        the timeout expires.
        """
        locator = parse_locator(locator)
        timeout = self.settings.timeout if timeout is None else timeout
        wait = WebDriverWait(
            self.driver, timeout, poll_frequency=self.settings.poll_frequency
        )
        try:
            return wait.until(EC.presence_of_element_located(locator.as_selenium()))
        except TimeoutException:
            raise ElementNotFound(locator=locator, timeout=timeout)

    def find_all(self, locator):
        """Return all elements matching the locator without waiting"""
        locator = parse_locator(locator)
        with self.no_implicit_wait():
            return self.driver.find_elements(*locator.as_selenium())

    def is_present(self, locator):
        """Return True if the element is present right now"""
        locator = parse_locator(locator)
        with self.no_implicit_wait():
            try:
                self.driver.find_element(*locator.as_selenium())
            except NoSuchElementException:
                return False
        return True

    def wait_until_present(self, locator, timeout=None):
        self._record("wait_until_present", parse_locator(locator))
        return self.find(locator, timeout=timeout)

    def wait_until_not_present(self, locator, timeout=None):
        """Wait for the element to go away

        Raises PageModelFailure if it is still present when the
        timeout expires.
        """
        locator = parse_locator(locator)
        timeout = self.settings.timeout if timeout is None else timeout
        self._record("wait_until_not_present", locator)
        wait = WebDriverWait(
            self.driver, timeout, poll_frequency=self.settings.poll_frequency
        )
        with self.no_implicit_wait():
            try:
                wait.until_not(EC.presence_of_element_located(locator.as_selenium()))
            except TimeoutException:
                raise PageModelFailure(
                    f"UI element {locator} was still present after {timeout}s"
                )

    def click(self, locator):
        locator = parse_locator(locator)
        self._record("click", locator)
        self.find(locator).click()

    def type_text(self, locator, text, clear=True):
        locator = parse_locator(locator)
        self._record("type_text", locator, text)
        element = self.find(locator)
        if clear:
            element.clear()
        element.send_keys(text)

    def read_text(self, locator):
        locator = parse_locator(locator)
        self._record("read_text", locator)
        return self.find(locator).text

    def back(self):
        self._record("back")
        self.driver.back()

    def go_to(self, url):
        self._record("go_to", None, url)
        self.driver.get(url)

    @property
    def current_url(self):
        return self.driver.current_url

    @contextmanager
    def no_implicit_wait(self):
        """Context manager for running driver commands without an implicit wait"""
        current_wait = self._implicit_wait
        self.set_implicit_wait(0)
        try:
            yield
        finally:
            self.set_implicit_wait(current_wait)

    def set_implicit_wait(self, seconds):
        """Set the driver's implicit wait and return the previous value"""
        previous = self._implicit_wait
        self.driver.implicitly_wait(seconds)
        self._implicit_wait = seconds
        return previous

    def capture_screenshot(self, name=None):
        """Save a screenshot under the configured screenshot directory

        Returns the path of the file that was written.
        """
        directory = Path(self.settings.screenshot_dir)
        directory.mkdir(parents=True, exist_ok=True)
        name = re.sub(r"[^\w.-]+", "_", name or "screenshot")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        path = directory / f"{name}-{timestamp}.png"
        self.driver.save_screenshot(str(path))
        logger.info(f"screenshot saved to {path}")
        return path

    def safe_screenshot(self, name=None):
        """Take a screenshot, but log and then ignore errors if the screenshot fails"""
        try:
            return self.capture_screenshot(name)
        except Exception as e:
            logger.warning(f"unable to capture screenshot: {e}")

    def quit(self):
        logger.debug("quitting session")
        self.driver.quit()


def open_session(settings):
    """Open a remote session using the remote_url and capabilities from settings"""
    options = ArgOptions()
    for key, value in settings.capabilities.items():
        options.set_capability(key, value)
    logger.info(f"opening remote session at {settings.remote_url}")
    driver = webdriver.Remote(command_executor=settings.remote_url, options=options)
    session = Session(driver, settings)
    if settings.implicit_wait:
        session.set_implicit_wait(settings.implicit_wait)
    return session
