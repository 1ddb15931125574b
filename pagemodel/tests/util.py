from selenium.common.exceptions import NoSuchElementException

HOME = "home"
ECHO = "echo"


class FakeElement:
    def __init__(self, driver, key):
        self._driver = driver
        self._key = key

    def click(self):
        self._driver._click(self._key)

    def clear(self):
        self._driver._clear(self._key)

    def send_keys(self, text):
        self._driver._send_keys(self._key, text)

    @property
    def text(self):
        return self._driver._text(self._key)


class FakeDriver:
    """A stand-in for an Appium driver running the message echo app

    Only the 'accessibility id' strategy is understood. The saved
    message lives in the app, so it survives navigating away from
    the echo screen; the text typed into the field does not.
    """

    def __init__(self):
        self.screens = [HOME]
        self.typed = ""
        self.saved = None
        self.calls = []
        self.implicit_waits = []
        self.screenshots = []
        self.current_url = "app://home"
        self.quit_called = False

    @property
    def screen(self):
        return self.screens[-1]

    def _visible_ids(self):
        if self.screen == HOME:
            return {"homeList", "Echo Box", "Login Screen"}
        ids = {"messageInput", "messageSaveBtn"}
        if self.saved:
            ids.add("savedMessage")
        return ids

    def find_element(self, by="id", value=None):
        self.calls.append(("find_element", by, value))
        if by == "accessibility id" and value in self._visible_ids():
            return FakeElement(self, value)
        raise NoSuchElementException(f"no element {by}={value}")

    def find_elements(self, by="id", value=None):
        try:
            return [self.find_element(by, value)]
        except NoSuchElementException:
            return []

    def _click(self, key):
        self.calls.append(("click", key))
        if key == "Echo Box":
            self.screens.append(ECHO)
            self.current_url = "app://echo"
        elif key == "messageSaveBtn":
            self.saved = self.typed

    def _clear(self, key):
        self.calls.append(("clear", key))
        if key == "messageInput":
            self.typed = ""

    def _send_keys(self, key, text):
        self.calls.append(("send_keys", key, text))
        if key == "messageInput":
            self.typed += text

    def _text(self, key):
        self.calls.append(("text", key))
        if key == "savedMessage":
            return self.saved
        if key == "messageInput":
            return self.typed
        return key

    def back(self):
        self.calls.append(("back",))
        if len(self.screens) > 1:
            self.screens.pop()
            self.typed = ""
        self.current_url = f"app://{self.screen}"

    def get(self, url):
        self.calls.append(("get", url))
        self.current_url = url

    def implicitly_wait(self, seconds):
        self.implicit_waits.append(seconds)

    def save_screenshot(self, filename):
        self.screenshots.append(filename)
        with open(filename, "wb") as f:
            f.write(b"\x89PNG\r\n\x1a\n")
        return True

    def quit(self):
        self.quit_called = True
