"""Page objects for a small "message echo" mobile app

The app has a home screen listing its demos. The "Echo Box" demo has
a text field and a save button; the saved message is shown below the
field and is kept when the user navigates away and comes back.

Example:

| po = PageObjects("pagemodel.examples.echo", session=session)
| home = po.wait_for_page_object("Home", "EchoApp")
| echo = home.open_echo_box()
| echo.save_message("Hello")
| assert echo.saved_message() == "Hello"
"""

from pagemodel.pageobjects import BasePage, pageobject
from pagemodel.utils import capture_screenshot_on_error


@pageobject("Home", "EchoApp")
class HomePage(BasePage):
    locators = {
        "page": "accessibility id:homeList",
        "demo_link": "accessibility id:{}",
    }

    @capture_screenshot_on_error
    def open_echo_box(self):
        """Open the Echo Box demo and return its page"""
        self._click("demo_link", "Echo Box")
        page = EchoPage(self.session)
        page._wait_to_appear()
        return page


@pageobject("Echo", "EchoApp")
class EchoPage(BasePage):
    locators = {
        "page": "accessibility id:messageInput",
        "message": {
            "input": "accessibility id:messageInput",
            "save": "accessibility id:messageSaveBtn",
            "saved": "accessibility id:savedMessage",
        },
    }

    @capture_screenshot_on_error
    def save_message(self, text):
        """Enter the text in the message field and save it"""
        self._type("message.input", text)
        self._click("message.save")

    @capture_screenshot_on_error
    def saved_message(self):
        """Return the message currently displayed as saved"""
        return self._read("message.saved")

    def saved_message_should_be(self, expected):
        """Fail unless the saved message is the expected text"""
        actual = self.saved_message()
        if actual != expected:
            raise AssertionError(
                f"Expected saved message to be '{expected}' but it was '{actual}'"
            )

    def go_back(self):
        """Return to the home screen"""
        super().go_back()
        page = HomePage(self.session)
        page._wait_to_appear()
        return page
