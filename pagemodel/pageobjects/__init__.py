from .PageObjects import PageObjects, pageobject  # noqa: F401
from .baseobjects import BasePage  # noqa: F401
