import os

import pytest
from pytest import fixture

from pagemodel.core.config import Settings
from pagemodel.pageobjects import PageObjects
from pagemodel.session import Session
from pagemodel.tests.util import FakeDriver

# importing the module registers its page objects
import pagemodel.examples.echo  # noqa: F401


@fixture(scope="class", autouse=True)
def restore_cwd():
    d = os.getcwd()
    try:
        yield
    finally:
        os.chdir(d)


@fixture
def settings(tmp_path):
    """Settings with short waits, so that missing elements fail fast"""
    return Settings(
        timeout=0.2, poll_frequency=0.01, screenshot_dir=tmp_path / "screenshots"
    )


@fixture
def fake_driver():
    return FakeDriver()


@fixture
def session(fake_driver, settings):
    return Session(fake_driver, settings)


@fixture
def page_objects(session):
    return PageObjects(session=session)


@pytest.fixture
def empty_registry():
    """Run a test with an empty page object registry, restoring it afterwards"""
    saved_registry = PageObjects.registry
    PageObjects.registry = {}
    try:
        yield PageObjects.registry
    finally:
        PageObjects.registry = saved_registry
