import logging

import pytest

from unlock_keyring.backend import KeyringBackend


class FakeBackend(KeyringBackend):
    """Returns a fixed code and counts how often it was asked."""

    def __init__(self, code) -> None:
        self.code = code
        self.calls = 0

    def unlock_default_collection(self):
        self.calls += 1
        return self.code


@pytest.fixture
def fake_backend():
    return FakeBackend


@pytest.fixture(autouse=True)
def reset_package_logger():
    package_logger = logging.getLogger("unlock_keyring")
    handlers, level = package_logger.handlers[:], package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
