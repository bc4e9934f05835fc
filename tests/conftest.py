import pytest


@pytest.fixture
def base_path() -> str:
    """An absolute POSIX base path shared by the conversion tests."""
    return "/node/site"


@pytest.fixture
def drive_base_path() -> str:
    """The same base path anchored at a Windows drive, written with back-slashes."""
    return "C:\\node\\site"
