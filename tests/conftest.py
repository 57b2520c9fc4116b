import pytest

from tests.helpers import SleepRecorder, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def sleeper():
    return SleepRecorder()
