import os
import sys
import pytest

# Add the project root directory to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from travel_planner.config import Settings


class StubCompletionClient:
    """Completion client double: records every call and replays a canned reply."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, model_id, prompt):
        self.calls.append((model_id, prompt))
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def last_prompt(self):
        return self.calls[-1][1]


@pytest.fixture(autouse=True)
def setup_test_env():
    """Setup test environment variables"""
    os.environ['GEMINI_API_KEY'] = 'test_gemini_key'

    yield

    # Cleanup after tests
    for var in ['GEMINI_API_KEY', 'PORT']:
        if var in os.environ:
            del os.environ[var]


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test_gemini_key")


@pytest.fixture
def stub_client():
    return StubCompletionClient()
