import pytest
import pytest_asyncio

from tests.mocks import fake_openai
from tests.mocks.factories import make_http_transport


@pytest.fixture
def service_log():
    """Requests received by the fake completion service during the test."""
    fake_openai.received.clear()
    yield fake_openai.received
    fake_openai.received.clear()


@pytest_asyncio.fixture
async def http_transport(service_log):
    transport = make_http_transport()
    yield transport
    await transport.close()
