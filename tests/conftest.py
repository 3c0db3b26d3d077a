import httpx
import pytest

from swift_sdk import Session, SwiftClient

STORAGE_URL = "https://storage.example/v1/AUTH_test"
TOKEN = "tk-123"

class RecordingTransport(httpx.MockTransport):
    """Mock transport that records requests and replies with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.response_headers = {}
        self.response_content = b""
        self.error = None
        super().__init__(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            headers=self.response_headers,
            content=self.response_content,
        )

    @property
    def last(self):
        return self.requests[-1]

@pytest.fixture
def transport():
    return RecordingTransport()

@pytest.fixture
def session():
    return Session(storage_url=STORAGE_URL, auth_token=TOKEN)

@pytest.fixture
def client(session, transport):
    http_client = httpx.Client(transport=transport)
    client = SwiftClient(session, http_client=http_client)
    yield client
    http_client.close()
