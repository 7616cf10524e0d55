import os
import tempfile

os.environ.setdefault("LOG_LOCATION", tempfile.mkdtemp(prefix="streamcat-logs-"))

import httpx
import pytest

ORIGIN = "http://origin.test"


class CountingStream(httpx.SyncByteStream):
    """Response body that remembers how many times it was closed."""

    def __init__(self, chunks):
        self.chunks = chunks
        self.close_count = 0

    def __iter__(self):
        yield from self.chunks

    def close(self):
        self.close_count += 1


class FakeOrigin:
    """Serves canned bodies through httpx.MockTransport.

    Paths that were never served behave like an unreachable host.
    """

    def __init__(self):
        self.routes = {}
        self.streams = []
        self.requested = []

    def serve(self, path, body, status_code=200, headers=None, chunk_size=None):
        self.routes[path] = (status_code, body, headers or {}, chunk_size)
        return ORIGIN + path

    def handler(self, request):
        self.requested.append(request.url.path)
        if request.url.path not in self.routes:
            raise httpx.ConnectError("Name or service not known", request=request)
        status_code, body, headers, chunk_size = self.routes[request.url.path]
        chunk_size = chunk_size or max(len(body), 1)
        stream = CountingStream([body[i:i + chunk_size] for i in range(0, len(body), chunk_size)])
        self.streams.append(stream)
        return httpx.Response(status_code, headers=headers, stream=stream)

    def client(self):
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def origin():
    return FakeOrigin()


@pytest.fixture
def client(origin):
    with origin.client() as c:
        yield c


def make_body(size):
    return bytes(i % 251 for i in range(size))
