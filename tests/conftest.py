import hashlib

import pytest


def make_key(body: str) -> str:
    return body + hashlib.md5(body.encode("utf-8")).hexdigest()[:4]


class FakeTransport:
    def __init__(self, body=b'{"result":"ok"}', exc=None):
        self.body = body
        self.exc = exc
        self.urls = []
        self.closed = False

    def fetch(self, url):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.body

    def close(self):
        self.closed = True


@pytest.fixture
def api_key():
    return make_key("0123456789abcdef0123456789abcdef")


@pytest.fixture
def transport():
    return FakeTransport()
