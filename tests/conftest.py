from types import SimpleNamespace

import pytest


def make_chunk(text):
    """A streamed completion chunk carrying one text delta (None for no text)."""
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


class FakeStream:
    def __init__(self, chunks, error=None):
        self.chunks = chunks
        self.error = error
        self.close_calls = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise self.error

    async def close(self):
        self.close_calls += 1


class FakeCompletions:
    def __init__(self, stream=None, error=None):
        self.stream = stream
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.stream


class FakeClient:
    def __init__(self, completions):
        self.chat = SimpleNamespace(completions=completions)
        self.closed = False

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_client():
    def factory(chunks=(), stream_error=None, create_error=None):
        stream = FakeStream(list(chunks), error=stream_error)
        return FakeClient(FakeCompletions(stream=stream, error=create_error))
    return factory
