"""Hit Counting Middleware — tests for the ASGI wrapper in isolation.

Tests cover:
    - HTTP requests counted before the wrapped app runs
    - Requests counted even when the wrapped app fails
    - Non-HTTP scopes pass through uncounted
"""

import pytest

from chirpy.api.middleware import HitCountingMiddleware
from chirpy.core.hit_counter import HitCounter


async def _receive():
    return {"type": "http.request", "body": b"", "more_body": False}


async def _send(message):
    pass


async def test_counts_http_before_delegating():
    counter = HitCounter()
    seen = []

    async def inner(scope, receive, send):
        seen.append(counter.value())

    await HitCountingMiddleware(inner, counter)({"type": "http"}, _receive, _send)
    assert seen == [1]
    assert counter.value() == 1


async def test_counts_even_when_inner_app_fails():
    counter = HitCounter()

    async def inner(scope, receive, send):
        raise RuntimeError("disk on fire")

    with pytest.raises(RuntimeError):
        await HitCountingMiddleware(inner, counter)({"type": "http"}, _receive, _send)
    assert counter.value() == 1


async def test_ignores_non_http_scopes():
    counter = HitCounter()

    async def inner(scope, receive, send):
        pass

    await HitCountingMiddleware(inner, counter)({"type": "lifespan"}, _receive, _send)
    assert counter.value() == 0
