"""Hit Counting Middleware — ASGI wrapper that counts requests to a wrapped app.

Invariants:
    - Each HTTP request increments the counter exactly once
    - The increment happens before the wrapped app runs, whatever its outcome
    - Non-HTTP scopes (lifespan, websocket) pass through uncounted
"""

from starlette.types import ASGIApp, Receive, Scope, Send

from chirpy.core.hit_counter import HitCounter


class HitCountingMiddleware:
    """Wrap an ASGI app (the static file server) and count its hits."""

    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)
