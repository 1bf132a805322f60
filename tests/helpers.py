"""Fake Quay API used by the tests."""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict

API_PREFIX = "/api/v1"


@dataclass
class RecordedRequest:
    """A request received by the fake server."""

    method: str
    path: str
    query: dict[str, str]
    headers: CIMultiDict[str]


@dataclass
class ScriptedResponse:
    status: int
    body: Any = None
    raw: bytes | None = None
    delay: float = 0.0


@dataclass
class FakeQuay:
    """In-process Quay API that serves scripted responses.

    Responses are keyed by ``(method, path)`` where ``path`` is relative to
    the API prefix, e.g. ``("DELETE", "/repository/org/app")``. Unscripted
    requests get a 404 with a Quay-style error body.
    """

    responses: dict[tuple[str, str], ScriptedResponse] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def script(
        self,
        method: str,
        path: str,
        status: int,
        body: Any = None,
        raw: bytes | None = None,
        delay: float = 0.0,
    ) -> None:
        self.responses[(method, path)] = ScriptedResponse(status, body, raw, delay)

    async def handle(self, request: web.Request) -> web.Response:
        path = request.path[len(API_PREFIX) :]
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=dict(request.query),
                headers=request.headers.copy(),
            )
        )

        scripted = self.responses.get((request.method, path))
        if scripted is None:
            return web.json_response(
                {"error_message": "Not Found", "status": 404}, status=404
            )

        if scripted.delay:
            await asyncio.sleep(scripted.delay)
        if scripted.raw is not None:
            return web.Response(status=scripted.status, body=scripted.raw)
        if scripted.body is None:
            return web.Response(status=scripted.status)
        return web.Response(
            status=scripted.status,
            body=json.dumps(scripted.body).encode("utf-8"),
            content_type="application/json",
        )

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", API_PREFIX + "/{tail:.*}", self.handle)
        return app


async def start_fake_quay(fake: FakeQuay) -> tuple[TestServer, str]:
    """Start a server for ``fake`` and return it with its API base URL."""
    server = TestServer(fake.make_app())
    await server.start_server()
    return server, str(server.make_url(API_PREFIX))
