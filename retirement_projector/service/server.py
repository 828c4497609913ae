"""WebSocket endpoint serving retirement projections.

Each connection is handled by its own task with its own return sampler, so
nothing is shared between clients except the read-only lookup tables.
Within a connection messages are processed one at a time: a request is
projected in full and answered before the next frame is read.
"""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Optional

from websockets.asyncio.server import ServerConnection, serve as ws_serve
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK
from websockets.http11 import Request, Response

from ..calculators.projection import ProjectionOptions, project
from ..calculators.returns import ReturnSampler, make_sampler
from ..config import ServiceConfig
from .codec import RequestError, decode_request, encode_error, encode_result

logger = logging.getLogger(__name__)


def handle_message(text: str, sampler: ReturnSampler, options: Optional[ProjectionOptions] = None) -> Optional[str]:
    """Turn one inbound text frame into the reply text, or None when nothing is sent."""
    try:
        request = decode_request(text)
    except RequestError as exc:
        logger.warning("rejecting malformed request: %s", exc.cause)
        return encode_error()

    if not request.is_simulation:
        logger.debug("no simulation for action %r", request.action)
        return None

    result = project(request, sampler, options)
    logger.debug("projected %d years for age %d", len(result), request.age)
    return encode_result(result)


class ProjectionServer:
    def __init__(self, config: Optional[ServiceConfig] = None):
        self.config = config or ServiceConfig()

    def _new_sampler(self) -> ReturnSampler:
        return make_sampler(self.config.sampler_policy, seed=self.config.seed)

    def _check_path(self, connection: ServerConnection, request: Request) -> Optional[Response]:
        if request.path != self.config.path:
            logger.info("refusing upgrade on %s", request.path)
            return connection.respond(HTTPStatus.NOT_FOUND, "Not Found\n")
        return None

    async def handle_connection(self, websocket: ServerConnection) -> None:
        peer = websocket.remote_address
        logger.info("new connection from %s", peer)
        sampler = self._new_sampler()
        try:
            async for message in websocket:
                if isinstance(message, bytes):
                    logger.debug("ignoring binary frame from %s", peer)
                    continue
                logger.debug("received from %s: %s", peer, message)
                reply = handle_message(message, sampler, self.config.projection)
                if reply is not None:
                    await websocket.send(reply)
        except ConnectionClosedOK:
            logger.info("client %s disconnected", peer)
        except ConnectionClosedError as exc:
            logger.error("connection from %s failed: %s", peer, exc)
        else:
            logger.info("client %s disconnected", peer)

    def start(self):
        """Bind the listening socket; use as ``async with server.start() as ws_server``."""
        return ws_serve(
            self.handle_connection,
            self.config.host,
            self.config.port,
            process_request=self._check_path,
        )

    async def serve_forever(self) -> None:
        async with self.start() as ws_server:
            logger.info("projection server running on %s", self.config.url)
            await ws_server.serve_forever()


async def serve(config: Optional[ServiceConfig] = None) -> None:
    await ProjectionServer(config).serve_forever()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("shutting down")


__all__ = ["handle_message", "ProjectionServer", "serve", "main"]
