"""Dual listener startup: one plaintext and one TLS uvicorn server sharing one app."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import List

import uvicorn

from .config import ConfigError, Settings, load_settings, setup_logging
from .main import app

logger = logging.getLogger(__name__)

IDLE_TIMEOUT = 60


def build_server_configs(settings: Settings) -> List[uvicorn.Config]:
    configs = []
    if settings.tls_enabled:
        configs.append(
            uvicorn.Config(
                app,
                host=settings.host,
                port=settings.https_port,
                ssl_certfile=str(settings.tls_cert_file),
                ssl_keyfile=str(settings.tls_key_file),
                timeout_keep_alive=IDLE_TIMEOUT,
                log_config=None,
            )
        )
    configs.append(
        uvicorn.Config(
            app,
            host=settings.host,
            port=settings.http_port,
            timeout_keep_alive=IDLE_TIMEOUT,
            log_config=None,
        )
    )
    return configs


def describe(config: uvicorn.Config) -> str:
    mode = "with self signed TLS certs" if config.ssl_certfile else "with no TLS"
    return f"{config.host}:{config.port} {mode}"


async def serve(settings: Settings) -> None:
    """Run every configured listener until one of them stops."""
    servers = [uvicorn.Server(config) for config in build_server_configs(settings)]
    tasks = []
    for server in servers:
        logger.info("starting server on %s", describe(server.config))
        tasks.append(asyncio.create_task(server.serve()))

    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    for server in servers:
        server.should_exit = True
    if pending:
        await asyncio.gather(*pending)
    for task in done:
        # Propagate a listener crash instead of exiting cleanly.
        task.result()
    logger.info("all listeners stopped")


def run() -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        setup_logging()
        logger.critical("%s", exc)
        sys.exit(1)

    setup_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
