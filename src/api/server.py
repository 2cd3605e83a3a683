from __future__ import annotations

import asyncio
from typing import Any, Dict

import uvicorn
from dotenv import find_dotenv, load_dotenv

from core.config import Settings, get_settings
from core.logging import get_logger
from api.app import create_app

logger = get_logger("api.server")


def handle_loop_exception(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    """
    Exception handler del loop: errori asincroni fuori da una richiesta
    (task non attesi, callback) vengono loggati e il processo continua.
    """
    exc = context.get("exception")
    message = context.get("message") or "errore asincrono"
    if exc is not None:
        logger.error("Errore asincrono non gestito: %s: %s", message, exc, exc_info=exc)
    else:
        logger.error("Errore asincrono non gestito: %s", message)


async def serve(settings: Settings) -> None:
    loop = asyncio.get_running_loop()
    loop.set_exception_handler(handle_loop_exception)

    # log uvicorn con lo stesso formatter JSON
    get_logger("uvicorn")
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    server = uvicorn.Server(config)
    logger.info("API proxy avviato sulla porta %s", settings.port)
    await server.serve()


def main() -> None:
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
    settings = get_settings()
    asyncio.run(serve(settings))


# Avvio rapido: python -m api.server
if __name__ == "__main__":
    main()
