"""Interactive terminal chat."""

import asyncio
import logging

import structlog

from .assistant.plugins import create_default_registry
from .chat.engine import ChatEngine
from .chat.history import ConversationStore
from .chat.render import render_message
from .config.settings import Settings, get_settings
from .services.fetch import AiohttpFetcher

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


async def run(settings: Settings) -> None:
    fetcher = AiohttpFetcher(timeout_seconds=settings.http_timeout_seconds)
    registry = create_default_registry(settings, fetcher)
    engine = ChatEngine(registry, ConversationStore(settings.history_path))

    print("Commands: " + ", ".join(engine.available_commands()))
    try:
        while True:
            try:
                text = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            text = text.strip()
            if not text:
                continue
            if text in ("/quit", "/exit"):
                break
            reply = await engine.handle_message(text)
            print(render_message(reply))
    finally:
        await fetcher.close()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting chat", history_path=str(settings.history_path))
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
