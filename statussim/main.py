"""Status Simulator - Main Entry Point."""

import sys
from . import config
from .adapters import (
    AlertAdapter,
    FileAdapter,
    MessageBirdAdapter,
    StdoutAdapter,
    TelegramBotAdapter,
)
from .errors import ConfigError
from .handlers import ROUTE_HANDLERS
from .interfaces import IMessagingProvider
from .log_dispatcher import LEVELS_ALL, LEVELS_SEVERE, LogDispatcher
from .server import make_server


def build_messaging(
    transport: str, api_key: str, originator: str, telegram_token: str
) -> IMessagingProvider | None:
    """Select alert transport, None when no credential is set."""
    if transport == "messagebird":
        return MessageBirdAdapter(api_key, originator) if api_key else None
    if transport == "telegram":
        return TelegramBotAdapter(telegram_token) if telegram_token else None
    raise ConfigError(f"unknown alert transport: {transport!r}")


def build_dispatcher(
    log_path: str,
    messaging: IMessagingProvider | None,
    recipients: tuple[str, ...]
) -> LogDispatcher:
    """Mount log destinations (console, file, alert)."""
    destinations = [(StdoutAdapter(), LEVELS_ALL)]
    problems = []

    try:
        destinations.append((FileAdapter(log_path), LEVELS_ALL))
    except OSError as e:
        print(f"ERROR: cannot open log file {log_path}: {e}", file=sys.stderr)
        problems.append(("error", f"File logging disabled: {e}"))

    if messaging is not None and recipients:
        destinations.append(
            (AlertAdapter(messaging, recipients), LEVELS_SEVERE)
        )
    else:
        problems.append(
            ("warning", "Alerts disabled: no transport credential or recipients")
        )

    dispatcher = LogDispatcher(destinations)
    for level, message in problems:
        dispatcher.log(level, message)
    for dest, _ in dispatcher.destinations:
        dispatcher.log("info", f"Registered log destination: {type(dest).__name__}")
    return dispatcher


def build_routes(logger: LogDispatcher) -> dict:
    """Instantiate route handlers (table-driven)."""
    return {
        prefix: handler_class(logger)
        for prefix, handler_class in ROUTE_HANDLERS.items()
    }


def main() -> None:
    """Main server initialization."""
    # Validate config (early return)
    try:
        port = config.parse_port(config.SIMULATOR_PORT)
        messaging = build_messaging(
            config.ALERT_TRANSPORT,
            config.MESSAGEBIRD_API_KEY,
            config.ALERT_ORIGINATOR,
            config.TELEGRAM_TOKEN,
        )
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    logger = build_dispatcher(config.LOG_PATH, messaging, config.ALERT_RECIPIENTS)

    try:
        server = make_server(config.SIMULATOR_HOST, port, build_routes(logger))
    except OSError as e:
        logger.log("fatal", f"Failed to bind :{port}: {e}")
        logger.close()
        sys.exit(1)

    logger.log("info", f"Serving on:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.log("info", "Shutting down")
    finally:
        server.server_close()
        logger.close()


if __name__ == "__main__":
    main()
