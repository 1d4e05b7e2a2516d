"""Entry point: ``python -m notify_relay`` / ``notify-relay``."""
from __future__ import annotations

import sys

import uvicorn

from notify_relay.adapters.fastapi import create_app
from notify_relay.config import ConfigError, DotenvSettingsLoader, RelaySettings, SettingsFactory
from notify_relay.observability.logging import LoggerFactory, get_logger


def main(env_file: str = ".env") -> int:
    try:
        settings = SettingsFactory.create(RelaySettings, loaders=[DotenvSettingsLoader(env_file)])
    except ConfigError as exc:
        LoggerFactory.configure()
        get_logger(__name__).error("config.invalid", error=exc.message, **exc.detail)
        return 2

    LoggerFactory.configure(settings.log_level_value, json=settings.log_json)
    get_logger(__name__).info("relay.listening", host=settings.host, port=settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
