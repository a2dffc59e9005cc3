from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from .app import build_application
from .config import BotSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> None:
    """Entry point for launching the Telegram bot."""

    load_dotenv()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper(), format=LOG_FORMAT)
    # httpx logs every request URL at INFO, which would include the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    settings = BotSettings.from_env()
    application = build_application(settings)
    application.run_polling()


def run() -> None:  # pragma: no cover - compatibility alias
    main()
