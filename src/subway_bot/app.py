from __future__ import annotations

from telegram.ext import Application, ApplicationBuilder, CommandHandler

from .commands import arrivals, help_command, start
from .config import BotSettings
from .subway_api import create_subway_client


def build_application(settings: BotSettings) -> Application:
    """Configure the Telegram application with command handlers."""

    subway_client = create_subway_client(settings.api_settings)

    async def _close_client(application: Application) -> None:  # pragma: no cover - lifecycle
        subway_client.close()

    application = (
        ApplicationBuilder()
        .token(settings.telegram_token)
        .post_shutdown(_close_client)
        .build()
    )

    application.bot_data["settings"] = settings
    application.bot_data["subway_client"] = subway_client

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("arrivals", arrivals))

    return application
