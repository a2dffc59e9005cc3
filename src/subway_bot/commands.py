from __future__ import annotations

import asyncio
import logging

from telegram import Update
from telegram.ext import ContextTypes

from .config import BotSettings
from .errors import InvalidArgument, SubwayApiError
from .formatter import format_arrivals
from .subway_api import SubwayClient

logger = logging.getLogger(__name__)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send greeting and usage basics."""

    message = (
        "👋 Hi! Send /arrivals followed by a Seoul subway station name, e.g.\n"
        "/arrivals 강남\n\n"
        "Use /help for more examples."
    )
    await update.message.reply_text(message)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = (
        "Usage:\n"
        "  /arrivals <station name>\n\n"
        "Station names are the Korean names used by Seoul Open Data, without 역.\n"
        "Examples:\n"
        "  /arrivals 강남\n"
        "  /arrivals 서울\n"
        "  /arrivals 공릉(서울산업대입구)"
    )
    await update.message.reply_text(message)


async def arrivals(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle the /arrivals command to list upcoming trains at a station."""

    station_name = " ".join(context.args) if context.args else ""
    if not station_name:
        await update.message.reply_text("Please supply a station name, e.g. /arrivals 강남")
        return

    settings = _settings(context)
    client = _client(context)

    try:
        results = await asyncio.to_thread(
            client.get_realtime_arrival,
            station_name,
            0,
            settings.default_result_limit,
        )
    except InvalidArgument as exc:
        await update.message.reply_text(str(exc))
        return
    except SubwayApiError as exc:
        logger.warning("Arrival lookup for '%s' failed: %s", station_name, exc)
        await update.message.reply_text(f"Couldn't fetch arrivals for {station_name}: {exc}")
        return

    await update.message.reply_text(format_arrivals(station_name, results))


def _settings(context: ContextTypes.DEFAULT_TYPE) -> BotSettings:
    return context.application.bot_data["settings"]


def _client(context: ContextTypes.DEFAULT_TYPE) -> SubwayClient:
    return context.application.bot_data["subway_client"]
