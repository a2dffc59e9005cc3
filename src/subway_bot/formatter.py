from __future__ import annotations

from typing import Sequence

from .models import SubwayArrival


def format_arrivals(station_name: str, arrivals: Sequence[SubwayArrival]) -> str:
    """Render a text summary of upcoming trains for Telegram."""

    header = f"Next trains at {station_name}"
    if not arrivals:
        return f"{header}\nNo arrivals reported right now."

    lines = [header]
    for idx, arrival in enumerate(arrivals, start=1):
        lines.append(
            "\n".join(
                [
                    f"{idx}. {_line_label(arrival)} {_direction(arrival)}",
                    _format_timing(arrival),
                    f"Now: {arrival.location_status}",
                ]
                + (["🔴 Last train of the day"] if arrival.is_last_train else [])
            )
        )

    return "\n\n".join(lines)


def _line_label(arrival: SubwayArrival) -> str:
    line = arrival.subway_line
    if line:
        return line.display_name
    return arrival.subway_line_id or "Unknown line"


def _direction(arrival: SubwayArrival) -> str:
    destination = arrival.final_destination_station_name
    parts = [arrival.up_down_line, f"➜ {destination}" if destination else ""]
    if arrival.train_status and arrival.train_status != "일반":
        parts.append(f"({arrival.train_status})")
    return " ".join(part for part in parts if part)


def _format_timing(arrival: SubwayArrival) -> str:
    message = arrival.first_arrival_message
    minutes = arrival.arrival_minutes
    if minutes:
        due = f"Due in {minutes} min"
        return f"{due} ({message})" if message else due
    return message or "Arrival time unavailable"
