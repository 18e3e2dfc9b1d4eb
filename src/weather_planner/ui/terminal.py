"""Rich-rendered terminal screens for the weather planner."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..assistant.models import ConversationTurn
from ..assistant.rendering import MessageBlock, parse_message
from ..redaction import sanitize_text
from ..weather.models import DataSource, HistoricalDay, WeatherSnapshot
from .controller import ViewController

CONDITION_ICONS = {
    "Clear": "☀",
    "Partly cloudy": "⛅",
    "Cloudy": "☁",
    "Rainy": "🌧",
    "Snowy": "❄",
    "Thunderstorm": "⛈",
}

HELP_TEXT = (
    "/city NAME  search another city    /current  current weather\n"
    "/history    14-day history         /help     show this help\n"
    "/quit       exit                   anything else is a question for the assistant"
)


class _NoticeLogHandler(logging.Handler):
    """Route warning log records into the view's notice panel."""

    def __init__(self, view: TerminalView) -> None:
        super().__init__(level=logging.WARNING)
        self.view = view

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.view.record_notice(sanitize_text(record.getMessage()))
        except Exception:
            self.handleError(record)


class TerminalView:
    """Renders landing, sign-in and dashboard screens to a rich console."""

    def __init__(self, *, console: Console, max_notices: int = 5) -> None:
        self.console = console
        self.notices: deque[str] = deque(maxlen=max_notices)
        self._logger: logging.Logger | None = None
        self._original_handlers: list[logging.Handler] = []

    def attach_logger(self, logger: logging.Logger) -> None:
        """Replace the JSON console handler with the notice feed."""
        self._logger = logger
        self._original_handlers = list(logger.handlers)
        logger.handlers = [_NoticeLogHandler(self)]

    def detach_logger(self) -> None:
        """Restore original logger handlers."""
        if self._logger is None:
            return
        self._logger.handlers = self._original_handlers
        self._logger = None
        self._original_handlers = []

    def record_notice(self, message: str) -> None:
        self.notices.append(message)

    def render_landing(self) -> None:
        body = Group(
            Align.center(Text("AI Weather Planner", style="bold yellow")),
            Align.center(
                Text(
                    "Get hyper-personalized weather forecasts and AI-powered advice "
                    "to perfectly plan your day.",
                    style="white",
                )
            ),
        )
        self.console.print(Panel(body, border_style="yellow", padding=(1, 4)))

    def render_sign_in(self) -> None:
        self.console.print(
            Panel(
                Align.center(Text("Sign in to access your weather dashboard.")),
                title="Sign In",
                border_style="white",
                padding=(1, 4),
            )
        )

    def render_help(self) -> None:
        self.console.print(Panel(HELP_TEXT, title="Commands", border_style="dim"))

    def render_dashboard(self, controller: ViewController) -> None:
        self.console.print(self._build_tab_bar(controller))
        if controller.error:
            self.console.print(Text(controller.error, style="red"))

        if controller.tab == "current":
            if controller.snapshot is not None:
                self.console.print(
                    self.build_weather_card(controller.snapshot, controller.snapshot_source)
                )
                self.console.print(
                    self.build_conversation_panel(controller.conversation.visible_turns)
                )
        elif controller.history is not None:
            self.console.print(
                self.build_history_table(
                    controller.history,
                    city=controller.history_city or controller.searched_city,
                    source=controller.history_source,
                )
            )

        if self.notices:
            self.console.print(
                Panel("\n".join(self.notices), title="Notices", border_style="yellow")
            )
            self.notices.clear()

    def render_reply(self, turn: ConversationTurn) -> None:
        self.console.print(self._build_turn(turn))

    def build_weather_card(
        self, snapshot: WeatherSnapshot, source: DataSource | None = None
    ) -> Panel:
        icon = CONDITION_ICONS.get(snapshot.condition, "☁")
        headline = Text()
        headline.append(f"{snapshot.temperature}°", style="bold white")
        headline.append(f"  {icon} {snapshot.condition}", style="yellow")

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(justify="right")
        table.add_column(style="bold")
        table.add_column(justify="right")
        table.add_row("Feels Like", f"{snapshot.feels_like} °C", "Humidity", f"{snapshot.humidity} %")
        table.add_row("Wind Speed", f"{snapshot.wind_speed} km/h", "Pressure", f"{snapshot.pressure} hPa")
        table.add_row("Sunrise", snapshot.sunrise, "Sunset", snapshot.sunset)
        table.add_row("Visibility", f"{snapshot.visibility} km", "UV Index", str(snapshot.uv_index))

        title = snapshot.city
        subtitle = "simulated data" if source == "mock" else None
        return Panel(
            Group(headline, table),
            title=title,
            subtitle=subtitle,
            border_style="cyan",
        )

    def build_history_table(
        self,
        days: Sequence[HistoricalDay],
        *,
        city: str,
        source: DataSource | None = None,
    ) -> Table:
        caption = "simulated data" if source == "mock" else None
        table = Table(title=f"14-Day History for {city}", caption=caption, header_style="bold")
        table.add_column("Day")
        table.add_column("Date")
        table.add_column("Condition")
        table.add_column("Max", justify="right")
        table.add_column("Min", justify="right")
        for day in days:
            icon = CONDITION_ICONS.get(day.condition, "☁")
            table.add_row(
                day.day_of_week,
                day.date,
                f"{icon} {day.condition}",
                f"{day.temp_max}°",
                f"{day.temp_min}°",
            )
        return table

    def build_conversation_panel(self, turns: Sequence[ConversationTurn]) -> Panel:
        if turns:
            body: RenderableType = Group(*(self._build_turn(turn) for turn in turns))
        else:
            body = Text("No advice yet.", style="dim")
        return Panel(body, title="AI Daily Planner", border_style="yellow")

    def _build_turn(self, turn: ConversationTurn) -> RenderableType:
        if turn.role == "user":
            return Align.right(Text(turn.text, style="bold black on yellow"))
        return message_text(parse_message(turn.text))

    def _build_tab_bar(self, controller: ViewController) -> Text:
        text = Text()
        for tab, label in (("current", "Current Weather"), ("history", "14-Day History")):
            style = "bold black on yellow" if controller.tab == tab else "white"
            text.append(f" {label} ", style=style)
            text.append("  ")
        text.append(f"city={controller.searched_city}", style="dim")
        return text


def message_text(blocks: Sequence[MessageBlock]) -> Text:
    """Style parsed reply blocks; bold spans become bold, list items get a marker."""
    text = Text()
    for index, block in enumerate(blocks):
        if index:
            text.append("\n")
        if block.kind == "list_item":
            text.append(f"  {block.marker} ", style="yellow")
        for span in block.spans:
            text.append(span.text, style="bold" if span.bold else None)
    return text
