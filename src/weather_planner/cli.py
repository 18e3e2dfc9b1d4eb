"""CLI: interactive weather dashboard with an AI day-planning assistant."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from .assistant.conversation import ConversationManager
from .assistant.gemini import GeminiClient
from .config import Settings, load_settings
from .exceptions import ConfigError
from .log_setup import setup_logger
from .ui.controller import ViewController
from .ui.terminal import TerminalView
from .weather.open_meteo import OpenMeteoWeatherProvider
from .weather.service import WeatherService


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse weather planner CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Weather dashboard with AI day-planning advice."
    )
    parser.add_argument("--city", type=str, default=None, help="City to load first.")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print weather and advice for --city and exit instead of starting the dashboard.",
    )
    parser.add_argument(
        "--ask",
        action="append",
        default=[],
        metavar="QUESTION",
        help="Follow-up question for --once mode (repeatable).",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Also print the 14-day history in --once mode.",
    )
    return parser.parse_args(argv)


def build_controller(settings: Settings, logger: logging.Logger) -> ViewController:
    """Wire provider, services and assistant from settings."""
    provider = OpenMeteoWeatherProvider(settings=settings, logger=logger)
    weather = WeatherService(
        provider,
        logger,
        mock_latency_seconds=settings.mock_latency_seconds,
    )
    model_client = GeminiClient(
        api_key=settings.gemini_api_key,
        logger=logger,
        model=settings.gemini_model,
    )
    conversation = ConversationManager(model_client, logger)
    return ViewController(weather, conversation, logger, default_city=settings.default_city)


def handle_command(controller: ViewController, view: TerminalView, line: str) -> bool:
    """Apply one line of dashboard input. Returns False when the user quits."""
    line = line.strip()
    if not line:
        return True
    if line in {"/quit", "/exit"}:
        return False
    if line == "/help":
        view.render_help()
        return True
    if line == "/current":
        controller.select_tab("current")
        view.render_dashboard(controller)
        return True
    if line == "/history":
        with view.console.status("Loading 14-day history..."):
            controller.select_tab("history")
        view.render_dashboard(controller)
        return True
    if line == "/city" or line.startswith("/city "):
        city = line[len("/city"):].strip()
        if not city:
            view.console.print("Usage: /city NAME")
            return True
        with view.console.status("Fetching weather data..."):
            controller.search(city)
        view.render_dashboard(controller)
        return True
    if line.startswith("/"):
        view.console.print(f"Unknown command {line.split()[0]!r}; type /help.")
        return True

    if controller.tab != "current":
        controller.select_tab("current")
    with view.console.status("Thinking..."):
        reply = controller.ask(line)
    turns = controller.conversation.visible_turns
    if reply is not None and turns:
        view.render_reply(turns[-1])
    return True


def _run_once(args: argparse.Namespace, controller: ViewController, view: TerminalView) -> int:
    controller.screen = "dashboard"
    if not controller.search(controller.searched_city):
        view.render_dashboard(controller)
        return 4
    view.render_dashboard(controller)
    for question in args.ask:
        if controller.ask(question) is None:
            continue
        question_turn, reply_turn = controller.conversation.visible_turns[-2:]
        view.render_reply(question_turn)
        view.render_reply(reply_turn)
    if args.history:
        controller.select_tab("history")
        view.render_dashboard(controller)
    return 0


def _run_interactive(controller: ViewController, view: TerminalView) -> int:
    console = view.console
    view.render_landing()
    console.input("Press Enter to get started ")
    controller.get_started()
    view.render_sign_in()
    console.input("Press Enter to sign in ")
    with console.status("Fetching weather data..."):
        controller.sign_in()
    view.render_dashboard(controller)
    view.render_help()

    while True:
        line = console.input("[bold yellow]>[/bold yellow] ")
        if not handle_command(controller, view, line):
            return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the weather planner."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    logger = setup_logger(level=settings.log_level)
    logger.info("Starting weather planner: %s", settings.safe_summary())
    controller = build_controller(settings, logger)
    if args.city:
        controller.searched_city = args.city

    view = TerminalView(console=console)
    view.attach_logger(logger)
    try:
        if args.once:
            return _run_once(args, controller, view)
        return _run_interactive(controller, view)
    except (EOFError, KeyboardInterrupt):
        return 0
    except Exception as exc:  # pragma: no cover - unexpected runtime failure
        view.detach_logger()
        logger.exception("Unexpected weather planner failure: %s", exc)
        return 99
    finally:
        view.detach_logger()
        controller.weather.close()


if __name__ == "__main__":
    sys.exit(main())
