"""Command-line interface for GrammarFix."""

import argparse
import getpass
import sys

from grammarfix.alignment import render_markup
from grammarfix.config import AppConfig
from grammarfix.errors import GrammarFixError
from grammarfix.features.suggestions import SuggestionProvider
from grammarfix.scenarios.auth import login, logout
from grammarfix.scenarios.check import CheckScreen
from grammarfix.session import LOGIN, SessionStore, route
from grammarfix.util.logs import setup_logging

RED = "\033[1;31m"
RESET = "\033[0m"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grammarfix",
        description="GrammarFix - highlight grammar mistakes with an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m grammarfix login alice
  python -m grammarfix check "He go home."
  python -m grammarfix web --port 7860
        """,
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON configuration file (default: environment / .env).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from configuration, INFO).",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    login_parser = subparsers.add_parser("login", help="Log in locally")
    login_parser.add_argument("username", help="User name to remember")
    login_parser.add_argument(
        "--password",
        type=str,
        help="Password (prompted for if omitted; never stored).",
    )

    subparsers.add_parser("logout", help="Forget the logged-in user")
    subparsers.add_parser("whoami", help="Show the logged-in user")

    check_parser = subparsers.add_parser("check", help="Check the grammar of a text")
    check_parser.add_argument("text", nargs="+", help="Text to check")
    check_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Mark mistakes with [brackets] instead of color.",
    )

    web_parser = subparsers.add_parser("web", help="Start the web UI")
    web_parser.add_argument("--host", default="127.0.0.1", help="Host to bind.")
    web_parser.add_argument("--port", type=int, default=7860, help="Port to bind.")
    web_parser.add_argument(
        "--share", action="store_true", help="Create a public Gradio link."
    )

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        parser.exit(1)
    return args


def cmd_check(args: argparse.Namespace, config: AppConfig, store: SessionStore) -> int:
    if route(store) == LOGIN:
        print("Not logged in. Run `python -m grammarfix login USERNAME` first.")
        return 1

    screen = CheckScreen(
        SuggestionProvider(api_key=config.openai_api_key, model=config.model),
        match_phrases=config.match_phrases,
    )
    state = screen.check(" ".join(args.text))
    if state.notice is not None:
        print(f"{state.notice.title}: {state.notice.message}", file=sys.stderr)
        return 1

    if args.no_color or not sys.stdout.isatty():
        print(render_markup(state.segments))
    else:
        print(render_markup(state.segments, start=RED, end=RESET))
    for correction in state.corrections:
        print(f"  {correction.word} -> {correction.suggestion}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = AppConfig.load(args.config)
    except GrammarFixError as e:
        print(f"{e.title}: {e}", file=sys.stderr)
        return 1
    setup_logging(level=args.log_level or config.log_level)
    store = SessionStore(config.session_file)

    try:
        if args.command == "login":
            password = args.password
            if password is None:
                password = getpass.getpass("Password: ")
            login(store, args.username, password)
            print(f"Logged in as {args.username}")
        elif args.command == "logout":
            logout(store)
            print("Logged out")
        elif args.command == "whoami":
            user = store.current_user()
            print(user if user else "Not logged in")
        elif args.command == "check":
            return cmd_check(args, config, store)
        elif args.command == "web":
            from grammarfix.web.app import run_web

            run_web(config, host=args.host, port=args.port, share=args.share)
    except GrammarFixError as e:
        print(f"{e.title}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
