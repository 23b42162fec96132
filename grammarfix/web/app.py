"""Gradio front end: a login view and a grammar check view.

Which view is visible is decided once per page load by the session guard.
"""

from typing import Iterator

import gradio as gr

from grammarfix.config import AppConfig
from grammarfix.errors import ValidationError
from grammarfix.features.suggestions import SuggestionProvider
from grammarfix.models import Segment
from grammarfix.scenarios.auth import login, logout
from grammarfix.scenarios.check import CheckScreen, CheckState, Notice
from grammarfix.session import HOME, SessionStore, route
from grammarfix.session.guard import Destination
from grammarfix.util.logs import get_logger

logger = get_logger(__name__)

MISTAKE_LABEL = "mistake"
CHECK_LABEL = "Check Grammar"
CHECKING_LABEL = "Checking..."


def to_highlights(segments: tuple[Segment, ...] | list[Segment]) -> list[tuple[str, str | None]]:
    """Convert segments to `gr.HighlightedText` values."""
    return [(s.text, MISTAKE_LABEL if s.is_mistake else None) for s in segments]


def show_notice(notice: Notice | None) -> None:
    if notice is not None:
        gr.Warning(f"{notice.title}: {notice.message}")


class GrammarFixApp:
    """Event handlers of the web UI, bound to one store and provider."""

    def __init__(
        self,
        store: SessionStore,
        provider: SuggestionProvider,
        match_phrases: bool = False,
    ):
        self.store = store
        self.provider = provider
        self.match_phrases = match_phrases

    @staticmethod
    def show_view(destination: Destination) -> tuple[dict, dict]:
        """Visibility updates for the (login, home) columns."""
        at_home = destination == HOME
        return gr.update(visible=not at_home), gr.update(visible=at_home)

    def on_load(self) -> tuple[dict, dict]:
        return self.show_view(route(self.store))

    def on_login(self, username: str, password: str) -> tuple[dict, dict]:
        try:
            destination = login(self.store, username or "", password or "")
        except ValidationError as e:
            show_notice(Notice.from_error(e))
            return self.show_view(route(self.store))
        return self.show_view(destination)

    def on_logout(self) -> tuple[dict, dict, CheckState, list]:
        login_view, home_view = self.show_view(logout(self.store))
        return login_view, home_view, CheckState(), []

    def render(self, state: CheckState) -> tuple[CheckState, list, dict, dict]:
        """UI values for `state`: (state, highlighted output, input box, button)."""
        if state.segments:
            highlighted = to_highlights(state.segments)
        elif state.input_text:
            highlighted = [(state.input_text, None)]
        else:
            highlighted = []
        button = gr.update(
            value=CHECKING_LABEL if state.busy else CHECK_LABEL,
            interactive=not state.busy,
        )
        return state, highlighted, gr.update(value=state.input_text), button

    def on_check(
        self, text: str, state: CheckState | None
    ) -> Iterator[tuple[CheckState, list, dict, dict]]:
        screen = CheckScreen(self.provider, state=state, match_phrases=self.match_phrases)
        for new_state in screen.run_check(text or ""):
            show_notice(new_state.notice)
            yield self.render(new_state)


def build_demo(config: AppConfig) -> gr.Blocks:
    """Create the Gradio Blocks app for `config`."""
    app = GrammarFixApp(
        store=SessionStore(config.session_file),
        provider=SuggestionProvider(api_key=config.openai_api_key, model=config.model),
        match_phrases=config.match_phrases,
    )

    with gr.Blocks(title="GrammarFix") as demo:
        state = gr.State(value=CheckState())

        with gr.Column(visible=False) as login_view:
            gr.Markdown("# GrammarFix App")
            username = gr.Textbox(label="Username", placeholder="Username")
            password = gr.Textbox(label="Password", placeholder="Password", type="password")
            login_button = gr.Button("Login", variant="primary")

        with gr.Column(visible=False) as home_view:
            with gr.Row():
                gr.Markdown("# GrammarFix")
                logout_button = gr.Button("Logout", variant="stop", size="sm")
            output = gr.HighlightedText(
                label="Live Output",
                color_map={MISTAKE_LABEL: "red"},
                show_legend=False,
                combine_adjacent=False,
            )
            input_text = gr.Textbox(
                label="Enter Text", placeholder="Type something...", lines=4
            )
            check_button = gr.Button(CHECK_LABEL, variant="primary")

        demo.load(app.on_load, None, [login_view, home_view])
        login_button.click(app.on_login, [username, password], [login_view, home_view])
        logout_button.click(app.on_logout, None, [login_view, home_view, state, output])
        check_button.click(
            app.on_check,
            [input_text, state],
            [state, output, input_text, check_button],
            concurrency_limit=1,
        )

    return demo


def run_web(config: AppConfig, host: str = "127.0.0.1", port: int = 7860, share: bool = False):
    """Serve the web UI until interrupted."""
    logger.info(f"Starting web UI on http://{host}:{port}")
    build_demo(config).launch(server_name=host, server_port=port, share=share)
