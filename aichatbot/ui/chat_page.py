"""NiceGUI chat interface with a simulated typing effect."""

from collections.abc import Callable

from nicegui import ui

from aichatbot.chat.conversation import Message, Sender
from aichatbot.chat.display import TICK_INTERVAL, ResponseDisplayController
from aichatbot.chat.relay_client import RelayClient
from aichatbot.chat.state import SessionState
from aichatbot.chat.submission import SubmissionFlow
from aichatbot.ui.markdown import markdown_to_html, render

CURSOR_HTML = '<span class="typing-cursor"></span>'

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #27272a; color: white; min-height: 100vh; }

    .header { background: #27272a; border-bottom: 1px solid #3f3f46; }

    .message-user, .message-ai {
        background: #18181b;
        color: #f4f4f5;
        border-radius: 0.5rem;
        word-break: break-word;
    }
    .message-user { border-bottom-right-radius: 0; }
    .message-ai { border-bottom-left-radius: 0; }

    .typing-cursor {
        display: inline-block;
        width: 0.5rem; height: 1rem;
        margin-left: 0.25rem;
        background: #f4f4f5;
        vertical-align: bottom;
        animation: blink 1s step-start infinite;
    }

    @keyframes blink { 50% { opacity: 0; } }

    .input-box {
        background: #27272a;
        border: 2px solid #3f3f46;
        border-radius: 0.5rem;
    }

    /* Markdown styling */
    .message-ai pre { margin: 0.5rem 0; }
    .message-ai code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def nicegui_timer(container: ui.element) -> Callable[[float, Callable[[], None]], ui.timer]:
    """Timer factory creating ``ui.timer`` instances inside ``container``."""

    def create(interval: float, callback: Callable[[], None]) -> ui.timer:
        with container:
            return ui.timer(interval, callback, immediate=False)

    return create


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode(True)
    state = SessionState()

    page_root: ui.element
    scroll_area: ui.scroll_area
    messages_container: ui.column
    response_html: ui.html | None = None
    input_field: ui.input
    send_btn: ui.button
    stop_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.sender is Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-ai"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes(f"max-w-[75%] p-3 gap-0 {bubble}"):
                # Markdown for ai, plain text for user
                if is_user:
                    ui.label(msg.text).classes("whitespace-pre-wrap")
                    return
                for block in render(msg.text):
                    if block.kind == "code":
                        ui.code(block.content, language=block.language or None).classes(
                            "w-full my-3"
                        )
                    else:
                        ui.html(block.content, sanitize=False).classes("w-full")

    def render_reveal() -> ui.html:
        """Render the in-progress response with a blinking cursor."""
        with (
            ui.row().classes("w-full justify-start"),
            ui.element("div").classes("max-w-[75%] p-3 message-ai"),
        ):
            prefix = state.display.revealed_prefix if state.display else ""
            return ui.html(markdown_to_html(prefix) + CURSOR_HTML, sanitize=False)

    def render_thinking() -> None:
        with ui.row().classes("w-full justify-start"):
            ui.label("Thinking...").classes("max-w-[75%] p-3 message-ai animate-pulse")

    def update_controls() -> None:
        send_btn.set_visibility(not state.is_revealing)
        stop_btn.set_visibility(state.is_revealing)
        send_btn.set_enabled(not state.loading)
        input_field.set_enabled(not state.is_revealing)

    def refresh_messages() -> None:
        nonlocal response_html
        response_html = None
        messages_container.clear()
        with messages_container:
            if not len(state.conversation) and not state.loading:
                with ui.column().classes("w-full h-64 items-center justify-center"):
                    ui.html(
                        "Welcome to AI Chat! <br> Ask anything, and AI will respond.",
                        sanitize=False,
                    ).classes("text-2xl text-zinc-300 font-bold text-center")
            for msg in state.conversation:
                render_message(msg)
            if state.is_revealing:
                response_html = render_reveal()
            elif state.loading:
                render_thinking()
        update_controls()
        scroll_area.scroll_to(percent=1.0)

    def on_update(prefix: str) -> None:
        if response_html is None:
            refresh_messages()
            return
        response_html.set_content(markdown_to_html(prefix) + CURSOR_HTML)
        scroll_area.scroll_to(percent=1.0)

    def on_finish() -> None:
        refresh_messages()
        input_field.run_method("focus")

    async def send_message() -> None:
        await flow.submit()

    # === UI Layout ===
    with ui.column().classes("w-full min-h-screen gap-0") as page_root:
        # Header
        with ui.row().classes("w-full header py-4 justify-center fixed top-0 z-50"):
            ui.label("AiChatBot").classes("text-2xl font-bold text-zinc-300")

        # Messages
        with (
            ui.scroll_area().classes("w-full").style(
                "height: calc(100vh - 10rem); margin-top: 4rem"
            ) as scroll_area,
            ui.column().classes("w-full p-4"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center input-box fixed bottom-0"):
            input_field = (
                ui.input(placeholder="Type your message...")
                .props("dark borderless dense")
                .classes("flex-grow")
                .bind_value(state, "prompt")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button("Send", on_click=send_message).props("unelevated color=blue")
            stop_btn = ui.button("Stop", on_click=lambda: flow.stop()).props(
                "unelevated color=red"
            )

    controller = ResponseDisplayController(
        state,
        timer_factory=nicegui_timer(page_root),
        interval=TICK_INTERVAL,
        on_update=on_update,
        on_finish=on_finish,
    )
    flow = SubmissionFlow(state, RelayClient(), controller, on_change=refresh_messages)

    # No reveal timer outlives its page
    ui.context.client.on_delete(controller.dispose)

    refresh_messages()


def main() -> None:
    ui.run(title="AiChatBot", port=8080, reload=False)


if __name__ == "__main__":
    main()
