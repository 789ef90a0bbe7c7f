"""Main application entry point.

Runs the FastAPI relay (port 5000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

DEFAULT_PORT = "5000"


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the relay route, NiceGUI handles the UI.
    Both accessible on port 5000.
    """
    import uvicorn
    from nicegui import ui

    from aichatbot.api.app import create_app
    from aichatbot.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    try:
        app = create_app()
    except ValidationError as e:
        logger.critical(f"Relay misconfigured: {e}")
        sys.exit(1)

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="AiChatBot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "aichatbot-secret"),
    )

    port = int(os.getenv("PORT", DEFAULT_PORT))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the relay and NiceGUI as separate servers.

    Relay on port 5000, NiceGUI on port 8080.
    Useful when the UI is hosted apart from the relay.
    """
    import asyncio
    import subprocess

    from aichatbot.relay.config import get_relay_config

    try:
        get_relay_config()
    except ValidationError as e:
        logger.critical(f"Relay misconfigured: {e}")
        sys.exit(1)

    async def run_servers() -> None:
        port = os.getenv("PORT", DEFAULT_PORT)
        logger.info(f"Starting relay on http://localhost:{port}")
        logger.info("Starting NiceGUI on http://localhost:8080")

        relay_proc = subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "aichatbot.api.app:create_app",
                "--factory",
                "--host",
                os.getenv("HOST", "0.0.0.0"),
                "--port",
                port,
            ]
        )

        nicegui_proc = subprocess.Popen(
            [sys.executable, "-c", "from aichatbot.ui.chat_page import main; main()"]
        )

        try:
            while True:
                await asyncio.sleep(1)
                if relay_proc.poll() is not None or nicegui_proc.poll() is not None:
                    break
        except KeyboardInterrupt:
            logger.info("Shutting down servers...")
        finally:
            relay_proc.terminate()
            nicegui_proc.terminate()
            relay_proc.wait()
            nicegui_proc.wait()

    asyncio.run(run_servers())


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run the relay and NiceGUI on different ports.
    Default is integrated mode (both on port 5000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting AiChatBot in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
