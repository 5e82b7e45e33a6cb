"""Main application entry point.

Runs the NiceGUI interface for the document chat client.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Registers the pages and starts the NiceGUI server.
    """
    from nicegui import ui

    from docchat.config import get_client_config
    from docchat.session import get_session_store
    from docchat.ui.chat_page import chat_page  # noqa: F401 - Registers the page
    from docchat.ui.login_page import login_page  # noqa: F401 - Registers the page

    config = get_client_config()
    session = get_session_store()

    logger.info(f"Backend: {config.api_base_url}")
    logger.info(f"Session file: {session.path} (logged in: {session.is_logged_in})")
    logger.info(f"Chat UI available at http://localhost:{config.ui_port}/")

    ui.run(
        title="Document Chat",
        host=config.ui_host,
        port=config.ui_port,
        storage_secret=config.storage_secret,
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
