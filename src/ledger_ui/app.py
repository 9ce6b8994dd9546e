"""
Reflex application entry point for the Ledger UI.

This module initializes the Reflex app and registers the document list
page and the print page.
"""

import contextlib
import os

import reflex as rx

from ledger_ui.components import document_table, printable_document, search_panel
from ledger_ui.lib import clients, logs
from ledger_ui.services import get_document_service
from ledger_ui.state import APP_SUBTITLE, APP_TITLE, DocumentListState, PrintState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("LEDGER_UI_APP_PORT", "8000"))

LOG.info("LEDGER_UI_SERVICE: %s", os.getenv("LEDGER_UI_SERVICE", "http"))
LOG.info("LEDGER_UI_API_URL: %s", clients.api_url())


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the document list page.

    Returns:
        The complete page component with header, search and table.
    """
    return rx.box(
        rx.box(
            page_header(),
            search_panel(),
            document_table(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


def print_page() -> rx.Component:
    """Build the print page for /print/[document_id]."""
    return rx.box(printable_document(), class_name="print-shell")


@contextlib.asynccontextmanager
async def close_document_service():
    """Close the shared document service when the backend shuts down."""
    yield
    LOG.info("Closing document service")
    await get_document_service().aclose()


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=["/styles.css"],
)

app.add_page(index, title=APP_TITLE, on_load=DocumentListState.on_load)
app.add_page(
    print_page,
    route="/print/[document_id]",
    title="Print document",
    on_load=PrintState.on_load,
)
app.register_lifespan_task(close_document_service)


def main() -> None:
    """Entrypoint used by `ledger-ui`."""
    # Note: In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--backend-port", str(APP_PORT)])


if __name__ == "__main__":
    main()
