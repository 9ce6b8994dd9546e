"""Reflex configuration for the Ledger UI application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("LEDGER_UI_APP_PORT", "8000"))

config = rx.Config(
    app_name="ledger_ui",
    # Use the src directory structure
    app_module_import="ledger_ui.app",
    backend_port=APP_PORT,
)
