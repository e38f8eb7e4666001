"""Reflex configuration for the invoice filters application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("INVOICE_FILTERS_PORT", "8000"))

config = rx.Config(
    app_name="invoice_filters",
    # Use the src directory structure
    app_module_import="invoice_filters.app",
    backend_port=APP_PORT,
)
