"""
Shared utilities package.

This package contains logging configuration used by both the API and
the Streamlit UI.
"""

from app.utils.logging_config import setup_logging, configure_api_logging, configure_ui_logging

__all__ = ['setup_logging', 'configure_api_logging', 'configure_ui_logging']
