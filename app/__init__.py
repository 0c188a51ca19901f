"""
Movie Browser Application Package.

This package contains the catalog proxy API, the external catalog client,
the Streamlit browse UI, and shared utilities.
"""

__version__ = "1.0.0"
