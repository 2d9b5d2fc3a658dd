"""ABOUTME: Entry point for Streamlit Community Cloud deployment.
ABOUTME: Delegates to the type calculator app module."""

import traceback

import streamlit as st

try:
    import typematchup.app.main  # noqa: F401
except Exception:
    st.error("The type calculator failed to load.")
    st.code(traceback.format_exc())
