# ABOUTME: Streamlit presentation layer for the type calculator.
