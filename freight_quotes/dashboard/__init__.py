"""Streamlit comparison page for the freight quote engine."""
