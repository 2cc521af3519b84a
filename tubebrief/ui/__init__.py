"""Streamlit UI: entry point, navigation, pages and components."""
