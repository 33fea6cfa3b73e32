import streamlit as st


class Toasts:
    """User-facing message sink backed by st.toast."""

    def success(self, message: str):
        st.toast(message, icon="✅")

    def error(self, message: str):
        st.toast(message, icon="❌")


toasts = Toasts()
