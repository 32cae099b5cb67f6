# tracker_ui/ui/common.py

import streamlit as st
from services.api import list_users, is_error


def select_user(key):
    """
    Shows a user picker and returns the chosen user, or None when there is nothing to pick.
    """
    users = list_users()
    if is_error(users):
        st.error(users["message"])
        return None

    if not users:
        st.warning("No users yet. Create one on the Users page first.")
        return None

    return st.selectbox(
        "User",
        options=users,
        format_func=lambda u: f"{u['username']} ({u['_id'][:8]})",
        key=key,
    )
