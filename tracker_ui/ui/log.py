# tracker_ui/ui/log.py

import streamlit as st
from services.api import get_log, is_error
from ui.common import select_user


def log_page():
    st.title("📅 Exercise log")

    user = select_user("log_user")
    if user is None:
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        date_from = st.date_input("From", value=None)
    with col2:
        date_to = st.date_input("To", value=None)
    with col3:
        limit = st.number_input("Limit", min_value=0, step=1, value=0, help="0 = server default")

    result = get_log(
        user["_id"],
        date_from=date_from.isoformat() if date_from else None,
        date_to=date_to.isoformat() if date_to else None,
        limit=int(limit) or None,
    )
    if is_error(result):
        st.error(result["message"])
        return

    st.markdown(f"**{result['username']}** · {result['count']} entries")
    if result["log"]:
        st.table(result["log"])
    else:
        st.info("No exercises in this range.")
