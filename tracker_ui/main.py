# tracker_ui/main.py

import streamlit as st
from dotenv import load_dotenv
from ui.users import users_page
from ui.exercise import exercise_page
from ui.log import log_page


load_dotenv()


st.set_page_config(page_title="Exercise Tracker")


def main_page():
    st.sidebar.markdown("## 📋 Menu")

    if st.sidebar.button("👥 Users"):
        st.session_state["page"] = "users"
    if st.sidebar.button("🏃 Add exercise"):
        st.session_state["page"] = "exercise"
    if st.sidebar.button("📅 Exercise log"):
        st.session_state["page"] = "log"

    page = st.session_state.get("page", "users")
    if page == "users":
        users_page()
    elif page == "exercise":
        exercise_page()
    elif page == "log":
        log_page()


main_page()
