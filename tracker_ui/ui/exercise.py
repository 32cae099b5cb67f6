# tracker_ui/ui/exercise.py

import streamlit as st
from services.api import add_exercise, is_error
from ui.common import select_user


def exercise_page():
    st.title("🏃 Add exercise")

    user = select_user("exercise_user")
    if user is None:
        return

    with st.form("exercise_form"):
        description = st.text_input("Description")
        duration = st.number_input("Duration (minutes)", min_value=1, step=1, value=30)
        use_date = st.checkbox("Set a date (defaults to today)")
        day = st.date_input("Date")
        submitted = st.form_submit_button("💾 Save")

    if submitted:
        if not description.strip():
            st.error("Please enter a description.")
            return
        date = day.isoformat() if use_date else None
        result = add_exercise(user["_id"], description, int(duration), date)
        if is_error(result):
            st.error(f"❌ {result['message']}")
        else:
            st.success(f"✅ {result['description']} · {result['duration']} min · {result['date']}")
