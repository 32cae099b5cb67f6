# tracker_ui/ui/users.py

import streamlit as st
from services.api import list_users, create_user, is_error


def users_page():
    st.title("👥 Users")

    with st.form("create_user_form"):
        username = st.text_input("Username")
        submitted = st.form_submit_button("Create user")

    if submitted:
        result = create_user(username)
        if is_error(result):
            st.error(f"❌ {result['message']}")
        else:
            st.success(f"✅ Created {result['username']} ({result['_id']})")

    users = list_users()
    if is_error(users):
        st.error(users["message"])
        return

    if not users:
        st.info("No users yet.")
        return

    st.table([{"id": u["_id"], "username": u["username"]} for u in users])
