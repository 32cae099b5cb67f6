# tracker_ui/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
TRACKER_API_URL = os.getenv("TRACKER_API_URL", "http://localhost:3000")


def _handle(res):
    """
    Returns the parsed body on success, or the error envelope otherwise.
    """
    try:
        data = res.json()
    except ValueError:
        data = None

    if res.status_code == 200:
        return data

    if isinstance(data, dict) and data.get("status") == "error":
        return data
    return {"status": "error", "message": f"Request failed with status {res.status_code}"}


def is_error(result) -> bool:
    return isinstance(result, dict) and result.get("status") == "error"


# -------------------------------
# Users
# -------------------------------

def list_users():
    """
    Lists all registered users as {_id, username}.
    """
    try:
        res = requests.get(f"{TRACKER_API_URL}/api/users")
        return _handle(res)
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}


def create_user(username):
    try:
        res = requests.post(f"{TRACKER_API_URL}/api/users", data={"username": username})
        return _handle(res)
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}


# -------------------------
# Exercises
# -------------------------

def add_exercise(user_id, description, duration, date=None):
    """
    Adds an exercise for the user. The server uses today when date is omitted.
    """
    data = {"description": description, "duration": duration}
    if date:
        data["date"] = date
    try:
        res = requests.post(f"{TRACKER_API_URL}/api/users/{user_id}/exercises", data=data)
        return _handle(res)
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}


def get_log(user_id, date_from=None, date_to=None, limit=None):
    params = {}
    if date_from:
        params["from"] = date_from
    if date_to:
        params["to"] = date_to
    if limit:
        params["limit"] = limit
    try:
        res = requests.get(f"{TRACKER_API_URL}/api/users/{user_id}/logs", params=params)
        return _handle(res)
    except requests.RequestException as e:
        return {"status": "error", "message": str(e)}
