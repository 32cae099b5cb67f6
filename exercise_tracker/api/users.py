# exercise_tracker/api/users.py

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..core import tracker
from ..database import get_db
from ..exceptions import ValidationError


# -------------------------------
# Router & Request Body Handling
# -------------------------------

router = APIRouter(prefix="/api/users")


async def read_fields(request: Request) -> dict:
    """
    Reads the request body as a flat dict of fields.
    JSON bodies and HTML form posts (urlencoded or multipart) are both accepted.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Request body is not valid JSON")
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    form = await request.form()
    return {key: value for key, value in form.items()}


# -------------------------------
# User Endpoints
# -------------------------------

@router.get("")
def list_users(db: Session = Depends(get_db)):
    """
    Lists every user as {_id, username}. An empty store yields [].
    """
    return tracker.list_users(db)


@router.post("")
def create_user(fields: dict = Depends(read_fields), db: Session = Depends(get_db)):
    return tracker.create_user(db, fields.get("username"))


# -------------------------------
# Exercise Endpoints
# -------------------------------

@router.post("/{user_id}/exercises")
def create_exercise(user_id: str, fields: dict = Depends(read_fields), db: Session = Depends(get_db)):
    """
    Adds an exercise to the user's log and echoes it back with the user's id and name.
    """
    return tracker.create_exercise(
        db,
        user_id,
        description=fields.get("description"),
        duration=fields.get("duration"),
        exercise_date=fields.get("date"),
    )


@router.get("/{user_id}/logs")
def get_logs(request: Request, user_id: str, db: Session = Depends(get_db)):
    """
    Returns the user's exercise log.
    Optional query parameters: from, to (inclusive YYYY-MM-DD bounds) and limit.
    """
    params = request.query_params
    return tracker.get_logs(
        db,
        user_id,
        date_from=params.get("from"),
        date_to=params.get("to"),
        limit=params.get("limit"),
        default_limit=request.app.state.default_log_limit,
    )
