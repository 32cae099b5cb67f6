# exercise_tracker/core/tracker.py

import logging
from datetime import date
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, PersistenceError, ValidationError
from ..models.user import User
from ..models.exercise import Exercise
from .utils import format_date, is_blank, parse_date, parse_duration, parse_limit


logger = logging.getLogger(__name__)


# -------------------------------
# Users
# -------------------------------

def list_users(db: Session) -> list[dict]:
    """
    Returns every user projected to id and username, oldest first.
    """
    users = (
        db.query(User.id, User.username)
        .order_by(User.created_at, User.id)
        .all()
    )
    return [{"_id": user_id, "username": username} for user_id, username in users]


def create_user(db: Session, username) -> dict:
    """
    Stores a new user. Usernames are neither deduplicated nor checked for content.
    """
    if username is None:
        raise ValidationError("username is required")

    user = User(username=str(username))
    save(db, user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return {"_id": user.id, "username": user.username}


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"Could not find user '{user_id}'")
    return user


# -------------------------------
# Exercises
# -------------------------------

def create_exercise(db: Session, user_id: str, description, duration, exercise_date=None) -> dict:
    """
    Records an exercise for an existing user.
    The date defaults to today when it is not given.
    """
    user = get_user(db, user_id)

    if is_blank(description):
        raise ValidationError("description is required")
    minutes = parse_duration(duration)
    day = parse_date(exercise_date) or date.today()

    exercise = Exercise(
        user_id=user.id,
        description=str(description),
        duration=minutes,
        date=day,
    )
    save(db, exercise)
    logger.info("Logged exercise %s for user %s on %s", exercise.id, user.id, day.isoformat())

    return {
        "_id": user.id,
        "username": user.username,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": format_date(exercise.date),
    }


def get_logs(db: Session, user_id: str, date_from=None, date_to=None, limit=None, default_limit: int = 500) -> dict:
    """
    Returns the user's exercises between the optional inclusive bounds,
    ordered by date and capped at the limit.
    """
    user = get_user(db, user_id)

    lower = parse_date(date_from, "from")
    upper = parse_date(date_to, "to")
    max_entries = parse_limit(limit, default_limit)

    query = db.query(Exercise).filter(Exercise.user_id == user.id)
    if lower is not None:
        query = query.filter(Exercise.date >= lower)
    if upper is not None:
        query = query.filter(Exercise.date <= upper)

    exercises = (
        query.order_by(Exercise.date, Exercise.created_at, Exercise.id)
        .limit(max_entries)
        .all()
    )

    log = [
        {
            "description": e.description,
            "duration": e.duration,
            "date": format_date(e.date),
        }
        for e in exercises
    ]

    return {
        "_id": user.id,
        "username": user.username,
        "count": len(log),
        "log": log,
    }


def save(db: Session, record):
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save %s", type(record).__name__)
        raise PersistenceError(f"Could not save {type(record).__name__.lower()}") from e
