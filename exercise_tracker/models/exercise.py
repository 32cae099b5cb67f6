# exercise_tracker/models/exercise.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime
from . import Base
from .user import new_id


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(32), primary_key=True, default=new_id)
    # weak reference to users.id, checked only when the exercise is created
    user_id = Column(String(32), index=True, nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Integer, nullable=False)
    date = Column(Date, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
