# exercise_tracker/exceptions.py


class TrackerError(Exception):
    """
    Base error for the service.
    Each subclass carries the HTTP status it is rendered with.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    status_code = 400


class NotFoundError(TrackerError):
    status_code = 404


class PersistenceError(TrackerError):
    status_code = 500
