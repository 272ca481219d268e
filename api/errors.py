"""
Translation of tracker outcomes into HTTP errors.

- NotFoundError -> 404
- NoActiveWorkoutError, WorkoutAlreadyActiveError -> 409
- AuthenticationError -> 401
- RemoteUnavailableError -> 503
- ValueError (bad field or value) -> 400
- ActionResult needing confirmation -> 409, other rejections -> 400
"""

from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import HTTPException

from application.exceptions import (
    AuthenticationError,
    NoActiveWorkoutError,
    NotFoundError,
    RemoteUnavailableError,
    WorkoutAlreadyActiveError,
)
from application.tracker import WorkoutTracker
from application.use_cases.base import ActionResult


@contextmanager
def tracker_call(tracker: WorkoutTracker) -> Iterator[WorkoutTracker]:
    """Hold the tracker lock and map tracker exceptions to HTTP errors."""
    with tracker.lock:
        try:
            yield tracker
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except (NoActiveWorkoutError, WorkoutAlreadyActiveError) as e:
            raise HTTPException(status_code=409, detail=str(e)) from e
        except AuthenticationError as e:
            raise HTTPException(status_code=401, detail=str(e)) from e
        except RemoteUnavailableError as e:
            raise HTTPException(status_code=503, detail=str(e)) from e
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e


def unwrap(result: ActionResult) -> Any:
    """Return the result value or raise the matching HTTP error."""
    if result.requires_confirmation:
        raise HTTPException(
            status_code=409,
            detail={"message": result.error, "requires_confirmation": True},
        )
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return result.value
