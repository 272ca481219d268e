"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Input validation failures are not exceptions: use cases report them through
result objects so callers can show them without unwinding.
"""


class TrackerError(Exception):
    """Base class for workout tracker errors."""

    pass


class NotFoundError(TrackerError):
    """A template, log, exercise index or set index does not exist."""

    pass


class NoActiveWorkoutError(TrackerError):
    """A session operation was attempted with no active workout."""

    pass


class WorkoutAlreadyActiveError(TrackerError):
    """A session was started while another one is still active."""

    pass


class AuthenticationError(TrackerError):
    """Sign-up or sign-in was refused by the auth provider."""

    pass


class RemoteUnavailableError(TrackerError):
    """The remote backend is not configured or a read from it failed.

    Raised by Supabase repositories on failed reads so the sync orchestrator
    can fall back to local data. Writes never raise; they return a failure
    flag instead.
    """

    pass
