"""
Logging helpers shared by the Supabase repositories.
"""
import logging

RLS_HINT = (
    "RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of "
    "SUPABASE_ANON_KEY for backend API"
)


def is_permission_error(error: Exception) -> bool:
    error_msg = str(error)
    return (
        "PGRST" in error_msg
        or "permission" in error_msg.lower()
        or "row-level security" in error_msg.lower()
    )


def is_duplicate_error(error: Exception) -> bool:
    error_msg = str(error).lower()
    return "23505" in error_msg or "duplicate" in error_msg


def log_write_error(logger: logging.Logger, action: str, error: Exception) -> None:
    """Log a failed write, adding the RLS hint for permission errors."""
    logger.error(f"Failed to {action}: {error}")
    if is_permission_error(error):
        logger.error(RLS_HINT)
