"""
Fire-and-forget execution of remote writes.

Use cases write locally first and then hand the matching remote call to the
pusher. If nobody is signed in the call is dropped. Otherwise it is submitted
to a background executor and never awaited; the SyncService push helpers log
and report their own failures. There is no queue, batching or retry.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from application.use_cases.sync_data import SyncService

logger = logging.getLogger(__name__)

PUSH_OPERATIONS = frozenset(
    {
        "update_profile",
        "create_template",
        "update_template",
        "delete_template",
        "create_workout",
        "delete_workout",
        "create_custom_exercise",
        "delete_custom_exercise",
    }
)


class RemotePusher:
    """
    Submits best-effort remote writes for the bound sync session.

    Usage:
        >>> pusher = RemotePusher()
        >>> pusher.bind(sync_service)
        >>> pusher.push("create_template", template)
    """

    def __init__(self, executor: Optional[Executor] = None, max_workers: int = 2):
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="remote-push"
        )
        self._session: Optional["SyncService"] = None

    @property
    def session(self) -> Optional["SyncService"]:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session is not None

    def bind(self, session: "SyncService") -> None:
        logger.info(f"Remote session bound for user {session.user_id}")
        self._session = session

    def unbind(self) -> None:
        if self._session is not None:
            logger.info(f"Remote session unbound for user {self._session.user_id}")
        self._session = None

    def push(self, operation: str, *args) -> Optional[Future]:
        """
        Submit ``operation`` on the bound SyncService.

        Returns:
            The Future of the submitted call, or None when no session is bound
        """
        if operation not in PUSH_OPERATIONS:
            raise ValueError(f"Unknown push operation: {operation}")

        session = self._session
        if session is None:
            return None

        future = self._executor.submit(getattr(session, operation), *args)
        future.add_done_callback(lambda f: self._report(operation, f))
        return future

    def _report(self, operation: str, future: Future) -> None:
        error = future.exception()
        if error is not None:
            logger.error(f"Remote push '{operation}' raised: {error}")

    def shutdown(self, wait: bool = False) -> None:
        self._executor.shutdown(wait=wait)
