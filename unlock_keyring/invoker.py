import logging
import sys
from typing import IO

from .backend import KeyringBackend
from .outcome import UnlockOutcome, UnlockRequest

logger = logging.getLogger(__name__)


class UnlockInvoker:
    """
    Asks a keyring backend to unlock the default collection once and reports the result.

    Attributes:
        backend (KeyringBackend): Anything with an `unlock_default_collection()` method.
        stream (IO[str] | None): Where the result line goes. Defaults to stdout at call time.
    """

    def __init__(self, backend: KeyringBackend, stream: IO[str] | None = None) -> None:
        self.backend = backend
        self.stream = stream

    def request_unlock(self) -> UnlockOutcome:
        """
        Performs the single blocking unlock call.

        Returns:
            UnlockOutcome: The outcome built from the code the backend returned.
        """
        request = UnlockRequest()
        logger.debug("Requesting unlock of the %s collection", request.collection_selector)
        code = self.backend.unlock_default_collection()
        logger.debug("Backend returned %r", code)
        return UnlockOutcome.from_code(code)

    def run(self) -> int:
        """
        Unlocks the default collection and prints one line describing the outcome.

        Returns:
            int: 0 if the backend reported success, 1 for any other code.
        """
        outcome = self.request_unlock()
        print(outcome.message, file=self.stream or sys.stdout)
        return outcome.exit_status
