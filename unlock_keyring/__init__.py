"""unlock-keyring: ask the Secret Service to unlock the default keyring."""

from .backend import KeyringBackend, SecretServiceBackend
from .invoker import UnlockInvoker
from .outcome import UnlockFailed, UnlockOutcome, UnlockRequest, UnlockSucceeded
from .results import ResultCode

app_name = "unlock-keyring"
__version__ = "0.1.0"

__all__ = [
    "KeyringBackend",
    "ResultCode",
    "SecretServiceBackend",
    "UnlockFailed",
    "UnlockInvoker",
    "UnlockOutcome",
    "UnlockRequest",
    "UnlockSucceeded",
    "__version__",
    "app_name",
]
