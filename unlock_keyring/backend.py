import contextlib
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

import secretstorage
from jeepney import DBusErrorResponse
from secretstorage.exceptions import (
    ItemNotFoundException,
    LockedException,
    PromptDismissedException,
    SecretServiceNotAvailableException,
    SecretStorageException,
)

from .results import ResultCode

if TYPE_CHECKING:
    from jeepney.io.blocking import DBusConnection
    from secretstorage.collection import Collection

logger = logging.getLogger(__name__)


class KeyringBackend(ABC):
    """
    The one capability needed from a credential store: unlock its default collection.
    """

    @abstractmethod
    def unlock_default_collection(self) -> ResultCode | int:
        """
        Requests that the default collection be unlocked, blocking until the service answers.

        Returns:
            ResultCode | int: The service's result code. Codes outside `ResultCode` are allowed.
        """


class SecretServiceBackend(KeyringBackend):
    """
    Unlocks the default collection through the FreeDesktop Secret Service (gnome-keyring, KWallet, KeePassXC...).

    Attributes:
        connect (Callable[[], DBusConnection]): Opens the D-Bus connection, `secretstorage.dbus_init` by default.
    """

    def __init__(self, connect: "Callable[[], DBusConnection] | None" = None) -> None:
        self.connect = connect or secretstorage.dbus_init

    def unlock_default_collection(self) -> ResultCode:
        """
        Unlocks the default collection, letting the service show its own prompt if it needs one.

        Returns:
            ResultCode: OK if the collection ends up unlocked, otherwise the code matching what went wrong.
        """
        try:
            with contextlib.closing(self.connect()) as connection:
                collection = secretstorage.get_default_collection(connection)
                return self._unlock(collection)
        except SecretServiceNotAvailableException as e:
            logger.warning("Secret Service API not available: %s", e)
            return ResultCode.NO_KEYRING_DAEMON
        except PromptDismissedException as e:
            logger.warning("Unlock prompt dismissed: %s", e)
            return ResultCode.CANCELLED
        except ItemNotFoundException as e:
            logger.warning("No default collection: %s", e)
            return ResultCode.NO_SUCH_KEYRING
        except LockedException as e:
            logger.warning("Collection is still locked: %s", e)
            return ResultCode.DENIED
        except (SecretStorageException, DBusErrorResponse, OSError) as e:
            logger.warning("Secret Service request failed: %s", e)
            return ResultCode.IO_ERROR

    @staticmethod
    def _unlock(collection: "Collection") -> ResultCode:
        if not collection.is_locked():
            logger.info("Keyring already unlocked")
            return ResultCode.OK
        if collection.unlock():
            logger.warning("Unlock prompt dismissed")
            return ResultCode.CANCELLED
        if collection.is_locked():
            logger.warning("Keyring still locked after prompt")
            return ResultCode.DENIED
        return ResultCode.OK
