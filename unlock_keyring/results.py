from enum import IntEnum


class ResultCode(IntEnum):
    """
    Result codes of a keyring unlock request, in the GNOME keyring numbering.

    The set is open: backends may hand back integers that are not listed here,
    and those are treated like any other failure.
    """
    OK = 0
    DENIED = 1
    NO_KEYRING_DAEMON = 2
    ALREADY_UNLOCKED = 3
    NO_SUCH_KEYRING = 4
    BAD_ARGUMENTS = 5
    IO_ERROR = 6
    CANCELLED = 7
    KEYRING_ALREADY_EXISTS = 8
    NO_MATCH = 9
