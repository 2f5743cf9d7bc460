from enum import Enum


class ErrorKind(str, Enum):
    UNKNOWN_USER = "UnknownUser"
    EMPTY_PARTICIPANTS = "EmptyParticipants"
    EMPTY_SHARES = "EmptyShares"
    MALFORMED_TOKEN = "MalformedToken"
    SHARE_MISMATCH = "ShareMismatch"
    CORRUPT_PERSISTED_STATE = "CorruptPersistedState"
    FILE_UNAVAILABLE = "FileUnavailable"
    INVALID_AMOUNT = "InvalidAmount"
    SNAPSHOT_UNAVAILABLE = "SnapshotUnavailable"


class LedgerError(Exception):
    """
    Base for every validation / storage failure the ledger reports.

    `kind` identifies the failure, `message` is the text shown to the user.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownUser(LedgerError):
    kind = ErrorKind.UNKNOWN_USER

    def __init__(self, name: str, role: str = "participant"):
        super().__init__(f"Unknown {role}: {name}")
        self.name = name


class EmptyParticipants(LedgerError):
    kind = ErrorKind.EMPTY_PARTICIPANTS

    def __init__(self):
        super().__init__("No participants.")


class EmptyShares(LedgerError):
    kind = ErrorKind.EMPTY_SHARES

    def __init__(self):
        super().__init__("No shares provided.")


class MalformedToken(LedgerError):
    kind = ErrorKind.MALFORMED_TOKEN

    def __init__(self, token: str):
        super().__init__(f"Bad token '{token}', expected name:amount")
        self.token = token


class ShareMismatch(LedgerError):
    kind = ErrorKind.SHARE_MISMATCH

    def __init__(self, share_sum: float, amount: float):
        super().__init__(f"Share sum ({share_sum:.6f}) != amount ({amount:.6f})")
        self.share_sum = share_sum
        self.amount = amount


class CorruptPersistedState(LedgerError):
    kind = ErrorKind.CORRUPT_PERSISTED_STATE

    def __init__(self, section: str):
        super().__init__(f"Corrupt file ({section}).")
        self.section = section


class LedgerFileError(LedgerError):
    kind = ErrorKind.FILE_UNAVAILABLE


class InvalidAmount(LedgerError):
    kind = ErrorKind.INVALID_AMOUNT

    def __init__(self, amount):
        super().__init__(f"Invalid amount: {amount}")
        self.amount = amount


class SnapshotUnavailable(LedgerError):
    kind = ErrorKind.SNAPSHOT_UNAVAILABLE
