class SymbolCliError(Exception):
    """Base error for failures reported to the user as a message."""


class ValidationError(SymbolCliError):
    pass


class ProfileError(SymbolCliError):
    pass


class AnnounceError(SymbolCliError):
    """The node refused the announced transaction."""

    def __init__(self, message: str, code: str = "") -> None:
        super().__init__(message)
        self.code = code


class TransactionStatusError(SymbolCliError):
    """The transaction failed or was never confirmed."""

    def __init__(self, message: str, code: str = "") -> None:
        super().__init__(message)
        self.code = code
