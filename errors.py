# errors.py

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_FIELDS = "missing-fields"
    MALFORMED_SUPPLY = "malformed-supply"
    SUPPLY_OUT_OF_RANGE = "supply-out-of-range"
    INVALID_BINDINGS = "invalid-bindings"
    MALFORMED_MANIFEST = "malformed-manifest"
    INVALID_FIELD = "invalid-field"

    CONNECTION = "connection"
    FUNDING_FAILED = "funding-failed"
    MINT_CREATION_FAILED = "mint-creation-failed"
    ACCOUNT_CREATION_FAILED = "account-creation-failed"
    MINT_FAILED = "mint-failed"


class TokenLaunchError(Exception):
    """Base class for every failure the launcher reports to its caller."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class ValidationError(TokenLaunchError):
    """Bad input. Raised before anything touches the network."""

    def __init__(self, message: str, kind: ErrorKind, missing_fields=None):
        super().__init__(message, kind)
        self.missing_fields = list(missing_fields or [])


class InfrastructureError(TokenLaunchError):
    """A mandatory ledger step failed.

    Ledger mutations are never rolled back, so when the mint was already
    created the error carries its address (and the token account, if that
    step got through) for manual recovery.
    """

    def __init__(self, message: str, kind: ErrorKind, mint_address=None, token_account=None):
        super().__init__(message, kind)
        self.mint_address = mint_address
        self.token_account = token_account

    @property
    def partial(self) -> bool:
        return self.mint_address is not None


class ConfigurationError(Exception):
    pass
