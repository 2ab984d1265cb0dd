"""Custom exception classes"""
import enum
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failure exception"""

    def __init__(self, message: str = "Authentication failed", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=401,
            error_type="AuthenticationError",
            details=details
        )


class ErrorCategory(str, enum.Enum):
    """Who can correct a ledger error"""
    VALIDATION = "VALIDATION"
    DOMAIN_STATE = "DOMAIN_STATE"
    ACCESS = "ACCESS"
    INTERNAL = "INTERNAL"


class LedgerErrorCode(str, enum.Enum):
    """Closed set of ledger error codes"""

    # Expense input
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_SPLIT = "INVALID_SPLIT"
    ZERO_SPLIT_NOT_ALLOWED = "ZERO_SPLIT_NOT_ALLOWED"
    DUPLICATE_SPLIT_USER = "DUPLICATE_SPLIT_USER"
    PAYER_MUST_BE_PARTICIPANT = "PAYER_MUST_BE_PARTICIPANT"
    INVALID_SPLIT_SUM = "INVALID_SPLIT_SUM"
    INVALID_PERCENTAGE_SUM = "INVALID_PERCENTAGE_SUM"
    INVALID_SPLIT_USER = "INVALID_SPLIT_USER"
    PAYER_NOT_FOUND = "PAYER_NOT_FOUND"

    # Settlement input
    INVALID_SETTLEMENT_AMOUNT = "INVALID_SETTLEMENT_AMOUNT"
    INVALID_SETTLEMENT_USERS = "INVALID_SETTLEMENT_USERS"

    # Settlement against current balances
    INVALID_SETTLEMENT_DIRECTION = "INVALID_SETTLEMENT_DIRECTION"
    NO_SHARED_EXPENSE_HISTORY = "NO_SHARED_EXPENSE_HISTORY"
    AMOUNT_EXCEEDS_OUTSTANDING = "AMOUNT_EXCEEDS_OUTSTANDING"

    # Membership
    NOT_GROUP_MEMBER = "NOT_GROUP_MEMBER"
    PAYER_NOT_GROUP_MEMBER = "PAYER_NOT_GROUP_MEMBER"

    # Defects
    INTERNAL_SPLIT_ERROR = "INTERNAL_SPLIT_ERROR"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES = {
    LedgerErrorCode.INVALID_AMOUNT: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SPLIT: ErrorCategory.VALIDATION,
    LedgerErrorCode.ZERO_SPLIT_NOT_ALLOWED: ErrorCategory.VALIDATION,
    LedgerErrorCode.DUPLICATE_SPLIT_USER: ErrorCategory.VALIDATION,
    LedgerErrorCode.PAYER_MUST_BE_PARTICIPANT: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SPLIT_SUM: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_PERCENTAGE_SUM: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SPLIT_USER: ErrorCategory.VALIDATION,
    LedgerErrorCode.PAYER_NOT_FOUND: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SETTLEMENT_AMOUNT: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SETTLEMENT_USERS: ErrorCategory.VALIDATION,
    LedgerErrorCode.INVALID_SETTLEMENT_DIRECTION: ErrorCategory.DOMAIN_STATE,
    LedgerErrorCode.NO_SHARED_EXPENSE_HISTORY: ErrorCategory.DOMAIN_STATE,
    LedgerErrorCode.AMOUNT_EXCEEDS_OUTSTANDING: ErrorCategory.DOMAIN_STATE,
    LedgerErrorCode.NOT_GROUP_MEMBER: ErrorCategory.ACCESS,
    LedgerErrorCode.PAYER_NOT_GROUP_MEMBER: ErrorCategory.ACCESS,
    LedgerErrorCode.INTERNAL_SPLIT_ERROR: ErrorCategory.INTERNAL,
}

_STATUS_CODES = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.DOMAIN_STATE: 400,
    ErrorCategory.ACCESS: 403,
    ErrorCategory.INTERNAL: 500,
}


class LedgerError(AppException):
    """
    Ledger rule violation tagged with a LedgerErrorCode.

    Structured fields describing the violation (offending ids, amounts)
    are kept in ``context`` so callers never need to parse the message.
    """

    def __init__(
        self,
        code: LedgerErrorCode,
        message: Optional[str] = None,
        **context: Any
    ):
        self.code = code
        self.context = context
        super().__init__(
            message=message or code.value,
            status_code=_STATUS_CODES[code.category],
            error_type="LedgerError",
            details=context or None
        )

    @property
    def category(self) -> ErrorCategory:
        return self.code.category


class LedgerInvariantError(LedgerError):
    """Internal ledger invariant broken; indicates a defect, not bad input"""

    def __init__(
        self,
        code: LedgerErrorCode = LedgerErrorCode.INTERNAL_SPLIT_ERROR,
        message: Optional[str] = None,
        **context: Any
    ):
        if code.category is not ErrorCategory.INTERNAL:
            raise ValueError(f"{code.value} is not an internal invariant code")
        super().__init__(code, message, **context)
        self.error_type = "LedgerInvariantError"
