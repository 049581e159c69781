"""Domain exceptions for cashdesk-payments.

Exception hierarchy:
    DomainException (base)
    ├── Not Found Errors
    │   └── NotFoundError
    │       ├── PaymentNotFoundError
    │       ├── CashDeskNotFoundError
    │       └── EmployeeNotFoundError
    ├── Conflict Errors
    │   └── ConflictError
    │       ├── OpenPaymentExistsError
    │       ├── PaymentAlreadyConfirmedError
    │       ├── PaymentHasItemsError
    │       └── IntegrityConflictError (store-level constraint violation)
    ├── Authorization Errors
    │   └── AuthorizationError
    │       └── InsufficientRightsError
    ├── Validation Errors (caller errors, also ValueError)
    │   └── ValidationError
    │       ├── InvalidPaymentTypeError
    │       ├── InvalidAmountError
    │       └── InvalidArticleNameError
    └── InvalidStateTransitionError

The HTTP layer maps NotFoundError to 404, ConflictError to 409,
AuthorizationError to 403 and ValidationError to 400.
"""

from __future__ import annotations

PAYMENT_NOT_FOUND = "Payment not found."
CASH_DESK_NOT_FOUND = "Cash desk not found."
EMPLOYEE_NOT_FOUND = "Employee not found."
OPEN_PAYMENT_EXISTS = "Open payment for cashdesk."
PAYMENT_ALREADY_CONFIRMED = "Payment already confirmed."
PAYMENT_HAS_ITEMS = "Payment has payment items."
INSUFFICIENT_RIGHTS = "Insufficient rights to create a credit card payment."


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(DomainException):
    """Raised when a referenced entity does not exist (HTTP 404)."""


class PaymentNotFoundError(NotFoundError):
    """Raised when a payment cannot be found by ID."""


class CashDeskNotFoundError(NotFoundError):
    """Raised when opening a payment at an unknown cash desk number."""


class EmployeeNotFoundError(NotFoundError):
    """Raised when opening a payment for an unknown registration number."""


# =============================================================================
# Conflict Errors
# =============================================================================


class ConflictError(DomainException):
    """Raised when an operation would violate a state invariant (HTTP 409)."""


class OpenPaymentExistsError(ConflictError):
    """Raised when a cash desk already has a payment without confirmation.

    At most one open payment per cash desk may exist at any time.
    """


class PaymentAlreadyConfirmedError(ConflictError):
    """Raised when confirming or adding items to a confirmed payment.

    Confirmation is not idempotent: the second call fails.
    """


class PaymentHasItemsError(ConflictError):
    """Raised when deleting a payment that still owns items without delete_items."""


class IntegrityConflictError(ConflictError):
    """Raised by a store when a commit violates a store-level constraint.

    Use cases translate this into the specific conflict it stands for
    (e.g. OpenPaymentExistsError when two opens race on one cash desk).
    """


# =============================================================================
# Authorization Errors
# =============================================================================


class AuthorizationError(DomainException):
    """Raised when the acting employee lacks the role for an operation (HTTP 403)."""


class InsufficientRightsError(AuthorizationError):
    """Raised when a non-manager opens a credit card payment."""


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(DomainException, ValueError):
    """Raised when caller input is malformed (HTTP 400)."""


class InvalidPaymentTypeError(ValidationError):
    """Raised when a payment type text does not name a PaymentType."""


class InvalidAmountError(ValidationError):
    """Raised when a payment item quantity is not a positive integer."""


class InvalidArticleNameError(ValidationError):
    """Raised when a payment item has a blank article name."""


# =============================================================================
# State Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when an entity method is called in a state that forbids it.

    Valid transitions:
        - open → confirmed

    Use cases check the state first and raise the specific conflict;
    this error signals a use case that skipped that check.
    """
