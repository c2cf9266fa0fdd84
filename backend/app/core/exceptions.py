"""Domain errors raised by services and routers.

Every error carries the HTTP status it maps to and a human-readable message;
``app.main`` turns them into ``{"message": ...}`` responses.
"""
from fastapi import status


class ShowroomError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


# Taxonomy

class ValidationError(ShowroomError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NotFoundError(ShowroomError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(ShowroomError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request conflicts with current state"


class AuthorizationError(ShowroomError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "You are not allowed to perform this action"


class AuthenticationError(ShowroomError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


# Accounts

class InvalidCredentials(AuthenticationError):
    message = "Invalid email or password"


class AccountInactive(AuthenticationError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Account is inactive"


class DuplicateEmail(ConflictError):
    message = "Email already exists"


class Forbidden(AuthorizationError):
    pass


# Catalog

class VehicleNotFound(NotFoundError):
    message = "Vehicle not found"


class VehicleImageNotFound(NotFoundError):
    message = "Vehicle image not found"


# Engagement

class AlreadyInWishlist(ConflictError):
    message = "Vehicle already in wishlist"


class NotInWishlist(NotFoundError):
    message = "Vehicle not found in wishlist"


class TestDriveNotFound(NotFoundError):
    message = "Test drive not found"


class InquiryNotFound(NotFoundError):
    message = "Inquiry not found"


class InvalidTransition(ConflictError):
    message = "Status change not allowed"


# Orders

class TransactionNotFound(NotFoundError):
    message = "Transaction not found"


class OutOfStock(ConflictError):
    message = "Vehicle is out of stock"


class InvalidPaymentMethod(ValidationError):
    message = "Invalid payment method. Use 'Cash' or 'BankTransfer'"


class InvalidStatus(ValidationError):
    message = "Invalid status. Use 'Completed', 'Rejected', or 'Cancelled'"


class NotPending(ConflictError):
    message = "Can only upload payment proof for pending transactions"


class PaymentRecordMissing(ConflictError):
    message = "Payment record not found"
