"""Custom exceptions for the storefront application."""


class ShopError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['success'] = False
        rv['message'] = self.message
        return rv


class InvalidArgumentError(ShopError):
    """Raised when a caller passes missing or malformed input."""
    def __init__(self, message, payload=None):
        super().__init__(message, 400, payload)


class BusinessLogicError(ShopError):
    """Exception raised for business logic violations."""
    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)


class NotFoundError(ShopError):
    """Exception raised when a resource is not found.

    Direct lookups keep the 404 default; a missing product referenced from a
    cart operation is raised with ``status_code=400``.
    """
    def __init__(self, message="Resource not found", status_code=404, payload=None):
        super().__init__(message, status_code, payload)


class InsufficientStockError(BusinessLogicError):
    """Raised when an operation fails due to lack of stock."""
    def __init__(self, available):
        self.available = available
        message = f"Insufficient stock. Only {available} items left in stock."
        super().__init__(message, status_code=400, payload={'available': available})


class CheckoutError(BusinessLogicError):
    """Raised when checkout is rejected by cart or discount validation."""
    def __init__(self, message, payload=None):
        super().__init__(message, status_code=400, payload=payload)
