class InventoryError(Exception):
    """Base exception for the Smart Inventory Replenishment System."""

    def __init__(self, message=None, code=None, details=None):
        """Initialize the exception.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message or "An error occurred in the Smart Inventory System"
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        """String representation of the error."""
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self):
        """Convert the exception to a dictionary."""
        error_dict = {
            'error': self.__class__.__name__,
            'message': self.message,
        }

        if self.code:
            error_dict['code'] = self.code

        if self.details:
            error_dict['details'] = self.details

        return error_dict


class ConfigError(InventoryError):
    """Exception raised for configuration errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Configuration error"
        super().__init__(message, code, details)


class InvalidConfiguration(ConfigError):
    """Exception raised when a policy configuration value is out of range."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Invalid policy configuration"
        super().__init__(message, code or 'INVALID_CONFIGURATION', details)


class ValidationError(InventoryError):
    """Exception raised for data validation errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Validation error"
        super().__init__(message, code, details)


class InvalidQuantity(ValidationError):
    """Exception raised when a negative quantity reaches a stock mutator."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Quantity must be >= 0"
        super().__init__(message, code or 'INVALID_QUANTITY', details)


class ItemError(InventoryError):
    """Exception raised for item-related errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Item error"
        super().__init__(message, code, details)


class NotFoundError(InventoryError):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Resource not found"
        super().__init__(message, code, details)
