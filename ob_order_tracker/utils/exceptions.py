"""
Exceptions raised at the input and storage boundaries.
"""


class ValidationError(ValueError):
    """
    Raised when submitted data fails input validation.
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class RecordNotFoundError(LookupError):
    """
    Raised when a record that must exist is missing from storage.
    """
