"""Custom exceptions for the email list tools."""


class EmailToolsException(Exception):
    """Base exception for email list tool errors."""
    pass


class InputRequiredError(EmailToolsException):
    """Raised when an operation is invoked without any input text."""
    
    def __init__(self, message: str = "Please provide emails to validate."):
        super().__init__(message)
        self.message = message


class UnreadableInputError(EmailToolsException):
    """Raised when uploaded input cannot be read as text."""
    
    def __init__(self, message: str = "Failed to read the file."):
        super().__init__(message)
        self.message = message
