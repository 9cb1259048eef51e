"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class StorageError(Exception):
    """Error reading from or writing to the workout store.

    Raised by repository adapters when the database call fails. The message
    is safe to show to the user.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ActionNotSupportedError(Exception):
    """Raised when an action that has no side effect (chat) is confirmed."""

    pass
