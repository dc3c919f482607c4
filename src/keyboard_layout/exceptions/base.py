"""Root of the keyboard_layout exception hierarchy."""

from typing import Optional


class KeyboardLayoutError(Exception):
    """
    Any error raised by keyboard_layout.

    Not a ValueError subclass, so errors raised while a Pydantic model is
    being built reach the caller unchanged.

    Attributes:
        user_message: Short description of what is wrong with the layout
        technical_message: Ids and values involved, for logs
        recoverable: False when the input itself must be fixed
        recovery_hint: What to change in the layout or configuration
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """Message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
