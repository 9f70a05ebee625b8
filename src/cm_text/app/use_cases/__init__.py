"""Use cases do cliente."""

from .send_messages import SendMessagesUseCase

__all__ = ["SendMessagesUseCase"]
