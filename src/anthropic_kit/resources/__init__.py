from .admin import AdminMixin
from .base import (
    AdminClient,
    FileClient,
    MessageBatchClient,
    MessageClient,
    ModelClient,
)
from .batches import MessageBatchesMixin
from .files import FilesMixin
from .messages import MessagesMixin
from .models import ModelsMixin

__all__ = [
    # Protocols
    "MessageClient",
    "ModelClient",
    "MessageBatchClient",
    "FileClient",
    "AdminClient",
    # Operations
    "MessagesMixin",
    "ModelsMixin",
    "MessageBatchesMixin",
    "FilesMixin",
    "AdminMixin",
]
