"""
File update module.
"""
from .models import UpdateRequest, UpdateResult
from .handler import UpdateHandler, encode_content

__all__ = [
    "UpdateRequest",
    "UpdateResult",
    "UpdateHandler",
    "encode_content",
]
