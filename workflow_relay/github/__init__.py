"""
GitHub contents API module.
"""
from .models import FileLocation, RemoteFile
from .client import GitHubContentClient

__all__ = [
    "FileLocation",
    "RemoteFile",
    "GitHubContentClient",
]
