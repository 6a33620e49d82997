"""Providers for mvxkit."""

from ..providers.base import BaseProvider
from ..providers.http import HTTPProvider

__all__ = [
    "BaseProvider",
    "HTTPProvider",
]
