"""
Session module.

An authenticated session owns the cookie-retaining HTTP client and tracks
whether the messaging backend has been warmed up.
"""
from .models import LibrusSession

__all__ = [
    'LibrusSession',
]
