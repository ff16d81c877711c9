"""
Signup Relay Core
=================

Shared configuration for signup relay modules.
"""

from .config import Config

__all__ = ['Config']
