"""
Modelos de entrada para bandcal
"""
from .event import NewEvent

__all__ = ["NewEvent"]
