"""
Database module - datos de ejemplo
"""
from .seed import seed_all

__all__ = ["seed_all"]
