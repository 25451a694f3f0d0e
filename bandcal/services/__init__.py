"""
Servicios de dominio para bandcal
"""
from .consolidation import AvailabilityConsolidator, StatusIndex, classify

__all__ = ["AvailabilityConsolidator", "StatusIndex", "classify"]
