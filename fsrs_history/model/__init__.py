"""
Memory models and model resolution.
"""

from .base import MemoryModel
from .fsrs_model import FSRSModel
from .resolver import ModelResolver, ModelSource, PerItemModels, SingleModel, as_resolver

__all__ = [
    "MemoryModel",
    "FSRSModel",
    "ModelResolver",
    "ModelSource",
    "PerItemModels",
    "SingleModel",
    "as_resolver",
]
