"""
Model resolution: which memory model is responsible for an item.

Two configurations are supported:
- SingleModel: one model shared by every item
- PerItemModels: an explicit item id -> model mapping (e.g. one preset per deck)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Mapping, Union

from ..core.errors import ConfigurationError, ModelNotFoundError
from .base import MemoryModel


class ModelResolver(ABC):
    """Lookup of the model for an item id."""

    @abstractmethod
    def resolve(self, item_id: int) -> MemoryModel:
        ...


@dataclass(frozen=True)
class SingleModel(ModelResolver):
    """Every item uses the same model."""
    model: MemoryModel

    def resolve(self, item_id: int) -> MemoryModel:
        return self.model


@dataclass(frozen=True)
class PerItemModels(ModelResolver):
    """
    Each item uses the model registered for it.

    There is no fallback: resolving an unregistered item raises
    ModelNotFoundError.
    """
    models: Mapping[int, MemoryModel] = field(default_factory=dict)

    def resolve(self, item_id: int) -> MemoryModel:
        try:
            return self.models[item_id]
        except KeyError:
            raise ModelNotFoundError(item_id) from None

    @staticmethod
    def from_presets(
        item_presets: Mapping[int, str], presets: Mapping[str, MemoryModel]
    ) -> "PerItemModels":
        """
        Build a mapping from item -> preset name and preset name -> model.

        Items sharing a preset share the same model instance.

        Raises:
            ConfigurationError: If an item refers to an unknown preset
        """
        models: Dict[int, MemoryModel] = {}
        for item_id, preset in item_presets.items():
            if preset not in presets:
                raise ConfigurationError(f"Item {item_id} refers to unknown preset {preset!r}")
            models[item_id] = presets[preset]
        return PerItemModels(models=models)


ModelSource = Union[ModelResolver, MemoryModel, Mapping[int, MemoryModel]]


def as_resolver(source: ModelSource) -> ModelResolver:
    """
    Wrap a model, a mapping of models, or an existing resolver.

    Raises:
        ConfigurationError: If source is none of these
    """
    if isinstance(source, ModelResolver):
        return source
    if isinstance(source, MemoryModel):
        return SingleModel(source)
    if isinstance(source, Mapping):
        return PerItemModels(models=dict(source))
    raise ConfigurationError(f"Expected a MemoryModel or a mapping of models, got {type(source).__name__}")
