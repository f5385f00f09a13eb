"""
Configuration management for lq pipelines.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, Optional


class FlatMapNonePolicy(Enum):
    """What flat_map does when its transform returns None."""
    RAISE = "raise"
    EMPTY = "empty"


@dataclass
class LqConfig:
    """Global configuration for lq pipelines."""

    # flat_map misuse handling
    flat_map_none_policy: FlatMapNonePolicy = FlatMapNonePolicy.RAISE
    flat_map_scalars: bool = False  # Forward non-iterable results as one element

    _instance: ClassVar[Optional['LqConfig']] = None

    @classmethod
    def get_instance(cls) -> 'LqConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        enum_fields = {
            f.name: f.type for f in fields(cls)
            if isinstance(f.type, type) and issubclass(f.type, Enum)
        }
        for key, value in kwargs.items():
            if not hasattr(instance, key):
                continue
            if key in enum_fields and isinstance(value, str):
                value = enum_fields[key](value)
            setattr(instance, key, value)


# Global configuration instance
config = LqConfig.get_instance()
