"""Resources module - Ready-made Resource implementations."""

from roadresource_core.resources.memory import MemoryResource

__all__ = [
    "MemoryResource",
]
