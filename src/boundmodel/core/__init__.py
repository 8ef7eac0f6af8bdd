"""
boundmodel Core Module

Records, context functions and the descriptors that bind them.
"""

from .entity import Entity, EntityConfig, detach
from .context import method, ContextInfo
from .descriptors import BehaviorTable, ContextMethodDescriptor
from .functions import ContextFunction, LexicalFunction, BoundFunction, function, lexical, bind
from .errors import BindingError, UnboundContextError, CapabilityNotFoundError
from .utils import singleton, GlobalContext

__all__ = [
    "Entity",
    "EntityConfig",
    "detach",
    "method",
    "ContextInfo",
    "BehaviorTable",
    "ContextMethodDescriptor",
    "ContextFunction",
    "LexicalFunction",
    "BoundFunction",
    "function",
    "lexical",
    "bind",
    "BindingError",
    "UnboundContextError",
    "CapabilityNotFoundError",
    "singleton",
    "GlobalContext",
]
