"""
boundmodel - Explicit context binding for Python records

Models how a function finds its context ("this"): supplied by the caller,
captured where it was defined, or fixed for good by binding. Detaching a
capability from its record loses the context unless it was bound first.
"""

from .core import (
    Entity, EntityConfig, detach, method,
    BehaviorTable,
    ContextFunction, LexicalFunction, BoundFunction, function, lexical, bind,
    BindingError, UnboundContextError, CapabilityNotFoundError,
    GlobalContext,
)

__version__ = "0.1.0"

__all__ = [
    # Records
    'Entity',
    'EntityConfig',
    'detach',
    'method',
    'BehaviorTable',

    # Functions
    'ContextFunction',
    'LexicalFunction',
    'BoundFunction',
    'function',
    'lexical',
    'bind',
    'GlobalContext',

    # Errors
    'BindingError',
    'UnboundContextError',
    'CapabilityNotFoundError',
]
