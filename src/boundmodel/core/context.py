"""
Method Marker Decorator

The @method decorator only stores metadata on the function.
Entity classes turn marked functions into context functions when
the class is created.
"""

import inspect
from dataclasses import dataclass
from typing import Optional


@dataclass
class ContextInfo:
    """Metadata about a record method stored by the @method decorator."""
    name: str
    signature: inspect.Signature
    lexical: bool = False
    strict: Optional[bool] = None


def method(fn=None, *, lexical: bool = False, strict: Optional[bool] = None):
    """
    Mark a record method as a context-dependent capability.

    Args:
        fn: Function being decorated (when used without parentheses)
        lexical: Capture the defining context instead of the caller's
            (arrow-function form). On a record this is always "no context".
        strict: Raise on a missing context. None uses the record's
            ``strict_context`` setting.

    Returns:
        The same function with a _context_info attribute
    """
    def decorator(func):
        func._context_info = ContextInfo(
            name=func.__name__,
            signature=inspect.signature(func),
            lexical=lexical,
            strict=strict,
        )
        return func

    if fn is not None:
        return decorator(fn)

    return decorator
