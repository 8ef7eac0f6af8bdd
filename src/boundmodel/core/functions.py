"""
Context Functions

A context function receives its context (``this``) at call time as its
first argument. Calling it plainly means there is no context. Binding
fixes the context for good, so a bound function can be passed around
and called later without its owner.
"""

import functools
import logging
from typing import Any, Callable, Optional

from .errors import UnboundContextError
from .utils import GlobalContext

logger = logging.getLogger(__name__)


class ContextFunction:
    """A function whose context is supplied by the caller."""

    def __init__(self, func: Callable, *, name: Optional[str] = None, strict: bool = True):
        functools.update_wrapper(self, func)
        self.func = func
        self.name = name or getattr(func, "__name__", type(func).__name__)
        self.strict = strict

    def _resolve(self, this):
        if this is not None:
            return this
        if self.strict:
            raise UnboundContextError(f"{self.name}() was called without a context")
        logger.warning(f"{self.name}() was called without a context, falling back to the global context")
        return GlobalContext()

    def __call__(self, *args, **kwargs) -> Any:
        return self.call(None, *args, **kwargs)

    def call(self, this, *args, **kwargs) -> Any:
        """Invoke with an explicit context."""
        return self.func(self._resolve(this), *args, **kwargs)

    def apply(self, this, args=(), kwargs=None) -> Any:
        """Invoke with an explicit context and packed arguments."""
        return self.call(this, *args, **(kwargs or {}))

    def bind(self, this, *args) -> "BoundFunction":
        """Return a function whose context is fixed to ``this``."""
        logger.debug(f"Binding {self.name}() to {this!r}")
        return BoundFunction(self, this, *args)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class LexicalFunction(ContextFunction):
    """A function that keeps the context it was defined in (arrow-function form)."""

    def __init__(self, func: Callable, *, captured=None, name: Optional[str] = None, strict: bool = True):
        super().__init__(func, name=name, strict=strict)
        self.captured = captured

    def call(self, this, *args, **kwargs) -> Any:
        # the caller's context never reaches a lexical function
        return super().call(self.captured, *args, **kwargs)


class BoundFunction:
    """A context function with a permanent context."""

    def __init__(self, function: ContextFunction, this, *args):
        self.function = function
        self.this = this
        self.args = args
        self.__name__ = f"bound {function.name}"
        self.__doc__ = function.__doc__

    @property
    def name(self) -> str:
        return self.__name__

    def __call__(self, *args, **kwargs) -> Any:
        return self.function.call(self.this, *self.args, *args, **kwargs)

    def call(self, this, *args, **kwargs) -> Any:
        """Invoke, ignoring ``this``."""
        return self(*args, **kwargs)

    def apply(self, this, args=(), kwargs=None) -> Any:
        return self(*args, **(kwargs or {}))

    def bind(self, this, *args) -> "BoundFunction":
        """Pre-fill more arguments. The original context stays."""
        return BoundFunction(self.function, self.this, *self.args, *args)

    def __repr__(self) -> str:
        return f"BoundFunction({self.function.name}, this={self.this!r})"


def function(fn=None, *, strict: bool = True):
    """
    Turn a plain function into a context function.

    The first parameter of the decorated function receives the context.

    Example:
        ```python
        @function
        def log_message(this):
            return this.message

        log_message.bind(holder)()
        ```
    """
    def decorator(func):
        return ContextFunction(func, strict=strict)

    if fn is not None:
        return decorator(fn)

    return decorator


def lexical(fn=None, *, captured=None, strict: bool = True):
    """Turn a plain function into a lexical function closed over ``captured``."""
    def decorator(func):
        return LexicalFunction(func, captured=captured, strict=strict)

    if fn is not None:
        return decorator(fn)

    return decorator


def bind(target, this, *args) -> BoundFunction:
    """
    Bind ``target`` to ``this``.

    Args:
        target: A context function, a bound function or any callable whose
            first parameter receives the context
        this: The context to fix
        *args: Leading arguments to pre-fill

    Returns:
        A BoundFunction
    """
    if isinstance(target, (ContextFunction, BoundFunction)):
        return target.bind(this, *args)
    if callable(target):
        return ContextFunction(target).bind(this, *args)
    raise TypeError(f"Cannot bind {target!r}: it is not callable")
