import logging
from typing import Callable, Dict, Iterator, Optional

from .errors import BindingError
from .functions import ContextFunction, LexicalFunction

logger = logging.getLogger(__name__)


class ContextMethodDescriptor:
    """Bind a context function to the instance it is read from (method-call form)."""

    def __init__(self, method_name: str, entity_class_name: str, function: ContextFunction):
        self.method_name = method_name
        self.entity_class_name = entity_class_name
        self.function = function

    def __get__(self, instance, owner):
        #  class access  →  the shared, unbound function
        if instance is None:
            return self.function

        #  lexical functions keep the context they captured
        if isinstance(self.function, LexicalFunction):
            return self.function

        return self.function.bind(instance)

    def __repr__(self) -> str:
        return f"<context method {self.entity_class_name}.{self.method_name}>"


class BehaviorTable:
    """
    Capabilities shared by every instance of a record class.

    Each name maps to one implementation. The context is supplied when the
    capability is read from an instance, or explicitly with ``call``/``bind``.

    Example:
        ```python
        def get_name(this):
            return this.name

        Pet.prototype["get_name"] = get_name
        Pet(name="Fluffy").get_name()
        ```
    """

    def __init__(self, owner):
        self.owner = owner
        self._functions: Dict[str, ContextFunction] = {}

    def _strict(self, strict: Optional[bool]) -> bool:
        if strict is not None:
            return strict
        return self.owner.model_config.get("strict_context", True)

    def define(self, fn=None, *, name: Optional[str] = None, strict: Optional[bool] = None):
        """Register the decorated function under ``name`` (defaults to its own name)."""
        def decorator(func: Callable):
            key = name or func.__name__
            self._install(key, ContextFunction(func, name=key, strict=self._strict(strict)))
            return func

        if fn is not None:
            return decorator(fn)

        return decorator

    def _install(self, name: str, function: ContextFunction) -> None:
        if name in self.owner.model_fields:
            raise BindingError(f"{self.owner.__name__}.{name} is a field and cannot hold a capability")
        self._functions[name] = function
        setattr(self.owner, name, ContextMethodDescriptor(name, self.owner.__name__, function))
        logger.debug(f"Registered {self.owner.__name__}.prototype.{name}")

    def __setitem__(self, name: str, func: Callable) -> None:
        if not isinstance(func, ContextFunction):
            func = ContextFunction(func, name=name, strict=self._strict(None))
        self._install(name, func)

    def __getitem__(self, name: str) -> ContextFunction:
        return self._functions[name]

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def names(self) -> list[str]:
        return list(self._functions)

    def __repr__(self) -> str:
        return f"BehaviorTable({self.owner.__name__}: {', '.join(self._functions)})"
