import inspect
import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from .descriptors import BehaviorTable, ContextMethodDescriptor
from .errors import CapabilityNotFoundError
from .functions import ContextFunction, LexicalFunction

logger = logging.getLogger(__name__)


class EntityConfig(ConfigDict):
    """Configuration for all entity classes."""
    strict_context: bool


class Entity(BaseModel):
    """Base class for immutable records with context-dependent capabilities."""
    model_config = EntityConfig(frozen=True, strict_context=True)

    prototype: ClassVar[BehaviorTable]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        # Every class shares its own behavior table between its instances
        cls.prototype = BehaviorTable(cls)

        # Replace @method functions with descriptors that bind on instance access
        for attr_name, attr in list(vars(cls).items()):
            info = getattr(attr, '_context_info', None)
            if info is None or not inspect.isfunction(attr):
                continue
            strict = cls.model_config.get("strict_context", True) if info.strict is None else info.strict
            if info.lexical:
                function = LexicalFunction(attr, strict=strict)
            else:
                function = ContextFunction(attr, strict=strict)
            setattr(cls, attr_name, ContextMethodDescriptor(attr_name, cls.__name__, function))

    @classmethod
    def capabilities(cls) -> list[str]:
        """Names of every context capability exposed by this class."""
        names, seen = set(), set()
        for klass in cls.__mro__:
            for attr_name, attr in vars(klass).items():
                if attr_name in seen:
                    continue
                seen.add(attr_name)
                if isinstance(attr, ContextMethodDescriptor):
                    names.add(attr_name)
        return sorted(names)


def detach(record: Entity, name: str, *, bound: bool = False):
    """
    Extract a capability from a record without invoking it.

    A detached capability no longer knows its record, so calling it runs
    without a context. Pass ``bound=True`` to bind it to the record first.

    Args:
        record: Record to extract from
        name: Capability or field name
        bound: Bind the capability to ``record`` before returning it

    Returns:
        The context function (or a BoundFunction when ``bound``). A field or
        a plain method resolves as normal attribute access
    """
    if name in type(record).model_fields:
        return getattr(record, name)

    # the first class defining the name wins, as in normal attribute lookup
    for klass in type(record).__mro__:
        if name not in vars(klass):
            continue
        attr = vars(klass)[name]
        if not isinstance(attr, ContextMethodDescriptor):
            return getattr(record, name)
        function = attr.function
        if bound:
            return function.bind(record)
        logger.debug(f"Detached {type(record).__name__}.{name} without a context")
        return function

    raise CapabilityNotFoundError(f"{type(record).__name__} has no capability named {name!r}")
