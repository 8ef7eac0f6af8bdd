"""
Context Binding Exercises

Four ways a function can lose its context, each fixed:

1. A record method reading its own field.
2. A shared (prototype) capability detached from its instance.
3. A free function handed out as a plain reference.
4. A class method extracted from its instance.

All values are computed once at import. ``exports`` holds the four results
under their public keys.

The unfixed forms read the global context and return None, except the
class method, which stays strict and raises UnboundContextError.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .core import Entity, EntityConfig, method, function, bind, detach, BindingError

logger = logging.getLogger(__name__)


# ----------------------------------
# 1. record method

class MessageHolder(Entity):
    """Record holding one message."""
    message: str

    @method
    def get_message(this):
        return this.message


class ArrowMessageHolder(Entity):
    """Same record with get_message in arrow form: it never sees the record."""
    model_config = EntityConfig(strict_context=False)
    message: str

    @method(lexical=True)
    def get_message(this):
        return this.message


message_object = MessageHolder(message="Hello, World!")


# ----------------------------------
# 2. prototype capability

class Pet(Entity):
    model_config = EntityConfig(strict_context=False)
    name: str


def _get_name(this):
    return this.name

Pet.prototype["get_name"] = _get_name

cat = Pet(name="Fluffy")

get_name = detach(cat, "get_name", bound=True)

pet_result = get_name()


# ----------------------------------
# 3. free function

object2 = MessageHolder(message="Hello, World!")


@function(strict=False)
def log_message(this):
    return this.message

object2_result = bind(log_message, object2)


# ----------------------------------
# 4. class method

class Rectangle(Entity):
    width: int | float
    height: int | float

    @method
    def get_area(this):
        return this.width * this.height


rectangle = Rectangle(width=10, height=20)

area_func = detach(rectangle, "get_area", bound=True)


# Keys keep their public names. Members of the exported records follow
# Python naming, so the message accessor is `get_message`.
exports: Dict[str, Any] = {
    "object": message_object,
    "petResult": pet_result,
    "object2Result": object2_result,
    "areaFunc": area_func,
}


def unbound_get_name():
    """get_name detached from ``cat`` without binding."""
    return detach(cat, "get_name")


def unbound_log_message():
    return log_message


def unbound_area_func():
    """get_area detached from ``rectangle`` without binding."""
    return detach(rectangle, "get_area")


@dataclass
class Scenario:
    """One exercise: the exported key, what it should produce and how to read it."""
    key: str
    title: str
    expected: Any
    resolve: Callable[[], Any]


@dataclass
class ScenarioResult:
    scenario: Scenario
    actual: Any = None
    error: Optional[BindingError] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.scenario.expected


SCENARIOS: List[Scenario] = [
    Scenario("object", "record method", "Hello, World!", lambda: exports["object"].get_message()),
    Scenario("petResult", "detached prototype capability", "Fluffy", lambda: exports["petResult"]),
    Scenario("object2Result", "bound free function", "Hello, World!", lambda: exports["object2Result"]()),
    Scenario("areaFunc", "extracted class method", 200, lambda: exports["areaFunc"]()),
]


def verify(scenarios: Optional[List[Scenario]] = None) -> List[ScenarioResult]:
    """
    Evaluate each scenario and compare it with its expected value.

    A BindingError raised by a scenario is recorded on its result.
    Any other exception propagates.
    """
    results = []
    for scenario in scenarios if scenarios is not None else SCENARIOS:
        try:
            result = ScenarioResult(scenario, actual=scenario.resolve())
        except BindingError as e:
            result = ScenarioResult(scenario, error=e)
        if not result.passed:
            logger.warning(f"Scenario {scenario.key} ({scenario.title}) failed: "
                           f"expected {scenario.expected!r}, got {result.error or result.actual!r}")
        results.append(result)
    logger.debug(f"Verified {len(results)} scenarios, {sum(r.passed for r in results)} passed")
    return results
