"""
Factory Method demo.

Creators override ``factory_method`` to decide which product to build. The
set of products is closed and selected through a mapping from discriminator
to creator class.
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalog.demos.base import DemoWriter, check
from pattern_catalog.domain.exceptions import InvalidSelectorError

PATTERN_NAME = "factory-method"


class Product(ABC):
    """Common capability every product offers."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProductA(Product):
    def operation(self) -> str:
        return "ConcreteProductA operation."


class ConcreteProductB(Product):
    def operation(self) -> str:
        return "ConcreteProductB operation."


class Creator(ABC):
    """Declares the factory method; subclasses pick the product."""

    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: the same creator code just worked with {product.operation()}"


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


CREATORS: Dict[str, Type[Creator]] = {
    "A": ConcreteCreatorA,
    "B": ConcreteCreatorB,
}


def get_creator(selector: str) -> Creator:
    """
    Resolve a creator from its discriminator.

    Raises:
        InvalidSelectorError: If the selector is not one of ``CREATORS``
    """
    key = (selector or "").strip().upper()
    creator_class = CREATORS.get(key)
    if creator_class is None:
        raise InvalidSelectorError(selector, valid_selectors=sorted(CREATORS))
    return creator_class()


def create_product(selector: str) -> Product:
    """Build the product for a discriminator."""
    return get_creator(selector).factory_method()


def run_demo(write: DemoWriter) -> None:
    """Build each known product, then show an unknown selector is rejected."""
    expected = {
        "A": "ConcreteProductA operation.",
        "B": "ConcreteProductB operation.",
    }
    for selector, expected_output in expected.items():
        output = create_product(selector).operation()
        write(f"Selector {selector}: {output}")
        check(output == expected_output, PATTERN_NAME, f"selector {selector} produced {output!r}")

    write(get_creator("A").some_operation())

    try:
        create_product("Z")
    except InvalidSelectorError as e:
        write(f"Selector Z: rejected ({e})")
    else:
        check(False, PATTERN_NAME, "selector Z was accepted")
