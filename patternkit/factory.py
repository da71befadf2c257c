"""Simple factory: creating shapes from their type name."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shape(ABC):
    """A drawable shape."""

    name: str = "Shape"

    @abstractmethod
    def draw(self) -> str:
        """Draw the shape and return the line written."""


class Circle(Shape):
    name = "Circle"

    def draw(self) -> str:
        line = f"draw a {self.name}"
        print(line)
        return line


class Rectangle(Shape):
    name = "Rectangle"

    def draw(self) -> str:
        line = f"draw a {self.name}"
        print(line)
        return line


class ShapeFactory:
    """Creates shapes by name."""

    _shapes: dict[str, type[Shape]] = {
        "Circle": Circle,
        "Rectangle": Rectangle,
    }

    def get_shape(self, shape_type: str) -> Shape | None:
        """Return a new shape of the named type, or None for an unknown name."""
        shape_class = self._shapes.get(shape_type)
        return shape_class() if shape_class is not None else None


def main(argv: list[str] | None = None) -> int:
    """Create and draw one circle and one rectangle."""
    factory = ShapeFactory()
    factory.get_shape("Circle").draw()
    factory.get_shape("Rectangle").draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())