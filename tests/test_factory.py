import pytest

from patternkit.factory import Circle, Rectangle, Shape, ShapeFactory, main


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


@pytest.mark.parametrize("name, cls", [("Circle", Circle), ("Rectangle", Rectangle)])
def test_factory_creates_named_shape(name, cls):
    assert type(ShapeFactory().get_shape(name)) is cls


@pytest.mark.parametrize("name", ["circle", "Triangle", ""])
def test_unknown_type_gives_none(name):
    assert ShapeFactory().get_shape(name) is None


def test_factory_returns_fresh_instances():
    factory = ShapeFactory()
    first = factory.get_shape("Circle")
    second = factory.get_shape("Circle")
    assert type(first) is type(second) is Circle
    assert first is not second


def test_draw_output(capsys):
    ShapeFactory().get_shape("Circle").draw()
    ShapeFactory().get_shape("Rectangle").draw()
    assert capsys.readouterr().out.splitlines() == ["draw a Circle", "draw a Rectangle"]


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["draw a Circle", "draw a Rectangle"]