import pytest

from patternkit.builder import (
    Builder,
    ComputerA,
    ComputerBuilder,
    Director,
    Product,
    main,
)

HEADER = "----------开始组装电脑A---------"
FOOTER = "----------成功组装电脑A---------"


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Product()
    with pytest.raises(TypeError):
        Builder()


def test_empty_computer_shows_only_frame(capsys):
    ComputerA().show()
    assert capsys.readouterr().out.splitlines() == [HEADER, FOOTER]


def test_parts_shown_in_insertion_order(capsys):
    computer = ComputerA()
    computer.set_mouse("m")
    computer.set_display("d")
    computer.set_keyboard("k")
    computer.set_host("h")
    computer.show()
    assert capsys.readouterr().out.splitlines() == [HEADER, "m", "d", "k", "h", FOOTER]


def test_director_returns_builder_product():
    builder = ComputerBuilder()
    product = Director(builder).create_computer("d", "h", "k", "m")
    assert product is builder.product


def test_director_builds_in_fixed_order(capsys):
    product = Director(ComputerBuilder()).create_computer("disp", "host", "kb", "mouse")
    product.show()
    assert capsys.readouterr().out.splitlines() == [
        HEADER, "disp", "host", "kb", "mouse", FOOTER,
    ]


def test_builder_accumulates_across_runs(capsys):
    director = Director(ComputerBuilder())
    director.create_computer("a", "b", "c", "d")
    product = director.create_computer("e", "f", "g", "h")
    product.show()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:-1] == ["a", "b", "c", "d", "e", "f", "g", "h"]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        HEADER, "联想显示器", "外星人主机", "雷蛇键盘", "罗技鼠标", FOOTER,
    ]