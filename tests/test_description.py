from pointwise.matchers.description import Description


def test_str_joins_items_with_newlines():
    assert str(Description(["a", "b"])) == "a\nb"


def test_empty_description_renders_empty_string():
    assert str(Description()) == ""
    assert len(Description()) == 0


def test_bullet_list():
    assert str(Description(["a", "b"]).bullet_list()) == "* a\n* b"


def test_enumerate_starts_at_zero():
    assert str(Description(["a", "b"]).enumerate()) == "0. a\n1. b"


def test_indent():
    assert str(Description(["a", "b"]).indent()) == "  a\n  b"


def test_indented_bullet_list():
    rendered = str(Description(["first", "second"]).bullet_list().indent())
    assert rendered == "  * first\n  * second"


def test_multiline_items_align_under_prefix():
    description = Description(["has:\n  0. x", "y"]).enumerate()
    assert str(description) == "0. has:\n     0. x\n1. y"


def test_indent_applies_to_continuation_lines():
    description = Description(["a\nb"]).bullet_list().indent()
    assert str(description) == "  * a\n    b"


def test_formatting_returns_new_description():
    original = Description(["a"])
    original.bullet_list()
    assert list(original) == ["a"]
    assert original == Description(["a"])
