from manikinkit.color import CORNFLOWER_BLUE, ColorRGBA


def test_as_tuple_order():
    c = ColorRGBA(0.1, 0.2, 0.3, 0.4)
    assert c.as_tuple() == (0.1, 0.2, 0.3, 0.4)


def test_alpha_defaults_to_opaque():
    assert ColorRGBA(0.5, 0.5, 0.5).alpha == 1.0


def test_cornflower_blue():
    assert CORNFLOWER_BLUE.as_tuple() == (100.0 / 255.0, 149.0 / 255.0, 237.0 / 255.0, 1.0)


def test_channels_are_mutable():
    c = ColorRGBA()
    c.green = 0.75
    assert c.as_tuple()[1] == 0.75