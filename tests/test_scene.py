import pytest

from scenebot.geometry import Point, Rect, Size
from scenebot.item_path import ItemPath
from scenebot.scene import Events, Item, KeyModifier, MethodInvocationError, MouseButton, Scene


class FakeItem(Item):
    def __init__(self, size=Size(10.0, 20.0), position=Point(1.0, 2.0)):
        self.props = {}
        self._size = size
        self._position = position

    def size(self):
        return self._size

    def position(self):
        return self._position

    def string_property(self, name):
        return self.props.get(name, "")

    def set_string_property(self, name, value):
        self.props[name] = value

    def invoke_method(self, method, args):
        if method != "echo":
            raise MethodInvocationError(method)
        return list(args)

    def visible(self):
        return True


class FakeScene(Scene):
    def __init__(self, items):
        self.items = items

    def item_at_path(self, path):
        return self.items.get(str(path))

    def events(self):
        raise NotImplementedError

    def take_screenshot(self, target_item, file_path):
        pass

    def take_screenshot_as_base64(self, target_item):
        return ""


def test_abstract_classes_cannot_be_instantiated():
    for cls in (Item, Events, Scene):
        with pytest.raises(TypeError):
            cls()


def test_default_bounds_combine_position_and_size():
    item = FakeItem()
    assert item.bounds() == Rect(item.position(), item.size())


def test_default_bounds_fields():
    item = FakeItem(Size(30.0, 40.0), Point(5.0, 6.0))
    bounds = item.bounds()
    assert bounds.top_left == Point(5.0, 6.0)
    assert bounds.size == Size(30.0, 40.0)


def test_scene_lookup():
    item = FakeItem()
    scene = FakeScene({"window/item": item})
    assert scene.item_at_path(ItemPath("window/item")) is item
    assert scene.item_at_path(ItemPath("window/other")) is None


def test_mouse_button_flags_combine():
    buttons = MouseButton(MouseButton.LEFT | MouseButton.RIGHT)
    assert MouseButton.LEFT in buttons
    assert MouseButton.MIDDLE not in buttons
    assert MouseButton(buttons ^ MouseButton.LEFT) == MouseButton.RIGHT


def test_key_modifier_flags_distinct():
    mods = [KeyModifier.SHIFT, KeyModifier.CONTROL, KeyModifier.ALT, KeyModifier.META]
    combined = KeyModifier(KeyModifier.NONE)
    for mod in mods:
        assert mod not in combined
        combined = KeyModifier(combined | mod)
    assert all(mod in combined for mod in mods)