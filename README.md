# scenebot

scenebot holds the building blocks for driving a running user interface
from a test: a path syntax for addressing items, abstract interfaces a
toolkit backend implements, commands that query a scene and hand their
answer back through a future, and conversion of values to and from the
XML-RPC wire format.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `scenebot.pathparser`: `parse_path_string` splits a path at unescaped
  slashes and drops empty components; `format_path_string` joins
  components again, escaping backslashes and slashes.
- `scenebot.item_path`: `ItemPath`, a sequence of `Component`s, each
  holding one selector (`NameSelector`, `PropertySelector`,
  `TypeSelector`, `ValueSelector`, `PropertyValueSelector`).
- `scenebot.geometry`: the dataclasses `Size`, `Point` and `Rect`
  (`Rect.from_values(x, y, width, height)`).
- `scenebot.pasteboard`: `PasteboardContent`, a list of URLs for a drop,
  and `make_pasteboard_content_with_urls`.
- `scenebot.scene`: the abstract classes `Scene`, `Item` and `Events` that
  a toolkit backend implements, the flags `MouseButton` and `KeyModifier`,
  and `MethodInvocationError`.
- `scenebot.environment`: `ExecuterState`, which collects error messages,
  and `CommandEnvironment`, which gives a command its `scene` and `state`.
- `scenebot.command`: the abstract `Command` (`execute(env)` and
  `can_execute_now(env)`, which by default returns `True`) and `CustomCmd`,
  built from two callables.
- `scenebot.queries`: commands that answer through `command.future`, a
  `concurrent.futures.Future`.
- `scenebot.rpc_values`: `to_variant`, `from_variant`, `unpack_param`,
  `RpcFunction` and `InvalidParamsError`.

## Item paths

The first component of a path names a window; each further component is a
selector:

| Component        | Selector                                          |
|------------------|---------------------------------------------------|
| `okButton`       | `NameSelector("okButton")`                        |
| `.contentItem`   | `PropertySelector("contentItem")`                 |
| `#Button`        | `TypeSelector("Button")`                          |
| `"Cancel"`       | `ValueSelector("Cancel")`                         |
| `(enabled=true)` | `PropertyValueSelector("enabled", "true")`        |

A parenthesised component without `=` is a plain name. A backslash escapes
the next character, so `a\/b` is one component named `a/b`.

```python
from scenebot.item_path import ItemPath

path = ItemPath('mainWindow/#Button/"Cancel"')
print(len(path))               # 3
print(path.root_component())   # mainWindow
print(path.sub_path(1))        # #Button/"Cancel"
```

`root_component()` raises `IndexError` on an empty path; `sub_path` with an
offset at or beyond the length returns an empty path.

## Scenes and query commands

Implement `Scene`, `Item` and `Events` for your toolkit. `Scene.item_at_path`
returns an `Item` or `None`; `Item.bounds()` defaults to a `Rect` built
from `position()` and `size()`; `Item.invoke_method` raises
`MethodInvocationError` when the call cannot be made.

The query commands in `scenebot.queries` are:

- `ExistsAndVisible(path)`: `True` if the item exists and is visible.
- `GetBoundingBox(path)`: the item's bounds, or an all-zero `Rect` and a
  reported error if it is missing.
- `GetProperty(path, property_name)`: the property as a string, or `""`
  and a reported error.
- `GetTestStatus()`: the errors reported so far.
- `InvokeMethod(path, method, args)`: the method's return value, or `None`
  and a reported error if the item is missing or the call fails.
- `ScreenshotAsBase64(target_item_path)`: what the scene's
  `take_screenshot_as_base64` returns.
- `WaitForItem(path, max_wait_ms)`: not ready on its first check (that
  check starts its timer); afterwards ready once the item exists or the
  time is up, and answers whether the item was found and visible. A
  `clock` callable returning seconds may be passed in.

```python
from scenebot.environment import CommandEnvironment
from scenebot.queries import GetProperty

command = GetProperty("mainWindow/resultLabel", "text")
env = CommandEnvironment(my_scene)      # your Scene implementation
if command.can_execute_now(env):
    command.execute(env)
print(command.future.result())
print(env.state.errors_description())   # errors, one per line
```

## RPC values

`to_variant` turns decoded XML-RPC values into plain Python values
(`None`, `bool`, `int`, `float`, `str`, `datetime`, lists, dicts with
string keys) and raises `InvalidParamsError` for anything else.
`from_variant` goes the other way, dropping fractional seconds from times,
and raises `TypeError` for values it cannot encode.

`RpcFunction` wraps a callable whose parameters are checked by kind
(`int`, `uint`, `double`, `string`, `string_list`, `variant`,
`variant_list`):

```python
from scenebot.rpc_values import InvalidParamsError, RpcFunction

read = RpcFunction("echo", "Return the text | echo(string text)", lambda text: text, ("string",))
print(read("hello"))    # hello

try:
    read(42)
except InvalidParamsError as error:
    print(error.code, error)   # -32602 Invalid parameters. Expected String.
```

## What this package does not do

- It has no queue or executer that runs commands on the main thread;
  you call `can_execute_now` and `execute` yourself.
- It has no commands that send input: no clicks, drags, drops, key
  presses, text input, property setting, waits or quit commands.
- It has no network server and no command-line program; `RpcFunction`
  only checks and converts values and must be registered with an
  XML-RPC server of your choosing.
- It ships no `Scene` implementation for any toolkit.