import xmlrpc.client
from datetime import datetime

import pytest

from scenebot.rpc_values import (
    InvalidParamsError,
    RpcFunction,
    from_variant,
    to_variant,
    unpack_param,
)


@pytest.mark.parametrize("value", [None, True, False, 7, -3, 2.5, "text"])
def test_to_variant_keeps_scalars(value):
    result = to_variant(value)
    assert result == value
    assert type(result) is type(value)


def test_to_variant_converts_datetime():
    value = xmlrpc.client.DateTime("20240102T03:04:05")
    assert to_variant(value) == datetime(2024, 1, 2, 3, 4, 5)


def test_to_variant_nested_containers():
    value = {"list": (1, "a", [True]), "inner": {"x": 1.5}}
    assert to_variant(value) == {"list": [1, "a", [True]], "inner": {"x": 1.5}}


def test_to_variant_rejects_non_string_keys():
    with pytest.raises(InvalidParamsError, match="dict keys must be a string"):
        to_variant({1: "a"})


def test_to_variant_rejects_binary():
    with pytest.raises(InvalidParamsError, match="unknown parameter type"):
        to_variant(xmlrpc.client.Binary(b"abc"))


def test_from_variant_drops_fractional_seconds():
    moment = datetime(2021, 6, 7, 8, 9, 10, 123456)
    encoded = from_variant(moment)
    assert isinstance(encoded, xmlrpc.client.DateTime)
    assert to_variant(encoded) == moment.replace(microsecond=0)


def test_from_variant_rejects_unknown_type():
    with pytest.raises(TypeError):
        from_variant(object())


def test_from_variant_rejects_non_string_keys():
    with pytest.raises(TypeError):
        from_variant({3: "x"})


def test_round_trip_through_wire_format():
    payload = {
        "numbers": [1, 2.5, -4],
        "flags": [True, False],
        "name": "button",
        "when": datetime(2020, 5, 6, 7, 8, 9),
        "nothing": None,
    }
    encoded = xmlrpc.client.dumps((from_variant(payload),), allow_none=True)
    (decoded,), _ = xmlrpc.client.loads(encoded)
    assert to_variant(decoded) == payload


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        (5, "int", 5),
        (5, "double", 5.0),
        (2.5, "double", 2.5),
        (3, "uint", 3),
        ("abc", "string", "abc"),
        (["a", "b"], "string_list", ["a", "b"]),
        ([1, "x"], "variant_list", [1, "x"]),
        ({"k": 1}, "variant", {"k": 1}),
    ],
)
def test_unpack_param_accepts(value, kind, expected):
    assert unpack_param(value, kind) == expected


@pytest.mark.parametrize(
    ("value", "kind", "message"),
    [
        ("1", "int", "Expected Int."),
        (True, "int", "Expected Int."),
        ("1.0", "double", "Expected double."),
        (-1, "uint", "Expected Int."),
        (1.5, "uint", "Expected Int."),
        (3, "string", "Expected String."),
        ("ab", "string_list", "Expected Array of Strings."),
        (["a", 1], "string_list", "Expected Array of Strings."),
        ("ab", "variant_list", "Expected Array."),
    ],
)
def test_unpack_param_rejects(value, kind, message):
    with pytest.raises(InvalidParamsError) as info:
        unpack_param(value, kind)
    assert message in str(info.value)


def test_unpack_param_unknown_kind():
    with pytest.raises(ValueError):
        unpack_param(1, "complex")


def test_rpc_function_checks_parameter_count():
    function = RpcFunction("add", "add two", lambda a, b: a + b, ("int", "int"))
    with pytest.raises(InvalidParamsError, match="Number of parameters incorrect"):
        function(1)


def test_rpc_function_converts_parameters_and_result():
    seen = []

    def handler(path, ratio):
        seen.append((path, ratio))
        return [ratio, ratio]

    function = RpcFunction("scale", "scale it", handler, ("string", "double"))
    assert function("win/item", 2) == [2.0, 2.0]
    assert seen == [("win/item", 2.0)]
    assert isinstance(seen[0][1], float)


def test_rpc_function_void_result_is_none():
    calls = []
    function = RpcFunction("quit", "Close the app", lambda: calls.append("quit"))
    assert function() is None
    assert calls == ["quit"]


def test_rpc_function_rejects_wrong_parameter_type():
    function = RpcFunction("wait", "wait", lambda ms: None, ["int"])
    assert function.param_kinds == ("int",)
    with pytest.raises(InvalidParamsError, match="Expected Int."):
        function("ten")


def test_rpc_function_rejects_unknown_kind():
    with pytest.raises(ValueError):
        RpcFunction("f", "f", lambda x: x, ("blob",))