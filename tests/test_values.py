"""
Value model tests.

Covers predicates, typed projections, number range checks, structural
equality and the conversion of Python primitives.
"""

import math

import pytest

import lintjson
from lintjson import FALSE
from lintjson import NULL
from lintjson import TRUE
from lintjson import JsonArray
from lintjson import JsonLiteral
from lintjson import JsonNumber
from lintjson import JsonObject
from lintjson import JsonString
from lintjson import NumberRangeError
from lintjson import TypeMismatchError
from lintjson import value_of

PREDICATES = [
    "is_null",
    "is_boolean",
    "is_true",
    "is_false",
    "is_number",
    "is_string",
    "is_array",
    "is_object",
]


@pytest.mark.parametrize(
    "value,true_predicates",
    [
        (NULL, {"is_null"}),
        (TRUE, {"is_boolean", "is_true"}),
        (FALSE, {"is_boolean", "is_false"}),
        (JsonNumber("23"), {"is_number"}),
        (JsonString("foo"), {"is_string"}),
        (JsonArray(), {"is_array"}),
        (JsonObject(), {"is_object"}),
    ],
)
def test_predicates(
    value: lintjson.JsonValue, true_predicates: set[str]
) -> None:
    """
    Validates that exactly the matching predicates answer true.
    """
    for predicate in PREDICATES:
        assert getattr(value, predicate)() is (predicate in true_predicates)


def test_projections_on_matching_variant() -> None:
    """
    Validates projections on the variant they belong to.
    """
    array = JsonArray()
    obj = JsonObject()

    assert TRUE.as_boolean() is True
    assert FALSE.as_boolean() is False
    assert JsonNumber("23").as_int() == 23
    assert JsonNumber("23").as_long() == 23
    assert JsonNumber("23.5").as_double() == 23.5
    assert JsonNumber("23.5").as_float() == 23.5
    assert JsonString("foo").as_string() == "foo"
    assert array.as_array() is array
    assert obj.as_object() is obj


@pytest.mark.parametrize(
    "value,projection,message",
    [
        (NULL, "as_boolean", "Not a boolean: null"),
        (JsonNumber("1"), "as_boolean", "Not a boolean: 1"),
        (TRUE, "as_int", "Not a number: true"),
        (JsonString("1"), "as_long", 'Not a number: "1"'),
        (NULL, "as_double", "Not a number: null"),
        (JsonArray(), "as_float", "Not a number: []"),
        (JsonNumber("1"), "as_string", "Not a string: 1"),
        (JsonArray(), "as_object", "Not an object: []"),
        (JsonObject(), "as_array", "Not an array: {}"),
    ],
)
def test_projection_on_wrong_variant(
    value: lintjson.JsonValue, projection: str, message: str
) -> None:
    """
    Validates that projections fail instead of coercing.
    """
    with pytest.raises(TypeMismatchError) as exc_info:
        getattr(value, projection)()

    assert str(exc_info.value) == message
    assert isinstance(exc_info.value, TypeError)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", 0),
        ("-0", 0),
        ("2147483647", 2**31 - 1),
        ("-2147483648", -(2**31)),
    ],
)
def test_as_int_within_range(text: str, expected: int) -> None:
    assert JsonNumber(text).as_int() == expected


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "1.0", "1e2", "0.5"],
)
def test_as_int_rejects(text: str) -> None:
    with pytest.raises(NumberRangeError):
        JsonNumber(text).as_int()


def test_int_overflow_is_a_long() -> None:
    """
    Validates that 2^31 needs the 64-bit accessor.
    """
    value = lintjson.loads("2147483648")

    with pytest.raises(NumberRangeError, match="out of int range"):
        value.as_int()
    assert value.as_long() == 2147483648


def test_as_long_boundaries() -> None:
    assert JsonNumber("9223372036854775807").as_long() == 2**63 - 1
    assert JsonNumber("-9223372036854775808").as_long() == -(2**63)

    with pytest.raises(NumberRangeError):
        JsonNumber("9223372036854775808").as_long()
    with pytest.raises(NumberRangeError):
        JsonNumber("-9223372036854775809").as_long()
    with pytest.raises(NumberRangeError):
        JsonNumber("123456789012345678901234567890").as_long()
    with pytest.raises(NumberRangeError, match="Not an integral long"):
        JsonNumber("1.5").as_long()


def test_floating_point_projections() -> None:
    """
    Validates double and single precision conversion and overflow.
    """
    assert JsonNumber("1e308").as_double() == 1e308
    assert JsonNumber("-2.5E-3").as_double() == -0.0025
    assert JsonNumber("0.1").as_float() != 0.1
    assert JsonNumber("0.1").as_float() == pytest.approx(0.1, rel=1e-7)
    assert JsonNumber("3.4028234663852886e38").as_float() == (
        3.4028234663852886e38
    )

    with pytest.raises(NumberRangeError, match="double range"):
        JsonNumber("1e400").as_double()
    with pytest.raises(NumberRangeError, match="float range"):
        JsonNumber("1e39").as_float()
    with pytest.raises(NumberRangeError, match="float range"):
        JsonNumber("-1e39").as_float()


def test_number_keeps_source_text() -> None:
    """
    Validates that numbers are compared and written by their text.
    """
    value = lintjson.loads("1.0E+2")

    assert value == JsonNumber("1.0E+2")
    assert value != JsonNumber("100")
    assert JsonNumber("1.0") != JsonNumber("1")
    assert value.as_double() == 100.0
    assert lintjson.dumps(value) == "1.0E+2"


@pytest.mark.parametrize(
    "text", ["", "01", "+1", "1.", ".5", "1e", "0x10", "NaN", " 1"]
)
def test_number_constructor_validates(text: str) -> None:
    with pytest.raises(ValueError, match="Not a JSON number"):
        JsonNumber(text)


def test_literals() -> None:
    """
    Validates the shared literal constants.
    """
    assert JsonLiteral("null") == NULL
    assert JsonLiteral("true") == TRUE
    assert TRUE != FALSE
    assert NULL.text == "null"
    assert repr(TRUE) == "TRUE"
    assert str(FALSE) == "false"
    assert lintjson.loads("null") is NULL

    with pytest.raises(ValueError):
        JsonLiteral("None")


def test_equality_and_hash() -> None:
    """
    Validates structural equality across variants.
    """
    first = lintjson.loads('{"a": [1, "x", null], "b": {"c": true}}')
    second = lintjson.loads('{ "a" : [ 1 , "x" , null ] , "b" : {"c":true} }')

    assert first == second
    assert hash(first) == hash(second)
    assert first != lintjson.loads('{"b": {"c": true}, "a": [1, "x", null]}')
    assert JsonString("1") != JsonNumber("1")
    assert JsonString("a") == JsonString("a")
    assert hash(JsonString("a")) == hash(JsonString("a"))
    assert len({NULL, JsonLiteral("null"), TRUE}) == 2


def test_string_representations() -> None:
    value = JsonString('say "hi"')

    assert str(value) == '"say \\"hi\\""'
    assert repr(value) == "JsonString('say \"hi\"')"
    assert repr(JsonNumber("42")) == "JsonNumber('42')"
    assert value.to_string() == str(value)


@pytest.mark.parametrize(
    "obj,expected",
    [
        (None, NULL),
        (True, TRUE),
        (False, FALSE),
        (0, JsonNumber("0")),
        (-17, JsonNumber("-17")),
        (2**70, JsonNumber(str(2**70))),
        (1.0, JsonNumber("1")),
        (0.1, JsonNumber("0.1")),
        (-2.5, JsonNumber("-2.5")),
        (1e16, JsonNumber("1e+16")),
        (1.5e-7, JsonNumber("1.5e-07")),
        ("foo", JsonString("foo")),
        ("", JsonString("")),
    ],
)
def test_value_of(obj: object, expected: lintjson.JsonValue) -> None:
    assert value_of(obj) == expected


def test_value_of_returns_values_unchanged() -> None:
    array = JsonArray()
    assert value_of(array) is array
    assert value_of(None) is NULL


@pytest.mark.parametrize("obj", [math.nan, math.inf, -math.inf])
def test_value_of_rejects_non_finite_floats(obj: float) -> None:
    with pytest.raises(ValueError, match="not JSON compliant"):
        value_of(obj)


@pytest.mark.parametrize("obj", [[], {}, (), b"x", object()])
def test_value_of_rejects_other_types(obj: object) -> None:
    with pytest.raises(TypeError, match="is not a JSON value"):
        value_of(obj)


def test_string_constructor_requires_str() -> None:
    with pytest.raises(TypeError):
        JsonString(1)  # type: ignore[arg-type]
