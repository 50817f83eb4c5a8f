"""Unit tests for assertkit.equivalence — equivalent() and explain()."""
from __future__ import annotations

import enum
import itertools

import numpy as np
import pytest

from assertkit.equivalence import Explanation, Rule, equivalent, explain

_INTEGER_TYPES = [
    int,
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
]


class Flag(enum.StrEnum):
    ON = "hi"


class Meters(float):
    pass


class Opaque:
    def __eq__(self, other: object) -> bool:
        raise TypeError("not comparable")

    __hash__ = object.__hash__


class Explosive:
    def __eq__(self, other: object) -> bool:
        raise RuntimeError("boom")

    __hash__ = object.__hash__


# ===========================================================================
# Fast path
# ===========================================================================


class TestIdentical:
    @pytest.mark.parametrize(
        "value",
        [True, "hi", 0, -3, 2.5, 1 + 2j, (1, "a"), np.int8(4), np.float32(0.5), np.complex64(1j)],
    )
    def test_reflexive(self, value: object) -> None:
        assert equivalent(value, value)

    def test_none_equals_none(self) -> None:
        assert equivalent(None, None)

    def test_same_type_lists(self) -> None:
        assert equivalent([1, 2], [1, 2])

    def test_same_type_different_values(self) -> None:
        assert not equivalent("hi", "he")

    def test_nan_is_not_equivalent_to_itself(self) -> None:
        assert not equivalent(float("nan"), float("nan"))

    def test_same_nan_object_is_not_equivalent_to_itself(self) -> None:
        nan = float("nan")
        assert not equivalent(nan, nan)

    def test_same_complex_nan_object_is_not_equivalent_to_itself(self) -> None:
        nan = complex("nan")
        assert not equivalent(nan, nan)

    def test_same_nan_object_across_widths(self) -> None:
        nan = float("nan")
        assert not equivalent(nan, np.float32(nan))

    def test_comparison_errors_other_than_type_and_value_propagate(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            equivalent(Explosive(), Explosive())


class TestByteSequences:
    def test_equal_contents(self) -> None:
        assert equivalent(b"hi", b"hi")

    def test_different_contents(self) -> None:
        assert not equivalent(b"hi", b"he")

    def test_mixed_byte_sequence_types(self) -> None:
        assert equivalent(bytearray(b"hi"), memoryview(b"hi"))

    def test_bytes_never_equal_text(self) -> None:
        assert not equivalent(b"hi", "hi")

    def test_rule(self) -> None:
        assert explain(b"hi", b"he").rule is Rule.BYTES


class TestArrays:
    def test_equal_arrays(self) -> None:
        assert equivalent(np.array([1, 2]), np.array([1, 2]))

    def test_different_dtype(self) -> None:
        assert not equivalent(np.array([1, 2], dtype=np.int8), np.array([1, 2], dtype=np.int64))

    def test_different_shape(self) -> None:
        assert not equivalent(np.array([1, 2]), np.array([[1, 2]]))

    def test_array_against_list(self) -> None:
        assert not equivalent(np.array([1, 2]), [1, 2])

    def test_rule(self) -> None:
        assert explain(np.array([1]), np.array([1])).rule is Rule.ARRAY


# ===========================================================================
# Literal reduction
# ===========================================================================


class TestIntegerWidths:
    @pytest.mark.parametrize("left,right", list(itertools.product(_INTEGER_TYPES, repeat=2)))
    def test_zero_of_every_width_pair(self, left: type, right: type) -> None:
        assert equivalent(left(0), right(0))

    def test_signed_and_unsigned_positive(self) -> None:
        assert equivalent(np.int32(5), np.uint8(5))

    def test_negative_never_equals_unsigned(self) -> None:
        assert not equivalent(np.int32(-5), np.uint8(251))

    def test_negatives_of_different_widths(self) -> None:
        assert equivalent(np.int8(-5), -5)

    def test_int8_zero_equals_uint64_zero(self) -> None:
        assert equivalent(np.int8(0), np.uint64(0))

    def test_int_enum_by_value(self) -> None:
        assert equivalent(enum.IntEnum("Level", {"HIGH": 3}).HIGH, np.uint8(3))


class TestFloatsAndComplex:
    @pytest.mark.parametrize("left", [np.float32(1.0), np.float64(1.0), Meters(1.0), 1.0])
    def test_widths_compare_by_value(self, left: object) -> None:
        assert equivalent(left, 1.0)

    def test_float32_against_float64(self) -> None:
        assert equivalent(np.float32(1.0), np.float64(1.0))

    def test_different_float_values(self) -> None:
        assert not equivalent(np.float32(1.0), 0.0)

    def test_complex_widths(self) -> None:
        assert equivalent(np.complex64(1 + 1j), np.complex128(1 + 1j))

    def test_complex_against_python_complex(self) -> None:
        assert equivalent(np.complex64(1 + 1j), 1 + 1j)

    def test_complex_never_equals_float(self) -> None:
        assert not equivalent(np.complex64(1 + 1j), 1.0)
        assert not equivalent(np.complex64(1), 1.0)

    def test_complex_different_values(self) -> None:
        assert not equivalent(np.complex64(1 + 1j), np.complex128(1))

    def test_integer_never_equals_float(self) -> None:
        assert not equivalent(1, 1.0)


class TestNamedScalars:
    def test_numpy_bool_equals_true(self) -> None:
        assert equivalent(np.bool_(True), True)

    def test_numpy_bool_false_not_true(self) -> None:
        assert not equivalent(np.bool_(False), True)

    def test_str_enum_equals_text(self) -> None:
        assert equivalent(Flag.ON, "hi")

    def test_str_enum_different_text(self) -> None:
        assert not equivalent(Flag.ON, "he")

    def test_numpy_str(self) -> None:
        assert equivalent(np.str_("hi"), "hi")

    def test_bool_never_equals_integer(self) -> None:
        assert not equivalent(True, 1)


# ===========================================================================
# nil versus zero
# ===========================================================================


class TestNilVersusZero:
    @pytest.mark.parametrize("zero", [0, 0.0, -0.0, np.int8(0), np.uint64(0), np.float32(0)])
    def test_nil_equals_numeric_zero(self, zero: object) -> None:
        assert equivalent(None, zero)
        assert equivalent(zero, None)

    @pytest.mark.parametrize("value", ["", False, 0j, [], {}, (), b"", 1, 0.5, np.uint8(1)])
    def test_nil_does_not_equal(self, value: object) -> None:
        assert not equivalent(None, value)
        assert not equivalent(value, None)

    def test_rule(self) -> None:
        assert explain(None, 0).rule is Rule.NIL_ZERO


# ===========================================================================
# Robustness
# ===========================================================================


class TestNeverRaises:
    def test_comparison_error_is_not_equivalent(self) -> None:
        assert not equivalent(Opaque(), Opaque())

    def test_list_of_arrays(self) -> None:
        assert not equivalent([np.array([1, 2])], [np.array([1, 2])])

    def test_unrelated_objects(self) -> None:
        assert not equivalent(object(), object())


# ===========================================================================
# explain
# ===========================================================================


class TestExplain:
    @pytest.mark.parametrize(
        "left,right",
        [
            (None, None),
            (None, 0),
            (np.int32(5), np.uint8(5)),
            (np.int32(-5), np.uint8(251)),
            (b"hi", b"he"),
            (np.array([1]), [1]),
            ("hi", Flag.ON),
        ],
    )
    def test_agrees_with_equivalent(self, left: object, right: object) -> None:
        assert explain(left, right).equivalent is equivalent(left, right)

    def test_identical_rule(self) -> None:
        assert explain(3, 3).rule is Rule.IDENTICAL

    def test_literal_rule(self) -> None:
        assert explain(np.float32(1.0), 1.0).rule is Rule.LITERAL

    def test_categories(self) -> None:
        explanation = explain(np.int8(1), 1.0)
        assert explanation.left_category.name == "SIGNED_INTEGER"
        assert explanation.right_category.name == "FLOATING_POINT"

    def test_to_dict(self) -> None:
        data = explain(np.int32(5), np.uint8(5)).to_dict()
        assert data["equivalent"] is True
        assert data["rule"] == "LITERAL"
        assert data["left"]["category"] == "SIGNED_INTEGER"
        assert data["left"]["literal"] == "UINT64 5"
        assert data["right"]["type"] == "uint8"

    def test_to_dict_passthrough_literal(self) -> None:
        data = explain(None, "x").to_dict()
        assert data["left"]["literal"] is None
        assert data["right"]["literal"] == "TEXT 'x'"

    def test_is_frozen(self) -> None:
        explanation = explain(1, 2)
        assert isinstance(explanation, Explanation)
        with pytest.raises(AttributeError):
            explanation.equivalent = True  # type: ignore[misc]
