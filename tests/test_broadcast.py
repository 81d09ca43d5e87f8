import pytest

from tensorgraph.ir import (
	BroadcastError,
	Dynamic,
	Static,
	as_shape,
	broadcast_dims,
	broadcast_shapes,
	is_broadcastable,
)


def S(*dims):
	return as_shape(dims)


def test_empty_and_identity() -> None:
	assert broadcast_shapes() == ()
	for s in [S(), S(2, 3), S("batch", 1), S(0)]:
		assert broadcast_shapes(s) == s


@pytest.mark.parametrize(
	"shapes, expected",
	[
		((S(2, 3), S(3)), S(2, 3)),
		((S(1, 4, 1), S(3, 1, 5)), S(3, 4, 5)),
		((S(2, 1), S(1, 3), S(3)), S(2, 3)),
		((S("batch", 1), S("batch", 3)), S("batch", 3)),
		((S("batch", 1), S(1, 3)), S("batch", 3)),
		((S(), S(2, "n")), S(2, "n")),
		((S(0, 3), S(1, 3)), S(1, 3)),
	],
)
def test_compatible(shapes, expected) -> None:
	assert broadcast_shapes(*shapes) == expected
	assert is_broadcastable(*shapes)


@pytest.mark.parametrize(
	"shapes",
	[
		(S(2, 3), S(4, 5)),
		(S("batch", 1), S("sequence", 3)),
		(S(3), S("n")),
		(S(2, 1), S(1, 3), S(4)),
		(S(0, 3), S(2, 3)),
	],
)
def test_incompatible(shapes) -> None:
	with pytest.raises(BroadcastError):
		broadcast_shapes(*shapes)
	assert not is_broadcastable(*shapes)


def test_dim_rules() -> None:
	assert broadcast_dims(Static(1), Static(7)) == Static(7)
	assert broadcast_dims(Static(7), Static(7)) == Static(7)
	assert broadcast_dims(Static(2), Static(7)) is None
	assert broadcast_dims(Static(1), Dynamic("n")) == Dynamic("n")
	assert broadcast_dims(Dynamic("n"), Static(1)) == Dynamic("n")
	assert broadcast_dims(Dynamic("n"), Static(2)) is None
	assert broadcast_dims(Dynamic("n"), Dynamic("n")) == Dynamic("n")
	assert broadcast_dims(Dynamic("n"), Dynamic("m")) is None
	assert broadcast_dims(Static(0), Static(1)) == Static(1)
	assert broadcast_dims(Static(1), Static(0)) == Static(1)
	assert broadcast_dims(Static(0), Static(2)) is None
	assert broadcast_dims(Static(0), Static(0)) == Static(0)


def test_absent_axis_carries_dynamic_verbatim() -> None:
	# No extent-1 axis is synthesized for the shorter side.
	assert broadcast_shapes(S(3), S("batch", 3)) == S("batch", 3)
	assert broadcast_shapes(S("batch", 3), S(3)) == S("batch", 3)


def test_result_rank_is_max_rank() -> None:
	out = broadcast_shapes(S(5, 1, 1, 1), S(2, 1), S(1, 1, 3))
	assert out == S(5, 1, 2, 3)


def test_fold_is_left_to_right() -> None:
	s0, s1, s2 = S(2, 1), S(1, 3), S(4)
	with pytest.raises(BroadcastError) as info:
		broadcast_shapes(s0, s1, s2)
	err = info.value
	# The running result of fold(s0, s1) is what failed against s2.
	assert err.lhs == S(2, 3)
	assert err.rhs == s2
	assert err.axis == -1
	assert err.shapes == (s0, s1, s2)


def test_error_reports_axis_from_right() -> None:
	with pytest.raises(BroadcastError) as info:
		broadcast_shapes(S(2, 3, 4), S(5, 3, 4))
	assert info.value.axis == -3
	assert "[2, 3, 4]" in str(info.value)


def test_plain_tuples_are_normalized() -> None:
	assert broadcast_shapes((2, 3), (3,)) == S(2, 3)
	assert broadcast_shapes((2, "n")) == (Static(2), Dynamic("n"))
	assert broadcast_shapes(("batch", 1), S(4)) == S("batch", 4)
