import pytest

from hexgrid import AXIAL_OFFSETS, Direction, DirectionError


def test_index_table_is_fixed():
    assert [d.to_index() for d in Direction] == [0, 1, 2, 3, 4, 5]
    assert [Direction.from_index(i) for i in range(6)] == [
        Direction.NE,
        Direction.N,
        Direction.NW,
        Direction.SW,
        Direction.S,
        Direction.SE,
    ]


@pytest.mark.parametrize("direction", list(Direction))
def test_from_index_inverts_to_index(direction: Direction):
    assert Direction.from_index(direction.to_index()) is direction


@pytest.mark.parametrize("index", [6, 100, -1])
def test_from_index_rejects_out_of_range(index: int):
    with pytest.raises(DirectionError) as excinfo:
        Direction.from_index(index)
    assert excinfo.value.index == index
    assert str(index) in str(excinfo.value)


def test_direction_error_is_a_value_error():
    with pytest.raises(ValueError):
        Direction.from_index(6)


def test_from_index_rejects_non_integers():
    with pytest.raises(TypeError):
        Direction.from_index(1.0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("direction", "opposite"),
    [
        (Direction.NE, Direction.SW),
        (Direction.N, Direction.S),
        (Direction.NW, Direction.SE),
        (Direction.SW, Direction.NE),
        (Direction.S, Direction.N),
        (Direction.SE, Direction.NW),
    ],
)
def test_opposites(direction: Direction, opposite: Direction):
    assert direction.opposite is opposite


@pytest.mark.parametrize("direction", list(Direction))
def test_offset_negates_opposite_offset(direction: Direction):
    dq, dr = direction.offset
    assert direction.opposite.offset == (-dq, -dr)


def test_offsets_cancel_over_full_cycle():
    assert sum(dq for dq, _ in AXIAL_OFFSETS) == 0
    assert sum(dr for _, dr in AXIAL_OFFSETS) == 0
    assert len(set(AXIAL_OFFSETS)) == 6
