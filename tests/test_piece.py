import pytest

from ledtris_piece import VARIANT_IDS, VARIANTS, Piece, create_piece, rotate_cw, variant
from ledtris_rng import UniformRandom


def test_catalog_shapes():
    assert set(VARIANT_IDS) == {"spotlight", "panel", "strip", "bulb", "tube"}
    assert VARIANTS["spotlight"].shape == ((0, 1, 0), (1, 1, 1))
    assert VARIANTS["panel"].shape == ((1, 1), (1, 1))
    assert VARIANTS["strip"].shape == ((1, 1, 1, 1),)
    assert VARIANTS["bulb"].shape == ((1, 0), (1, 0), (1, 1))
    assert VARIANTS["tube"].shape == ((1, 1, 0), (0, 1, 1))


def test_unknown_variant():
    with pytest.raises(KeyError):
        variant("tetromino")


def test_rotate_cw_dimensions_and_cells():
    assert rotate_cw([[0, 1, 0], [1, 1, 1]]) == [[1, 0], [1, 1], [1, 0]]
    assert rotate_cw([[1, 1, 1, 1]]) == [[1], [1], [1], [1]]
    assert rotate_cw([[1, 0], [1, 0], [1, 1]]) == [[1, 1, 1], [1, 0, 0]]


def test_rotate_does_not_touch_input():
    m = [[1, 1, 0], [0, 1, 1]]
    rotate_cw(m)
    assert m == [[1, 1, 0], [0, 1, 1]]


@pytest.mark.parametrize("vid", VARIANT_IDS)
def test_four_rotations_are_identity(vid):
    shape = [list(r) for r in VARIANTS[vid].shape]
    out = shape
    for _ in range(4):
        out = rotate_cw(out)
    assert out == shape


@pytest.mark.parametrize("vid,col", [("spotlight", 4), ("panel", 4), ("strip", 3), ("bulb", 4), ("tube", 4)])
def test_spawn_is_centered(vid, col):
    p = Piece.spawn(vid)
    assert (p.origin_col, p.origin_row) == (col, 0)
    assert p.primary_color == VARIANTS[vid].primary_color
    assert p.glow_color == VARIANTS[vid].glow_color


def test_created_piece_owns_its_shape():
    p = create_piece(UniformRandom(1))
    p.shape[0][0] = 7
    p.shape = rotate_cw(p.shape)
    assert all(7 not in row for v in VARIANTS.values() for row in v.shape)


def test_cells_are_absolute():
    p = Piece.spawn("tube")
    p.origin_row = -1
    assert p.cells() == [(4, -1), (5, -1), (5, 0), (6, 0)]


def test_seeded_draws_repeat():
    a = UniformRandom(7)
    b = UniformRandom(7)
    assert [a.next_variant() for _ in range(50)] == [b.next_variant() for _ in range(50)]


def test_every_variant_gets_drawn():
    rng = UniformRandom(123)
    seen = {create_piece(rng).variant_id for _ in range(500)}
    assert seen == set(VARIANT_IDS)
