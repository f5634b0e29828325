from naughts.symmetry import (
    ALL_SYMS,
    apply_action_transform,
    canonicalize,
    inverse_op,
    orbit,
    transform_board,
)


def test_transforms_match_hand_written_permutations():
    b = list(range(9))
    assert transform_board(b, 'rot90') == [6, 3, 0, 7, 4, 1, 8, 5, 2]
    assert transform_board(b, 'rot270') == [2, 5, 8, 1, 4, 7, 0, 3, 6]
    assert transform_board(b, 'hflip') == [2, 1, 0, 5, 4, 3, 8, 7, 6]
    assert transform_board(b, 'vflip') == [6, 7, 8, 3, 4, 5, 0, 1, 2]
    assert transform_board(b, 'd1') == [0, 3, 6, 1, 4, 7, 2, 5, 8]
    assert transform_board(b, 'd2') == [8, 5, 2, 7, 4, 1, 6, 3, 0]


def test_action_transform_follows_the_mark():
    for k in ALL_SYMS:
        for i in range(9):
            b = [0] * 9
            b[i] = 1
            assert transform_board(b, k).index(1) == apply_action_transform(i, k)


def test_inverse_ops_undo_each_other():
    for k in ALL_SYMS:
        for i in range(9):
            assert apply_action_transform(apply_action_transform(i, k), inverse_op(k)) == i


def test_canonical_is_lexicographically_minimum():
    board = [1, 2, 0, 0, 0, 0, 0, 0, 0]
    canon, op = canonicalize(board)
    assert canon == min(orbit(board))
    assert ''.join(map(str, transform_board(board, op))) == canon
    # X0 O1 turns onto X8 O7
    assert canon == "000000021"
    assert op == 'rot180'


def test_empty_board_canonicalizes_with_identity():
    assert canonicalize([0] * 9) == ("000000000", 'id')
