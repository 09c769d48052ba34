from tictree.core import board_from_rows, new_board
from tictree.display import render_board, render_summary, render_tree
from tictree.tree import build


def test_render_empty_board():
    assert render_board(new_board()) == " | | \n-----\n | | \n-----\n | | \nWinner: None"


def test_render_finished_board():
    board = board_from_rows(["XXX", "OO ", "   "])
    assert render_board(board) == "X|X|X\n-----\nO|O| \n-----\n | | \nWinner: X_WIN"


def test_render_tree_lists_children_with_probabilities():
    node = build(board_from_rows(["XOX", "XOO", "OX "]))
    text = render_tree(node)

    assert text.startswith("Current State:\nX|O|X\n")
    assert text.endswith("X|O|X\n-----\nX|O|O\n-----\nO|X|X\nWinner: TIE\nO wins: 0.0\nX wins: 0.0\nTies: 1.0")


def test_render_tree_separates_edges_with_blank_lines():
    node = build(board_from_rows(["XO ", "XO ", "   "]))
    blocks = render_tree(node).split("\n\n")

    # root block followed by one block per edge
    assert len(blocks) == 1 + len(node.edges)
    assert all("Ties: " in block for block in blocks[1:])


def test_render_summary_reports_sum():
    node = build(board_from_rows(["XOX", "XOO", "OX "]))
    assert render_summary(node) == "X: 0.0\nO: 0.0\nTie: 1.0\nsum: 1.0"
