"""Tests for the Snake module."""

import pytest

from grid_snake.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_of_opposite(self, direction):
        assert direction.opposite().opposite() == direction


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(2, 2)
        assert list(snake.body) == [(4, 2), (3, 2), (2, 2)]
        assert snake.head_direction() == Direction.RIGHT
        assert snake.head_position() == (4, 2)

    def test_length(self):
        assert len(Snake(5, 7)) == 3


class TestSnakeLookahead:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, (4, 1)),
            (Direction.DOWN, (4, 3)),
            (Direction.LEFT, (3, 2)),
            (Direction.RIGHT, (5, 2)),
        ],
    )
    def test_next_head_with_override(self, direction, expected):
        snake = Snake(2, 2)
        assert snake.next_head(direction) == expected

    def test_next_head_uses_current_direction(self):
        snake = Snake(2, 2)
        assert snake.next_head() == (5, 2)

    def test_next_head_does_not_mutate(self):
        snake = Snake(2, 2)
        snake.next_head(Direction.DOWN)
        assert snake.direction == Direction.RIGHT
        assert list(snake.body) == [(4, 2), (3, 2), (2, 2)]


class TestSnakeMovement:
    def test_move_forward_keeps_length(self):
        snake = Snake(2, 2)
        predicted = snake.next_head()
        snake.move_forward()
        assert len(snake.body) == 3
        assert snake.head_position() == predicted
        assert list(snake.body) == [(5, 2), (4, 2), (3, 2)]

    def test_move_forward_with_override_turns(self):
        snake = Snake(2, 2)
        predicted = snake.next_head(Direction.DOWN)
        snake.move_forward(Direction.DOWN)
        assert snake.head_direction() == Direction.DOWN
        assert snake.head_position() == predicted == (4, 3)

    def test_repeated_moves_translate(self):
        snake = Snake(2, 5)
        for _ in range(4):
            snake.move_forward(Direction.UP)
        assert list(snake.body) == [(4, 1), (4, 2), (4, 3)]


class TestSnakeGrowth:
    def test_grow_after_move_restores_old_tail(self):
        snake = Snake(2, 2)
        old_tail = snake.body[-1]
        snake.move_forward()
        snake.grow_tail()
        assert len(snake.body) == 4
        assert snake.body[-1] == old_tail

    def test_grow_without_move_raises(self):
        snake = Snake(2, 2)
        with pytest.raises(RuntimeError, match="move_forward"):
            snake.grow_tail()

    def test_grow_consumes_cached_tail(self):
        snake = Snake(2, 2)
        snake.move_forward()
        snake.grow_tail()
        with pytest.raises(RuntimeError):
            snake.grow_tail()


class TestSnakeOverlap:
    def test_overlapping_includes_head(self):
        snake = Snake(2, 2)
        assert snake.is_overlapping(4, 2)
        assert snake.is_overlapping(3, 2)
        assert snake.is_overlapping(2, 2)

    def test_not_overlapping(self):
        snake = Snake(2, 2)
        assert not snake.is_overlapping(5, 2)
        assert not snake.is_overlapping(2, 3)


class TestSnakeSerialization:
    def test_to_dict(self):
        d = Snake(2, 2).to_dict()
        assert d["body"] == [[4, 2], [3, 2], [2, 2]]
        assert d["direction"] == "right"
