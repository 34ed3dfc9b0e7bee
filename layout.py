"""Random placement of assignments on the board."""

import random
import time
from typing import Sequence, TypeVar

from loguru import logger

from errors import ConfigurationError, InsufficientSpace
from models import Coordinate

T = TypeVar("T")

# Seeded once per process so a single run can be replayed from the log
LAYOUT_SEED = time.time_ns() % 1_000_000_000
_rng = random.Random(LAYOUT_SEED)


def random_positions(
    width: int,
    height: int,
    count: int,
    rng: random.Random | None = None,
) -> list[Coordinate]:
    """Draw ``count`` distinct cells from a ``width x height`` board."""
    rng = rng or _rng
    capacity = width * height
    if count > capacity:
        raise InsufficientSpace(count, capacity)

    cells = [
        Coordinate(row=row, col=col)
        for row in range(1, height + 1)
        for col in range(1, width + 1)
    ]
    rng.shuffle(cells)
    return cells[:count]


def assignment_pool(
    type_pool: Sequence[T],
    count: int,
    rng: random.Random | None = None,
) -> list[T]:
    """Cycle the type pool until ``count`` entries are collected, then shuffle."""
    rng = rng or _rng
    pool: list[T] = []
    while len(pool) < count:
        for tag in type_pool:
            pool.append(tag)
            if len(pool) == count:
                break
    rng.shuffle(pool)
    return pool


def generate(
    board_width: int,
    board_height: int,
    count: int,
    type_pool: Sequence[T],
    rng: random.Random | None = None,
) -> list[tuple[Coordinate, T]]:
    """Generate the ordered (cell, type) pairs for one session.

    Positions and types are shuffled independently of each other.

    Raises:
        ConfigurationError: On non-positive dimensions or count, or an empty pool.
        InsufficientSpace: If ``count`` exceeds the number of cells.
    """
    if board_width <= 0 or board_height <= 0:
        raise ConfigurationError(
            f"Board dimensions must be positive, got {board_width}x{board_height}"
        )
    if count <= 0:
        raise ConfigurationError(f"Assignment count must be positive, got {count}")
    if not type_pool:
        raise ConfigurationError("Assignment type pool is empty")

    positions = random_positions(board_width, board_height, count, rng)
    kinds = assignment_pool(type_pool, count, rng)
    logger.debug(
        f"Generated {count} assignments on a {board_width}x{board_height} board"
    )
    return list(zip(positions, kinds))
