"""Collision predicates for a candidate head position."""


def hits_wall(pos, width, height):
    """True if pos lies on or beyond the one-cell border."""
    x, y = pos
    return x <= 0 or x >= width - 1 or y <= 0 or y >= height - 1


def hits_self(pos, body):
    """True if pos is any current body cell.

    The tail counts even though a non-growing move would vacate it.
    """
    return pos in body


def hits_obstacle(pos, obstacles):
    """True if pos is an obstacle cell."""
    return pos in obstacles


def is_fatal(pos, body, obstacles, width, height):
    """True if moving the head to pos ends the game."""
    return (
        hits_wall(pos, width, height)
        or hits_self(pos, body)
        or hits_obstacle(pos, obstacles)
    )
