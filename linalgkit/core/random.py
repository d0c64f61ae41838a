"""Uniformly random unit vectors.

The random source is always passed in by the caller; nothing here touches
numpy's global random state, so concurrent callers with their own
generators never interfere.
"""

import logging
from typing import Any, Optional, Union

import numpy as np

from ..utils.config import Config
from ..utils.exceptions import ComputationError, ShapeError, ValidationError
from ..utils.validation import as_vector, check_writable, write_into

logger = logging.getLogger(__name__)

RandomSource = Optional[Union[int, np.random.Generator]]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Normalize a random source to a numpy Generator.

    Args:
        rng: Generator (returned as is), integer seed, or None for a fresh
            unseeded generator

    Returns:
        numpy.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    raise ValidationError(
        f"rng must be numpy.random.Generator, int seed or None, got {type(rng).__name__}",
        parameter="rng",
        expected="numpy.random.Generator, int or None",
        actual=type(rng).__name__,
    )


def _draw_unit(dim: int, rng: np.random.Generator) -> np.ndarray:
    max_retries = Config.numerical.MAX_RANDOM_RETRIES
    for attempt in range(max_retries + 1):
        v = rng.standard_normal(dim)
        norm = np.linalg.norm(v)
        if norm > Config.numerical.STRICT_EPSILON:
            return v / norm
        logger.warning(f"rand_vector: degenerate draw (norm={norm:.3e}), retry {attempt + 1}")
    raise ComputationError(
        f"rand_vector: {max_retries + 1} consecutive draws had zero norm",
        operation="rand_vector",
        values={'dimension': dim},
    )


def rand_vector(v: Any, rng: RandomSource = None) -> Any:
    """Draw a point uniformly at random from the unit sphere in R^n.

    Each coordinate is drawn from a standard normal distribution and the
    result is divided by its Euclidean norm.

    Args:
        v: Writable float numpy array or tensor to overwrite, or an integer
            dimension to allocate a new float64 array
        rng: Generator, integer seed or None

    Returns:
        The unit vector (``v`` itself when a vector was passed)

    Raises:
        ShapeError: If the dimension is smaller than 1
        ValidationError: If ``v`` is a vector that cannot be written in place
    """
    generator = make_rng(rng)

    if isinstance(v, (int, np.integer)):
        if v < 1:
            raise ShapeError(f"Dimension must be >= 1, got {v}", parameter="v",
                             expected=">= 1", actual=int(v))
        return _draw_unit(int(v), generator)

    check_writable(v, "v", "rand_vector")
    target = as_vector(v, "v")
    if target.size < 1:
        raise ShapeError("Cannot draw a unit vector of dimension 0", parameter="v",
                         expected=">= 1", actual=0)
    return write_into(v, _draw_unit(target.size, generator))
