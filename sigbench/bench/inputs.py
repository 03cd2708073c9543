"""Synthetic messages for the signing benchmark."""

import random

from sigbench.errors import ConfigurationError


def generate_inputs(
    count: int, size: int, rng: random.Random | None = None
) -> tuple[bytes, ...]:
    """Generate the message set signed in every round.

    The payloads are benchmark filler, not secrets, so a non-cryptographic
    generator is enough. The returned tuple is reused unchanged for warmup and
    measured rounds so generation cost never lands inside a timed region.

    Args:
        count: Number of messages (one per operation in a round).
        size: Size of each message in bytes.
        rng: Optional generator for reproducible payloads.

    Returns:
        Tuple of ``count`` byte strings of exactly ``size`` bytes each.

    Raises:
        ConfigurationError: If count < 1 or size <= 0.
    """
    if count < 1:
        raise ConfigurationError(f"count must be >= 1, got {count}")
    if size <= 0:
        raise ConfigurationError(f"size must be > 0, got {size}")

    rng = rng if rng is not None else random.Random()
    return tuple(rng.randbytes(size) for _ in range(count))
