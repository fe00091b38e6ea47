"""
Effects Module - Confetti burst played in the navigation bar on page load

Every page render is a fresh "mount": generate_confetti() is called once per
request and produces a new random batch. The template renders one element per
particle and the page script plays each animation once, then removes the
element.
"""

import random
from typing import List, NamedTuple, Optional

CONFETTI_COUNT = 30
CONFETTI_PALETTE = ('#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEEAD', '#F7B801')

MIN_SIZE = 2
SIZE_SPREAD = 30        # size in [2, 32)
LEFT_SPREAD = 300       # percent, wider than the bar so pieces spill across it
DELAY_STEP = 0.1        # seconds between consecutive pieces
MIN_DURATION = 3
DURATION_SPREAD = 2     # duration in [3, 5)
DRIFT_SPREAD = 50       # drift in [-25, 25)


class Particle(NamedTuple):
    index: int
    size: float
    left: float
    color: str
    delay: float
    duration: float
    drift: float

    @property
    def height(self) -> float:
        """Rendered height in pixels; pieces are 2px wide streaks"""
        return self.size * 5


def make_particle(index: int, rng: random.Random) -> Particle:
    """Randomize a single confetti piece"""
    return Particle(
        index=index,
        size=MIN_SIZE + rng.random() * SIZE_SPREAD,
        left=rng.random() * LEFT_SPREAD,
        color=rng.choice(CONFETTI_PALETTE),
        delay=round(index * DELAY_STEP, 2),
        duration=MIN_DURATION + rng.random() * DURATION_SPREAD,
        drift=rng.random() * DRIFT_SPREAD - DRIFT_SPREAD / 2,
    )


def generate_confetti(count: int = CONFETTI_COUNT, rng: Optional[random.Random] = None) -> List[Particle]:
    """
    Generate a batch of independently randomized confetti pieces.

    Args:
        count: Number of pieces, CONFETTI_COUNT for the page
        rng: Random source; a fresh one is used when omitted so that
            successive batches differ

    Returns:
        list: Particle descriptors ordered by index
    """
    if count < 0:
        raise ValueError('count must not be negative')
    rng = rng or random.Random()
    return [make_particle(i, rng) for i in range(count)]
