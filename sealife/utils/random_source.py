from gymnasium.utils import seeding
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """
    The single random stream of a simulation run. Every random decision
    (seeding, neighbor shuffling, breeding and movement rolls, disease,
    weather) is drawn from one instance, so a run is reproducible from its seed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> int:
        self.np_random, self.seed = seeding.np_random(seed)
        return self.seed

    def uniform(self) -> float:
        # uniform float in [0, 1)
        return float(self.np_random.random())

    def integer(self, upper: int) -> int:
        # uniform integer in [0, upper)
        return int(self.np_random.integers(upper))

    def boolean(self) -> bool:
        return bool(self.np_random.integers(2))

    def shuffled(self, items: Sequence[T]) -> List[T]:
        order = self.np_random.permutation(len(items))
        return [items[i] for i in order]

    def choice(self, options: Sequence[T]) -> T:
        return options[self.integer(len(options))]


_default_random_source: Optional[RandomSource] = None


def default_random_source() -> RandomSource:
    """
    Returns the process-wide random stream, creating it on first use.
    """
    global _default_random_source
    if _default_random_source is None:
        _default_random_source = RandomSource()
    return _default_random_source
