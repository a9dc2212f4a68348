import random
from typing import Dict, Iterable, List, Optional


class DiceRoller:
    """Rolls the per-role outcomes for a round."""

    def __init__(self, rng: Optional[random.Random] = None, count: int = 5, faces: int = 6):
        if count < 1:
            raise ValueError('DICE_COUNT must be at least 1')
        if faces < 2:
            raise ValueError('DICE_FACES must be at least 2')
        self.rng = rng or random.Random()
        self.count = count
        self.faces = faces

    def roll(self) -> List[int]:
        return [self.rng.randint(1, self.faces) for _ in range(self.count)]

    def roll_round(self, roles: Iterable[str]) -> Dict[str, List[int]]:
        # Each role rolls independently; order follows the roster
        return {role: self.roll() for role in roles}
