
"""Uniform piece randomizer"""
import random
from typing import Optional, Sequence
from tetris_piece import CATALOGUE, PieceShape


class PieceRandomizer:
    """Independent uniform draw per call; repeats and droughts are possible."""
    def __init__(self, seed: Optional[int] = None, catalogue: Sequence[PieceShape] = CATALOGUE):
        self.rng = random.Random(seed)
        self.catalogue = tuple(catalogue)
        if not self.catalogue:
            raise ValueError("catalogue must not be empty")

    def create_piece(self) -> PieceShape:
        return self.rng.choice(self.catalogue)
