"""Sound selection — random pick that never repeats the previous sound."""

import logging
import random
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class SoundCatalog:
    """Fixed, ordered set of sound ids known at startup."""

    def __init__(self, sounds):
        self._sounds: tuple[str, ...] = tuple(sounds)
        if not self._sounds:
            raise ValueError("Sound catalog is empty")

    @property
    def sounds(self) -> tuple[str, ...]:
        return self._sounds

    def __len__(self) -> int:
        return len(self._sounds)

    def __iter__(self):
        return iter(self._sounds)

    def __contains__(self, sound: object) -> bool:
        return sound in self._sounds


@dataclass
class SelectionState:
    last_played: str | None = None


class Selector:
    """Pick the next sound uniformly, excluding the one played last."""

    def __init__(
        self,
        catalog: SoundCatalog,
        rng: random.Random | None = None,
        state: SelectionState | None = None,
    ):
        self.catalog = catalog
        self.state = state or SelectionState()
        self._rng = rng or random.Random()

    def select_next(self) -> str:
        candidates = [s for s in self.catalog if s != self.state.last_played]
        # Single-sound catalog: nothing else to pick
        if not candidates:
            candidates = list(self.catalog)

        sound = self._rng.choice(candidates)
        self.state.last_played = sound
        logger.debug("Selected %s", sound)
        return sound
