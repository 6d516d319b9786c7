"""Sound loop — select, decode, play, sleep, forever."""

import logging
import random
import time
from enum import Enum
from typing import Callable

from spooky_sounds.decoder import WavDecoder
from spooky_sounds.errors import DecodeError
from spooky_sounds.player import SoundPlayer
from spooky_sounds.selector import Selector

logger = logging.getLogger(__name__)


class State(Enum):
    SELECTING = "selecting"
    DECODING = "decoding"
    PLAYING = "playing"
    SLEEPING = "sleeping"


class FailurePolicy(Enum):
    ABORT = "abort"  # any error ends the loop
    SKIP = "skip"  # decode errors skip to the next sound, device errors end the loop


class SoundLoop:
    def __init__(
        self,
        selector: Selector,
        decoder: WavDecoder,
        player: SoundPlayer,
        device: str,
        maximum_interval: int = 15,
        interval_seconds: int = 60,
        failure_policy: FailurePolicy = FailurePolicy.ABORT,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if maximum_interval < 1:
            raise ValueError(f"maximum_interval must be at least 1, got {maximum_interval}")

        self.state = State.SELECTING

        self.selector = selector
        self.decoder = decoder
        self.player = player
        self.device = device

        self._maximum_interval = maximum_interval
        self._interval_seconds = interval_seconds
        self._failure_policy = failure_policy
        self._rng = rng or random.Random()
        self._sleep = sleep

    def run(self) -> None:
        """Main loop. Only returns by raising."""
        while True:
            self.step()

    def step(self) -> None:
        """One full cycle, ending after the sleep."""
        self.state = State.SELECTING
        sound = self.selector.select_next()

        self.state = State.DECODING
        try:
            samples = self.decoder.decode(sound)
        except DecodeError as e:
            if self._failure_policy is not FailurePolicy.SKIP:
                raise
            logger.warning("Skipping %s: %s", sound, e)
        else:
            self.state = State.PLAYING
            self.player.play(self.device, samples)

        self.state = State.SLEEPING
        seconds = self.next_delay() * self._interval_seconds
        logger.info("Play next sound in %ds", seconds)
        self._sleep(seconds)

    def next_delay(self) -> int:
        """Random wait in interval units, in [0, maximum_interval)."""
        return self._rng.randrange(self._maximum_interval)
