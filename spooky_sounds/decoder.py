"""WAV decoding — asset bytes to a mono int16 sample buffer."""

import io
import logging
import wave
from dataclasses import dataclass

import numpy as np

from spooky_sounds.assets import AssetSource
from spooky_sounds.errors import AssetCorruptError

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
SAMPLE_WIDTH = 2  # bytes, signed 16-bit


@dataclass
class WavInfo:
    channels: int
    sample_rate: int
    bits_per_sample: int
    frames: int


class WavDecoder:
    """Decode sounds from an asset source into mono 16-bit PCM at 44.1 kHz.

    Only the first channel of multi-channel files is kept. Files recorded at
    another rate are returned as-is and will play at the wrong speed.
    """

    def __init__(self, source: AssetSource, sample_rate: int = SAMPLE_RATE):
        self.source = source
        self.sample_rate = sample_rate

    def decode(self, sound: str) -> np.ndarray:
        data = self.source.read(sound)
        logger.info("Reading %s.wav", sound)
        info, raw = self._parse(sound, data)
        logger.info(
            "File info: channels=%d rate=%d bits=%d frames=%d",
            info.channels, info.sample_rate, info.bits_per_sample, info.frames,
        )
        if info.sample_rate != self.sample_rate:
            logger.warning(
                "%s.wav is %d Hz, expected %d Hz; it will play at the wrong speed",
                sound, info.sample_rate, self.sample_rate,
            )
        return self._first_channel(raw, info.channels)

    def _parse(self, sound: str, data: bytes) -> tuple[WavInfo, bytes]:
        try:
            with wave.open(io.BytesIO(data), "rb") as wav:
                info = WavInfo(
                    channels=wav.getnchannels(),
                    sample_rate=wav.getframerate(),
                    bits_per_sample=wav.getsampwidth() * 8,
                    frames=wav.getnframes(),
                )
                if wav.getsampwidth() != SAMPLE_WIDTH:
                    raise AssetCorruptError(
                        sound, f"Unsupported bit depth: {info.bits_per_sample}"
                    )
                raw = wav.readframes(info.frames)
        except (wave.Error, EOFError) as e:
            raise AssetCorruptError(sound, f"Not a valid WAV file: {e}") from e
        return info, raw

    @staticmethod
    def _first_channel(raw: bytes, channels: int) -> np.ndarray:
        """Little-endian interleaved PCM → channel 0 as native int16."""
        frame_bytes = SAMPLE_WIDTH * channels
        usable = len(raw) - len(raw) % frame_bytes
        samples = np.frombuffer(raw[:usable], dtype="<i2").reshape(-1, channels)
        return samples[:, 0].astype(np.int16)
