"""Playback of decoded samples on a named output device via sounddevice."""

import logging

import numpy as np

try:
    import sounddevice as sd
except (ImportError, OSError):
    sd = None  # PortAudio missing; mocked in tests

from spooky_sounds.errors import DeviceUnavailableError, PlaybackWriteError

logger = logging.getLogger(__name__)


class SoundPlayer:
    """Blocking mono int16 playback, one stream per sound."""

    def __init__(self, sample_rate: int = 44100):
        self.sample_rate = sample_rate

    def play(self, device: str, samples: np.ndarray) -> None:
        """Write all samples to `device` and wait until they have been played.

        The stream is opened for this call only and always closed before
        returning. An empty buffer opens and closes the device without writing.
        """
        logger.info("Playing sound on %s", device)
        stream = self._open(device)
        try:
            stream.start()
            if len(samples):
                underflowed = stream.write(
                    np.ascontiguousarray(samples, dtype=np.int16).reshape(-1, 1)
                )
                if underflowed:
                    logger.debug("Output underflow on %s", device)
            stream.stop()
        except (sd.PortAudioError, OSError) as e:
            raise PlaybackWriteError(device, f"Error playing sound: {e}") from e
        finally:
            stream.close()

    def _open(self, device: str):
        if sd is None:
            raise DeviceUnavailableError(device, "sounddevice/PortAudio is not available")
        try:
            return sd.OutputStream(
                device=device,
                channels=1,
                dtype="int16",
                samplerate=self.sample_rate,
            )
        except (ValueError, sd.PortAudioError) as e:
            raise DeviceUnavailableError(
                device, f"Cannot open audio playback device: {e}"
            ) from e


def list_devices() -> str:
    """Human-readable list of audio devices, like `aplay -L`."""
    if sd is None:
        return "sounddevice/PortAudio is not available"
    return str(sd.query_devices())
