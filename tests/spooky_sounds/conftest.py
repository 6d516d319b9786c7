"""Shared fixtures for spooky_sounds tests."""

import wave

import numpy as np
import pytest


@pytest.fixture
def write_wav(tmp_path):
    """Write a 16-bit PCM WAV into tmp_path and return its path.

    `frames` is an int16 array of shape (n,) for mono or (n, channels).
    """

    def _write(name: str, frames: np.ndarray, rate: int = 44100, sampwidth: int = 2):
        frames = np.asarray(frames)
        channels = 1 if frames.ndim == 1 else frames.shape[1]
        path = tmp_path / f"{name}.wav"
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(channels)
            wav.setsampwidth(sampwidth)
            wav.setframerate(rate)
            wav.writeframes(frames.astype("<i2").tobytes() if sampwidth == 2 else frames.tobytes())
        return path

    return _write
