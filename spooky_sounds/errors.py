"""Errors raised by the decode and playback stages of the sound loop."""


class SoundLoopError(Exception):
    """Base class for every failure the loop can hit."""


class DecodeError(SoundLoopError):
    def __init__(self, sound: str, message: str):
        super().__init__(f"{message} (sound: {sound})")
        self.sound = sound


class AssetNotFoundError(DecodeError):
    """No asset exists for the sound id."""


class AssetCorruptError(DecodeError):
    """Asset exists but is not a usable 16-bit PCM WAV file."""


class AssetIOError(DecodeError):
    """Reading the asset failed."""


class PlaybackError(SoundLoopError):
    def __init__(self, device: str, message: str):
        super().__init__(f"{message} (device: {device})")
        self.device = device


class DeviceUnavailableError(PlaybackError):
    """Output device could not be found or opened."""


class PlaybackWriteError(PlaybackError):
    """Samples could not be delivered to the open device."""
