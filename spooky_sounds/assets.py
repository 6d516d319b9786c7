"""Asset sources — where the WAV bytes for a sound id come from."""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path

from spooky_sounds.config import SpookyConfig
from spooky_sounds.errors import AssetIOError, AssetNotFoundError


class AssetSource(ABC):
    name: str

    @abstractmethod
    def read(self, sound: str) -> bytes:
        """Return the full contents of `<sound>.wav`."""

    @staticmethod
    def filename(sound: str) -> str:
        return f"{sound}.wav"


class DirectoryAssetSource(AssetSource):
    name = "directory"

    def __init__(self, root: str | Path = "sounds"):
        self.root = Path(root)

    def read(self, sound: str) -> bytes:
        path = self.root / self.filename(sound)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise AssetNotFoundError(sound, f"No sound file at {path}") from e
        except OSError as e:
            raise AssetIOError(sound, f"Error reading {path}: {e}") from e


class PackageAssetSource(AssetSource):
    """Sounds bundled inside the installed package under `sounds/`."""

    name = "bundled"

    def __init__(self, package: str = "spooky_sounds", folder: str = "sounds"):
        self.package = package
        self.folder = folder

    def read(self, sound: str) -> bytes:
        resource = resources.files(self.package).joinpath(self.folder, self.filename(sound))
        if not resource.is_file():
            raise AssetNotFoundError(
                sound, f"No bundled sound {self.folder}/{self.filename(sound)}"
            )
        try:
            return resource.read_bytes()
        except OSError as e:
            raise AssetIOError(sound, f"Error reading bundled sound: {e}") from e


def make_asset_source(config: SpookyConfig) -> AssetSource:
    if config.assets.sounds_dir:
        return DirectoryAssetSource(config.assets.sounds_dir)
    return PackageAssetSource()
