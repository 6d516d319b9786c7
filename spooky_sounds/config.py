# spooky_sounds/config.py
from dataclasses import dataclass, field
import yaml

DEFAULT_CATALOG = ["bell", "cat", "laugh", "hauntedhouse", "raven", "witches"]

INTERVAL_UNITS = {"minutes": 60, "seconds": 1}
FAILURE_POLICIES = ("abort", "skip")


@dataclass
class AssetsConfig:
    sounds_dir: str | None = None  # None = bundled sounds


@dataclass
class SpookyConfig:
    # BlueALSA PCM, see `aplay -L` or `spooky-sounds --list-devices`
    device: str = "bluealsa"
    maximum_interval: int = 15
    interval_unit: str = "minutes"
    failure_policy: str = "abort"
    catalog: list[str] = field(default_factory=lambda: list(DEFAULT_CATALOG))
    assets: AssetsConfig = field(default_factory=AssetsConfig)

    @property
    def interval_seconds(self) -> int:
        """Length of one interval unit in seconds."""
        return INTERVAL_UNITS[self.interval_unit]

    def validate(self) -> None:
        # bool is an int subclass
        if isinstance(self.maximum_interval, bool) or not isinstance(self.maximum_interval, int):
            raise ValueError(
                f"maximum_interval must be an integer, got {self.maximum_interval!r}"
            )
        if self.maximum_interval < 1:
            raise ValueError(
                f"maximum_interval must be at least 1, got {self.maximum_interval}"
            )
        if self.interval_unit not in INTERVAL_UNITS:
            raise ValueError(f"Unknown interval unit: {self.interval_unit}")
        if self.failure_policy not in FAILURE_POLICIES:
            raise ValueError(f"Unknown failure policy: {self.failure_policy}")
        if not isinstance(self.catalog, list) or not all(
            isinstance(sound, str) for sound in self.catalog
        ):
            raise ValueError(f"catalog must be a list of sound names, got {self.catalog!r}")
        if not self.catalog:
            raise ValueError("Sound catalog is empty")


def _build_nested(cls, data: dict):
    """Build a dataclass from a dict, handling nested dataclasses."""
    if data is None:
        return cls()
    fieldtypes = {f.name: f.type for f in cls.__dataclass_fields__.values()}
    kwargs = {}
    for key, value in data.items():
        if key in fieldtypes and isinstance(value, dict):
            nested_cls = cls.__dataclass_fields__[key].default_factory
            kwargs[key] = _build_nested(nested_cls, value)
        else:
            kwargs[key] = value
    return cls(**kwargs)


def load_config(path: str | None = None) -> SpookyConfig:
    """Load config from YAML. Without a path, returns the defaults."""
    if path is None:
        return SpookyConfig()
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return _build_nested(SpookyConfig, data)
