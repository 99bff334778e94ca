from typing import Optional
from pathlib import Path
from dataclasses import dataclass, field, fields, asdict

ERROR_NOT_A_DICT = "Configuration must be a JSON object. Got: {}."
ERROR_UNKNOWN_KEYS = "Unknown configuration keys: {}."
ERROR_NO_INPUT = "An input file must be provided."
ERROR_NO_KEYS = "At least one key to remove must be provided."
ERROR_KEYS_TYPE = "Keys must be a list of strings. Got: {!r}."
ERROR_INPUT_TYPE = "Input and output files must be strings. Got: {!r}."
ERROR_FLAG_TYPE = "Option '{}' must be a boolean. Got: {!r}."
ERROR_INDENT = "Indent must be a positive integer. Got: {}."
ERROR_MAX_DEPTH = "Max depth must be a non-negative integer. Got: {}."

OUTPUT_SUFFIX = ".pruned"


class ConfigError(Exception):
    pass


@dataclass
class Config:
    """Configuration for pruning keys from a JSON file."""
    input_file: Optional[str] = None
    keys: list[str] = field(default_factory=list)
    output_file: Optional[str] = None
    lines: bool = False
    indent: int = 4
    max_depth: Optional[int] = None
    show_progress: bool = False

    @classmethod
    def from_dict(cls, config: dict):
        if not isinstance(config, dict):
            raise ConfigError(ERROR_NOT_A_DICT.format(type(config).__name__))

        unknown = sorted(set(config) - {f.name for f in fields(cls)})
        if unknown:
            raise ConfigError(ERROR_UNKNOWN_KEYS.format(unknown))

        config = dict(config)
        if isinstance(config.get("keys"), str):
            config["keys"] = [k.strip() for k in config["keys"].split(",")]

        if isinstance(config.get("keys"), tuple):
            config["keys"] = list(config["keys"])

        return cls(**config)

    @property
    def input_path(self) -> Path:
        return Path(self.input_file)

    @property
    def output_path(self) -> Path:
        """Output path. If not configured, a sibling of the input file e.g., data.pruned.json."""
        if self.output_file is not None:
            return Path(self.output_file)

        path = self.input_path
        return path.with_name(f"{path.stem}{OUTPUT_SUFFIX}{path.suffix}")

    def validate(self) -> None:
        if self.input_file is None:
            raise ConfigError(ERROR_NO_INPUT)

        for path in (self.input_file, self.output_file):
            if path is not None and not isinstance(path, str):
                raise ConfigError(ERROR_INPUT_TYPE.format(path))

        if not isinstance(self.keys, list) or not all(isinstance(k, str) for k in self.keys):
            raise ConfigError(ERROR_KEYS_TYPE.format(self.keys))

        if not self.keys:
            raise ConfigError(ERROR_NO_KEYS)

        for name in ("lines", "show_progress"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(ERROR_FLAG_TYPE.format(name, getattr(self, name)))

        if not _is_int(self.indent) or self.indent < 1:
            raise ConfigError(ERROR_INDENT.format(self.indent))

        if self.max_depth is not None and (not _is_int(self.max_depth) or self.max_depth < 0):
            raise ConfigError(ERROR_MAX_DEPTH.format(self.max_depth))

    def to_dict(self) -> dict:
        return asdict(self)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
