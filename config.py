"""Configuration management for Teller.

Reads configuration from ~/.config/teller.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    log_to_file: bool
    reporter: str  # "log", "print" or "none"

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "teller"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
            log_to_file=True,
            reporter="log",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "teller.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "teller"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))
    log_to_file = log_config.get("to_file", True)

    output_config = data.get("output", {})
    reporter = output_config.get("reporter", "log")

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        log_to_file=log_to_file,
        reporter=reporter,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
            "to_file": config.log_to_file,
        },
        "output": {
            "reporter": config.reporter,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
