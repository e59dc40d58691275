"""Configuration management for Trackform."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from trackform.config.file_ops import write_text_file
from trackform.config.paths import default_config_path
from trackform.platform.logging import logger

DEFAULT_SEARCH_PATHS: tuple[str, ...] = (
    "/opt/homebrew/bin/ffmpeg",
    "/usr/local/bin/ffmpeg",
    "/usr/bin/ffmpeg",
)
DEFAULT_TIMEOUT_SECONDS: float = 120.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Explicit ffmpeg executable; skips discovery when set
    ffmpeg_path: Path | None = _path_field()

    # Fallback install locations probed after the bundled tool
    search_paths: list[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATHS))

    # Seconds to wait for ffmpeg before killing it (0 disables the limit)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Directory for remux output before it replaces the original
    scratch_dir: Path | None = _path_field()

    # How the remuxed file replaces the original: "remove" or "backup"
    replace_strategy: str = "remove"

    # Treat a non-zero ffmpeg exit on write as fatal
    strict_exit_code: bool = True

    # Skip the confirmation prompt before overwriting a file
    always_allow: bool = False

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            destination = target or default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# Trackform Configuration File")
        lines.append("")

        lines.append("# ffmpeg executable (optional)")
        lines.append("# When unset, Trackform looks for a bundled copy, then search_paths, then PATH")
        lines.append('# Example: ffmpeg_path = "/opt/homebrew/bin/ffmpeg"')
        if config["ffmpeg_path"] is not None:
            lines.append(f"ffmpeg_path = {self._format_toml_value(config['ffmpeg_path'])}")
        lines.append("")

        lines.append("# Fallback locations probed for ffmpeg, in order")
        lines.append(f"search_paths = {self._format_toml_value(config['search_paths'])}")
        lines.append("")

        lines.append("# Seconds to wait for ffmpeg before giving up (0 waits forever)")
        lines.append(f"timeout_seconds = {self._format_toml_value(config['timeout_seconds'])}")
        lines.append("")

        lines.append("# Scratch directory for remuxed files (optional)")
        lines.append("# Defaults to a private directory under the system temp dir")
        if config["scratch_dir"] is not None:
            lines.append(f"scratch_dir = {self._format_toml_value(config['scratch_dir'])}")
        lines.append("")

        lines.append("# How the rewritten file replaces the original")
        lines.append('# "remove": delete the original, then move the new file in place')
        lines.append('# "backup": keep the original aside until the new file is in place')
        lines.append(f"replace_strategy = {self._format_toml_value(config['replace_strategy'])}")
        lines.append("")

        lines.append("# Fail a write when ffmpeg exits non-zero (false only checks the output file)")
        lines.append(f"strict_exit_code = {self._format_toml_value(config['strict_exit_code'])}")
        lines.append("")

        lines.append("# Always allow overwriting files without asking for confirmation")
        lines.append(f"always_allow = {self._format_toml_value(config['always_allow'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/trackform.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when absent.

        Args:
            config_file: Explicit file to read. Defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        config_file = config_file or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                for key in [key for key in config_dict if key not in known]:
                    logger.warning("Ignoring unknown configuration key: %s", key)
                    del config_dict[key]

                for key, value in config_dict.items():
                    if key.endswith("_path") or key.endswith("_dir"):
                        if isinstance(value, str) and value.strip() != "":
                            config_dict[key] = value
                        else:
                            config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save(config_file)
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
