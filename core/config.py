import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from constants import CONFIG_FILE, DEFAULT_CODE_PAGE, DEFAULT_MAX_WORKERS
from core.codec_selector import validate_code_page
from core.exceptions import ConfigError, FileReadError
from core.file_io import FilesystemFileReader


@dataclass(frozen=True)
class AuditSettings:
    """
    User-tunable settings for an audit run.

    Attributes:
        code_page: Single-byte codec used to decode ExtendedAscii files.
        max_workers: Number of worker threads used for directory audits.
        show_all: Report every file, not only the inconsistent ones.
        strict: Treat text files without any line break as inconsistent.
        summary: Print a summary table after the per-file report.
    """

    code_page: str = DEFAULT_CODE_PAGE
    max_workers: int = DEFAULT_MAX_WORKERS
    show_all: bool = False
    strict: bool = False
    summary: bool = True

    def merged(self, **overrides) -> "AuditSettings":
        """Return a copy with every non-None override applied."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")
        settings = replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """
        Check value types and ranges.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
            InvalidCodePageError: If code_page is not a known codec.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            expected = type(getattr(AuditSettings, f.name))
            # bool is a subclass of int, so it is rejected explicitly
            if type(value) is not expected:
                raise ConfigError(
                    f"Setting '{f.name}' must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        if self.max_workers < 1:
            raise ConfigError("Setting 'max_workers' must be at least 1")
        validate_code_page(self.code_page)


def load_settings(config_path: Path = CONFIG_FILE) -> AuditSettings:
    """
    Load settings from a JSON file.

    A missing file yields the defaults. Keys absent from the file keep their
    default value.

    Args:
        config_path: The settings file. Defaults to ~/.eolaudit/settings.json.

    Returns:
        The validated AuditSettings.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object, has
            unknown keys or invalid values.
    """
    if not config_path.exists():
        return AuditSettings()

    try:
        raw = FilesystemFileReader().read_bytes(config_path)
    except FileReadError as e:
        raise ConfigError(
            message=f"Failed to read settings file: {config_path}",
            config_path=str(config_path),
            original_exception=e,
        ) from e

    try:
        data = json.loads(raw) if raw.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(
            message=f"Settings file is not valid JSON: {config_path}",
            config_path=str(config_path),
            original_exception=e,
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Settings file must contain a JSON object: {config_path}",
            config_path=str(config_path),
        )

    try:
        return AuditSettings().merged(**data)
    except ConfigError as e:
        raise ConfigError(
            message=f"{e.message} ({config_path})",
            config_path=str(config_path),
            original_exception=e,
        ) from e


def save_settings(settings: AuditSettings, config_path: Path = CONFIG_FILE) -> None:
    """
    Write settings to a JSON file, creating its directory if needed.

    Raises:
        ConfigError: If the file cannot be written.
    """
    settings.validate()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Failed to write settings file: {config_path}",
            config_path=str(config_path),
            original_exception=e,
        ) from e
