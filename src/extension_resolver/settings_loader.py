import yaml
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from .exceptions import SettingsLoadError
from .schemas import ResolverSettings

SETTINGS_FILE = "extension_resolver.yaml"


def load_settings_manifest(config_dir: str) -> Optional[Dict]:
    """Load extension_resolver.yaml (optional)."""
    path = Path(config_dir) / SETTINGS_FILE
    if not path.exists():
        return None
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return data
    except yaml.YAMLError as e:
        raise SettingsLoadError(SETTINGS_FILE, f"Invalid YAML: {e}") from e
    except OSError as e:
        raise SettingsLoadError(SETTINGS_FILE, str(e)) from e


def load_resolver_settings(config_dir: Optional[str] = None) -> ResolverSettings:
    """Build ResolverSettings from config_dir, falling back to defaults.

    Args:
        config_dir: Directory holding extension_resolver.yaml, or None

    Returns:
        Validated ResolverSettings

    Raises:
        SettingsLoadError: If the file exists but is invalid
    """
    if config_dir is None:
        return ResolverSettings()

    data = load_settings_manifest(config_dir)
    if data is None:
        return ResolverSettings()
    if not isinstance(data, dict):
        raise SettingsLoadError(SETTINGS_FILE, "Root must be a dict")

    try:
        return ResolverSettings(**data)
    except ValidationError as e:
        raise SettingsLoadError(SETTINGS_FILE, f"Invalid settings: {e}") from e
