import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


# ----------------------------
# Settings
# ----------------------------

DEFAULT_SETTINGS = {
    "digest": {
        "algorithm": "sha256",
    },
    "tracing": {
        "exporter": "none",
        "service_name": "tree-digest",
        "environment": "production",
    },
    "logging": {"level": "WARNING"},
}


def default_settings() -> Dict[str, Any]:
    return json.loads(json.dumps(DEFAULT_SETTINGS))


def merge_settings(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(base))
    for k, v in overrides.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k].update(v)
        else:
            merged[k] = v
    return merged


def load_settings(
    project_root: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Load settings, merged section by section over DEFAULT_SETTINGS.

    - config_path wins if given, and must exist
    - otherwise <project_root>/data/settings.json is used when present
    - otherwise the defaults are returned
    """
    if config_path is not None:
        settings_path = Path(config_path)
        if not settings_path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")
    elif project_root is not None:
        settings_path = Path(project_root) / "data" / "settings.json"
        if not settings_path.exists():
            return default_settings()
    else:
        return default_settings()

    with open(settings_path, "r", encoding="utf-8") as f:
        user_settings = json.load(f)

    if not isinstance(user_settings, dict):
        raise ValueError(f"Settings file must hold a JSON object: {settings_path}")

    logger.debug("Loaded settings from %s", settings_path)
    return merge_settings(DEFAULT_SETTINGS, user_settings)


def configure_logging(settings: Dict[str, Any]) -> None:
    level = str(settings.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
