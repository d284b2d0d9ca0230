import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

DEFAULTS = {
    "site_url": "https://stockyan.heyaayush.com",
    "data_file": "data/articles.json",
    "output_dir": "learn",
    "templates_dir": "templates",
    "sitemap_file": "sitemap.xml",
    "log_file": "log.json",
}

ENV_KEYS = {
    "site_url": "STOCKYAN_SITE_URL",
    "data_file": "STOCKYAN_DATA_FILE",
    "output_dir": "STOCKYAN_OUTPUT_DIR",
    "templates_dir": "STOCKYAN_TEMPLATES_DIR",
    "sitemap_file": "STOCKYAN_SITEMAP_FILE",
    "log_file": "STOCKYAN_LOG_FILE",
}

PATH_KEYS = ("data_file", "output_dir", "templates_dir", "sitemap_file", "log_file")


def _resolve(value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def load_config(env_file: str = None, overrides: dict = None) -> dict:
    """
    Load build settings from the environment (and a .env file), then apply overrides.
    """
    load_dotenv(env_file)

    config = {}
    for key, default in DEFAULTS.items():
        config[key] = os.getenv(ENV_KEYS[key]) or default

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    config["site_url"] = str(config["site_url"]).strip().rstrip("/")
    if not config["site_url"]:
        raise ValueError("Missing required config key: site_url")

    for key in PATH_KEYS:
        config[key] = _resolve(str(config[key]))

    return config
