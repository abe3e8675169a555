import os
import yaml
from pathlib import Path
from pydantic import BaseModel
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "server.yaml"


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    static_dir: Optional[str] = None  # Built web client, served at "/" when present


def get_config_path() -> Path:
    """CONNECT4_CONFIG (env or .env) overrides the bundled server.yaml"""
    return Path(os.getenv("CONNECT4_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_settings(path: Optional[Path] = None) -> ServerSettings:
    path = path or get_config_path()
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return ServerSettings(**data.get("server", {}))


# Singleton instance
settings = load_settings()
