import os, logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from tlsdebug.common.errors import ConfigError

ENV_FILE = os.path.join(os.path.dirname(__file__), "..", "..", ".env")

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)
    log_level: str = "WARNING"
    transcript_dir: str = "transcripts"

def load_settings(env_file: Optional[str] = None) -> Settings:
    load_dotenv(env_file or ENV_FILE)
    level = os.getenv("TLSDEBUG_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"TLSDEBUG_LOG_LEVEL: unknown level {level!r}")
    return Settings(
        log_level=level,
        transcript_dir=os.getenv("TLSDEBUG_TRANSCRIPT_DIR", "transcripts"),
    )

def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
