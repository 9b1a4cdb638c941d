import os
import yaml
import logging
from functools import lru_cache
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///talentdesk.db"
    echo: bool = False


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ScorerConfig(BaseModel):
    """
    Weighting policy for candidate ranking.

    The five auto-score factors carry fixed point budgets; what is pluggable
    is how the auto score blends with a recruiter's manual score, and the
    sizes of the ranked lists.
    """
    # total_score = auto_weight * auto_score + manual_weight * manual_score
    auto_weight: float = Field(default=0.6, ge=0.0, le=1.0)
    manual_weight: float = Field(default=0.4, ge=0.0, le=1.0)

    # Default size of the "top candidates" list
    top_k: int = Field(default=10, ge=1)
    # Size of the final shortlist (manually scored candidates only)
    final_top_n: int = Field(default=3, ge=1)

    # Cover letters must be strictly longer than this to earn quality points
    cover_letter_min_length: int = 100

    @model_validator(mode='after')
    def _weights_sum_to_one(self) -> 'ScorerConfig':
        if abs(self.auto_weight + self.manual_weight - 1.0) > 1e-9:
            raise ValueError(
                f"auto_weight + manual_weight must equal 1.0, "
                f"got {self.auto_weight} + {self.manual_weight}"
            )
        return self


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides on top of the YAML data."""
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    if 'LOG_LEVEL' in os.environ:
        data.setdefault('logging', {})
        data['logging']['level'] = os.environ['LOG_LEVEL']

    return data


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration from YAML with environment overrides.

    Falls back to the project-root config.yaml, then to built-in defaults
    when no file exists.
    """
    if config_path is None:
        config_path = os.environ.get("TALENTDESK_CONFIG", "config.yaml")

    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config.yaml found, using defaults")

    return AppConfig(**_apply_env_overrides(data))


@lru_cache()
def get_config() -> AppConfig:
    """Cached application configuration."""
    return load_config()
