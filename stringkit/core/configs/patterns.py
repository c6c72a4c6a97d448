from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stringkit.core.paths import ROOT_PATH


class PatternConfiguration(BaseSettings):
    """Guarded pattern matching configuration."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=ROOT_PATH / '.env',
        env_file_encoding='utf-8',
        env_prefix='PATTERN_',
        extra='ignore',
    )

    timeout: float = Field(
        2.0,
        description=(
            'The maximum time (in seconds) a single pattern evaluation may run '
            'before it is reported as timed out'
        ),
        gt=0,
        le=60,
    )
    cache_size: int = Field(
        256,
        description='Number of compiled raw-text patterns kept per process',
        ge=1,
    )
