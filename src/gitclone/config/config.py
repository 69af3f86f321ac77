"""Configuration management for gitclone."""

from typing import Optional, Dict, Any
from pathlib import Path
import os

from pydantic import BaseModel, Field, validator
import yaml
from dotenv import load_dotenv


class GitConfig(BaseModel):
    """Options for the git process wrapper."""

    cwd: Optional[str] = Field(
        default=None,
        description='Working directory git is launched in. Defaults to the current directory.',
    )
    executable: str = Field(default='git', description='Git executable to run')

    class Config:
        """Pydantic configuration."""

        extra = 'forbid'

    @validator('cwd', pre=True)
    def validate_cwd(cls, v):
        """Coerce path-like values and reject empty paths."""
        if v is None:
            return v
        v = os.fspath(v) if isinstance(v, os.PathLike) else str(v)
        if not v.strip():
            raise ValueError('cwd must not be empty')
        return v

    @validator('executable')
    def validate_executable(cls, v):
        """Validate the executable name is set."""
        if not v.strip():
            raise ValueError('executable must not be empty')
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default='INFO', description='Log level')
    file: Optional[str] = Field(default=None, description='Log file path')
    format: Optional[str] = Field(
        default=None,
        description='Console log format. Defaults to the gitclone console format.',
    )

    @validator('level')
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class Config(BaseModel):
    """Main configuration class for gitclone."""

    git: GitConfig = Field(default_factory=GitConfig, description='Git settings')
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description='Logging settings'
    )

    class Config:
        """Pydantic configuration."""

        extra = 'forbid'  # Don't allow extra fields

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        # Load .env file if it exists
        load_dotenv()

        config_data = {
            'git': {
                'cwd': os.getenv('GIT_CLONE_CWD'),
                'executable': os.getenv('GIT_EXECUTABLE', 'git'),
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL', 'INFO'),
                'file': os.getenv('LOG_FILE'),
            },
        }

        config_data = cls._remove_none_values(config_data)

        return cls(**config_data)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'Config':
        """Load configuration from a file if given, else from the environment."""
        if config_path:
            return cls.from_file(config_path)
        return cls.from_env()

    @staticmethod
    def _remove_none_values(data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively remove None values from dictionary."""
        if isinstance(data, dict):
            return {
                k: Config._remove_none_values(v)
                for k, v in data.items()
                if v is not None
            }
        return data

    def to_file(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(
                self.dict(), f, default_flow_style=False, indent=2, sort_keys=False
            )

    @staticmethod
    def create_template(output_path: str) -> None:
        """Create a configuration template file."""
        template_config = {
            'git': {
                'cwd': '/path/to/workspace',
                'executable': 'git',
            },
            'logging': {
                'level': 'INFO',
                'file': 'gitclone.log',
            },
        }

        config_file = Path(output_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(
                template_config, f, default_flow_style=False, indent=2, sort_keys=False
            )
