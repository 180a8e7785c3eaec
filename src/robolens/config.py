# RoboLens — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Settings for fetching and checking robots.txt files.

	Environment variables are prefixed with ROBOLENS_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="ROBOLENS_", env_file=".env", extra="ignore")

	user_agent: str = Field(default="RoboLens/0.1 (+https://example.com)", min_length=1)
	timeout: float = Field(default=10.0, gt=0)
	retries: int = Field(default=3, ge=0)
	backoff: float = Field(default=0.5, ge=0)
	max_redirects: int = Field(default=5, ge=0)
	log_level: str = Field(default="INFO")
	log_dir: Optional[str] = Field(default="logs")
