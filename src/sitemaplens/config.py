# SitemapLens — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPLENS_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="SITEMAPLENS_", env_file=".env", extra="ignore")

	user_agent: str = Field(default="SitemapLens/0.1 (+https://example.com)")
	timeout: float = Field(default=30.0, gt=0)
	max_workers: int = Field(default=1, ge=1)
	max_depth: Optional[int] = Field(default=None, ge=0)
	on_error: Literal["raise", "collect"] = Field(default="raise")
	skip_revisits: bool = Field(default=True)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")

