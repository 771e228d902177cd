"""Configuration for the Wikipedia title lookup.

All settings can be overridden via WIKIPEDIA_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WikipediaConfig(BaseSettings):
    """Endpoint and transport settings for MediaWiki queries."""

    model_config = SettingsConfigDict(
        env_prefix="WIKIPEDIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url_template: str = Field(
        default="https://{lang}.wikipedia.org/w/api.php",
        description="MediaWiki API URL; {lang} is replaced by the edition code",
    )
    user_agent: str = Field(
        default="article-scorer/0.1.0 (title lookup)",
        description="User-Agent sent to Wikimedia, which rejects anonymous clients",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds for each lookup",
    )

    def api_url(self, lang: str) -> str:
        """API endpoint for a language edition."""
        return self.api_url_template.format(lang=lang)
