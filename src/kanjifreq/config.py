"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class CrawlerSettings(BaseSettings):
    """Crawler configuration."""

    timeout: float = 10.0
    user_agent: str = "KanjiFreq/0.1 (+https://github.com/kanjifreq)"
    max_connections: int = 100
    max_keepalive_connections: int = 20

    default_url: str = "https://www.yomiuri.co.jp"
    default_depth: int = 1
    max_depth: int = 10
    default_ranking_size: int = 100

    model_config = {"env_prefix": "KANJIFREQ_"}


settings = CrawlerSettings()
