"""Runtime settings for the pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Pipeline configuration.

    Passed explicitly to ``create_default_pipeline``; nothing is read from the
    environment.
    """

    site_url: str = "https://postvai.com"
    relay_url: str = "https://api.allorigins.win/get"
    per_page: int = 20
    request_timeout: float = 10.0
    top_k: int = 5
    min_similarity: float = 0.01
    min_query_length: int = 3
    cache_ttl_seconds: float = 30 * 60
