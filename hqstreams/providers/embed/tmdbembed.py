from hqstreams.providers.base_provider import BaseProvider
from hqstreams.schemas.type_defs import ParsedIdentifier


class TMDBEmbedProvider(BaseProvider):
    """TMDB-Embed API, prefers the TMDB id whenever one was supplied"""

    provider_key = "tmdbembed"
    display_name = "TMDB-Embed"
    movie_url = "https://api.tmdbembed.org/embed/movie"
    series_url = "https://api.tmdbembed.org/embed/tv"
    qualities = ["1080p", "4K"]
    features = ["multi_source"]
    quality_index = 1  # advertised as 4K

    def build_movie_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.movie_url}/{self.tmdb_or_primary(parsed)}"

    def build_episode_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{self.tmdb_or_primary(parsed)}/{parsed['season']}/{parsed['episode']}"

    def build_show_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{self.tmdb_or_primary(parsed)}"
