from hqstreams.providers.base_provider import BaseProvider
from hqstreams.schemas.type_defs import ParsedIdentifier


class AutoEmbedProvider(BaseProvider):
    provider_key = "autoembed"
    display_name = "AutoEmbed"
    movie_url = "https://autoembed.cc/embed/movie"
    series_url = "https://autoembed.cc/embed/tv"
    qualities = ["1080p", "4K"]
    features = ["free_api"]

    def build_movie_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.movie_url}/{parsed['primary_id']}"

    def build_episode_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{parsed['primary_id']}/{parsed['season']}/{parsed['episode']}"

    def build_show_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{parsed['primary_id']}"
