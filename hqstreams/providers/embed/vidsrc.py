from hqstreams.providers.base_provider import BaseProvider
from hqstreams.schemas.type_defs import ParsedIdentifier


class VidSrcProvider(BaseProvider):
    """VidSrc embeds, addressed by path segments"""

    provider_key = "vidsrc"
    display_name = "VidSrc"
    movie_url = "https://vidsrc.to/embed/movie"
    series_url = "https://vidsrc.to/embed/tv"
    qualities = ["1080p", "4K"]
    features = ["subtitles", "auto_update"]

    def build_movie_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.movie_url}/{parsed['primary_id']}"

    def build_episode_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{parsed['primary_id']}/{parsed['season']}/{parsed['episode']}"

    def build_show_url(self, parsed: ParsedIdentifier) -> str:
        return f"{self.series_url}/{parsed['primary_id']}"
