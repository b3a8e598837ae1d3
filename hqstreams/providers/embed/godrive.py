from urllib.parse import urlencode

from hqstreams.providers.base_provider import BaseProvider
from hqstreams.schemas.type_defs import ParsedIdentifier


class GoDrivePlayerProvider(BaseProvider):
    """
    GoDrivePlayer serves movies and series from the same player page,
    selecting the title through query parameters.
    """

    provider_key = "godrive"
    display_name = "GoDrivePlayer"
    movie_url = "https://godriveplayer.com/player.php"
    series_url = "https://godriveplayer.com/player.php"
    qualities = ["1080p"]
    features = ["fast_servers", "responsive"]

    # Used when a series is requested without season/episode
    default_season = "1"
    default_episode = "1"

    def _player_url(self, base: str, params: dict) -> str:
        # ':' stays literal so 'tmdb:' prefixed ids reach the player unchanged
        return f"{base}?{urlencode(params, safe=':')}"

    def build_movie_url(self, parsed: ParsedIdentifier) -> str:
        return self._player_url(self.movie_url, {"imdb": parsed["primary_id"]})

    def build_episode_url(self, parsed: ParsedIdentifier) -> str:
        return self._player_url(self.series_url, {
            "tmdb": self.tmdb_or_primary(parsed),
            "season": parsed["season"],
            "episode": parsed["episode"],
        })

    def build_show_url(self, parsed: ParsedIdentifier) -> str:
        return self._player_url(self.series_url, {
            "tmdb": self.tmdb_or_primary(parsed),
            "season": self.default_season,
            "episode": self.default_episode,
        })
