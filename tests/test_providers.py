"""
Provider URL construction tests.
Verifies every provider's movie, episode and season-less series URLs.
"""

import pytest
from hqstreams.providers.base_provider import BaseProvider
from hqstreams.providers.common import ProviderFactory
from hqstreams.providers.registry import PROVIDER_CLASSES
from hqstreams.config.provider_config import PROVIDER_REGISTRY, get_provider_keys
from hqstreams.utils.ids import parse_media_id


class TestRegistry:
    """Registry and factory behaviour"""

    def test_registry_order(self):
        assert list(PROVIDER_CLASSES.keys()) == ["vidsrc", "godrive", "autoembed", "tmdbembed"]
        assert get_provider_keys() == ["vidsrc", "godrive", "autoembed", "tmdbembed"]

    def test_all_providers_inherit_base_provider(self):
        for cls in PROVIDER_CLASSES.values():
            assert issubclass(cls, BaseProvider)

    def test_factory_creates_provider(self):
        provider = ProviderFactory.create_provider("godrive")
        assert provider.display_name == "GoDrivePlayer"

    def test_factory_rejects_unknown_provider(self):
        with pytest.raises(ValueError):
            ProviderFactory.create_provider("unknown")

    def test_provider_registry_mirrors_classes(self):
        config = PROVIDER_REGISTRY["tmdbembed"]
        assert config["display_name"] == "TMDB-Embed"
        assert config["qualities"] == ["1080p", "4K"]
        assert config["features"] == ["multi_source"]
        assert "unknown" not in PROVIDER_REGISTRY


class TestDeclaredQuality:
    """Each provider advertises one fixed quality label"""

    @pytest.mark.parametrize("key,quality", [
        ("vidsrc", "1080p"),
        ("godrive", "1080p"),
        ("autoembed", "1080p"),
        ("tmdbembed", "4K"),
    ])
    def test_quality_label(self, key, quality):
        assert ProviderFactory.create_provider(key).quality == quality

    def test_candidate_fields(self):
        provider = ProviderFactory.create_provider("vidsrc")
        candidate = provider.build_candidate("movie", parse_media_id("tt0111161"))
        assert candidate["provider_name"] == "VidSrc"
        assert candidate["title"] == "VidSrc - 1080p"
        assert candidate["description"] == "Source: VidSrc\nQuality: 1080p\nFeatures: subtitles, auto_update"
        assert candidate["features"] == ["subtitles", "auto_update"]


class TestMovieUrls:

    @pytest.mark.parametrize("key,url", [
        ("vidsrc", "https://vidsrc.to/embed/movie/tt0111161"),
        ("godrive", "https://godriveplayer.com/player.php?imdb=tt0111161"),
        ("autoembed", "https://autoembed.cc/embed/movie/tt0111161"),
        ("tmdbembed", "https://api.tmdbembed.org/embed/movie/tt0111161"),
    ])
    def test_imdb_movie(self, key, url):
        provider = ProviderFactory.create_provider(key)
        assert provider.build_url("movie", parse_media_id("tt0111161")) == url

    def test_tmdb_movie_prefers_alternate_id_for_tmdb_embed(self):
        parsed = parse_media_id("tmdb:278")
        assert ProviderFactory.create_provider("tmdbembed").build_url("movie", parsed) == \
            "https://api.tmdbembed.org/embed/movie/278"
        # imdb-keyed providers receive the raw id
        assert ProviderFactory.create_provider("vidsrc").build_url("movie", parsed) == \
            "https://vidsrc.to/embed/movie/tmdb:278"

    def test_movie_type_ignores_episode_segments(self):
        parsed = parse_media_id("tt0111161:1:1")
        assert ProviderFactory.create_provider("vidsrc").build_url("movie", parsed) == \
            "https://vidsrc.to/embed/movie/tt0111161"


class TestSeriesUrls:

    @pytest.mark.parametrize("key,url", [
        ("vidsrc", "https://vidsrc.to/embed/tv/tt0903747/2/5"),
        ("godrive", "https://godriveplayer.com/player.php?tmdb=tt0903747&season=2&episode=5"),
        ("autoembed", "https://autoembed.cc/embed/tv/tt0903747/2/5"),
        ("tmdbembed", "https://api.tmdbembed.org/embed/tv/tt0903747/2/5"),
    ])
    def test_episode(self, key, url):
        provider = ProviderFactory.create_provider(key)
        assert provider.build_url("series", parse_media_id("tt0903747:2:5")) == url

    @pytest.mark.parametrize("key,url", [
        ("vidsrc", "https://vidsrc.to/embed/tv/tt0903747"),
        ("godrive", "https://godriveplayer.com/player.php?tmdb=tt0903747&season=1&episode=1"),
        ("autoembed", "https://autoembed.cc/embed/tv/tt0903747"),
        ("tmdbembed", "https://api.tmdbembed.org/embed/tv/tt0903747"),
    ])
    def test_series_without_episode(self, key, url):
        provider = ProviderFactory.create_provider(key)
        assert provider.build_url("series", parse_media_id("tt0903747")) == url

    def test_tmdb_series_uses_alternate_id(self):
        parsed = parse_media_id("tmdb:1396")
        assert ProviderFactory.create_provider("godrive").build_url("series", parsed) == \
            "https://godriveplayer.com/player.php?tmdb=1396&season=1&episode=1"
        assert ProviderFactory.create_provider("tmdbembed").build_url("series", parsed) == \
            "https://api.tmdbembed.org/embed/tv/1396"

    def test_godrive_encodes_query_breaking_characters(self):
        """Only ':' is kept literal in GoDrive query values"""
        parsed = parse_media_id("tt1&x=1")
        assert ProviderFactory.create_provider("godrive").build_url("movie", parsed) == \
            "https://godriveplayer.com/player.php?imdb=tt1%26x%3D1"
