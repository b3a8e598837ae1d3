"""
Base provider class with common functionality.
All embed providers should inherit from this class.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from hqstreams.schemas.type_defs import CandidateStream, ParsedIdentifier
from hqstreams.utils.ids import has_episode

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Abstract base class for all embed providers.

    A provider never contacts the remote service: it only substitutes the
    parsed identifier into its URL templates and labels the result with its
    declared quality and features.
    """

    # Subclasses should override these
    provider_key: str = "base"
    display_name: str = "Base"
    movie_url: str = ""
    series_url: str = ""
    qualities: List[str] = []
    features: List[str] = []
    # Index into `qualities` used as the advertised label
    quality_index: int = 0

    @property
    def log_prefix(self) -> str:
        """Get formatted logging prefix with provider display name."""
        return f"[{self.display_name}]"

    @property
    def quality(self) -> str:
        return self.qualities[self.quality_index]

    @staticmethod
    def tmdb_or_primary(parsed: ParsedIdentifier) -> str:
        """Alternate (TMDB) id when present, primary id otherwise"""
        return parsed["alternate_id"] or parsed["primary_id"]

    @abstractmethod
    def build_movie_url(self, parsed: ParsedIdentifier) -> str:
        """URL for a movie"""
        pass

    @abstractmethod
    def build_episode_url(self, parsed: ParsedIdentifier) -> str:
        """URL for a series episode, season and episode are always present"""
        pass

    @abstractmethod
    def build_show_url(self, parsed: ParsedIdentifier) -> str:
        """URL for a series requested without season/episode"""
        pass

    def build_url(self, media_type: str, parsed: ParsedIdentifier) -> str:
        """Pick the template matching the media type and identifier shape."""
        if media_type == "series" and has_episode(parsed):
            return self.build_episode_url(parsed)
        if media_type == "movie":
            return self.build_movie_url(parsed)
        return self.build_show_url(parsed)

    def build_candidate(self, media_type: str, parsed: ParsedIdentifier) -> CandidateStream:
        url = self.build_url(media_type, parsed)
        logger.debug(f"{self.log_prefix} Built {media_type} URL: {url}")
        return {
            "provider_name": self.display_name,
            "title": f"{self.display_name} - {self.quality}",
            "url": url,
            "description": (
                f"Source: {self.display_name}\n"
                f"Quality: {self.quality}\n"
                f"Features: {', '.join(self.features)}"
            ),
            "quality": self.quality,
            "features": list(self.features),
        }
