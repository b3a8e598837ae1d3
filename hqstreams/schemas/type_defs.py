"""
Type definitions for resolver intermediate values.
Provides TypedDicts for better type safety and IDE autocompletion.
"""

from typing import TypedDict, Optional, List


class ParsedIdentifier(TypedDict):
    """Identifier fields derived from a raw Stremio media id"""
    primary_id: str
    alternate_id: Optional[str]  # TMDB id when the raw id is 'tmdb:<id>'
    season: Optional[str]
    episode: Optional[str]


class CandidateStream(TypedDict):
    """One constructed, unverified playback URL returned by a provider"""
    provider_name: str
    title: str
    url: str
    description: str
    quality: str
    features: List[str]


class ProviderConfig(TypedDict, total=False):
    """Provider configuration from PROVIDER_REGISTRY"""
    provider_key: str
    display_name: str
    movie_url: str
    series_url: str
    qualities: List[str]
    features: List[str]
