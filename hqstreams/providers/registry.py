from typing import Type, Dict, Optional
from hqstreams.providers.base_provider import BaseProvider
from hqstreams.providers.embed.vidsrc import VidSrcProvider
from hqstreams.providers.embed.godrive import GoDrivePlayerProvider
from hqstreams.providers.embed.autoembed import AutoEmbedProvider
from hqstreams.providers.embed.tmdbembed import TMDBEmbedProvider

# Map provider keys to their implementation classes (insertion order is response order)
PROVIDER_CLASSES: Dict[str, Type[BaseProvider]] = {
    "vidsrc": VidSrcProvider,
    "godrive": GoDrivePlayerProvider,
    "autoembed": AutoEmbedProvider,
    "tmdbembed": TMDBEmbedProvider,
}

def get_provider_class(key: str) -> Optional[Type[BaseProvider]]:
    """Get the provider class for a given key."""
    return PROVIDER_CLASSES.get(key)
