"""
Centralized provider configuration registry.
Built from the provider classes so the class attributes stay the single source of truth.
"""

from typing import Dict, List
from hqstreams.providers.registry import PROVIDER_CLASSES
from hqstreams.schemas.type_defs import ProviderConfig


def _build_registry() -> Dict[str, ProviderConfig]:
    """Build the provider registry from registered classes."""
    registry = {}
    for key, cls in PROVIDER_CLASSES.items():
        registry[key] = {
            "provider_key": cls.provider_key,
            "display_name": cls.display_name,
            "movie_url": cls.movie_url,
            "series_url": cls.series_url,
            "qualities": list(cls.qualities),
            "features": list(cls.features),
        }
    return registry

# Read-only after import
PROVIDER_REGISTRY: Dict[str, ProviderConfig] = _build_registry()


def get_provider_keys() -> List[str]:
    """Provider keys in registry order, as reported by /health."""
    return list(PROVIDER_REGISTRY.keys())
