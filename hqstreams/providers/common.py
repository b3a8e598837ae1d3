from typing import List
from hqstreams.providers.base_provider import BaseProvider
from hqstreams.providers.registry import PROVIDER_CLASSES, get_provider_class

class ProviderFactory:
    """Factory to create provider instances using dynamic registry."""

    @staticmethod
    def create_provider(provider_name: str) -> BaseProvider:
        """Create a provider instance based on the provider name."""
        provider_cls = get_provider_class(provider_name)

        if not provider_cls:
            raise ValueError(f"Unknown provider: {provider_name}")

        return provider_cls()

    @staticmethod
    def create_all() -> List[BaseProvider]:
        """Instantiate every registered provider, in registry order."""
        return [cls() for cls in PROVIDER_CLASSES.values()]
