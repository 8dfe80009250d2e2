import pydantic

from services.catalog import AuthProvider


class ProviderResponse(pydantic.BaseModel):
    """Response body for a single `AuthProvider`."""

    name: str
    display_label: str
    provider_id: str
    is_identity_provider: bool

    @classmethod
    def from_provider(cls, provider: AuthProvider) -> "ProviderResponse":
        return cls(
            name=provider.name,
            display_label=provider.display_label,
            provider_id=provider.provider_id,
            is_identity_provider=provider.is_identity_provider,
        )
