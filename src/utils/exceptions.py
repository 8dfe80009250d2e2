import pathlib


####################
#   Catalog
####################


class CatalogError(ValueError):
    """Base exception for any errors related to the providers `Catalog`."""


class UnknownProviderError(CatalogError):
    """No `AuthProvider` matches the requested identifier."""

    def __init__(self, provider_id: str):
        """No `AuthProvider` matches the requested identifier."""
        self.provider_id = provider_id
        super().__init__(f"Unknown auth provider: '{provider_id}'")


####################
#   Icons
####################


class IconResolverConfigError(CatalogError):
    """The configuration of an `IconResolver` is wrong."""

    def __init__(self, path: pathlib.Path, message: str):
        """The configuration of an `IconResolver` is wrong."""
        super().__init__(f"Wrong config for the icon assets directory '{path}': {message}")
