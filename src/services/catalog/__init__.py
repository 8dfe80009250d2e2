from .icons import BaseIconResolver, LocalIconResolver
from .models import IconHandle, ListItem, Section
from .providers import IDENTITY_PROVIDERS, AuthProvider
from .service import CatalogService
from .types import SectionName


__all__ = [
    "IDENTITY_PROVIDERS",
    "AuthProvider",
    "BaseIconResolver",
    "CatalogService",
    "IconHandle",
    "ListItem",
    "LocalIconResolver",
    "Section",
    "SectionName",
]
