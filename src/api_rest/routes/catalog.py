from fastapi import APIRouter, status

from api_rest.exceptions import provider_exceptions, provider_not_found_exception
from api_rest.schemas.catalog import ProviderResponse
from api_rest.schemas.common import Item, Items
from services.catalog import AuthProvider, CatalogService, Section, SectionName
from utils import exceptions


PATH_CATALOG = "catalog"
TAG_CATALOG = "Catalog"


router_catalog = APIRouter(
    prefix=f"/{PATH_CATALOG}",
    tags=[TAG_CATALOG],
)


####################
#   Providers
####################


@router_catalog.get(
    "/providers",
    status_code=status.HTTP_200_OK,
    response_model=Items[ProviderResponse],
)
async def get_providers() -> Items[ProviderResponse]:
    """Get all supported `AuthProviders`, in declaration order."""
    providers = [ProviderResponse.from_provider(p) for p in AuthProvider]
    return {"count": len(providers), "data": providers}


@router_catalog.get(
    "/providers/{provider_id}",
    status_code=status.HTTP_200_OK,
    response_model=Item[ProviderResponse],
    responses=provider_exceptions,
)
async def get_provider(provider_id: str) -> Item[ProviderResponse]:
    """Get the `AuthProvider` with the identity platform identifier `provider_id` (e.g. 'google.com', 'password')."""
    try:
        provider = AuthProvider.from_provider_id(provider_id)
    except exceptions.UnknownProviderError as err:
        raise provider_not_found_exception(err)
    return {"data": ProviderResponse.from_provider(provider)}


####################
#   Sections
####################


@router_catalog.get(
    "/sections",
    status_code=status.HTTP_200_OK,
    response_model=Items[Section],
)
async def get_sections() -> Items[Section]:
    """Get all `Sections` of the providers picker."""
    sections = CatalogService.all_sections()
    return {"count": len(sections), "data": sections}


@router_catalog.get(
    "/sections/auth-link",
    status_code=status.HTTP_200_OK,
    response_model=Items[Section],
)
async def get_sections_auth_link() -> Items[Section]:
    """Get the `Sections` for managing the linked providers of a `User`.

    Marking which of the items are already linked is up to the client.
    """
    sections = CatalogService.auth_link_sections()
    return {"count": len(sections), "data": sections}


@router_catalog.get(
    "/sections/{section_name}",
    status_code=status.HTTP_200_OK,
    response_model=Item[Section],
)
async def get_section(section_name: SectionName) -> Item[Section]:
    """Get a single `Section` of the providers picker."""
    return {"data": CatalogService.section(section_name)}
