import typing

from config import AppConfig
from utils import logging, singleton

from .icons import BaseIconResolver, LocalIconResolver
from .models import ListItem, Section
from .providers import IDENTITY_PROVIDERS, AuthProvider
from .types import SectionName


log = logging.getLogger("catalog")


_OTHER_PROVIDERS_SYMBOLS: typing.Final[tuple[tuple[AuthProvider, str], ...]] = (
    (AuthProvider.PASSWORDLESS, "lock.slash.fill"),
    (AuthProvider.PHONE_NUMBER, "phone.fill"),
    (AuthProvider.ANONYMOUS, "questionmark.circle.fill"),
    (AuthProvider.CUSTOM, "lock.shield.fill"),
)


# being a Singleton is just a precaution, everything should be using the 'CatalogService' instance:
class _CatalogService(singleton.Singleton):
    """Service for building the display `Sections` of the supported `AuthProviders`.

    Every `Section` is built anew on each call, so consecutive calls return equal results.
    """

    __slots__ = ("_resolver",)

    def __init__(self):
        self._resolver: BaseIconResolver | None = None

    def setup(self, resolver: BaseIconResolver | None = None) -> bool:
        """Setup the `CatalogService` global singleton.

        Called lazily on first use, if not called explicitly before that.

        Is idempotent, unless a different `resolver` is provided.

        :param BaseIconResolver resolver:
            Used for resolving the icons of the items. Defaults to a `LocalIconResolver` from `AppConfig.CATALOG`.

        :return bool:
            If the setup was successfull or not.
        """
        if resolver is None:
            if self._resolver is not None:
                return True
            resolver = LocalIconResolver.from_config(AppConfig.CATALOG)
        log.info(f"using icon resolver: {type(resolver).__name__}")
        self._resolver = resolver
        return True

    @property
    def resolver(self) -> BaseIconResolver:
        """The currently used `BaseIconResolver`."""
        if self._resolver is None:
            self.setup()
        return typing.cast(BaseIconResolver, self._resolver)

    def provider_id(self, provider: AuthProvider) -> str:
        """The identifier of `provider`, as expected by the identity platform SDK."""
        return provider.provider_id

    def provider_section(self) -> Section:
        """The external identity providers, as plain items."""
        return Section(
            header_text="Identity Providers",
            footer_text="Choose a login flow from one of the identity providers above.",
            items=tuple(ListItem.for_provider(p) for p in IDENTITY_PROVIDERS),
        )

    def email_password_section(self) -> Section:
        """The email & password login, as a single item leading to its own login flow."""
        icon = self.resolver.by_name(AppConfig.CATALOG.EMAIL_PASSWORD_ICON)
        item = ListItem.for_provider(AuthProvider.EMAIL_PASSWORD, has_nested_content=True, icon=icon)
        return Section(
            footer_text="A example login flow with password authentication.",
            items=(item,),
        )

    def other_section(self) -> Section:
        """The other methods of authentication, each with its own tinted symbol."""
        tint = AppConfig.CATALOG.SYMBOL_TINT
        return Section(
            footer_text="Other authentication methods.",
            items=tuple(
                ListItem.for_provider(p, icon=self.resolver.by_symbol_with_tint(symbol, tint))
                for p, symbol in _OTHER_PROVIDERS_SYMBOLS
            ),
        )

    def section(self, name: SectionName) -> Section:
        """Get a single `Section` of the providers picker by its `name`."""
        match name:
            case SectionName.PROVIDERS:
                return self.provider_section()
            case SectionName.EMAIL_PASSWORD:
                return self.email_password_section()
            case SectionName.OTHER:
                return self.other_section()

    def all_sections(self) -> list[Section]:
        """All `Sections` of the providers picker, in display order."""
        return [self.provider_section(), self.email_password_section(), self.other_section()]

    def auth_link_sections(self) -> list[Section]:
        """All items of the providers picker, combined in a single `Section` for managing the linked providers.

        The checked state of each item (if the current `User` is linked to the respective provider)
        is left to the caller.
        """
        return [
            Section(
                header_text="Manage linking between providers",
                footer_text=(
                    "Select an unchecked row to link the currently signed in user to that auth provider. "
                    "To unlink the user from a linked provider, select its corresponding row marked with a checkmark."
                ),
                items=tuple(item for s in self.all_sections() for item in s.items),
            )
        ]


CatalogService: typing.Final[_CatalogService] = _CatalogService()
"""Service for building the display `Sections` of the supported `AuthProviders`."""
