import enum
import typing

from utils import exceptions


@enum.unique
class AuthProvider(enum.StrEnum):
    """A supported identity provider or other method of authentication.

    The value of each member is its human-readable display label.
    """

    GOOGLE = "Google"
    APPLE = "Apple"
    TWITTER = "Twitter"
    MICROSOFT = "Microsoft"
    GITHUB = "GitHub"
    YAHOO = "Yahoo"
    FACEBOOK = "Facebook"
    EMAIL_PASSWORD = ("Email & Password Login", "password")
    PASSWORDLESS = ("Email Link/Passwordless", "emailLink")
    PHONE_NUMBER = ("Phone Number", "phone")
    ANONYMOUS = ("Anonymous Authentication", "anonymous")
    CUSTOM = ("Custom Auth System", "custom")

    def __new__(cls, label: str, provider_id: str | None = None):
        member = str.__new__(cls, label)
        member._value_ = label
        return member

    def __init__(self, label: str, provider_id: str | None = None):
        self._explicit_provider_id = provider_id

    @property
    def display_label(self) -> str:
        """The human-readable name of the provider, used as the title of its list item."""
        return self.value

    @property
    def provider_id(self) -> str:
        """The identifier of the provider, as expected by the identity platform SDK.

        Members without an explicit identifier fall back to `"<lowercased display label>.com"`.
        """
        if self._explicit_provider_id is not None:
            return self._explicit_provider_id
        return f"{self.value.lower()}.com"

    @property
    def is_identity_provider(self) -> bool:
        """If the provider is an external identity provider (e.g. Google), not a built-in method of auth."""
        return self in IDENTITY_PROVIDERS

    @classmethod
    def from_provider_id(cls, provider_id: str) -> "AuthProvider":
        """Get the `AuthProvider` identified by `provider_id`.

        :raise exceptions.UnknownProviderError:
            If no `AuthProvider` has the requested `provider_id`.
        """
        for member in cls:
            if member.provider_id == provider_id:
                return member
        raise exceptions.UnknownProviderError(provider_id)


IDENTITY_PROVIDERS: typing.Final[tuple[AuthProvider, ...]] = (
    AuthProvider.GOOGLE,
    AuthProvider.APPLE,
    AuthProvider.TWITTER,
    AuthProvider.MICROSOFT,
    AuthProvider.GITHUB,
    AuthProvider.YAHOO,
    AuthProvider.FACEBOOK,
)
"""The external identity providers, in the order they are listed to the `User`."""
