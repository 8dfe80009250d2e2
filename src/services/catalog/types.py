import enum


@enum.unique
class SectionName(enum.StrEnum):
    """A single `Section` of the providers picker."""

    PROVIDERS = "providers"
    EMAIL_PASSWORD = "email-password"
    OTHER = "other"
