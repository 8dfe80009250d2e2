import typing

import pydantic

from .providers import AuthProvider


class IconHandle(pydantic.BaseModel):
    """An opaque reference to an image, either a named asset or a tinted symbol."""

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    kind: typing.Literal["asset", "symbol"]
    name: str = pydantic.Field(min_length=1)
    tint: str | None = None
    source: str | None = None

    @pydantic.model_validator(mode="after")
    def _validate_for_kind(self) -> typing.Self:
        if self.kind == "symbol":
            if not self.tint:
                raise ValueError(f"a 'symbol' icon requires a 'tint', received '{self.tint}'")
            if self.source is not None:
                raise ValueError("only an 'asset' icon can have a 'source'")
        elif self.tint is not None:
            raise ValueError("only a 'symbol' icon can have a 'tint'")
        return self


class ListItem(pydantic.BaseModel):
    """The display data of a single row in a `Section`."""

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    title: str = pydantic.Field(min_length=1)
    has_nested_content: bool = False
    icon: IconHandle | None = None

    @classmethod
    def for_provider(
        cls, provider: AuthProvider, *, has_nested_content: bool = False, icon: IconHandle | None = None
    ) -> "ListItem":
        """Create a new `ListItem` titled with the display label of `provider`."""
        return cls(title=provider.display_label, has_nested_content=has_nested_content, icon=icon)


class Section(pydantic.BaseModel):
    """An ordered group of `ListItems` with an optional header and footer.

    The order of the `items` is the order they should be displayed in.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    header_text: str | None = None
    footer_text: str | None = None
    items: tuple[ListItem, ...] = ()
