import pathlib
import typing

import pydantic
from pydantic_settings import SettingsConfigDict

from utils import logging

from . import _utils


log = logging.getLogger()


class CatalogConfig(_utils.BaseSettings):
    """Configs for building the sections of the providers `Catalog`."""

    _prefix: typing.ClassVar[str] = "CATALOG"
    model_config = SettingsConfigDict(env_prefix=f"{_prefix}_")

    ASSETS_DIR: pathlib.Path | None = None
    ASSETS_EXTENSIONS: tuple[str, ...] = (".png", ".svg", ".pdf")
    SYMBOLS_AVAILABLE: frozenset[str] | None = None
    SYMBOL_TINT: str = pydantic.Field("systemOrange", min_length=1)
    EMAIL_PASSWORD_ICON: str = pydantic.Field("firebaseIcon", min_length=1)

    @pydantic.field_validator("ASSETS_EXTENSIONS")
    @classmethod
    def _validate_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"an extension must start with a '.', received '{ext}'")
        return v

    @typing.override
    def model_post_init(self, _: typing.Any):
        if self.ASSETS_DIR is None:
            log.info("assets: disabled (named icons will be absent)")
        else:
            log.info(f"assets: '{self.ASSETS_DIR}' {list(self.ASSETS_EXTENSIONS)}")
        if self.SYMBOLS_AVAILABLE is not None:
            log.info(f"symbols: restricted to {sorted(self.SYMBOLS_AVAILABLE)}")
