import typing

import pydantic
from pydantic_settings import SettingsConfigDict

from utils import logging, singleton

from . import _utils, catalog


log = logging.getLogger()


# being a Singleton is just a precaution, everything should be using the 'AppConfig' instance:
class _AppConfig(_utils.BaseSettings, singleton.SingletonPydantic):
    """All configs of the application."""

    model_config = SettingsConfigDict(frozen=False)

    APP_NAME: str = "auth-provider-catalog"
    LOG_LEVEL: typing.Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    CATALOG: catalog.CatalogConfig = pydantic.Field(default=None)  # type: ignore

    @typing.override
    def model_post_init(self, _: typing.Any):
        logging.setLevel(self.LOG_LEVEL)
        self.CATALOG = _utils.init_config(catalog.CatalogConfig, "[CATALOG]")
        self.model_config["frozen"] = True  # runtime error, no static-type-check error


with log.any_error(exit_code=1):
    with log.with_prefix("[CONFIG]"):
        log.info("starting ...")
        AppConfig: typing.Final[_AppConfig] = _AppConfig()
        log.info("success!")
