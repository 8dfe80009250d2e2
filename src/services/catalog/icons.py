import pathlib
from abc import ABC, abstractmethod
from collections.abc import Iterable

from config.catalog import CatalogConfig
from utils import exceptions, logging

from .models import IconHandle


log = logging.getLogger("catalog")


class BaseIconResolver(ABC):
    """Base class for resolving the icons of the `Catalog` items.

    A missing icon is not an error: both lookups return **None** instead of raising.
    """

    @abstractmethod
    def by_name(self, name: str) -> IconHandle | None:
        """Get the image asset named `name`."""

    @abstractmethod
    def by_symbol_with_tint(self, symbol: str, tint: str) -> IconHandle | None:
        """Get the symbolic glyph named `symbol`, tinted with the color `tint`."""


class LocalIconResolver(BaseIconResolver):
    """Resolves image assets from a local directory and symbols from an (optionally restricted) set of names."""

    __slots__ = ("_assets_dir", "_extensions", "_symbols")

    def __init__(
        self,
        assets_dir: pathlib.Path | None = None,
        extensions: Iterable[str] = (".png", ".svg", ".pdf"),
        symbols: Iterable[str] | None = None,
    ):
        """
        :param pathlib.Path assets_dir:
            Where to look for named image assets. When **None**, every named asset is absent.
        :param Iterable[str] extensions:
            The file extensions of the assets, in the order they are looked up.
        :param Iterable[str] symbols:
            The names of the available symbols. When **None**, every symbol is available.

        :raise exceptions.IconResolverConfigError:
            If `assets_dir` is provided, but is not an existing directory.
        """
        if assets_dir is not None and not assets_dir.is_dir():
            raise exceptions.IconResolverConfigError(assets_dir, "not an existing directory")
        self._assets_dir = assets_dir
        self._extensions = tuple(extensions)
        self._symbols = frozenset(symbols) if symbols is not None else None

    @classmethod
    def from_config(cls, config: CatalogConfig) -> "LocalIconResolver":
        """Create a new `LocalIconResolver` from the `Catalog` configs."""
        return cls(
            assets_dir=config.ASSETS_DIR,
            extensions=config.ASSETS_EXTENSIONS,
            symbols=config.SYMBOLS_AVAILABLE,
        )

    def by_name(self, name: str) -> IconHandle | None:
        if self._assets_dir is None or not name:
            return None
        for ext in self._extensions:
            path = self._assets_dir / f"{name}{ext}"
            if path.is_file():
                return IconHandle(kind="asset", name=name, source=str(path))
        log.debug(f"asset not found: '{name}' in '{self._assets_dir}'")
        return None

    def by_symbol_with_tint(self, symbol: str, tint: str) -> IconHandle | None:
        if not symbol or not tint:
            return None
        if self._symbols is not None and symbol not in self._symbols:
            log.debug(f"symbol not available: '{symbol}'")
            return None
        return IconHandle(kind="symbol", name=symbol, tint=tint)
