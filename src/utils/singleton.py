import typing

import pydantic


__all__ = (
    "Singleton",
    "SingletonPydantic",
)


_instances: dict[type, typing.Any] = {}
"""The single instance of each singleton class, shared by both metaclasses."""


def _get_or_create(cls: type) -> typing.Any:
    if cls not in _instances:
        instance = cls.__new__(cls)
        instance.__init__()
        _instances[cls] = instance
    return _instances[cls]


class _SingletonMeta(type):
    @typing.override
    def __call__(cls):
        return _get_or_create(cls)


class _SingletonMetaPydantic(type(pydantic.BaseModel)):  # type: ignore
    def __call__(cls):  # type: ignore
        return _get_or_create(cls)


class Singleton(metaclass=_SingletonMeta):
    """Affects current and all child classes (each will be a separate `Singleton`).

    Only works for classes that don't have constructor args and kwargs.

    Provides the `__slots__` attribute.
    """

    __slots__ = ()


class SingletonPydantic(metaclass=_SingletonMetaPydantic):
    """Same as `Singleton`, but for `pydantic_settings.BaseSettings` (inherit together with it).

    Only works for settings that **don't** need setting their values on instantiation,
    i.e. read all of their fields from the environment, an *.env* file or defaults.
    """
