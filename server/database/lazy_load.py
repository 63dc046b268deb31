# server/database/lazy_load.py
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class LazyLoad(Generic[T]):
    """
    Defers loading a value until it is first read.

    Transformers registered before or after the first read are applied in
    registration order; a transformer added after the value was resolved is
    applied immediately to the cached value.
    """

    def __init__(self, loader: Callable[[], T]):
        self._loader = loader
        self._value: Optional[T] = None
        self._loaded = False
        self._transformers: List[Callable[[T], T]] = []

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def value(self) -> T:
        if not self._loaded:
            value = self._loader()
            for transformer in self._transformers:
                value = transformer(value)
            self._value = value
            self._loaded = True
        return self._value  # type: ignore[return-value]

    def add_transformer(self, transformer: Callable[[T], T]) -> None:
        self._transformers.append(transformer)
        if self._loaded:
            self._value = transformer(self._value)  # type: ignore[arg-type]
