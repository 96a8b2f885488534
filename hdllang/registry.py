"""Generic registry for plugin-style class registration.

Parsers and renderers are registered against a key with a class
decorator and later instantiated by that key, so adding a dialect or an
output format never touches the dispatch code.

Example usage::

    parser_registry = Registry("parser")

    @parser_registry.register(Dialect.VERILOG)
    class VerilogParser(HDLParser):
        ...

    parser = parser_registry.create(Dialect.VERILOG, source=text)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Type, TypeVar

T = TypeVar("T")


class Registry:
    """A registry for decorator-based class registration."""

    def __init__(self, name: str = "registry") -> None:
        """Initialize the registry.

        Args:
            name: Human-readable name for error messages.
        """
        self._name = name
        self._items: Dict[Hashable, Type[Any]] = {}

    def register(self, key: Hashable) -> Callable[[Type[T]], Type[T]]:
        """Decorator to register a class with the given key.

        Raises:
            ValueError: If the key is already registered.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            if key in self._items:
                raise ValueError(
                    f"{self._name}: key '{key}' already registered "
                    f"to {self._items[key].__name__}"
                )
            self._items[key] = cls
            return cls
        return decorator

    def get(self, key: Hashable) -> Type[Any]:
        """Return the class registered under ``key``.

        Raises:
            KeyError: If the key is not registered.
        """
        if key not in self._items:
            available = ", ".join(sorted(str(k) for k in self._items))
            raise KeyError(
                f"{self._name}: unknown key '{key}'. "
                f"Available: {available}"
            )
        return self._items[key]

    def create(self, key: Hashable, **kwargs: Any) -> Any:
        """Create an instance of the class registered under ``key``.

        Args:
            key: The key of the registered class.
            **kwargs: Arguments to pass to the class constructor.

        Raises:
            KeyError: If the key is not registered.
        """
        return self.get(key)(**kwargs)

    def keys(self) -> List[str]:
        """Return the registered keys as strings.

        Useful for populating argparse choices dynamically.
        """
        return [str(k) for k in self._items]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
