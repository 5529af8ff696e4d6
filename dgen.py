r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from lazyq import from_iterable, Enumerable
from typing import Any, Dict, Iterable, Iterator, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def _records(self) -> Iterator[Any]:
        while True:
            yield self._generator.create(self._schema)

    def stream(self) -> Enumerable:
        """an endless enumerable; records are generated only when pulled"""
        return from_iterable(self._records())

    def take(self, count: int) -> Enumerable:
        return self.stream().take(count)

    def list(self, count: int) -> List[Any]:
        return self.take(count).to.list()


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- pull tracing ---

class ExhaustedPullError(AssertionError):
    """a consumer pulled a source again after it had reported exhaustion."""


class TracingSource:
    """
    iterator that records every pull made against it.
    pulling again after it has raised StopIteration fails loudly, which is
    how tests check that adaptors never touch an exhausted source.
    """

    def __init__(self, data: Iterable[Any]):
        self._iterator = iter(data)
        self.pulled: List[Any] = []
        self.exhausted = False

    @property
    def pulls(self) -> int:
        return len(self.pulled)

    def __iter__(self) -> 'TracingSource':
        return self

    def __next__(self) -> Any:
        if self.exhausted:
            raise ExhaustedPullError(f"source pulled after exhaustion ({self.pulls} values produced)")
        try:
            item = next(self._iterator)
        except StopIteration:
            self.exhausted = True
            raise
        self.pulled.append(item)
        return item


def traced(data: Iterable[Any]) -> TracingSource:
    return TracingSource(data)
