"""
seeded fixture records for the test suites.

a schema is a dict of field -> spec where spec is one of

    'word'                                   a faker provider name
    ('pyint', {'min_value': 1})              a faker provider with kwargs
    {'_provider': 'choice', 'from': [...]}   a value picked by the rng
    {'_provider': 'literal', 'value': x}     x as-is
    {...}                                    a nested record

anything else is used as a literal.
"""
from types import SimpleNamespace
from typing import Any, Callable, Dict, Optional

import numpy as np
from faker import Faker

from enumerable import Enumerable, from_iterable


class Generator:
    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _fake_value(self, provider: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, provider)
        except AttributeError:
            raise ValueError(f"faker has no provider '{provider}'")
        return method(**(kwargs or {}))

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            provider = schema.get('_provider')
            if provider == 'choice':
                # numpy scalars back to plain python values
                picked = self._rng.choice(schema['from'])
                return picked.item() if hasattr(picked, 'item') else picked
            if provider == 'literal':
                return schema['value']
            if provider is not None:
                raise ValueError(f"unknown _provider: '{provider}'")
            return {key: self.create(spec) for key, spec in schema.items()}

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._fake_value(*schema)

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._fake_value(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> list:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int, factory: Optional[Callable[[Dict], Any]] = None) -> Enumerable:
        records = self.records(count)
        return from_iterable(factory(r) for r in records) if factory else from_iterable(records)

    def objects(self, count: int) -> Enumerable:
        """records as attribute objects, nested dicts included"""
        return self.take(count, _to_namespace)


def _to_namespace(value: Any) -> Any:
    if isinstance(value, dict):
        return SimpleNamespace(**{k: _to_namespace(v) for k, v in value.items()})
    return value


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
