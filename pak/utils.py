"""
Pak utilities: the Unset sentinel and the read-only value object machinery.

- Unset: "not provided" where None is a legitimate value (coalesce() resolves it).
- mirror() / ValueType: immutable value objects with frozen container views and
  readable reprs, used for Vocabulary, ShortcutTable, Resolution and Config.
- rename(): stable names for the methods ValueType generates.
"""
import builtins
import functools
import operator
import re
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """Sealed, falsy singleton type of Unset; usable in `str | Unset` checks."""

    def __or__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """Replace Unset with default; every other value, falsy ones included, is kept."""
    return object if object is not Unset else default


def rename(*parameters):
    """rename(callable, name) sets __name__ and __qualname__; rename(name) is the decorator form."""
    match parameters:
        case (callable, str(name)) if builtins.callable(callable):
            callable.__qualname__ = callable.__name__ = name
            return callable
        case (str(name),):
            return lambda callable: rename(callable, name)
        case _:
            raise TypeError("rename() takes a callable and a name, or a name alone")


def _immortalize(object):
    # tuples, read-only mappings and frozensets all the way down; strings stay strings
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(zip(object.keys(), map(_immortalize, object.values()))))
    elif isinstance(object, Set):
        return frozenset(map(_immortalize, object))
    else:
        return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" on the instance and returns a frozen
    view for container types, so callers cannot mutate shared configuration.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


class ValueType(type):
    """
    Metaclass for the immutable value objects of the package.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the "_{name}" backing field.
    - Provide stable, readable __repr__/__rich_repr__ for diagnostics and rich UI.
    - Freeze instances: attributes can only be assigned inside __init__.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Example
            - vocabulary(commands=('install', 'remove'))
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        @rename("__setattr__")
        def __setattr__(self, name, value, /):
            if getattr(self, "_ValueType__frozen", False):
                raise AttributeError(f"{type(self).__typename__} is read-only")
            object.__setattr__(self, name, value)
        self.__setattr__ = __setattr__

        return self

    def __call__(cls, *args, **kwargs):
        self = super().__call__(*args, **kwargs)
        object.__setattr__(self, "_ValueType__frozen", True)
        return self


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",
    "ValueType",

    # Constants
    "Unset",
)
