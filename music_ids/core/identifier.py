"""Generic identifier engine shared by every identifier kind.

Concrete kinds (ISRC, GRid) are plain declarations: a subclass of
`Identifier` with a class-level `grammar`. Everything else lives here:

- parsing in strict mode (raise `InvalidFormat`) or relaxed mode (return a
  value marked not well-formed, keeping the input text verbatim)
- component accessors generated from the grammar's block names, sliced
  lazily and cached per instance
- rendering as `data`, `full` or `prefixed`
- equality, hashing and JSON serialization on the canonical string

Well-formed only means the string matches the grammar. Whether an identifier
was ever issued is a registry question and is not answered here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, TypeVar

from music_ids.core.grammar import Block, Grammar
from music_ids.errors import InvalidFormat, UnsupportedFormat

logger = logging.getLogger(__name__)

IdentifierT = TypeVar("IdentifierT", bound="Identifier")


class OutputFormat(str, Enum):
    """Renderings supported by `Identifier.format_as`."""

    DATA = "data"
    FULL = "full"
    PREFIXED = "prefixed"


_RESERVED_NAMES = {"value", "well_formed", "grammar"}


class Component:
    """Read-only accessor for one block of a well-formed identifier."""

    def __init__(self, block: Block) -> None:
        self.block = block
        self.__doc__ = (
            f"The {block.width}-character {block.name} block, or None if not well-formed."
        )

    def __get__(self, instance: Optional[Identifier], owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.component(self.block.name)


@dataclass(frozen=True, eq=False, repr=False)
class Identifier:
    """Immutable identifier value.

    Args:
        value: Canonical string, or the raw input when not well-formed
        well_formed: Whether `value` matched the grammar

    Constructing directly is the trusted path: no validation happens. Use
    `parse` for untrusted input.
    """

    grammar: ClassVar[Grammar]

    value: str
    well_formed: bool = True
    _components: dict[str, str] = field(default_factory=dict, init=False, compare=False)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        grammar = cls.__dict__.get("grammar")
        if grammar is None:
            return
        for block in grammar.blocks:
            if block.name in _RESERVED_NAMES:
                raise TypeError(f"{cls.__name__}: block name {block.name!r} is reserved")
            if block.name not in cls.__dict__:
                setattr(cls, block.name, Component(block))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(
        cls: type[IdentifierT], value: Any, *, relaxed: bool = False
    ) -> Optional[IdentifierT]:
        """Parse untrusted input into an identifier.

        Args:
            value: A string (or anything with a string form), an existing
                instance of this kind, or None
            relaxed: Return a value marked not well-formed instead of raising

        Returns:
            The identifier, or None for a None input in relaxed mode

        Raises:
            InvalidFormat: In strict mode, when the input does not match the
                grammar, is None, or is an instance that is not well-formed
        """
        if value is None:
            if relaxed:
                return None
            raise cls._invalid(None)

        if isinstance(value, cls):
            if value.well_formed or relaxed:
                return value
            raise cls._invalid(value.value)

        text = str(value)
        canonical = cls.grammar.canonicalize(text)
        if canonical is not None:
            return cls(canonical)

        if relaxed:
            logger.debug("Marking malformed %s input %r", cls.grammar.prefix, text)
            return cls(text, well_formed=False)
        raise cls._invalid(text)

    @classmethod
    def relaxed(cls: type[IdentifierT], value: Any) -> Optional[IdentifierT]:
        """Shorthand for `parse(value, relaxed=True)`."""
        return cls.parse(value, relaxed=True)

    @classmethod
    def is_well_formed(cls, value: Any) -> bool:
        """Check input against the grammar without raising."""
        if value is None:
            return False
        if isinstance(value, cls):
            return value.well_formed
        return cls.grammar.canonicalize(str(value)) is not None

    @classmethod
    def _invalid(cls, value: Any) -> InvalidFormat:
        return InvalidFormat(value, cls.grammar.prefix, cls.grammar.describe())

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def component(self, name: str) -> Optional[str]:
        """Return the named block, slicing it on first access."""
        if name not in self.grammar.offsets:
            raise KeyError(f"{self.grammar.prefix} has no component {name!r}")
        if not self.well_formed:
            return None
        cached = self._components.get(name)
        if cached is not None:
            return cached
        start, end = self.grammar.offsets[name]
        return self._components.setdefault(name, self.value[start:end])

    def components(self) -> dict[str, Optional[str]]:
        """All blocks in declared order (every value None when not well-formed)."""
        return {block.name: self.component(block.name) for block in self.grammar.blocks}

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format_as(self, fmt: OutputFormat | str) -> str:
        """Render as `data`, `full` (hyphenated) or `prefixed` (`TOKEN:` + full).

        A value that is not well-formed renders as its raw text in every
        format; bad data is never partially formatted.
        """
        try:
            fmt = OutputFormat(fmt)
        except ValueError:
            raise UnsupportedFormat(fmt, tuple(item.value for item in OutputFormat)) from None

        if fmt is OutputFormat.DATA or not self.well_formed:
            return self.value
        full = "-".join(self.component(block.name) for block in self.grammar.blocks)
        if fmt is OutputFormat.FULL:
            return full
        return f"{self.grammar.prefix}:{full}"

    def as_json(self) -> str:
        """JSON representation: the canonical string."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.value
        return self.format_as(spec)

    def __repr__(self) -> str:
        if self.well_formed:
            return f"{type(self).__name__}({self.value!r})"
        return f"{type(self).__name__}({self.value!r}, well_formed=False)"

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Identifier):
            return type(other) is type(self) and other.value == self.value
        if isinstance(other, str):
            return other == self.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


def json_default(obj: Any) -> str:
    """`default=` hook for `json.dumps` that serializes identifiers."""
    if isinstance(obj, Identifier):
        return obj.as_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
