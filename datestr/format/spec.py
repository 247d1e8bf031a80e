"""FormatSpec: a pre-validated description of a textual date layout.

A FormatSpec is an ordered tuple of items. Each item is either a Field
(year, month or day) or a Literal piece of text copied verbatim.

Supported Fields:
    YYYY - year, zero padded to at least 4 digits
    MM   - 2-digit month (01-12)
    DD   - 2-digit day (01-31)

Field names are case-insensitive. Any other name is rejected with
UnsupportedTokenError when the spec is built, so applying a FormatSpec
to a valid DateStr cannot fail.

Examples:
    >>> spec = FormatSpec.from_pattern("DD/MM/YYYY")
    >>> spec.items
    (<Field.DAY: 'DD'>, Literal('/'), <Field.MONTH: 'MM'>, Literal('/'), <Field.YEAR: 'YYYY'>)

    >>> FormatSpec([Field.YEAR, Literal("."), "mm"]).pattern
    'YYYY.MM'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from datestr.errors import UnsupportedTokenError

logger = logging.getLogger(__name__)

# Field names, literal text, and any other run of letters (rejected)
_PATTERN_RUN = re.compile(
    r"(?P<field>[Yy]{4}|[Mm]{2}|[Dd]{2})|(?P<literal>[^A-Za-z]+)|(?P<unknown>[A-Za-z]+)"
)


class Field(Enum):
    """Date fields a FormatSpec can reference."""

    YEAR = "YYYY"
    MONTH = "MM"
    DAY = "DD"

    @classmethod
    def from_name(cls, name: str) -> Field:
        """Look up a field by its pattern name, ignoring case.

        Raises:
            UnsupportedTokenError: If name is not YYYY, MM or DD.

        Examples:
            >>> Field.from_name("yyyy")
            <Field.YEAR: 'YYYY'>
        """
        try:
            return cls(name.upper())
        except ValueError:
            logger.debug("rejected format field %r", name)
            supported = ", ".join(f.value for f in cls)
            raise UnsupportedTokenError(
                f"unsupported format field: {name!r}. Supported: {supported}",
                token=name,
            ) from None


@dataclass(frozen=True)
class Literal:
    """Text emitted verbatim between fields."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise UnsupportedTokenError(
                f"literal text must be str, got {type(self.text).__name__}",
                token=self.text,
            )

    def __repr__(self) -> str:
        return f"Literal({self.text!r})"


Token = Union[Field, Literal]


class FormatSpec:
    """An immutable, validated sequence of Fields and Literals.

    Args:
        tokens: Items making up the layout. Each may be a Field, a
            Literal, or a field name string ("YYYY", "MM", "DD").
            Adjacent literals are merged and empty literals dropped.

    Raises:
        UnsupportedTokenError: If an item is not a recognized field or
            literal, or if the spec would be empty.

    Examples:
        >>> FormatSpec(["DD", Literal("/"), "MM", Literal("/"), "YYYY"])
        FormatSpec('DD/MM/YYYY')
    """

    __slots__ = ("_items",)

    _items: tuple[Token, ...]

    def __init__(self, tokens: Iterable[Token | str]) -> None:
        if isinstance(tokens, (str, bytes)):
            raise TypeError(
                "FormatSpec expects a sequence of tokens; "
                "use FormatSpec.from_pattern() for pattern strings"
            )

        items: list[Token] = []
        for token in tokens:
            item = _resolve_token(token)
            if isinstance(item, Literal):
                if not item.text:
                    continue
                if items and isinstance(items[-1], Literal):
                    item = Literal(items[-1].text + item.text)
                    items.pop()
            items.append(item)

        if not items:
            raise UnsupportedTokenError("format spec must contain at least one token")

        object.__setattr__(self, "_items", tuple(items))

    @classmethod
    def from_pattern(cls, pattern: str, separator: str | None = None) -> FormatSpec:
        """Compile a pattern string such as "DD/MM/YYYY".

        YYYY, MM and DD (any case) name fields and may be adjacent, as in
        "YYYYMMDD". Runs of characters other than ASCII letters are
        literals; any other letters are rejected. When separator is
        given, each literal is replaced by it.

        Raises:
            UnsupportedTokenError: If letters do not form a known field.

        Examples:
            >>> FormatSpec.from_pattern("dd-mm-yyyy", separator="/").pattern
            'DD/MM/YYYY'

            >>> FormatSpec.from_pattern("DD-MM-YYAY")
            Traceback (most recent call last):
            ...
            UnsupportedTokenError: unsupported format field: 'YYAY'. Supported: YYYY, MM, DD
        """
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be str, got {type(pattern).__name__}")

        tokens: list[Token] = []
        for match in _PATTERN_RUN.finditer(pattern):
            if match.group("field") or match.group("unknown"):
                tokens.append(Field.from_name(match.group()))
            elif separator is not None:
                tokens.append(Literal(separator))
            else:
                tokens.append(Literal(match.group("literal")))
        return cls(tokens)

    @classmethod
    def iso8601(cls) -> FormatSpec:
        """Return the YYYY-MM-DD spec."""
        return cls([Field.YEAR, Literal("-"), Field.MONTH, Literal("-"), Field.DAY])

    @property
    def items(self) -> tuple[Token, ...]:
        """Return the validated items in output order."""
        return self._items

    @property
    def fields(self) -> tuple[Field, ...]:
        """Return only the Field items, in order."""
        return tuple(item for item in self._items if isinstance(item, Field))

    @property
    def pattern(self) -> str:
        """Render the spec back to pattern text.

        Literal text containing letters does not survive a trip through
        from_pattern, since letters there always name fields.
        """
        return "".join(
            item.value if isinstance(item, Field) else item.text
            for item in self._items
        )

    def with_separator(self, separator: str) -> FormatSpec:
        """Return a copy with every literal replaced by separator."""
        return FormatSpec(
            item if isinstance(item, Field) else Literal(separator)
            for item in self._items
        )

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatSpec):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[FormatSpec], tuple[tuple[Token, ...]]]:
        return (FormatSpec, (self._items,))

    def __repr__(self) -> str:
        return f"FormatSpec({self.pattern!r})"


def _resolve_token(token: object) -> Token:
    """Turn one FormatSpec constructor item into a Field or Literal."""
    if isinstance(token, (Field, Literal)):
        return token
    if isinstance(token, str):
        return Field.from_name(token)
    logger.debug("rejected format token %r", token)
    raise UnsupportedTokenError(
        f"unsupported format token: {token!r}. "
        "Expected Field, Literal, or a field name",
        token=token,
    )


__all__ = ["Field", "Literal", "FormatSpec", "Token"]
