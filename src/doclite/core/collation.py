from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Collation:
    """Text comparison options attached to an expression with ``Expression.collate``.

    The stored flags say what to ignore; the rendered ``CASE`` and ``DIAC``
    keys say what is significant, so they are the negation of the flags.
    """

    is_unicode: bool = False
    case_insensitive: bool = False
    accent_insensitive: bool = False
    locale_name: str | None = None

    @staticmethod
    def ascii() -> ASCIICollation:
        return ASCIICollation()

    @staticmethod
    def unicode() -> UnicodeCollation:
        return UnicodeCollation()

    def as_json(self) -> dict[str, Any]:
        return {
            "UNICODE": self.is_unicode,
            "LOCALE": self.locale_name,
            "CASE": not self.case_insensitive,
            "DIAC": not self.accent_insensitive,
        }

    def __str__(self) -> str:
        return (
            f"Collation{{unicode={self.is_unicode}, ignoreCase={self.case_insensitive}, "
            f"ignoreAccents={self.accent_insensitive}, locale='{self.locale_name}'}}"
        )


@dataclass(frozen=True)
class ASCIICollation(Collation):
    def ignore_case(self, ignore_case: bool) -> ASCIICollation:
        return replace(self, case_insensitive=ignore_case)


@dataclass(frozen=True)
class UnicodeCollation(Collation):
    is_unicode: bool = True

    def ignore_case(self, ignore_case: bool) -> UnicodeCollation:
        return replace(self, case_insensitive=ignore_case)

    def ignore_accents(self, ignore_accents: bool) -> UnicodeCollation:
        return replace(self, accent_insensitive=ignore_accents)

    def locale(self, locale: str | None) -> UnicodeCollation:
        return replace(self, locale_name=locale)
