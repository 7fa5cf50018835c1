"""Locale identifiers and bundle search order."""

from __future__ import annotations

import locale as _stdlib_locale
import os
import re
from dataclasses import dataclass

FALLBACK_LOCALE = "en_US"


@dataclass(frozen=True, order=True)
class Locale:
    """Language + optional country + optional variant, e.g. ``de_DE``.

    ``Locale("")`` is the root locale: the base bundle with no suffix.
    """

    language: str
    country: str = ""
    variant: str = ""

    @classmethod
    def parse(cls, value: str | Locale) -> Locale:
        """Parse ``de``, ``de_DE``, ``de-DE`` or ``de_DE.UTF-8@euro``."""
        if isinstance(value, Locale):
            return value
        text = value.strip().split(".", 1)[0].split("@", 1)[0]
        if text in ("", "C", "POSIX"):
            return ROOT if not text else cls.parse(FALLBACK_LOCALE)
        parts = re.split(r"[-_]", text, maxsplit=2)
        language = parts[0].lower()
        country = parts[1].upper() if len(parts) > 1 else ""
        variant = parts[2] if len(parts) > 2 else ""
        return cls(language, country, variant)

    @classmethod
    def default(cls) -> Locale:
        """Process locale from the environment, else ``en_US``."""
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            value = os.environ.get(var)
            if value:
                return cls.parse(value)
        current = _stdlib_locale.getlocale()[0]
        return cls.parse(current or FALLBACK_LOCALE)

    @property
    def is_root(self) -> bool:
        return not self.language

    def __str__(self) -> str:
        return "_".join(p for p in (self.language, self.country, self.variant) if p)

    def chain(self) -> list[Locale]:
        """Non-root candidates from most to least specific: de_DE_x, de_DE, de."""
        if self.is_root:
            return []
        candidates = []
        if self.variant:
            candidates.append(self)
        if self.country:
            candidates.append(Locale(self.language, self.country))
        candidates.append(Locale(self.language))
        return candidates


ROOT = Locale("")


def bundle_resource_name(base_name: str, locale: Locale, suffix: str = ".properties") -> str:
    """Resource name of the table for ``base_name`` in ``locale``.

    Dots in the base name are package separators: ``language.labels`` and
    ``language/labels`` name the same bundle.
    """
    base = base_name.replace(".", "/")
    tag = str(locale)
    return f"{base}_{tag}{suffix}" if tag else f"{base}{suffix}"

