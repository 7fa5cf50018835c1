"""Localized string tables.

A :class:`LocaleBundleIndex` keeps one :class:`StringTable` per
``(category, locale)`` pair, where the category is one of labels, messages or
errors. Tables are ``.properties`` resources named after a base name and a
locale suffix::

    language/labels.properties          root table
    language/labels_de.properties
    language/labels_de_DE.properties

Loading ``language/labels`` for ``de_DE`` merges every table found along the
search order (``de_DE``, ``de``, then the default locale's chain if none of
those exist, then the root table), more specific entries winning.

Lookups never raise. A key missing from a loaded table and a locale that was
never loaded both produce ``""`` and a warning; :meth:`LocaleBundleIndex.find`
returns None instead for callers that need to tell absence apart.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from bundled_assets import properties
from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import AssetDecodeError, BundleNotFoundError
from bundled_assets.i18n.locale import ROOT, Locale, bundle_resource_name

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ":"


class Category(Enum):
    """Kind of text a bundle holds."""

    LABELS = "labels"
    MESSAGES = "messages"
    ERRORS = "errors"


class StringTable(Mapping[str, str]):
    """Read-only message-key to template mapping for one locale."""

    def __init__(self, entries: Mapping[str, str], locale: Locale, sources: list[str]) -> None:
        self._entries = dict(entries)
        self.locale = locale
        self.sources = list(sources)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StringTable(locale={str(self.locale)!r}, sources={self.sources!r}, size={len(self)})"


def format_template(template: str, *args: Any) -> str:
    """Replace ``{}`` placeholders with ``args`` in order of appearance.

    Placeholders beyond the supplied arguments stay literal; surplus
    arguments are ignored.

    Example:
        >>> format_template("Hello {}!", "Tom")
        'Hello Tom!'
    """
    parts = template.split("{}")
    out = [parts[0]]
    for i, part in enumerate(parts[1:]):
        out.append(str(args[i]) if i < len(args) else "{}")
        out.append(part)
    return "".join(out)


def resolve_bundle(root: ResourceRoot, base_name: str, requested: Locale, default: Locale) -> list[str]:
    """Existing table resources for a bundle, most specific first.

    Raises:
        BundleNotFoundError: If neither a localized nor a root table exists.
    """
    found: list[str] = []
    chains = [requested.chain()]
    if default != requested:
        chains.append(default.chain())
    for chain in chains:
        found = [name for name in (bundle_resource_name(base_name, loc) for loc in chain) if root.exists(name)]
        if found:
            break
    root_name = bundle_resource_name(base_name, ROOT)
    if root.exists(root_name):
        found.append(root_name)
    if not found:
        raise BundleNotFoundError(base_name, str(requested), details={"root": str(root.base)})
    return found


def _coerce_category(category: Category | str) -> Category:
    return category if isinstance(category, Category) else Category(category.lower())


class LocaleBundleIndex:
    """String tables indexed by category and locale.

    Each ``(category, locale)`` pair is either unloaded or holds exactly one
    table. ``load`` moves a pair to loaded (replacing any earlier table);
    only ``clear`` moves pairs back to unloaded, all at once.
    """

    def __init__(self, root: ResourceRoot, default_locale: Locale | str | None = None) -> None:
        """Initialize index.

        Args:
            root: Where bundle resources are read from.
            default_locale: Locale used when a call omits one; defaults to
                the process locale.
        """
        self.root = root
        self._default = Locale.parse(default_locale) if default_locale else Locale.default()
        self._tables: dict[Category, dict[Locale, StringTable]] = {c: {} for c in Category}
        self._lock = threading.RLock()

    @property
    def default_locale(self) -> Locale:
        return self._default

    @default_locale.setter
    def default_locale(self, value: Locale | str) -> None:
        self._default = Locale.parse(value)

    def _locale(self, locale: Locale | str | None) -> Locale:
        return self._default if locale is None else Locale.parse(locale)

    def load(
        self,
        category: Category | str,
        base_name: str,
        locale: Locale | str | None = None,
    ) -> StringTable:
        """Read the bundle ``base_name`` into ``category`` for ``locale``.

        Args:
            category: Bundle category.
            base_name: Resource base name such as ``language/labels``.
            locale: Target locale; the default locale when omitted.

        Returns:
            The loaded table.

        Raises:
            BundleNotFoundError: If no table exists for ``base_name`` under
                any fallback locale.
            AssetDecodeError: If a table is malformed.
        """
        category = _coerce_category(category)
        target = self._locale(locale)
        names = resolve_bundle(self.root, base_name, target, self._default)

        entries: dict[str, str] = {}
        for name in reversed(names):
            try:
                entries.update(properties.loads(self.root.read_bytes(name)))
            except ValueError as e:
                raise AssetDecodeError(name, str(e)) from e
        table = StringTable(entries, target, names)

        with self._lock:
            self._tables[category][target] = table
        logger.info(
            "Loaded %s bundle %s for %s from %s (%d keys)",
            category.value, base_name, target, ", ".join(names), len(table),
        )
        return table

    def load_labels(self, base_name: str, locale: Locale | str | None = None) -> StringTable:
        return self.load(Category.LABELS, base_name, locale)

    def load_messages(self, base_name: str, locale: Locale | str | None = None) -> StringTable:
        return self.load(Category.MESSAGES, base_name, locale)

    def load_errors(self, base_name: str, locale: Locale | str | None = None) -> StringTable:
        return self.load(Category.ERRORS, base_name, locale)

    def table(self, category: Category | str, locale: Locale | str | None = None) -> StringTable | None:
        """The loaded table for a pair, or None."""
        with self._lock:
            return self._tables[_coerce_category(category)].get(self._locale(locale))

    def is_loaded(self, category: Category | str, locale: Locale | str | None = None) -> bool:
        return self.table(category, locale) is not None

    def find(self, category: Category | str, key: str, locale: Locale | str | None = None) -> str | None:
        """Template for ``key``, or None if the pair is unloaded or lacks it."""
        table = self.table(category, locale)
        if table is None:
            return None
        return table.get(key)

    def lookup(self, category: Category | str, key: str, locale: Locale | str | None = None) -> str:
        """Template for ``key``, or ``""`` with a warning when unavailable.

        Blank keys return ``""`` without a warning.
        """
        if not key or not key.strip():
            return ""
        category = _coerce_category(category)
        target = self._locale(locale)
        table = self.table(category, target)
        if table is None:
            logger.warning(
                "No value found for the key '%s' in the resource bundle '%s'. "
                "No %s bundle is loaded for the language %s; load it before "
                "reading values.",
                key, category.name, category.value, target,
            )
            return ""
        value = table.get(key)
        if value is None:
            logger.warning(
                "No value found for the key '%s' in the resource bundle '%s' (%s).",
                key, category.name, target,
            )
            return ""
        return value

    def lookup_with_suffix(
        self,
        category: Category | str,
        key: str,
        suffix: str = DEFAULT_SUFFIX,
        locale: Locale | str | None = None,
    ) -> str:
        """Like :meth:`lookup`, appending ``suffix`` to a non-empty result."""
        value = self.lookup(category, key, locale)
        return f"{value}{suffix}" if value else value

    def lookup_formatted(
        self,
        category: Category | str,
        key: str,
        *args: Any,
        locale: Locale | str | None = None,
    ) -> str:
        """Like :meth:`lookup`, then fill ``{}`` placeholders with ``args``."""
        return format_template(self.lookup(category, key, locale), *args)

    def label(self, key: str, locale: Locale | str | None = None) -> str:
        return self.lookup(Category.LABELS, key, locale)

    def message(self, key: str, locale: Locale | str | None = None) -> str:
        return self.lookup(Category.MESSAGES, key, locale)

    def error(self, key: str, locale: Locale | str | None = None) -> str:
        return self.lookup(Category.ERRORS, key, locale)

    def keys(self, category: Category | str, locale: Locale | str | None = None) -> frozenset[str]:
        """Keys of the loaded table; empty with a warning if the pair is unloaded."""
        table = self.table(category, locale)
        if table is None:
            logger.warning(
                "No %s bundle is loaded for the language %s",
                _coerce_category(category).value, self._locale(locale),
            )
            return frozenset()
        return frozenset(table)

    def loaded_locales(self, category: Category | str) -> frozenset[Locale]:
        with self._lock:
            return frozenset(self._tables[_coerce_category(category)])

    def clear(self) -> None:
        """Reset every pair in every category to unloaded."""
        with self._lock:
            self._tables = {c: {} for c in Category}
