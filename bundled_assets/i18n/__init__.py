"""Localized text for bundled-assets.

This subpackage provides:
- Locale identifiers and bundle search order
- Category (labels, messages, errors) string tables
- LocaleBundleIndex with empty-string fallback lookups
"""

from bundled_assets.i18n.locale import ROOT, Locale, bundle_resource_name
from bundled_assets.i18n.bundles import (
    Category,
    LocaleBundleIndex,
    StringTable,
    format_template,
    resolve_bundle,
)

__all__ = [
    "Locale",
    "ROOT",
    "bundle_resource_name",
    "Category",
    "LocaleBundleIndex",
    "StringTable",
    "format_template",
    "resolve_bundle",
]
