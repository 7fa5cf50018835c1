"""Unit tests for bundled_assets.store module.

Tests cover key policies, bulk loading, decode failures, lookup misses and
concurrent readers during a load.
"""

import logging
import threading

import pytest

from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import AssetDecodeError
from bundled_assets.store import KeyedAssetStore, stem_extension_key, stem_key


def _text_decoder(name: str, data: bytes) -> str:
    return data.decode("utf-8")


def _bytes_decoder(name: str, data: bytes) -> bytes:
    return data


def _failing_decoder(name: str, data: bytes) -> str:
    raise RuntimeError("boom")


@pytest.fixture
def store() -> KeyedAssetStore[str]:
    """Create a store that decodes properties files as text."""
    return KeyedAssetStore("text", _text_decoder, stem_key, (".properties",))


class TestKeyPolicies:
    """Tests for stem_key and stem_extension_key."""

    def test_stem_key(self) -> None:
        """Directory and extension are dropped."""
        assert stem_key("font/special/menomonia.ttf") == "menomonia"

    def test_stem_extension_key(self) -> None:
        """The extension is kept after a dash."""
        assert stem_extension_key("images/red/20x20_red.png") == "20x20_red-png"

    def test_case_is_preserved(self) -> None:
        """Keys keep the case of the file name."""
        assert stem_key("Logo.TTF") == "Logo"
        assert stem_extension_key("Logo.PNG") == "Logo-PNG"

    def test_dot_file_has_empty_stem(self) -> None:
        """A name made only of an extension has an empty stem."""
        assert stem_extension_key("images/.png") == "-png"
        assert stem_key("font/.ttf") == ""
        assert stem_extension_key("archive.tar.gz") == "archive.tar-gz"


class TestLoadAll:
    """Tests for KeyedAssetStore.load_all."""

    def test_loads_matching_resources(self, store: KeyedAssetStore[str], resource_root: ResourceRoot) -> None:
        """Every matching resource is decoded and keyed."""
        count = store.load_all(resource_root, "language")
        assert count == 6
        assert "labels_de_DE" in store
        assert len(store) == 6

    def test_explicit_suffixes_override_defaults(
        self, store: KeyedAssetStore[str], resource_root: ResourceRoot
    ) -> None:
        """Suffixes passed to load_all replace the store defaults."""
        raw = KeyedAssetStore("raw", _bytes_decoder, stem_key, (".properties",))
        count = raw.load_all(resource_root, "images/red", [".bmp"])
        assert count == 1
        assert raw.keys() == frozenset({"20x20_red"})

    def test_empty_suffixes_load_nothing(self, resource_root: ResourceRoot) -> None:
        """An empty suffix collection matches no resource."""
        raw = KeyedAssetStore("raw", _bytes_decoder, stem_key, (".properties",))
        assert raw.load_all(resource_root, "", []) == 0
        assert len(raw) == 0

    def test_empty_default_suffixes_load_nothing(self, resource_root: ResourceRoot) -> None:
        """A store without default suffixes loads nothing unless given some."""
        raw = KeyedAssetStore("raw", _bytes_decoder, stem_key)
        assert raw.load_all(resource_root, "language") == 0
        assert raw.load_all(resource_root, "language", [".properties"]) == 6

    def test_missing_scope_loads_nothing(self, store: KeyedAssetStore[str], resource_root: ResourceRoot) -> None:
        """A missing scope is not an error."""
        assert store.load_all(resource_root, "nowhere") == 0
        assert len(store) == 0

    def test_decode_failure_skips_resource(self, resource_root: ResourceRoot, caplog: pytest.LogCaptureFixture) -> None:
        """Failed decodes are logged and not counted."""
        failing = KeyedAssetStore("text", _failing_decoder, stem_key, (".properties",))
        with caplog.at_level(logging.ERROR, logger="bundled_assets"):
            count = failing.load_all(resource_root, "language")
        assert count == 0
        assert len(failing) == 0
        assert "boom" in caplog.text

    def test_reload_replaces_entries(self, store: KeyedAssetStore[str], resource_root: ResourceRoot) -> None:
        """Loading the same scope again replaces the values in place."""
        store.insert("labels", "stale")
        store.load_all(resource_root, "language")
        assert store.get("labels") != "stale"
        assert len(store) == 6


class TestAccess:
    """Tests for insert, get, keys and clear."""

    def test_get_missing_warns(self, store: KeyedAssetStore[str], caplog: pytest.LogCaptureFixture) -> None:
        """A miss returns None and logs a warning."""
        with caplog.at_level(logging.WARNING, logger="bundled_assets"):
            assert store.get("absent") is None
        assert "Text with name absent is not available!" in caplog.text

    def test_insert_and_get(self, store: KeyedAssetStore[str]) -> None:
        """Inserted assets are returned by get."""
        store.insert("k", "v")
        assert store.get("k") == "v"
        assert "k" in store

    def test_keys_is_snapshot(self, store: KeyedAssetStore[str]) -> None:
        """keys() does not change when the store does."""
        store.insert("a", "1")
        keys = store.keys()
        store.insert("b", "2")
        assert keys == frozenset({"a"})

    def test_clear(self, store: KeyedAssetStore[str]) -> None:
        """clear() empties the store and is idempotent."""
        store.insert("a", "1")
        store.clear()
        store.clear()
        assert len(store) == 0
        assert store.keys() == frozenset()

    def test_decode_wraps_errors(self) -> None:
        """Decoder exceptions surface as AssetDecodeError naming the resource."""
        failing = KeyedAssetStore("text", _failing_decoder)
        with pytest.raises(AssetDecodeError) as exc_info:
            failing.decode("x.txt", b"")
        assert exc_info.value.name == "x.txt"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_repr(self, store: KeyedAssetStore[str]) -> None:
        """repr shows kind and size."""
        assert repr(store) == "KeyedAssetStore(kind='text', entries=0)"


class TestConcurrency:
    """Tests for readers running alongside a bulk load."""

    def test_readers_see_all_or_nothing(self, resource_root: ResourceRoot) -> None:
        """A reader never observes a partially loaded batch."""
        started = threading.Event()
        release = threading.Event()

        def slow_decoder(name: str, data: bytes) -> str:
            started.set()
            release.wait(timeout=5)
            return name

        store = KeyedAssetStore("text", slow_decoder, stem_key, (".properties",))
        loader = threading.Thread(target=store.load_all, args=(resource_root, "language"))
        loader.start()
        assert started.wait(timeout=5)

        # Decoding is in progress; nothing is published yet
        assert len(store) == 0
        release.set()
        loader.join(timeout=5)

        assert len(store) == 6
