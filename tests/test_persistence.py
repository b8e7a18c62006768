"""
Unit tests for key-value backends and the history / favorites codecs.
Corrupt stored data must always load as an empty collection.
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestCodecs(unittest.TestCase):

    def test_favorites_round_trip(self):
        from colorgen.color import Color
        from colorgen.state import dump_favorites, load_favorites

        favorites = [Color(0, 100, 50), Color(210, 40, 60)]
        self.assertEqual(load_favorites(dump_favorites(favorites)), favorites)

    def test_history_round_trip(self):
        from colorgen.color import Color
        from colorgen.state import HistoryEntry, dump_history, load_history

        history = [HistoryEntry((Color(1, 50, 50), Color(2, 50, 50)), "2024-01-01T00:00:00.000Z", "gradient")]
        self.assertEqual(load_history(dump_history(history)), history)

    def test_missing_or_corrupt_is_empty(self):
        from colorgen.state import load_favorites, load_history

        for raw in (None, "", "{not json", '{"a": 1}', "42"):
            self.assertEqual(load_history(raw), [], raw)
            self.assertEqual(load_favorites(raw), [], raw)

    def test_bad_items_are_skipped(self):
        from colorgen.state import load_favorites, load_history

        favorites = load_favorites(json.dumps([{"hex": "#ff0000"}, {"name": "nothing"}, "oops"]))
        self.assertEqual([c.hex for c in favorites], ["#ff0000"])
        history = load_history(json.dumps([{"colors": [], "mode": "random"}, {"timestamp": "x"}]))
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0].mode, "random")

    def test_reads_browser_shaped_entries(self):
        """Entries carrying hsl/rgb strings alongside the numeric fields decode by HSL."""
        from colorgen.color import Color
        from colorgen.state import load_history

        raw = json.dumps([{
            "colors": [{"hsl": "hsl(12, 70%, 50%)", "hex": "#d9572b", "rgb": "rgb(217, 87, 43)",
                        "name": "red-orange", "hue": 12, "saturation": 70, "lightness": 50}],
            "timestamp": "2024-05-01T10:00:00.000Z",
            "mode": "analogous",
        }])
        entry = load_history(raw)[0]
        self.assertEqual(entry.colors, (Color(12, 70, 50),))
        self.assertEqual(entry.mode, "analogous")


class TestBackends(unittest.TestCase):

    def test_memory_store(self):
        from colorgen.state import MemoryStore

        store = MemoryStore({"a": "1"})
        self.assertEqual(store.get("a"), "1")
        self.assertIsNone(store.get("b"))
        store.set("b", "2")
        self.assertEqual(store.get("b"), "2")

    def test_json_file_store(self):
        from colorgen.state import FAVORITES_KEY, JsonFileStore

        with tempfile.TemporaryDirectory() as tmp:
            store = JsonFileStore(Path(tmp) / "nested")
            self.assertIsNone(store.get(FAVORITES_KEY))
            store.set(FAVORITES_KEY, "[]")
            self.assertEqual(store.get(FAVORITES_KEY), "[]")
            self.assertTrue((Path(tmp) / "nested" / "color-generator-favorites.json").exists())

    def test_store_persists_and_reloads(self):
        from colorgen.color import Color
        from colorgen.state import MemoryStore, PaletteStateStore

        backend = MemoryStore()
        first = PaletteStateStore(storage=backend)
        first.toggle_favorite(Color(0, 100, 50))
        first.push_history([Color(10, 50, 50)], "analogous")
        second = PaletteStateStore(storage=backend)
        self.assertEqual(second.favorites, [Color(0, 100, 50)])
        self.assertEqual(second.history[0].mode, "analogous")

    def test_store_starts_empty_on_corrupt_storage(self):
        from colorgen.state import FAVORITES_KEY, HISTORY_KEY, MemoryStore, PaletteStateStore

        backend = MemoryStore({HISTORY_KEY: "[{broken", FAVORITES_KEY: "null"})
        with self.assertLogs("colorgen.state.persistence", level="WARNING"):
            store = PaletteStateStore(storage=backend)
        self.assertEqual(store.history, [])
        self.assertEqual(store.favorites, [])

    def test_store_starts_empty_on_undecodable_file(self):
        from colorgen.state import HISTORY_KEY, JsonFileStore, PaletteStateStore

        with tempfile.TemporaryDirectory() as tmp:
            backend = JsonFileStore(Path(tmp))
            backend.path_for(HISTORY_KEY).write_bytes(b"\xff\xfe[not utf8")
            with self.assertLogs("colorgen.state.persistence", level="WARNING"):
                self.assertIsNone(backend.get(HISTORY_KEY))
                store = PaletteStateStore(storage=backend)
        self.assertEqual(store.history, [])

    def test_history_entry_with_unknown_mode_is_skipped(self):
        from colorgen.state import HISTORY_KEY, MemoryStore, PaletteStateStore

        raw = json.dumps([
            {"colors": [{"hue": 1, "saturation": 50, "lightness": 50}], "mode": "pastel"},
            {"colors": [{"hue": 2, "saturation": 50, "lightness": 50}], "mode": "analogous"},
            {"colors": [{"hue": 3, "saturation": 50, "lightness": 50}]},
        ])
        with self.assertLogs("colorgen.state.persistence", level="WARNING"):
            store = PaletteStateStore(storage=MemoryStore({HISTORY_KEY: raw}))
        self.assertEqual([e.mode for e in store.history], ["analogous", "random"])
        self.assertEqual(store.history[0].colors[0].hue, 2)

    def test_open_storage(self):
        from colorgen.state import JsonFileStore, MemoryStore, open_storage

        self.assertIsInstance(open_storage({"storage": {"backend": "memory"}}), MemoryStore)
        self.assertIsInstance(open_storage({"storage": {"backend": "file", "dir": "/tmp/colorgen-test"}}), JsonFileStore)
        with self.assertRaises(ValueError):
            open_storage({"storage": {"backend": "api"}})
        with self.assertRaises(ValueError):
            open_storage({"storage": {"backend": "sqlite"}})


def _response(status: int, payload=None):
    import requests

    resp = mock.Mock()
    resp.status_code = status
    resp.headers = {}
    resp.text = json.dumps(payload) if payload is not None else ""
    resp.content = resp.text.encode()
    resp.url = "http://palettes.test/api/kv/x"
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status}", response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


class TestApiStore(unittest.TestCase):

    def test_get_and_set(self):
        from colorgen.state.remote import ApiKeyValueStore

        store = ApiKeyValueStore("http://palettes.test/", max_retries=0)
        with mock.patch("colorgen.api_client.requests.request", return_value=_response(200, {"value": "[]"})) as req:
            self.assertEqual(store.get("color-generator-history"), "[]")
            method, url = req.call_args[0][:2]
            self.assertEqual(method, "GET")
            self.assertEqual(url, "http://palettes.test/api/kv/color-generator-history")
        with mock.patch("colorgen.api_client.requests.request", return_value=_response(200, {"ok": True})) as req:
            store.set("color-generator-favorites", "[1]")
            self.assertEqual(req.call_args[0][0], "POST")
            self.assertEqual(json.loads(req.call_args[1]["data"]), {"value": "[1]"})

    def test_failures_are_misses_and_dropped_writes(self):
        from colorgen.state.remote import ApiKeyValueStore

        store = ApiKeyValueStore("http://palettes.test", max_retries=0)
        with mock.patch("colorgen.api_client.requests.request", return_value=_response(404, {"error": "missing"})):
            self.assertIsNone(store.get("k"))
        with mock.patch("colorgen.api_client.requests.request", return_value=_response(500, {"error": "boom"})):
            with self.assertLogs("colorgen.state.remote", level="WARNING"):
                self.assertIsNone(store.get("k"))
            with self.assertLogs("colorgen.state.remote", level="WARNING"):
                store.set("k", "v")

    def test_retries_transient_errors(self):
        from colorgen.api_client import api_request_with_retry

        responses = [_response(503, {"error": "busy"}), _response(200, {"value": "x"})]
        with mock.patch("colorgen.api_client.requests.request", side_effect=responses) as req, \
                mock.patch("colorgen.api_client.time.sleep") as sleep:
            data = api_request_with_retry("http://palettes.test", "GET", "/api/kv/k", max_retries=2)
        self.assertEqual(data, {"value": "x"})
        self.assertEqual(req.call_count, 2)
        sleep.assert_called_once()

    def test_api_error_carries_status(self):
        from colorgen.api_client import APIError, api_request

        with mock.patch("colorgen.api_client.requests.request", return_value=_response(400, {"error": "bad"})):
            with self.assertRaises(APIError) as ctx:
                api_request("http://palettes.test", "GET", "/api/kv/k")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.path, "/api/kv/k")


if __name__ == "__main__":
    unittest.main()
