import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from pokedexcli.api import (
    LOCATION_URL,
    POKEMON_URL,
    ApiError,
    fetch_json,
    get_area_pokemon,
    get_location_areas,
    get_pokemon,
)

EXPECTED_JSON = """{
    "count": 1,
    "next": null,
    "previous": null,
    "results": [{"name": "area-1", "url": "url-1"}]
}"""


class MemoryCache:
    def __init__(self, storage=None):
        self.storage = dict(storage or {})

    def get(self, key):
        return self.storage.get(key)

    def add(self, key, val):
        self.storage[key] = val


@pytest.fixture
def server():
    hits = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            hits.append(self.path)
            if self.path == "/missing":
                self.send_response(404)
                self.end_headers()
                return
            body = b"not json" if self.path == "/bad" else EXPECTED_JSON.encode()
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, *args):
            pass

    httpd = HTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}", hits
    httpd.shutdown()
    httpd.server_close()
    thread.join()


def test_fetch_success_decodes_and_caches(server):
    base, _ = server
    url = base + "/"
    cache = MemoryCache()
    config = get_location_areas(url, cache)
    assert config.results[0].name == "area-1"
    assert config.next == ""
    assert config.previous == ""
    cached = cache.get(url)
    assert cached is not None and len(cached) > 0


def test_second_fetch_is_served_from_cache(server):
    base, hits = server
    url = base + "/"
    cache = MemoryCache()
    first = fetch_json(url, cache)
    second = fetch_json(url, cache)
    assert first == second
    assert hits == ["/"]


def test_cache_hit_prints_log_line(capsys):
    cache = MemoryCache({"http://unused.invalid/": b'{"a": 1}'})
    assert fetch_json("http://unused.invalid/", cache) == {"a": 1}
    assert "LOG --- Cache hit" in capsys.readouterr().out


def test_non_ok_status_raises(server):
    base, _ = server
    cache = MemoryCache()
    with pytest.raises(ApiError, match="unexpected status: 404"):
        fetch_json(base + "/missing", cache)
    assert cache.storage == {}


def test_invalid_json_raises(server):
    base, _ = server
    with pytest.raises(ApiError):
        fetch_json(base + "/bad", MemoryCache())


def test_get_area_pokemon_uses_area_url():
    body = json.dumps(
        {
            "id": 1,
            "name": "canalave-city-area",
            "pokemon_encounters": [{"pokemon": {"name": "tentacool", "url": "u"}}],
        }
    ).encode()
    cache = MemoryCache({LOCATION_URL + "canalave-city-area/": body})
    area = get_area_pokemon("canalave-city-area", cache)
    assert area.name == "canalave-city-area"
    assert [e.pokemon.name for e in area.pokemon_encounters] == ["tentacool"]


def test_get_pokemon_uses_pokemon_url():
    body = json.dumps({"name": "pikachu", "base_experience": 112}).encode()
    cache = MemoryCache({POKEMON_URL + "pikachu": body})
    pokemon = get_pokemon("pikachu", cache)
    assert pokemon.name == "pikachu"
    assert pokemon.base_experience == 112