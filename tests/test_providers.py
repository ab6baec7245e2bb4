"""Test lyrics providers"""

import dataclasses

import pytest
import requests
from unittest.mock import Mock, patch

from lyrics_explorer.core.config import ProxyConfig, default_config
from lyrics_explorer.core.exceptions import ConfigError, ProviderError
from lyrics_explorer.lyrics.base import Lyrics, LyricsProvider
from lyrics_explorer.lyrics.genius import GeniusProvider
from lyrics_explorer.lyrics.lrclib import LrcLibProvider
from lyrics_explorer.lyrics.providers import build_providers
from lyrics_explorer.lyrics.synced import SyncedLyricsProvider


def mock_session(status_code=200, payload=None):
    session = Mock()
    session.headers = {}
    session.proxies = {}
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    session.get.return_value = response
    return session


class TestLrcLibProvider:
    """Test the LRCLIB API client"""

    def test_plain_lyrics(self):
        """Test plain lyrics are returned"""
        session = mock_session(payload={
            "trackName": "Bohemian Rhapsody",
            "artistName": "Queen",
            "instrumental": False,
            "plainLyrics": "Is this the real life?\nIs this just fantasy?\n",
            "syncedLyrics": "[00:00.50]Is this the real life?",
        })
        provider = LrcLibProvider(session=session)

        lyrics = provider.lookup("Queen", "Bohemian Rhapsody")

        assert lyrics == Lyrics("Is this the real life?\nIs this just fantasy?", "lrclib")
        session.get.assert_called_once_with(
            "https://lrclib.net/api/get",
            params={"artist_name": "Queen", "track_name": "Bohemian Rhapsody"},
            timeout=15.0,
        )

    def test_synced_only(self):
        """Test synced lyrics are converted when no plain lyrics exist"""
        session = mock_session(payload={
            "plainLyrics": None,
            "syncedLyrics": "[00:00.50]Hello\n[00:03.10]World",
        })

        lyrics = LrcLibProvider(session=session).lookup("Foo", "Bar")

        assert lyrics.text == "Hello\nWorld"

    def test_not_found(self):
        """Test 404 means no lyrics"""
        session = mock_session(status_code=404)

        assert LrcLibProvider(session=session).lookup("Foo", "Bar") is None

    def test_instrumental(self):
        """Test instrumental records have no lyrics"""
        session = mock_session(payload={"instrumental": True, "plainLyrics": None})

        assert LrcLibProvider(session=session).lookup("Foo", "Bar") is None

    def test_empty_record(self):
        """Test a record without any lyrics counts as not found"""
        session = mock_session(payload={"plainLyrics": "", "syncedLyrics": None})

        assert LrcLibProvider(session=session).lookup("Foo", "Bar") is None

    def test_network_error(self):
        """Test connection failures raise ProviderError"""
        session = mock_session()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ProviderError) as exc_info:
            LrcLibProvider(session=session).lookup("Foo", "Bar")
        assert exc_info.value.details["provider"] == "lrclib"

    def test_http_error(self):
        """Test server errors raise ProviderError"""
        session = mock_session(status_code=503)
        session.get.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError("503")

        with pytest.raises(ProviderError):
            LrcLibProvider(session=session).lookup("Foo", "Bar")

    def test_invalid_json(self):
        """Test unparsable answers raise ProviderError"""
        session = mock_session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")

        with pytest.raises(ProviderError):
            LrcLibProvider(session=session).lookup("Foo", "Bar")

    def test_proxy_and_user_agent(self):
        """Test the session is configured with proxy and User-Agent"""
        session = mock_session()
        LrcLibProvider(
            user_agent="test-agent",
            timeout=3,
            proxy=ProxyConfig("proxy.local", 3128),
            session=session,
        )

        assert session.headers["User-Agent"] == "test-agent"
        assert session.proxies == {
            "http": "http://proxy.local:3128",
            "https": "http://proxy.local:3128",
        }

    def test_satisfies_protocol(self):
        """Test the provider matches the LyricsProvider protocol"""
        assert isinstance(LrcLibProvider(session=mock_session()), LyricsProvider)


class TestGeniusProvider:
    """Test the Genius client wrapper"""

    def make_client(self):
        client = Mock()
        client._session.proxies = {}
        return client

    def test_lyrics_cleaned(self):
        """Test the Genius page header and footer are removed"""
        client = self.make_client()
        client.search_song.return_value = Mock(
            lyrics="Bohemian Rhapsody Lyrics[Intro]\nIs this the real life?\n87Embed"
        )
        provider = GeniusProvider("token", client=client)

        lyrics = provider.lookup("Queen", "Bohemian Rhapsody")

        assert lyrics == Lyrics("[Intro]\nIs this the real life?", "genius")
        client.search_song.assert_called_once_with("Bohemian Rhapsody", "Queen")

    def test_song_not_found(self):
        """Test no search result means no lyrics"""
        client = self.make_client()
        client.search_song.return_value = None

        assert GeniusProvider("token", client=client).lookup("Foo", "Bar") is None

    def test_song_without_lyrics(self):
        """Test a song page without lyrics means no lyrics"""
        client = self.make_client()
        client.search_song.return_value = Mock(lyrics="")

        assert GeniusProvider("token", client=client).lookup("Foo", "Bar") is None

    def test_network_error(self):
        """Test request failures raise ProviderError"""
        client = self.make_client()
        client.search_song.side_effect = requests.exceptions.Timeout("timed out")

        with pytest.raises(ProviderError):
            GeniusProvider("token", client=client).lookup("Foo", "Bar")

    def test_proxy(self):
        """Test the proxy is applied to the client session"""
        client = self.make_client()
        GeniusProvider("token", proxy=ProxyConfig("proxy.local", 8080), client=client)

        assert client._session.proxies["https"] == "http://proxy.local:8080"


class TestSyncedLyricsProvider:
    """Test the syncedlyrics wrapper"""

    @patch("lyrics_explorer.lyrics.synced.syncedlyrics.search")
    def test_plain_lyrics(self, mock_search):
        """Test plain lyrics are requested and returned"""
        mock_search.return_value = "Hello\nWorld\n"

        lyrics = SyncedLyricsProvider().lookup("Foo", "Bar")

        assert lyrics == Lyrics("Hello\nWorld", "syncedlyrics")
        mock_search.assert_called_once_with("Foo Bar", plain_only=True, providers=None)

    @patch("lyrics_explorer.lyrics.synced.syncedlyrics.search")
    def test_not_found(self, mock_search):
        """Test empty results mean no lyrics"""
        mock_search.return_value = None

        assert SyncedLyricsProvider().lookup("Foo", "Bar") is None

    @patch("lyrics_explorer.lyrics.synced.syncedlyrics.search")
    def test_lrc_answer_is_stripped(self, mock_search):
        """Test timestamps are removed if a backend answers with LRC"""
        mock_search.return_value = "[00:01.00]Hello\n[00:02.00]World"

        assert SyncedLyricsProvider().lookup("Foo", "Bar").text == "Hello\nWorld"


class TestBuildProviders:
    """Test provider construction from the configuration"""

    def test_default_order_without_genius_token(self, no_genius_token):
        """Test Genius is skipped when no token is configured"""
        providers = build_providers(default_config())

        assert [p.name for p in providers] == ["lrclib", "syncedlyrics"]

    def test_genius_with_token(self, monkeypatch):
        """Test Genius is built when a token is available"""
        monkeypatch.setenv("GENIUS_ACCESS_TOKEN", "secret")

        providers = build_providers(default_config())

        assert [p.name for p in providers] == ["lrclib", "genius", "syncedlyrics"]

    def test_custom_order_and_proxy(self, no_genius_token):
        """Test order and proxy settings are applied"""
        config = default_config()
        config = dataclasses.replace(
            config,
            providers=dataclasses.replace(config.providers, order=("syncedlyrics", "lrclib")),
            network=dataclasses.replace(config.network, proxy=ProxyConfig("proxy.local", 3128)),
        )

        providers = build_providers(config)

        assert [p.name for p in providers] == ["syncedlyrics", "lrclib"]
        assert providers[1].session.proxies["http"] == "http://proxy.local:3128"

    def test_unknown_provider(self, no_genius_token):
        """Test unknown names are rejected"""
        config = default_config()
        config = dataclasses.replace(
            config, providers=dataclasses.replace(config.providers, order=("azlyrics",))
        )

        with pytest.raises(ConfigError):
            build_providers(config)

    def test_no_usable_provider(self, no_genius_token):
        """Test a configuration leaving no provider is an error"""
        config = default_config()
        config = dataclasses.replace(
            config, providers=dataclasses.replace(config.providers, order=("genius",))
        )

        with pytest.raises(ConfigError):
            build_providers(config)
