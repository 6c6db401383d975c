#!/usr/bin/env python
"""
Tests para la construcción de URLs de geocodificación.
"""

import pytest

from gmapsgeocoder.credentials import AnonymousCredentials, ApiKeyCredentials, ClientCredentials
from gmapsgeocoder.exceptions import InvalidArgumentError
from gmapsgeocoder.url_builder import GEOCODE_JSON_ENDPOINT, QueryParams, build_url, escape_data_string

ANON = AnonymousCredentials()


class TestQueryParams:

    def test_insertion_order_preserved(self):
        params = QueryParams().add("b", "2").add("a", "1").add("c", "3")
        assert params.encode() == "b=2&a=1&c=3"
        assert params.names() == ["b", "a", "c"]
        assert len(params) == 3

    def test_escape_flag(self):
        params = QueryParams().add("address", "a b&c", escape=True)
        assert params.encode() == "address=a%20b%26c"

    def test_empty(self):
        assert QueryParams().encode() == ""


class TestEscaping:

    @pytest.mark.parametrize(
        "raw, escaped",
        [
            ("Diagonal 100", "Diagonal%20100"),
            ("a+b", "a%2Bb"),
            ("C/ Aragó, 50", "C%2F%20Arag%C3%B3%2C%2050"),
            ("x=1&y=2", "x%3D1%26y%3D2"),
            ("safe-._~", "safe-._~"),
        ],
    )
    def test_rfc3986_data_string(self, raw, escaped):
        assert escape_data_string(raw) == escaped


class TestBuildUrl:

    def test_anonymous_address_only(self):
        url = build_url(GEOCODE_JSON_ENDPOINT, ANON, "Barcelona")
        assert url == GEOCODE_JSON_ENDPOINT + "?address=Barcelona"

    @pytest.mark.parametrize("address", ["Barcelona", "Avinguda Diagonal 100, Barcelona", "東京都", "1600 Amphitheatre Pkwy"])
    def test_address_without_region(self, address):
        url = build_url(GEOCODE_JSON_ENDPOINT, ANON, address, None)
        assert f"address={escape_data_string(address)}" in url
        assert "region=" not in url

    @pytest.mark.parametrize("region", [None, "", "   "])
    def test_blank_region_omitted(self, region):
        url = build_url(GEOCODE_JSON_ENDPOINT, ANON, "Girona", region)
        assert "region=" not in url

    def test_region_after_address(self):
        url = build_url(GEOCODE_JSON_ENDPOINT, ANON, "Toledo", "es")
        assert url.endswith("?address=Toledo&region=es")
        assert url.index("address=") < url.index("region=")

    def test_api_key_first(self):
        url = build_url(GEOCODE_JSON_ENDPOINT, ApiKeyCredentials(api_key="AIzaTEST"), "Lleida", "es")
        assert url == GEOCODE_JSON_ENDPOINT + "?key=AIzaTEST&address=Lleida&region=es"

    def test_client_first(self):
        creds = ClientCredentials(client_id="gme-test", crypto_key="vNIXE0xscrmjlyV-12Nj_BvUPaw=")
        url = build_url(GEOCODE_JSON_ENDPOINT, creds, "Tarragona")
        assert url == GEOCODE_JSON_ENDPOINT + "?client=gme-test&address=Tarragona"

    def test_secret_only_has_no_client_param(self):
        creds = ClientCredentials(crypto_key="vNIXE0xscrmjlyV-12Nj_BvUPaw=")
        url = build_url(GEOCODE_JSON_ENDPOINT, creds, "Reus")
        assert url == GEOCODE_JSON_ENDPOINT + "?address=Reus"

    def test_secret_never_in_url(self):
        creds = ClientCredentials(client_id="gme-test", crypto_key="vNIXE0xscrmjlyV-12Nj_BvUPaw=")
        assert "vNIXE0" not in build_url(GEOCODE_JSON_ENDPOINT, creds, "Reus")

    def test_custom_endpoint(self):
        url = build_url("http://localhost:8080/geocode/json", ANON, "Vic")
        assert url == "http://localhost:8080/geocode/json?address=Vic"

    @pytest.mark.parametrize("address", [None, "", "   ", 42])
    def test_invalid_address(self, address):
        with pytest.raises(InvalidArgumentError):
            build_url(GEOCODE_JSON_ENDPOINT, ANON, address)

    @pytest.mark.parametrize("region", [34, ["es"], b"es"])
    def test_invalid_region_type(self, region):
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_url(GEOCODE_JSON_ENDPOINT, ANON, "Girona", region)
        assert exc_info.value.details["received_type"] == type(region).__name__
