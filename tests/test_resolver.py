# tests/test_resolver.py
"""
Configuration Tests - Unit Tests for Settings and the Snapshot Resolver

This module contains unit tests for environment-backed Settings, the host
configuration they render, and the tolerant resolution of raw host
configuration into immutable snapshots.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dualprice.config.settings (Settings)
- dualprice.config.resolver (resolve)
- dualprice.shared.validators (coercion helpers)
- pydantic (ValidationError)
- pytest (testing framework)
"""
import dataclasses  # FrozenInstanceError for immutability checks

import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError  # Raised for invalid environment values

from dualprice.config.resolver import resolve
from dualprice.config.settings import Settings
from dualprice.shared.validators import (
    coerce_bool,
    coerce_choice,
    coerce_float,
    coerce_str_map,
    validate_iso_code,
)


class TestResolveDefaults:
    def test_empty_config_is_inactive(self):
        snapshot = resolve({})

        assert snapshot.primary == "BGN"
        assert snapshot.rate == 0.0
        assert snapshot.show_secondary is False
        assert snapshot.tag_style == "symbol"
        assert snapshot.format_style == "paren"
        assert dict(snapshot.region_flags) == {"product": False, "cart": False}
        assert snapshot.enable_emails is False
        assert snapshot.default_locale == "en"
        assert snapshot.extraction_order == "attributes"
        assert not snapshot.is_active

    def test_non_mapping_config(self):
        assert resolve(["primary", "EUR"]).primary == "BGN"
        assert resolve("junk").rate == 0.0


class TestResolveCoercion:
    def test_string_values(self):
        snapshot = resolve(
            {
                "primary": " eur ",
                "rate": "1,95583",
                "showSecondary": "true",
                "enableProduct": "1",
                "enableCart": "off",
                "tagStyle": "CODE",
                "format": "Pipe",
            }
        )

        assert snapshot.primary == "EUR"
        assert snapshot.rate == pytest.approx(1.95583)
        assert snapshot.is_active
        assert snapshot.is_region_enabled("product")
        assert not snapshot.is_region_enabled("cart")
        assert snapshot.tag_style == "code"
        assert snapshot.format_style == "pipe"

    @pytest.mark.parametrize("rate", [0, -1, "abc", None, "nan", float("inf"), True])
    def test_invalid_rate_disables(self, rate):
        snapshot = resolve({"rate": rate, "showSecondary": 1})
        assert snapshot.rate == 0.0
        assert not snapshot.is_active

    def test_unknown_styles_fall_back(self):
        snapshot = resolve({"tagStyle": "emoji", "format": 3, "extractionOrder": "random"})
        assert snapshot.tag_style == "symbol"
        assert snapshot.format_style == "paren"
        assert snapshot.extraction_order == "attributes"

    def test_additional_region_flags(self):
        snapshot = resolve({"enableHeaderCart": 1, "enableEmails": 1})
        assert snapshot.is_region_enabled("header_cart")
        assert "emails" not in snapshot.region_flags
        assert snapshot.enable_emails is True
        assert not snapshot.is_region_enabled("unknown")

    def test_symbol_tables(self):
        snapshot = resolve({"currencySymbols": {"eur": "EUR€", "BGN": ""}})
        assert dict(snapshot.symbols) == {"EUR": "EUR€"}
        assert snapshot.codes["BGN"] == "BGN"

    def test_locale(self):
        assert resolve({"locale": " bg "}).default_locale == "bg"
        assert resolve({"locale": ""}).default_locale == "en"


class TestSnapshotImmutability:
    def test_frozen(self, bgn_snapshot):
        with pytest.raises(dataclasses.FrozenInstanceError):
            bgn_snapshot.rate = 2.0

    def test_read_only_tables(self, bgn_snapshot):
        with pytest.raises(TypeError):
            bgn_snapshot.region_flags["cart"] = False
        with pytest.raises(TypeError):
            bgn_snapshot.symbols["EUR"] = "$"


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.primary == "BGN"
        assert settings.fixed_rate == pytest.approx(1.95583)
        assert settings.show_secondary is True
        assert settings.display_format == "paren"
        assert settings.log_level == "INFO"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("DUALPRICE_PRIMARY", "eur")
        monkeypatch.setenv("DUALPRICE_FORMAT", "pipe")
        monkeypatch.setenv("DUALPRICE_ENABLE_CART", "false")
        monkeypatch.setenv("DUALPRICE_CURRENCY_SYMBOLS", '{"EUR": "EUR", "BGN": "лв."}')

        settings = Settings()

        assert settings.primary == "EUR"
        assert settings.display_format == "pipe"
        assert settings.enable_cart is False
        assert settings.currency_symbols["BGN"] == "лв."

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("DUALPRICE_FIXED_RATE=2.5\n", encoding="utf-8")
        assert Settings().fixed_rate == pytest.approx(2.5)

    @pytest.mark.parametrize(
        "name, value",
        [
            ("DUALPRICE_PRIMARY", "EURO"),
            ("DUALPRICE_LOG_LEVEL", "LOUD"),
            ("DUALPRICE_HTTP_TIMEOUT_SECONDS", "0"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_to_host_config(self):
        config = Settings().to_host_config()
        assert config["primary"] == "BGN"
        assert config["rate"] == pytest.approx(1.95583)
        assert config["showSecondary"] is True
        assert config["enableProduct"] is True
        assert config["enableCart"] is True
        assert config["enableEmails"] is True
        assert config["format"] == "paren"
        assert config["tagStyle"] == "symbol"


class TestResolveFromEnvironment:
    def test_uses_settings(self, monkeypatch):
        monkeypatch.setenv("DUALPRICE_PRIMARY", "EUR")
        monkeypatch.setenv("DUALPRICE_ENABLE_PRODUCT", "0")

        snapshot = resolve()

        assert snapshot.primary == "EUR"
        assert snapshot.is_active
        assert not snapshot.is_region_enabled("product")
        assert snapshot.is_region_enabled("cart")

    def test_invalid_environment_disables(self, monkeypatch):
        monkeypatch.setenv("DUALPRICE_PRIMARY", "EURO")
        snapshot = resolve()
        assert not snapshot.is_active


class TestValidators:
    @pytest.mark.parametrize("value", [True, 1, "1", "true", "YES", "on"])
    def test_truthy(self, value):
        assert coerce_bool(value) is True

    @pytest.mark.parametrize("value", [False, 0, "0", "false", "off", "", None, "maybe"])
    def test_falsy(self, value):
        assert coerce_bool(value) is False

    def test_coerce_float(self):
        assert coerce_float("1,5") == 1.5
        assert coerce_float("x", 7.0) == 7.0
        assert coerce_float(False) == 0.0

    def test_coerce_choice(self):
        assert coerce_choice(" Code ", ("symbol", "code"), "symbol") == "code"
        assert coerce_choice(None, ("symbol", "code"), "symbol") == "symbol"

    def test_coerce_str_map(self):
        assert coerce_str_map(None, {"A": "b"}) == {"A": "b"}
        assert coerce_str_map({"": "x", "c": None}, {"A": "b"}) == {"A": "b"}

    def test_validate_iso_code(self):
        assert validate_iso_code("BGN")
        assert not validate_iso_code("bgn")
        assert not validate_iso_code("EURO")
        assert not validate_iso_code(None)
