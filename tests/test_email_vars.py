# tests/test_email_vars.py
"""
Email Template Totals Tests - Unit Tests for Secondary Email Variables

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dualprice.application.email_vars (alter_template_vars, template_key)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from dualprice.application.email_vars import TOTAL_KEYS, alter_template_vars, template_key


class TestTemplateKey:
    def test_template_key(self):
        assert template_key("total_paid") == "{TOTAL_PAID}"
        assert template_key("total_paid_secondary") == "{TOTAL_PAID_SECONDARY}"


class TestAlterTemplateVars:
    def test_adds_secondary_totals(self, bgn_snapshot):
        template_vars = {
            "{TOTAL_PAID}": "19,55 лв.",
            "{TOTAL_PRODUCTS}": "<span>100,00 лв.</span>",
            "{FIRSTNAME}": "Ivan",
        }

        result = alter_template_vars(template_vars, bgn_snapshot)

        assert result["{TOTAL_PAID_SECONDARY}"] == "€10.00"
        assert result["{TOTAL_PRODUCTS_SECONDARY}"] == "€51.13"
        assert result["{FIRSTNAME}"] == "Ivan"
        assert "{FIRSTNAME_SECONDARY}" not in result

    def test_input_is_not_mutated(self, bgn_snapshot):
        template_vars = {"{TOTAL_PAID}": "19,55 лв."}
        alter_template_vars(template_vars, bgn_snapshot)
        assert template_vars == {"{TOTAL_PAID}": "19,55 лв."}

    def test_skips_zero_and_unparseable(self, bgn_snapshot):
        result = alter_template_vars(
            {"{TOTAL_SHIPPING}": "0,00 лв.", "{TOTAL_DISCOUNTS}": "n/a"},
            bgn_snapshot,
        )
        assert "{TOTAL_SHIPPING_SECONDARY}" not in result
        assert "{TOTAL_DISCOUNTS_SECONDARY}" not in result

    def test_eur_primary(self, eur_snapshot):
        result = alter_template_vars({"{TOTAL_PAID}": "€51.13"}, eur_snapshot)
        assert result["{TOTAL_PAID_SECONDARY}"] == "100.00 лв"

    @pytest.mark.parametrize("overrides", [{"enableEmails": 0}, {"rate": 0}, {"showSecondary": 0}])
    def test_disabled(self, make_snapshot, overrides):
        template_vars = {"{TOTAL_PAID}": "19,55 лв."}
        assert alter_template_vars(template_vars, make_snapshot(**overrides)) == template_vars

    def test_every_total_key(self, bgn_snapshot):
        template_vars = {template_key(name): "19,55 лв." for name in TOTAL_KEYS}
        result = alter_template_vars(template_vars, bgn_snapshot)
        for name in TOTAL_KEYS:
            assert result[template_key(f"{name}_secondary")] == "€10.00"
