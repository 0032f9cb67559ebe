"""Unit tests for dashboard purchase filters"""

from dataclasses import replace

from household_billing.domain.filters import filter_options, filter_purchases
from household_billing.domain.models import Payer


def ids(purchases):
    return [p.id for p in purchases]


def test_no_filters_keeps_everything(sample_purchases):
    assert ids(filter_purchases(sample_purchases)) == ["1", "2", "3", "4"]


def test_location_substring(sample_purchases):
    assert ids(filter_purchases(sample_purchases, location="Store")) == ["1"]


def test_payer_exact(sample_purchases):
    assert ids(filter_purchases(sample_purchases, payer=Payer.shared())) == ["2", "3"]


def test_card_exact(sample_purchases):
    assert ids(filter_purchases(sample_purchases, card_reference="nubank")) == ["3"]


def test_filters_combine(sample_purchases):
    result = filter_purchases(sample_purchases, location="Co", payer=Payer.shared(), card_reference="master")
    assert ids(result) == ["2"]


def test_returns_new_list(sample_purchases):
    result = filter_purchases(sample_purchases)
    assert result is not sample_purchases


def test_filter_options_lists_distinct_sorted_values(sample_purchases):
    options = filter_options(sample_purchases)

    assert options.locations == ["Apple Store", "Carrefour", "Centauro", "Coco Bambu"]
    assert options.payers == [Payer.partner_a(), Payer.partner_b(), Payer.shared()]
    assert options.card_references == ["master", "nubank"]


def test_filter_options_skips_missing_values(sample_purchases):
    bare = replace(sample_purchases[0], location=None, card_reference=None)
    options = filter_options([bare, bare])

    assert options.locations == []
    assert options.payers == [Payer.partner_a()]
    assert options.card_references == []
