"""
Tests for the free-text parsers used by food recognition and receipts.
"""

from services.recognition_service import parse_food_items, parse_receipt, parse_receipt_items


def test_parse_food_items():
    text = "- Apple (fruit)\n* Chicken breast (meat)\nSome bread\n3) Greek yogurt (dairy)"
    assert parse_food_items(text) == [
        {"name": "Apple", "category": "fruit", "confidence": 0.9},
        {"name": "Chicken breast", "category": "meat", "confidence": 0.9},
        {"name": "Greek yogurt", "category": "dairy", "confidence": 0.9},
    ]


def test_parse_food_items_ignores_unmatched_text():
    assert parse_food_items("") == []
    assert parse_food_items("No food visible.") == []


def test_parse_receipt_items():
    text = "1. Milk: $3.99\n2. Bananas - $1.20\nThank you!\nTOTAL $5.19"
    assert parse_receipt_items(text) == [
        {"name": "Milk", "price": 3.99, "quantity": 1, "total": 3.99},
        {"name": "Bananas", "price": 1.2, "quantity": 1, "total": 1.2},
    ]


def test_parse_receipt_sums_items_without_total_line():
    receipt = parse_receipt("Milk $3.99\nEggs $2.01")
    assert receipt["store"] is None
    assert receipt["date"] is None
    assert receipt["total"] == 6.0
    assert len(receipt["items"]) == 2


def test_summary_lines_are_not_items():
    text = "Oat milk $3.49\nSubtotal $3.49\nTax $0.28\nTotal $3.77"
    receipt = parse_receipt(text)
    assert [i["name"] for i in receipt["items"]] == ["Oat milk"]
    assert receipt["total"] == 3.77
