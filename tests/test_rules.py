"""
Tests for mode detection and validation.

These tests verify:
- Orders-empty wins over menu-empty
- Whitespace-only fields count as empty
- Each mode applies its own rejection rule
"""

import pytest

from core.domain.errors import ValidationError
from core.domain.mode import Mode
from core.domain.rules import (
    CURRENT_ORDERS_REQUIRED,
    LIST_MENU_REQUIRED,
    classify,
    ensure_valid,
    validate,
)


class TestClassify:
    """Test suite for classify()."""

    @pytest.mark.parametrize(
        ("list_menu", "current_orders", "expected"),
        [
            ("", "", Mode.FIRST_TOUCH),
            ("menu", "", Mode.FIRST_TOUCH),
            ("", "orders", Mode.NITRO),
            ("menu", "orders", Mode.NORMAL),
        ],
    )
    def test_first_matching_rule_wins(self, list_menu, current_orders, expected):
        assert classify(list_menu, current_orders) is expected

    def test_whitespace_only_fields_are_empty(self):
        """Blank lines and tabs do not count as content."""
        assert classify("menu", "  \n\t ") is Mode.FIRST_TOUCH
        assert classify(" \n\n ", "1. Bob: noodles") is Mode.NITRO

    def test_unicode_content_is_not_normalized(self):
        """Emoji and non-latin text are plain content."""
        assert classify("🍜 Mie ayam", "1. ミフタ: nasi 1") is Mode.NORMAL

    def test_is_deterministic(self):
        results = {classify("menu", "orders") for _ in range(50)}
        assert results == {Mode.NORMAL}


class TestValidate:
    """Test suite for validate()."""

    def test_first_touch_requires_menu(self):
        outcome = validate(Mode.FIRST_TOUCH, "", "")
        assert not outcome.ok
        assert outcome.reason == LIST_MENU_REQUIRED == "List menu required for first-touch mode"

    def test_first_touch_with_menu_is_accepted(self):
        assert validate(Mode.FIRST_TOUCH, "Fried Rice", "").ok

    def test_normal_requires_orders(self):
        outcome = validate(Mode.NORMAL, "menu", "")
        assert not outcome.ok
        assert outcome.reason == CURRENT_ORDERS_REQUIRED == "Current orders is required"

    def test_nitro_requires_orders(self):
        outcome = validate(Mode.NITRO, "", "   ")
        assert outcome.reason == "Current orders is required"

    def test_nitro_without_menu_is_accepted(self):
        assert validate(Mode.NITRO, "", "1. Bob: noodles").ok

    def test_stale_mode_is_rechecked_against_inputs(self):
        """A mode computed earlier is validated against the inputs as they are now."""
        mode = classify("menu", "1. Alice")
        assert not validate(mode, "menu", "").ok


class TestModeLabels:
    @pytest.mark.parametrize(
        ("mode", "label"),
        [
            (Mode.NORMAL, "Normal Mode"),
            (Mode.NITRO, "Nitro Mode"),
            (Mode.FIRST_TOUCH, "First-Touch Mode"),
        ],
    )
    def test_label(self, mode, label):
        assert mode.label() == label

    def test_wire_values(self):
        assert [m.value for m in Mode] == ["normal", "nitro", "first-touch"]


class TestEnsureValid:
    def test_raises_with_reason(self):
        with pytest.raises(ValidationError) as excinfo:
            ensure_valid(Mode.NITRO, "", "")
        assert excinfo.value.message == "Current orders is required"

    def test_accepts_valid_input(self):
        assert ensure_valid(Mode.NORMAL, "menu", "orders") is None

    @pytest.mark.parametrize(
        ("mode", "list_menu", "current_orders"),
        [
            (Mode.FIRST_TOUCH, "", ""),
            (Mode.FIRST_TOUCH, " \n", "  "),
            (Mode.NORMAL, "menu", ""),
            (Mode.NITRO, "", "\t"),
        ],
    )
    def test_every_rejection_carries_its_reason(self, mode, list_menu, current_orders):
        outcome = validate(mode, list_menu, current_orders)

        assert not outcome.ok
        assert outcome.reason in (LIST_MENU_REQUIRED, CURRENT_ORDERS_REQUIRED)
        with pytest.raises(ValidationError, match=outcome.reason):
            ensure_valid(mode, list_menu, current_orders)
