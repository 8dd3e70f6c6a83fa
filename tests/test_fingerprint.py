"""Tests for the cyrb53 visitor fingerprint."""

import re
from datetime import datetime, timezone

import pytest

from cookieless.config import TrackingSettings
from cookieless.errors import InvalidConfiguration
from cookieless.utils.fingerprint import (
    VisitorAttributes,
    composite_key,
    compute_fingerprint,
    cyrb53,
    fingerprint_visitor,
)

HEX = re.compile(r"^[0-9a-f]+$")

REFERENCE_KEY = "1.2.3.4;example.com;TestAgent/1.0;en-US;18000"

# One hour into window 18000 of a 4-day period
IN_BUCKET_18000 = 18000 * 4 * 86400 + 3600


class TestCyrb53:
    """Pinned against the browser implementation of cyrb53."""

    @pytest.mark.parametrize(
        "text,seed,expected",
        [
            (REFERENCE_KEY, 0, "3ea045813d92d"),
            (REFERENCE_KEY, 7, "1b9b571f984c1f"),
            ("", 0, "d96711aee8d83"),
            ("a", 0, "124e8582c97901"),
            (";;;;0", 0, "d987c8abe9ef4"),
        ],
    )
    def test_reference_vectors(self, text, seed, expected):
        assert cyrb53(text, seed) == expected

    @pytest.mark.parametrize(
        "text,seed,expected",
        [
            (REFERENCE_KEY, 0, "2741e5813d92d"),
            (REFERENCE_KEY, 7, "1c76ea1f984c1f"),
            ("", 0, "bdcb81aee8d83"),
        ],
    )
    def test_chained_finalizer_matches_browser_snippet(self, text, seed, expected):
        assert cyrb53(text, seed, chained=True) == expected

    def test_chaining_only_affects_high_lane(self):
        """h1 is finalized the same way in both modes."""
        plain = int(cyrb53(REFERENCE_KEY), 16)
        chained = int(cyrb53(REFERENCE_KEY, chained=True), 16)
        assert plain & 0xFFFFFFFF == chained & 0xFFFFFFFF
        assert plain != chained

    def test_hashes_utf16_code_units(self):
        """Astral characters count as two surrogate code units, like charCodeAt."""
        assert cyrb53("café;\U0001F600") == "85e63fe435326"

    def test_fits_in_53_bits(self):
        for text in ["", "x", REFERENCE_KEY, "z" * 1000]:
            assert int(cyrb53(text), 16) < 2**53

    def test_lowercase_hex_without_prefix(self):
        result = cyrb53(REFERENCE_KEY)
        assert HEX.match(result)
        assert not result.startswith("0x")

    def test_seed_is_truncated_to_32_bits(self):
        assert cyrb53(REFERENCE_KEY, 7 + 2**32) == cyrb53(REFERENCE_KEY, 7)


class TestCompositeKey:
    def test_field_order_and_delimiter(self):
        key = composite_key("1.2.3.4", "example.com", "TestAgent/1.0", "en-US", 18000)
        assert key == REFERENCE_KEY

    def test_empty_fields(self):
        assert composite_key("", "", "", "", 0) == ";;;;0"


class TestComputeFingerprint:
    def test_reference_inputs(self):
        result = compute_fingerprint(
            "1.2.3.4", "example.com", "TestAgent/1.0", "en-US", 4, IN_BUCKET_18000
        )
        assert result == "3ea045813d92d"

    def test_deterministic(self):
        """Same input must always produce same output."""
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        a = compute_fingerprint("10.0.0.1", "example.com", "UA1", "de-DE", 4, now)
        b = compute_fingerprint("10.0.0.1", "example.com", "UA1", "de-DE", 4, now)
        assert a == b

    def test_sensitive_to_every_attribute(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        base = ("10.0.0.1", "example.com", "UA1", "en-US")
        variants = [
            ("10.0.0.2", "example.com", "UA1", "en-US"),
            ("10.0.0.1", "example.org", "UA1", "en-US"),
            ("10.0.0.1", "example.com", "UA2", "en-US"),
            ("10.0.0.1", "example.com", "UA1", "en-GB"),
        ]
        reference = compute_fingerprint(*base, 4, now)
        results = {compute_fingerprint(*v, 4, now) for v in variants}
        assert reference not in results
        assert len(results) == len(variants)

    def test_rotates_with_period(self):
        start = IN_BUCKET_18000
        same = compute_fingerprint("1.2.3.4", "example.com", "UA", "en", 4, start + 3600)
        later = compute_fingerprint("1.2.3.4", "example.com", "UA", "en", 4, start + 5 * 86400)
        assert compute_fingerprint("1.2.3.4", "example.com", "UA", "en", 4, start) == same
        assert same != later

    def test_empty_attributes(self):
        assert compute_fingerprint("", "", "", "", 4, 0) == "d987c8abe9ef4"

    def test_none_attributes_treated_as_empty(self):
        assert compute_fingerprint(None, None, None, None, 4, 0) == "d987c8abe9ef4"

    @pytest.mark.parametrize("days", [0, -1])
    def test_rejects_non_positive_period(self, days):
        with pytest.raises(InvalidConfiguration) as exc_info:
            compute_fingerprint("1.2.3.4", "example.com", "UA", "en", days, 0)
        assert exc_info.value.field == "validity_period_days"

    def test_seed_changes_output(self):
        result = compute_fingerprint(
            "1.2.3.4", "example.com", "TestAgent/1.0", "en-US", 4, IN_BUCKET_18000, seed=7
        )
        assert result == "1b9b571f984c1f"


class TestFingerprintVisitor:
    def test_uses_settings_period_and_seed(self):
        settings = TrackingSettings(tracking_id="UA-1-1", validity_period_days=4, hash_seed=7)
        attributes = VisitorAttributes("1.2.3.4", "example.com", "TestAgent/1.0", "en-US")
        assert fingerprint_visitor(attributes, settings, IN_BUCKET_18000) == "1b9b571f984c1f"
