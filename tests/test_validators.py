"""Tests for the validators module."""

import pytest

from team_randomizer.validators import (
    decode_snapshot,
    encode_snapshot,
    is_acceptable_name,
    name_key,
    normalize_name,
    validate_member_names,
)


class TestNames:
    """Test cases for member name helpers."""

    def test_normalize_trims(self):
        assert normalize_name('  Sam \t') == 'Sam'

    def test_name_key_ignores_case(self):
        assert name_key('SAM') == name_key('sam')

    def test_acceptable_names(self):
        assert is_acceptable_name('Sam')
        assert is_acceptable_name('x' * 20, max_length=20)
        assert not is_acceptable_name('')
        assert not is_acceptable_name('x' * 21, max_length=20)
        assert is_acceptable_name('x' * 200)


class TestValidateMemberNames:
    """Test cases for command-line name validation."""

    def test_valid_names(self):
        validate_member_names(['Alice', ' Bob '], max_length=20)  # Should not raise

    def test_whitespace_only_name(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_member_names(['Alice', '   '])

    def test_name_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            validate_member_names(['Bartholomew Fitzgerald'], max_length=20)


class TestSnapshotCodec:
    """Test cases for snapshot encoding and decoding."""

    def test_decode_valid_snapshot(self):
        assert decode_snapshot(b'["Ann", "Bob"]') == ['Ann', 'Bob']

    def test_decode_bytearray(self):
        assert decode_snapshot(bytearray(b'["Ann"]')) == ['Ann']

    def test_decode_empty_array(self):
        assert decode_snapshot(b'[]') == []

    def test_decode_preserves_unicode(self):
        payload = encode_snapshot(['Zoë', 'Łukasz'])
        assert decode_snapshot(payload) == ['Zoë', 'Łukasz']

    @pytest.mark.parametrize('payload', [
        None,
        b'',
        b'not json',
        b'{"name": "Ann"}',
        b'"Ann"',
        b'["Ann", 3]',
        b'["Ann", null]',
        b'\xff\xfe\x00',
        42,
        1.5,
        '["Ann"]',
    ])
    def test_decode_unparsable(self, payload):
        assert decode_snapshot(payload) is None
