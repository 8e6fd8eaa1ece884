"""
Pytest tests for the answer set codec
"""

import json

import pytest

from app.core.exceptions import CodecError
from app.domain.answer_codec import decode, encode


class TestEncode:
    """Test encoding answer sets to text"""

    def test_encode_is_json_object_with_string_keys(self):
        """Test that encoded text is a JSON object keyed by question ID"""
        text = encode({1: 2, 2: 1})

        assert json.loads(text) == {"1": 2, "2": 1}

    def test_encode_orders_keys_numerically(self):
        """Test that equal answer sets always encode to the same text"""
        assert encode({10: 0, 2: 3, 1: 1}) == '{"1":1,"2":3,"10":0}'
        assert encode({2: 3, 10: 0, 1: 1}) == encode({1: 1, 10: 0, 2: 3})

    def test_encode_empty_answer_set(self):
        """Test that an empty answer set encodes to an empty object"""
        assert encode({}) == "{}"

    def test_encode_rejects_non_integer_values(self):
        """Test that non-integer option indices are rejected"""
        with pytest.raises(CodecError):
            encode({1: "b"})

        with pytest.raises(CodecError):
            encode({1: True})

    def test_encode_rejects_non_mapping(self):
        """Test that a list is not accepted as an answer set"""
        with pytest.raises(CodecError):
            encode([1, 2])

    def test_encode_rejects_keys_naming_same_question(self):
        """Test that an int key and its string form are not silently merged"""
        with pytest.raises(CodecError, match="Duplicate question id"):
            encode({1: 0, "1": 2})


class TestDecode:
    """Test decoding stored text back to answer sets"""

    def test_decode_converts_keys_to_int(self):
        """Test that string keys come back as integer question IDs"""
        assert decode('{"1": 2, "2": 0}') == {1: 2, 2: 0}

    def test_decode_accepts_integer_strings(self):
        """Test that integer-like string values are accepted"""
        assert decode('{"7": "3"}') == {7: 3}

    def test_round_trip(self):
        """Test that decode(encode(a)) returns the original answer set"""
        answers = {1: 2, 5: 0, 42: 7, 1000: 3}

        assert decode(encode(answers)) == answers
        assert decode(encode({})) == {}

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "",
            "[1, 2, 3]",
            '"just a string"',
            '{"a": 1}',
            '{"1": "x"}',
            '{"1": 1.5}',
            '{"1": null}',
            '{"1": true}',
            '{"1": [2]}',
        ],
    )
    def test_decode_rejects_malformed_text(self, text):
        """Test that malformed answer text raises CodecError"""
        with pytest.raises(CodecError):
            decode(text)

    @pytest.mark.parametrize("text", ['{"1": 0, "1": 2}', '{"1": 0, "01": 2}', '{"1": 0, " 1": 2}'])
    def test_decode_rejects_duplicate_question_ids(self, text):
        """Test that repeated question IDs in stored text raise CodecError"""
        with pytest.raises(CodecError, match="Duplicate question id"):
            decode(text)

    def test_decode_rejects_nested_object_value(self):
        """Test that an object in place of an option index is rejected"""
        with pytest.raises(CodecError):
            decode('{"1": {"2": 0}}')

    def test_decode_rejects_none(self):
        """Test that a missing blob raises CodecError"""
        with pytest.raises(CodecError):
            decode(None)
