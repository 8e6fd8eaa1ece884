"""
Text encoding of a user's answer set.

An answer set maps question ids to the selected (0-based) option index. It is
stored on the attempt row as a JSON object, e.g. ``{"1": 2, "2": 0}``. Keys are
written in ascending numeric order so equal answer sets always encode to the
same text. Two keys naming the same question id (`{"1": 0, "01": 2}`)
are rejected rather than collapsed.
"""

import json
import re
from typing import Dict, Mapping

from app.core.exceptions import CodecError

AnswerSet = Dict[int, int]

_INTEGER_RE = re.compile(r"^-?\d+$")


def _to_int(value, what: str) -> int:
    # bool is an int subclass but never a valid id or index
    if isinstance(value, bool):
        raise CodecError(f"Invalid {what}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip())
    raise CodecError(f"Invalid {what}: {value!r}")


class _Pairs(list):
    """Key/value pairs of one JSON object, in document order"""


def _normalize(pairs) -> AnswerSet:
    normalized: AnswerSet = {}
    for key, value in pairs:
        question_id = _to_int(key, "question id")
        if question_id in normalized:
            raise CodecError(f"Duplicate question id: {key!r}")
        normalized[question_id] = _to_int(value, "option index")
    return normalized


def encode(answers: Mapping[int, int]) -> str:
    """Encode an answer set as JSON text"""
    try:
        pairs = answers.items()
    except AttributeError as e:
        raise CodecError(f"Answer set must be a mapping: {e}") from e
    normalized = _normalize(pairs)
    ordered = {str(k): normalized[k] for k in sorted(normalized)}
    return json.dumps(ordered, separators=(",", ":"))


def decode(text: str) -> AnswerSet:
    """Decode JSON text back into an answer set"""
    try:
        raw = json.loads(text, object_pairs_hook=_Pairs)
    except (TypeError, ValueError) as e:
        raise CodecError(f"Answer set is not valid JSON: {e}") from e

    if not isinstance(raw, _Pairs):
        raise CodecError(f"Answer set must be a JSON object, got {type(raw).__name__}")

    return _normalize(raw)
