"""Per-exercise workout payload and its notes-embedded fallback form.

A payload is a list of exercise results::

    [{"exercise_id": 4, "exercise_name": "Bench Press",
      "sets": [{"set_number": 1, "weight": 40.0, "reps": 10}, ...],
      "notes": ""}]

When the activity_logs table has no exercise_details column the payload is
JSON-encoded and appended to the human notes after PAYLOAD_DELIMITER.
"""

import json

from .errors import ValidationError

PAYLOAD_DELIMITER = "\n\n---EXERCISE_DATA---\n"


def embed_payload(notes, payload):
    return (notes or "") + PAYLOAD_DELIMITER + json.dumps(payload, separators=(",", ":"))


def split_notes(raw):
    """Return (human_notes, payload) from a notes field.

    payload is None when the notes carry no embedded data. The split uses the
    last delimiter because encoded JSON can never contain it, while
    free-typed notes might.
    """
    if not raw:
        return raw or "", None
    head, sep, tail = raw.rpartition(PAYLOAD_DELIMITER)
    if not sep:
        return raw, None
    try:
        payload = json.loads(tail)
    except ValueError:
        return raw, None
    if not isinstance(payload, list):
        return raw, None
    return head, payload


def normalize_sets(raw_sets):
    """Validate and number a list of {"weight", "reps"} dicts from 1."""
    if raw_sets is None:
        return []
    if not isinstance(raw_sets, list):
        raise ValidationError("sets must be a list")
    sets = []
    for index, item in enumerate(raw_sets, start=1):
        if not isinstance(item, dict):
            raise ValidationError(f"set {index} must be an object")
        try:
            weight = float(item.get("weight") or 0)
            reps = int(item.get("reps") or 0)
        except (TypeError, ValueError):
            raise ValidationError(f"set {index}: weight and reps must be numbers")
        if weight < 0 or reps < 0:
            raise ValidationError(f"set {index}: weight and reps must not be negative")
        sets.append({"set_number": index, "weight": weight, "reps": reps})
    return sets


def zero_filled_sets(sets_count, reps):
    return [
        {"set_number": n, "weight": 0.0, "reps": int(reps)}
        for n in range(1, max(1, int(sets_count)) + 1)
    ]
