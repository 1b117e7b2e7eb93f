"""Personal records derived from logged workouts."""


def personal_records(logged):
    """Best heaviest-set and most-reps results per exercise.

    `logged` is an iterable of (date, payload) pairs. Ties keep the earliest
    date on which the record was reached.
    """
    records = {}
    for day, payload in sorted(logged, key=lambda pair: pair[0]):
        for result in payload or []:
            key = result.get("exercise_id") or result.get("exercise_name")
            if key is None:
                continue
            record = records.setdefault(key, {
                "exercise_id": result.get("exercise_id"),
                "exercise_name": result.get("exercise_name"),
                "max_weight": None,
                "max_weight_reps": None,
                "max_weight_date": None,
                "max_reps": None,
                "max_reps_date": None,
                "sessions": 0,
            })
            record["exercise_name"] = result.get("exercise_name") or record["exercise_name"]
            record["sessions"] += 1
            for s in result.get("sets") or []:
                weight = float(s.get("weight") or 0)
                reps = int(s.get("reps") or 0)
                if reps <= 0:
                    continue
                if record["max_weight"] is None or weight > record["max_weight"]:
                    record["max_weight"] = weight
                    record["max_weight_reps"] = reps
                    record["max_weight_date"] = day.isoformat()
                if record["max_reps"] is None or reps > record["max_reps"]:
                    record["max_reps"] = reps
                    record["max_reps_date"] = day.isoformat()
    return sorted(records.values(), key=lambda r: (r["exercise_name"] or "").lower())
