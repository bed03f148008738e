# judging/scoring.py


def compute_total_score(scores, criteria=None):
    """
    Total of a scorecard.

    With event criteria (``[{name, percentage}]``) the total is the
    percentage-weighted average of the criterion scores, a missing score
    counting as 0. Without criteria it is the plain mean of the scores.
    Returns None when there is nothing to total.
    """
    if not scores:
        return None

    weights = {
        item.get("name"): float(item.get("percentage") or 0)
        for item in criteria or []
        if item.get("name")
    }
    weight_sum = sum(weights.values())

    if weight_sum > 0:
        total = sum(float(scores.get(name) or 0) * weight for name, weight in weights.items()) / weight_sum
    else:
        values = [float(value) for value in scores.values()]
        total = sum(values) / len(values)

    return round(total, 2)
