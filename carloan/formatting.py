import math

RUPEE = "₹"


def _indian_grouping(digits):
    """'1234567' -> '12,34,567': last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_currency(amount, symbol=RUPEE):
    # round half up to whole rupees
    rounded = int(math.floor(amount + 0.5))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{_indian_grouping(str(abs(rounded)))}"


def _plural(count, unit):
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_tenure(months):
    months = int(months)
    if months < 12:
        return _plural(months, "month")

    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(remaining, 'month')}"
