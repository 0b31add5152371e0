from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value):
    """Round to the nearest rupee, halves away from zero.

    Python's round() uses banker's rounding, which drifts from the published
    pay tables on amounts like 2.5, so every money figure goes through here.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _group_indian(whole):
    # 1234567 -> 12,34,567
    digits = str(abs(whole))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])
    return f"-{digits}" if whole < 0 else digits


def format_currency(amount, compact=False):
    if compact:
        if amount >= 10_000_000:
            return f"{amount / 10_000_000:.2f} Cr"
        if amount >= 100_000:
            return f"{amount / 100_000:.2f} L"
        if amount >= 1_000:
            return f"{amount / 1_000:.1f}K"
    return _group_indian(round_half_up(amount))


def format_currency_inr(amount):
    return f"₹{format_currency(amount)}"
