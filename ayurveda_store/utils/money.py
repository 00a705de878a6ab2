from typing import List, Optional


def to_paise(rupees: float) -> int:
    return int(round(rupees * 100))


def to_rupees(paise: int) -> float:
    return paise / 100


def split_amount(total: int, parts: int) -> List[int]:
    """
    Divide ``total`` paise into ``parts`` integer shares.

    The remainder goes one paisa at a time to the leading shares, so the
    shares always add back up to ``total``.
    """
    if parts <= 0:
        return []

    base, remainder = divmod(total, parts)
    return [base + 1 if i < remainder else base for i in range(parts)]


def prices_at_purchase(
    total: int,
    unit_prices: List[Optional[float]],
    quantities: Optional[List[int]] = None,
) -> List[int]:
    """
    Price-at-purchase (paise) for each cart line.

    Lines with an explicit rupee price keep it as their unit price. Lines
    without one share, equally, whatever the priced lines (unit price times
    quantity) leave of the gateway total.
    """
    if quantities is None:
        quantities = [1] * len(unit_prices)

    priced = [to_paise(p) if p is not None else None for p in unit_prices]
    missing = [i for i, p in enumerate(priced) if p is None]
    if not missing:
        return priced

    spent = sum(p * q for p, q in zip(priced, quantities) if p is not None)
    remaining = max(total - spent, 0)
    for i, share in zip(missing, split_amount(remaining, len(missing))):
        priced[i] = share
    return priced
