"""Fixed-installment amortization for consumer loans"""

DEFAULT_MONTHLY_RATE = 0.015


def calculate_monthly_payment(
    amount: float,
    term_months: int,
    rate: float = DEFAULT_MONTHLY_RATE,
) -> float:
    """
    Constant periodic installment for an amortising loan (French annuity).

        installment = amount * rate / (1 - (1 + rate) ** -term_months)

    A missing or non-positive term is the degenerate single-payment case and
    returns the amount unchanged. No rounding happens here; callers round
    when a value is surfaced.

    Example:
        50,000 over 60 months at 1.5% → 1269.67...
    """
    if not term_months or term_months <= 0:
        return amount

    if rate == 0:
        return amount / term_months

    return (amount * rate) / (1 - (1 + rate) ** -term_months)
