"""
Currency utility functions
"""

CURRENCY_SYMBOL = "₹"


def group_indian(digits: str) -> str:
    """
    Group a digit string the Indian way (lakh/crore)

    The last three digits form one group, everything before is grouped in
    pairs: "1234560" -> "12,34,560".
    """
    if len(digits) <= 3:
        return digits

    head, last_three = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [last_three])


def format_currency(amount: int) -> str:
    """
    Format a whole-rupee amount for display

    Args:
        amount: Amount in rupees (no paise)

    Returns:
        str: e.g. "₹12,34,560", "-₹300"
    """
    amount = int(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian(str(abs(amount)))}"
