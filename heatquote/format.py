"""Render quotes as plain text for the console."""

from typing import Iterable

from heatquote.models import Quote


def _num(value: float | None) -> str:
    """Integral values without a decimal point (8400, not 8400.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_quote(quote: Quote) -> str:
    text = f"--------------------\n{quote.submission_id}\n------------------------------\n"

    if quote.warning:
        text += f"       Heating Loss: {_num(quote.estimated_heat_loss)}\n Warning: {quote.warning}"
        return text

    text += f"  Estimated Heat Loss = {_num(quote.estimated_heat_loss)}\n"
    text += f"  Design Region = {quote.design_region}\n"
    text += f"  Power Heat Loss = {_num(quote.power_heat_loss)}\n"
    text += f"  Recommended Heat Pump = {quote.recommended_heat_pump}\n"
    text += "  Cost Breakdown\n"
    for item in quote.cost_breakdown or ():
        text += f"    {item.label}, {_num(item.cost)}\n"
    text += f"  Total Cost, including VAT = {_num(quote.total_cost_with_vat)}\n"
    return text


def format_quotes(quotes: Iterable[Quote]) -> str:
    return "\n".join(format_quote(q) for q in quotes)
