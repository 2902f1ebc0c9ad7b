"""Heat pump quote generator backed by a degree-days weather API."""

from heatquote.heatquote import HeatQuote
from heatquote.models import CostItem, HeatPump, House, Quote

__all__ = ["HeatQuote", "House", "HeatPump", "CostItem", "Quote"]
