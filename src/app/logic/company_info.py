"""Logic layer for the company summary card."""

from dataclasses import dataclass

from src.analysis.metrics import classify_change
from src.app.logic.formatting import format_price, format_volume, format_with_sign
from src.core.domain_models import ChangeSign, CompanySnapshot


@dataclass
class CompanyInfoContext:
    name: str
    symbol: str
    price_text: str
    change_text: str
    change_percent_text: str
    sign: ChangeSign
    market_cap: str
    pe_ratio_text: str
    volume_text: str

    @property
    def is_positive(self) -> bool:
        return self.sign == ChangeSign.POSITIVE


def build_company_info_context(
    company: CompanySnapshot,
    currency_symbol: str = "$",
) -> CompanyInfoContext:
    """Format a company snapshot for display.

    The percentage change is taken as supplied and styled with the sign of
    the absolute change.
    """
    sign = classify_change(company.change)
    return CompanyInfoContext(
        name=company.name,
        symbol=company.symbol,
        price_text=format_price(company.current_price, currency_symbol),
        change_text=format_with_sign(company.change, sign),
        change_percent_text=f"({format_with_sign(company.change_percent, sign)}%)",
        sign=sign,
        market_cap=company.market_cap,
        pe_ratio_text=f"{company.pe_ratio:.2f}",
        volume_text=format_volume(company.volume),
    )
