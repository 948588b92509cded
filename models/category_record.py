from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CategoryRecord:
    name: str
    amount: float               # >= 0
    percent: str                # pre-formatted, e.g. '42'
    category_id: int
    icon: str = ""
    type: str = "expense"       # 'expense' | 'income' | other
    icon_image: Optional[str] = None        # base64
    formatted_amount: Optional[str] = None

    @property
    def percent_text(self) -> str:
        return f"{self.percent}%"
