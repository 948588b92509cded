from models.category_record import CategoryRecord
from utils.constants import CATEGORY_COLORS, FALLBACK_PALETTE


def color_for(name: str, category_id: int) -> str:
    """Named categories use the fixed table; others a palette slot keyed by id.

    Python's floor modulo keeps negative ids in range (-1 → last entry).
    """
    named = CATEGORY_COLORS.get(name)
    if named is not None:
        return named
    return FALLBACK_PALETTE[category_id % len(FALLBACK_PALETTE)]


class ColorAssigner:
    def assign(self, category: CategoryRecord) -> str:
        return color_for(category.name, category.category_id)

    def assign_all(self, categories) -> list[str]:
        return [self.assign(c) for c in categories]
