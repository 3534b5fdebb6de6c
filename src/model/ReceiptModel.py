from dataclasses import dataclass, field
from typing import Tuple

from src.model.ReceiptItemModel import ReceiptItem


class MalformedInput(ValueError):
    """Raised when a receipt field cannot be parsed."""


@dataclass(frozen=True)
class Receipt:
    retailer: str = ""
    purchase_date: str = ""
    purchase_time: str = ""
    items: Tuple[ReceiptItem, ...] = field(default_factory=tuple)
    total: str = ""
