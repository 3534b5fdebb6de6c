from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt


class ItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: Optional[StrictStr] = Field(default=None, alias="shortDescription")
    price: Optional[StrictStr] = None

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(
            short_description=self.short_description or "",
            price=self.price or "",
        )


class ReceiptPayload(BaseModel):
    """
    JSON body of a submitted receipt.

    Missing or null fields become empty values; whether an empty value is
    acceptable is decided when the receipt is scored.
    """
    model_config = ConfigDict(populate_by_name=True)

    retailer: Optional[StrictStr] = None
    purchase_date: Optional[StrictStr] = Field(default=None, alias="purchaseDate")
    purchase_time: Optional[StrictStr] = Field(default=None, alias="purchaseTime")
    items: Optional[List[ItemPayload]] = None
    total: Optional[StrictStr] = None

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer or "",
            purchase_date=self.purchase_date or "",
            purchase_time=self.purchase_time or "",
            items=tuple(item.to_item() for item in self.items or []),
            total=self.total or "",
        )
