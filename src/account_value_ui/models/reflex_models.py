"""
Reflex-compatible models for the Account Value UI.

Reactive vars iterated with rx.foreach need a typed row model; these
dataclasses are the serializable counterparts of CollectibleView.
"""

import dataclasses

from account_value_ui.models.common import CollectibleView


@dataclasses.dataclass
class CollectibleModel:
    """Inventory item row."""

    name: str = ""
    price_text: str = ""
    catalog_url: str = ""
    thumbnail_url: str = ""
    has_serial: bool = False
    serial_text: str = ""


def to_collectible_model(item: CollectibleView) -> CollectibleModel:
    """
    Convert a CollectibleView to a CollectibleModel.

    Args:
        item: Display values for one inventory item.

    Returns:
        CollectibleModel instance.
    """
    return CollectibleModel(
        name=item.name,
        price_text=item.price_text,
        catalog_url=item.catalog_url,
        thumbnail_url=item.thumbnail_url,
        has_serial=item.has_serial,
        serial_text=item.serial_text,
    )
