"""
Inventory item card component.

Shows one collectible: catalog link, thumbnail with an optional serial
badge, and price.
"""

import reflex as rx

from account_value_ui.models.reflex_models import CollectibleModel


def collectible_card(item: CollectibleModel) -> rx.Component:
    """
    Build a card for a single collectible.

    Args:
        item: CollectibleModel row.

    Returns:
        The collectible card component.
    """
    return rx.box(
        rx.box(
            rx.link(item.name, href=item.catalog_url, is_external=True),
            class_name="collectible-title",
        ),
        rx.box(
            rx.image(src=item.thumbnail_url, alt=item.name, class_name="no-select"),
            # Limited items only
            rx.cond(
                item.has_serial,
                rx.box(item.serial_text, class_name="collectible-serialnumber"),
            ),
            class_name="collectible-thumbnail",
        ),
        rx.box(item.price_text, class_name="collectible-robux"),
        class_name="collectible",
    )
