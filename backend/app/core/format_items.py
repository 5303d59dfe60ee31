"""Item Views — pure builders for the JSON bodies of successful item responses.

Invariants:
    - Pure functions: input records in, plain dicts out
    - Owner id never rendered (only the signed-in actor sees these views)
    - Form views describe fields without touching the store
"""

from app.core.repository_protocols import ItemLike

TEXT_MAX_LENGTH = 1000

_TEXT_FIELD = {
    "name": "text",
    "type": "text",
    "required": True,
    "min_length": 1,
    "max_length": TEXT_MAX_LENGTH,
}


def format_item(item: ItemLike) -> dict:
    return {
        "id": str(item.id),
        "text": item.text,
        "created_at": item.created_at.isoformat(),
    }


def format_item_list(items: list[ItemLike]) -> dict:
    """Body of the list view (root)."""
    return {
        "items": [format_item(i) for i in items],
        "count": len(items),
    }


def format_new_form() -> dict:
    """Body of the new-item form: empty fields, posted to the collection."""
    return {
        "form": {
            "method": "POST",
            "action": "/items",
            "fields": [{**_TEXT_FIELD, "value": ""}],
        },
    }


def format_edit_form(item: ItemLike) -> dict:
    """Body of the edit form: current values, patched to the member path."""
    return {
        "item": format_item(item),
        "form": {
            "method": "PATCH",
            "action": f"/items/{item.id}",
            "fields": [{**_TEXT_FIELD, "value": item.text}],
        },
    }
