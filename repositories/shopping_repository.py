"""
Shopping List Repository - Data access layer for shopping lists
"""

from repositories.base import ContainerRepository


class ShoppingListRepository(ContainerRepository):
    """Shopping lists with generated ids; items live in their own collection"""

    collection = "shopping_lists"
    child_collection = "shopping_list_items"
    parent_field = "list_id"
