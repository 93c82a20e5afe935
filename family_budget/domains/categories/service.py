import logging
from typing import Dict, List

from family_budget.domains.categories.models import (
    CATEGORY_TYPES,
    DEFAULT_COLOR,
    Category,
    CategoryCreate,
    CategoryUpdate,
)

DEFAULT_CATEGORIES = [
    {"name": "食費", "type": "expense", "color": "#EF4444", "description": "食料品・外食費"},
    {"name": "交通費", "type": "expense", "color": "#F97316", "description": "電車・バス・タクシー代"},
    {"name": "娯楽費", "type": "expense", "color": "#EAB308", "description": "映画・ゲーム・趣味"},
    {"name": "光熱費", "type": "expense", "color": "#22C55E", "description": "電気・ガス・水道代"},
    {"name": "通信費", "type": "expense", "color": "#3B82F6", "description": "携帯・インターネット代"},
    {"name": "医療費", "type": "expense", "color": "#8B5CF6", "description": "病院・薬代"},
    {"name": "給与", "type": "income", "color": "#10B981", "description": "会社からの給与"},
    {"name": "副収入", "type": "income", "color": "#06B6D4", "description": "副業・その他収入"},
]


class CategoryNotFoundError(LookupError):
    pass


class InvalidCategoryTypeError(ValueError):
    pass


class CategoryService:
    def __init__(self):
        self.categories: Dict[int, Category] = {}  # key: id
        self.next_id = 1

    def seed_defaults(self) -> int:
        """Insert the default categories when the store is empty. Returns how many were added."""
        if self.categories:
            return 0
        for data in DEFAULT_CATEGORIES:
            self.create(CategoryCreate(**data))
        logging.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
        return len(DEFAULT_CATEGORIES)

    @staticmethod
    def check_type(category_type: str):
        if category_type not in CATEGORY_TYPES:
            raise InvalidCategoryTypeError("Category type must be 'income' or 'expense'")

    def list_all(self) -> List[Category]:
        return list(self.categories.values())

    def get(self, category_id: int) -> Category:
        category = self.categories.get(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        return category

    def create(self, data: CategoryCreate) -> Category:
        self.check_type(data.type)
        category = Category(
            id=self.next_id,
            name=data.name,
            type=data.type,
            color=data.color or DEFAULT_COLOR,
            description=data.description,
        )
        self.categories[category.id] = category
        self.next_id += 1
        logging.info(f"Created category {category.id}: {category.name}")
        return category

    def update(self, category_id: int, data: CategoryUpdate) -> Category:
        category = self.get(category_id)
        changes = data.model_dump(exclude_none=True)
        if "type" in changes:
            self.check_type(changes["type"])
        updated = category.model_copy(update=changes)
        self.categories[category_id] = updated
        logging.info(f"Updated category {category_id}: {sorted(changes)}")
        return updated

    def delete(self, category_id: int) -> None:
        if self.categories.pop(category_id, None) is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        logging.info(f"Deleted category {category_id}")
