"""Shop-wide settings kept in the store's ``meta`` document."""

from __future__ import annotations

from dataclasses import dataclass, field

from agripos.domain.exceptions import InvalidCategory

DEFAULT_SHOP_NAME = "Vật Tư Nông Nghiệp Tiến Liên"


@dataclass(frozen=True)
class ShopMeta:
    shop_name: str = DEFAULT_SHOP_NAME
    categories: tuple[str, ...] = field(default_factory=tuple)

    def check_category(self, category: str) -> None:
        """Reject categories outside the configured set.

        An empty category list means the shop has not configured any,
        and every category is accepted.
        """
        if self.categories and category not in self.categories:
            raise InvalidCategory(category, list(self.categories))
