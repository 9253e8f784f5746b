"""Abstract repository for the shop's meta document."""

from __future__ import annotations

from abc import ABC, abstractmethod

from agripos.domain.model.shop_meta import ShopMeta


class MetaRepository(ABC):

    @abstractmethod
    def get(self) -> ShopMeta:
        """Return the shop meta, or defaults if none is stored."""
