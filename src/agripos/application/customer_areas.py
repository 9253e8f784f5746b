"""Application service: group customers by commune and village."""

from __future__ import annotations

from dataclasses import dataclass

from agripos.application.dto import CustomerDTO, customer_to_dto
from agripos.domain.service.catalog_snapshot import CatalogSnapshot

UNKNOWN_COMMUNE = "Unknown commune"
UNKNOWN_VILLAGE = "Unknown village"


@dataclass(frozen=True)
class VillageGroup:
    village: str
    customers: list[CustomerDTO]


@dataclass(frozen=True)
class CommuneGroup:
    commune: str
    villages: list[VillageGroup]

    @property
    def customer_count(self) -> int:
        return sum(len(v.customers) for v in self.villages)


class CustomerAreasHandler:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self) -> list[CommuneGroup]:
        """Communes and their villages, both sorted by name."""
        grouped: dict[str, dict[str, list[CustomerDTO]]] = {}
        for c in self._catalog.customers:
            commune = c.commune.strip() or UNKNOWN_COMMUNE
            village = c.village.strip() or UNKNOWN_VILLAGE
            grouped.setdefault(commune, {}).setdefault(village, []).append(customer_to_dto(c))

        return [
            CommuneGroup(
                commune=commune,
                villages=[
                    VillageGroup(village=v, customers=villages[v])
                    for v in sorted(villages)
                ],
            )
            for commune, villages in sorted(grouped.items())
        ]
