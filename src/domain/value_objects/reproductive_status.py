from __future__ import annotations

from enum import Enum


class ReproductiveStatus(str, Enum):
    NOT_BRED = "not bred"
    BRED = "bred"
    CONFIRMED_PREGNANT = "confirmed pregnant"
    DRY = "dry"
    OPEN = "open"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ReproductiveStatus.OPEN: "Ready for Breeding",
    ReproductiveStatus.BRED: "Inseminated",
    ReproductiveStatus.CONFIRMED_PREGNANT: "Pregnant",
    ReproductiveStatus.DRY: "Dry (Late Pregnancy)",
    ReproductiveStatus.NOT_BRED: "Not Bred",
}
