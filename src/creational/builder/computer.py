"""Step-by-step assembly of computer configurations."""

from __future__ import annotations

import logging
from typing import Annotated, Self

from pydantic import Field

from creational.domain import TemplateModel
from creational.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# First matching marker per component wins.
_PRICE_TIERS: tuple[tuple[str, tuple[tuple[str, int], ...]], ...] = (
    ("cpu", (("i9", 500), ("i7", 350), ("i5", 250))),
    ("memory", (("32GB", 300), ("16GB", 150), ("8GB", 75))),
    ("storage", (("1TB", 100), ("512GB", 50))),
    ("graphics", (("RTX", 800), ("GTX", 400))),
)


class Computer(TemplateModel):
    """Assembled machine; components left unset stay empty."""

    cpu: str = ""
    memory: str = ""
    storage: str = ""
    graphics: str = ""
    motherboard: str = ""
    power_supply: str = ""
    cooling_system: str = ""
    network_card: str = ""
    warranty_years: Annotated[int, Field(ge=0)] = 0

    def estimated_price(self) -> float:
        price = 0
        for component, tiers in _PRICE_TIERS:
            value = getattr(self, component)
            for marker, amount in tiers:
                if marker in value:
                    price += amount
                    break
        return float(price)


class ComputerBuilder:
    """Fluent builder; ``build`` hands over the product and starts a fresh one."""

    def __init__(self) -> None:
        self._computer = Computer()

    def cpu(self, cpu: str) -> Self:
        self._computer.cpu = cpu
        return self

    def memory(self, memory: str) -> Self:
        self._computer.memory = memory
        return self

    def storage(self, storage: str) -> Self:
        self._computer.storage = storage
        return self

    def graphics(self, graphics: str) -> Self:
        self._computer.graphics = graphics
        return self

    def motherboard(self, motherboard: str) -> Self:
        self._computer.motherboard = motherboard
        return self

    def power_supply(self, power_supply: str) -> Self:
        self._computer.power_supply = power_supply
        return self

    def cooling_system(self, cooling_system: str) -> Self:
        self._computer.cooling_system = cooling_system
        return self

    def network_card(self, network_card: str) -> Self:
        self._computer.network_card = network_card
        return self

    def warranty(self, years: int) -> Self:
        if years < 0:
            msg = f"Warranty must be non-negative, got {years}"
            raise InvalidArgumentError(msg)
        self._computer.warranty_years = years
        return self

    def build(self) -> Computer:
        computer = self._computer
        self._computer = Computer()
        return computer


_PRESETS: dict[str, dict[str, str | int]] = {
    "gaming": {
        "cpu": "Intel i9-13900K",
        "memory": "32GB DDR5-5600",
        "storage": "1TB NVMe SSD",
        "graphics": "NVIDIA RTX 4080",
        "motherboard": "ASUS ROG Strix Z790-E",
        "power_supply": "850W 80+ Gold Modular",
        "cooling_system": "AIO Liquid Cooler 280mm",
        "network_card": "Wi-Fi 6E + Ethernet",
        "warranty": 3,
    },
    "office": {
        "cpu": "Intel i5-13400",
        "memory": "16GB DDR4-3200",
        "storage": "512GB SATA SSD",
        "graphics": "Integrated Intel UHD",
        "motherboard": "MSI B760M Pro-A",
        "power_supply": "500W 80+ Bronze",
        "cooling_system": "Stock CPU Cooler",
        "network_card": "Ethernet",
        "warranty": 1,
    },
    "workstation": {
        "cpu": "Intel i7-13700K",
        "memory": "64GB DDR5-4800",
        "storage": "2TB NVMe SSD",
        "graphics": "NVIDIA RTX 4070",
        "motherboard": "ASUS Pro WS W790-ACE",
        "power_supply": "750W 80+ Platinum",
        "cooling_system": "Tower Air Cooler",
        "network_card": "Wi-Fi 6 + Dual Ethernet",
        "warranty": 5,
    },
}


class ComputerDirector:
    """Drives a :class:`ComputerBuilder` through the known presets."""

    def __init__(self, builder: ComputerBuilder | None = None) -> None:
        self._builder = builder or ComputerBuilder()

    def build_preset(self, preset: str) -> Computer:
        try:
            steps = _PRESETS[preset.strip().lower()]
        except KeyError as exc:
            msg = f"Unknown computer preset {preset!r}"
            raise InvalidArgumentError(msg) from exc
        for step, value in steps.items():
            getattr(self._builder, step)(value)
        logger.debug("Built %s computer", preset)
        return self._builder.build()

    def build_gaming_computer(self) -> Computer:
        return self.build_preset("gaming")

    def build_office_computer(self) -> Computer:
        return self.build_preset("office")

    def build_workstation_computer(self) -> Computer:
        return self.build_preset("workstation")


__all__ = ["Computer", "ComputerBuilder", "ComputerDirector"]
