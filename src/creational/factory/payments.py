"""Payment processors and the factory methods that create them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol, runtime_checkable

from creational.domain import PaymentKind, ValueModel
from creational.exceptions import InvalidArgumentError

_CENT = Decimal("0.01")


logger = logging.getLogger(__name__)


def _to_amount(value: Decimal | float | int | str) -> Decimal:
    try:
        resolved = Decimal(str(value))
    except ArithmeticError as exc:
        msg = f"Amount {value!r} is not a number"
        raise InvalidArgumentError(msg) from exc
    if not resolved.is_finite():
        msg = f"Amount {value!r} is not a finite number"
        raise InvalidArgumentError(msg)
    return resolved


class PaymentReceipt(ValueModel):
    """Outcome of a successfully processed payment."""

    processor: str
    amount: Decimal
    fee: Decimal
    reference: str


@runtime_checkable
class PaymentProcessor(Protocol):
    """Validates and settles a payment amount."""

    @property
    def name(self) -> str: ...

    def validate(self, amount: Decimal) -> bool: ...

    def fee(self, amount: Decimal) -> Decimal: ...

    def process(self, amount: Decimal | float | int | str) -> PaymentReceipt: ...


class _LimitedProcessor(ABC):
    display_name: str = ""
    max_amount: Decimal = Decimal("0")
    fee_rate: Decimal = Decimal("0")

    @property
    def name(self) -> str:
        return self.display_name

    def validate(self, amount: Decimal) -> bool:
        return Decimal("0") < amount <= self.max_amount

    def fee(self, amount: Decimal) -> Decimal:
        return (amount * self.fee_rate).quantize(_CENT, rounding=ROUND_HALF_UP)

    @abstractmethod
    def reference(self) -> str: ...

    def process(self, amount: Decimal | float | int | str) -> PaymentReceipt:
        resolved = _to_amount(amount)
        if not self.validate(resolved):
            msg = f"Invalid payment amount {resolved} for {self.name}"
            raise InvalidArgumentError(msg)
        receipt = PaymentReceipt(
            processor=self.name,
            amount=resolved,
            fee=self.fee(resolved),
            reference=self.reference(),
        )
        logger.info("Processed %s via %s (fee %s)", receipt.amount, receipt.processor, receipt.fee)
        return receipt


class CreditCardProcessor(_LimitedProcessor):
    display_name = "Credit Card"
    max_amount = Decimal("10000")
    fee_rate = Decimal("0.029")

    def __init__(self, card_number: str) -> None:
        digits = card_number.replace(" ", "")
        if len(digits) < 4 or not digits.isdigit():
            msg = "Card number must contain at least four digits"
            raise InvalidArgumentError(msg)
        self._card_number = digits

    def reference(self) -> str:
        return f"card ending in {self._card_number[-4:]}"


class PayPalProcessor(_LimitedProcessor):
    display_name = "PayPal"
    max_amount = Decimal("50000")
    fee_rate = Decimal("0.034")

    def __init__(self, email: str) -> None:
        if "@" not in email:
            msg = f"Invalid PayPal account {email!r}"
            raise InvalidArgumentError(msg)
        self._email = email

    def reference(self) -> str:
        return f"PayPal account {self._email}"


class PaymentProcessorFactory(ABC):
    """Creator whose subclasses decide which processor to instantiate."""

    @abstractmethod
    def create_processor(self) -> PaymentProcessor: ...

    def execute_payment(self, amount: Decimal | float | int | str) -> PaymentReceipt:
        processor = self.create_processor()
        return processor.process(amount)


class CreditCardProcessorFactory(PaymentProcessorFactory):
    def __init__(self, card_number: str) -> None:
        self._card_number = card_number

    def create_processor(self) -> PaymentProcessor:
        return CreditCardProcessor(self._card_number)


class PayPalProcessorFactory(PaymentProcessorFactory):
    def __init__(self, email: str) -> None:
        self._email = email

    def create_processor(self) -> PaymentProcessor:
        return PayPalProcessor(self._email)


_FACTORIES: dict[PaymentKind, Callable[[str], PaymentProcessorFactory]] = {
    PaymentKind.CREDIT: CreditCardProcessorFactory,
    PaymentKind.PAYPAL: PayPalProcessorFactory,
}


def get_payment_factory(kind: PaymentKind | str, identifier: str) -> PaymentProcessorFactory:
    """Return the factory for ``kind`` bound to a card number or account email."""

    try:
        resolved = PaymentKind(kind.strip().lower() if isinstance(kind, str) else kind)
    except ValueError as exc:
        msg = f"Unknown payment type: {kind}"
        raise InvalidArgumentError(msg) from exc
    return _FACTORIES[resolved](identifier)


__all__ = [
    "CreditCardProcessor",
    "CreditCardProcessorFactory",
    "PayPalProcessor",
    "PayPalProcessorFactory",
    "PaymentProcessor",
    "PaymentProcessorFactory",
    "PaymentReceipt",
    "get_payment_factory",
]
