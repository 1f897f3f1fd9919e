"""Factory-method exports."""

from .payments import (
    CreditCardProcessor,
    CreditCardProcessorFactory,
    PaymentProcessor,
    PaymentProcessorFactory,
    PaymentReceipt,
    PayPalProcessor,
    PayPalProcessorFactory,
    get_payment_factory,
)

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
