from __future__ import annotations

from tgobjects.core.relations import HasOne

from .base import TelegramObject
from .chat import User


class Invoice(TelegramObject):
    pass


class ShippingAddress(TelegramObject):
    pass


class OrderInfo(TelegramObject):
    def relations(self):
        return {"shipping_address": HasOne(ShippingAddress)}


class SuccessfulPayment(TelegramObject):
    def relations(self):
        return {"order_info": HasOne(OrderInfo)}


class ShippingQuery(TelegramObject):
    """Incoming shipping query, only for invoices with flexible price."""

    def relations(self):
        return {
            "from": HasOne(User),
            "shipping_address": HasOne(ShippingAddress),
        }


class PreCheckoutQuery(TelegramObject):
    def relations(self):
        return {
            "from": HasOne(User),
            "order_info": HasOne(OrderInfo),
        }
