from __future__ import annotations

from tgobjects.core.relations import HasOne

from .base import TelegramObject
from .chat import Location, User
from .message import Message


class CallbackQuery(TelegramObject):
    """Incoming callback query from an inline keyboard button.

    ``message`` is missing when the button was attached to an inline-mode message.
    """

    def relations(self):
        return {
            "from": HasOne(User),
            "message": HasOne(Message),
        }


class InlineQuery(TelegramObject):
    def relations(self):
        return {
            "from": HasOne(User),
            "location": HasOne(Location),
        }


class ChosenInlineResult(TelegramObject):
    def relations(self):
        return {
            "from": HasOne(User),
            "location": HasOne(Location),
        }
