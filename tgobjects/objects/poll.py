from __future__ import annotations

from tgobjects.core.relations import HasMany, HasOne

from .base import TelegramObject
from .chat import Chat, User


class PollOption(TelegramObject):
    pass


class Poll(TelegramObject):
    """https://core.telegram.org/bots/api#poll"""

    def relations(self):
        return {
            "options": HasMany(PollOption),
            "explanation_entities": HasMany("MessageEntity"),
        }


class PollAnswer(TelegramObject):
    """A changed answer in a non-anonymous poll. ``user`` or ``voter_chat`` is set."""

    def relations(self):
        return {
            "user": HasOne(User),
            "voter_chat": HasOne(Chat),
        }
