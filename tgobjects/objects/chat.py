from __future__ import annotations

from tgobjects.core.relations import HasOne

from .base import TelegramObject


class User(TelegramObject):
    """https://core.telegram.org/bots/api#user"""


class ChatPhoto(TelegramObject):
    pass


class Location(TelegramObject):
    pass


class ChatLocation(TelegramObject):
    def relations(self):
        return {"location": HasOne(Location)}


class Chat(TelegramObject):
    """https://core.telegram.org/bots/api#chat

    ``pinned_message`` is declared by name since messages themselves carry chats.
    """

    def relations(self):
        return {
            "photo": HasOne(ChatPhoto),
            "pinned_message": HasOne("Message"),
            "location": HasOne(ChatLocation),
        }


class ChatInviteLink(TelegramObject):
    def relations(self):
        return {"creator": HasOne(User)}


class ChatMember(TelegramObject):
    def relations(self):
        return {"user": HasOne(User)}


class ChatMemberUpdated(TelegramObject):
    """Payload of ``my_chat_member`` and ``chat_member`` updates."""

    def relations(self):
        return {
            "chat": HasOne(Chat),
            "from": HasOne(User),
            "old_chat_member": HasOne(ChatMember),
            "new_chat_member": HasOne(ChatMember),
            "invite_link": HasOne(ChatInviteLink),
        }


class ChatJoinRequest(TelegramObject):
    def relations(self):
        return {
            "chat": HasOne(Chat),
            "from": HasOne(User),
            "invite_link": HasOne(ChatInviteLink),
        }
