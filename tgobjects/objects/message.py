from __future__ import annotations

from tgobjects.core.relations import HasMany, HasOne

from .base import TelegramObject
from .chat import Chat, Location, User
from .media import (
    Animation,
    Audio,
    Contact,
    Dice,
    DocumentFile,
    PhotoSize,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .payments import Invoice, SuccessfulPayment
from .poll import Poll


class MessageEntity(TelegramObject):
    """A special entity in a text message: hashtag, url, bot_command, ..."""

    def relations(self):
        return {"user": HasOne(User)}


class WebAppData(TelegramObject):
    pass


class MessageAutoDeleteTimerChanged(TelegramObject):
    pass


class InlineKeyboardMarkup(TelegramObject):
    pass


class Message(TelegramObject):
    """https://core.telegram.org/bots/api#message

    The sender is ``message.from_`` (or ``message.get("from")``).
    """

    def relations(self):
        return {
            "from": HasOne(User),
            "sender_chat": HasOne(Chat),
            "chat": HasOne(Chat),
            "forward_from": HasOne(User),
            "forward_from_chat": HasOne(Chat),
            "reply_to_message": HasOne(Message),
            "via_bot": HasOne(User),
            "entities": HasMany(MessageEntity),
            "caption_entities": HasMany(MessageEntity),
            "animation": HasOne(Animation),
            "audio": HasOne(Audio),
            "document": HasOne(DocumentFile),
            "photo": HasMany(PhotoSize),
            "sticker": HasOne(Sticker),
            "video": HasOne(Video),
            "video_note": HasOne(VideoNote),
            "voice": HasOne(Voice),
            "contact": HasOne(Contact),
            "dice": HasOne(Dice),
            "poll": HasOne(Poll),
            "venue": HasOne(Venue),
            "location": HasOne(Location),
            "new_chat_members": HasMany(User),
            "left_chat_member": HasOne(User),
            "new_chat_photo": HasMany(PhotoSize),
            "message_auto_delete_timer_changed": HasOne(MessageAutoDeleteTimerChanged),
            "pinned_message": HasOne(Message),
            "invoice": HasOne(Invoice),
            "successful_payment": HasOne(SuccessfulPayment),
            "web_app_data": HasOne(WebAppData),
            "reply_markup": HasOne(InlineKeyboardMarkup),
        }


class EditedMessage(Message):
    pass
