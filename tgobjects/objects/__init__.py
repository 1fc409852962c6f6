from __future__ import annotations

__all__ = [
    "Animation",
    "Audio",
    "CallbackQuery",
    "Chat",
    "ChatInviteLink",
    "ChatJoinRequest",
    "ChatLocation",
    "ChatMember",
    "ChatMemberUpdated",
    "ChatPhoto",
    "ChosenInlineResult",
    "Contact",
    "Dice",
    "DocumentFile",
    "EditedMessage",
    "InlineKeyboardMarkup",
    "InlineQuery",
    "Invoice",
    "Location",
    "Message",
    "MessageAutoDeleteTimerChanged",
    "MessageEntity",
    "OBJECT_TYPES",
    "OrderInfo",
    "PhotoSize",
    "Poll",
    "PollAnswer",
    "PollOption",
    "PreCheckoutQuery",
    "ShippingAddress",
    "ShippingQuery",
    "Sticker",
    "SuccessfulPayment",
    "TelegramObject",
    "UPDATE_TYPES",
    "Update",
    "UpdateKind",
    "User",
    "Venue",
    "Video",
    "VideoNote",
    "Voice",
    "WebAppData",
]

from .base import TelegramObject
from .chat import (
    Chat,
    ChatInviteLink,
    ChatJoinRequest,
    ChatLocation,
    ChatMember,
    ChatMemberUpdated,
    ChatPhoto,
    Location,
    User,
)
from .inline import CallbackQuery, ChosenInlineResult, InlineQuery
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
from .message import (
    EditedMessage,
    InlineKeyboardMarkup,
    Message,
    MessageAutoDeleteTimerChanged,
    MessageEntity,
    WebAppData,
)
from .payments import (
    Invoice,
    OrderInfo,
    PreCheckoutQuery,
    ShippingAddress,
    ShippingQuery,
    SuccessfulPayment,
)
from .poll import Poll, PollAnswer, PollOption
from .registry import OBJECT_TYPES
from .update import UPDATE_TYPES, Update, UpdateKind
