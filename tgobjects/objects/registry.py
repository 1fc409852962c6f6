"""Static table of typed wrappers, keyed by the StudlyCase form of a field name.

Used for fields without a declared relation (``location`` -> ``Location``) and
for relations declared by name.
"""
from __future__ import annotations

from tgobjects.core.document import Document

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
from .update import Update

OBJECT_TYPES: dict[str, type[Document]] = {
    "Animation": Animation,
    "Audio": Audio,
    "CallbackQuery": CallbackQuery,
    "Chat": Chat,
    "ChatInviteLink": ChatInviteLink,
    "ChatJoinRequest": ChatJoinRequest,
    "ChatLocation": ChatLocation,
    "ChatMember": ChatMember,
    "ChatMemberUpdated": ChatMemberUpdated,
    "ChatPhoto": ChatPhoto,
    "ChosenInlineResult": ChosenInlineResult,
    "Contact": Contact,
    "Dice": Dice,
    "DocumentFile": DocumentFile,
    "EditedMessage": EditedMessage,
    "InlineKeyboardMarkup": InlineKeyboardMarkup,
    "InlineQuery": InlineQuery,
    "Invoice": Invoice,
    "Location": Location,
    "Message": Message,
    "MessageAutoDeleteTimerChanged": MessageAutoDeleteTimerChanged,
    "MessageEntity": MessageEntity,
    "OrderInfo": OrderInfo,
    "PhotoSize": PhotoSize,
    "Poll": Poll,
    "PollAnswer": PollAnswer,
    "PollOption": PollOption,
    "PreCheckoutQuery": PreCheckoutQuery,
    "ShippingAddress": ShippingAddress,
    "ShippingQuery": ShippingQuery,
    "Sticker": Sticker,
    "SuccessfulPayment": SuccessfulPayment,
    "Update": Update,
    "User": User,
    "Venue": Venue,
    "Video": Video,
    "VideoNote": VideoNote,
    "Voice": Voice,
    "WebAppData": WebAppData,
}
