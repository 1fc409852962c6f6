from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Any

from tgobjects.core.collection import Collection
from tgobjects.core.document import Document
from tgobjects.core.relations import HasOne

from .base import TelegramObject
from .chat import ChatJoinRequest, ChatMemberUpdated
from .inline import CallbackQuery, ChosenInlineResult, InlineQuery
from .message import EditedMessage, Message
from .payments import PreCheckoutQuery, ShippingQuery
from .poll import Poll, PollAnswer

LOGGER = logging.getLogger(__name__)


class UpdateKind(str, Enum):
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"
    # derived from message content, never a top-level field
    WEB_APP_DATA = "web_app_data"


UPDATE_TYPES: tuple[str, ...] = tuple(
    kind.value for kind in UpdateKind if kind is not UpdateKind.WEB_APP_DATA
)

# kinds whose own field is the message returned by get_message()
_MESSAGE_FIELDS = frozenset(
    {
        "message",
        "edited_message",
        "channel_post",
        "edited_channel_post",
        "inline_query",
        "chosen_inline_result",
        "shipping_query",
        "pre_checkout_query",
        "poll",
    }
)

_UNSET: Any = object()


class Update(TelegramObject):
    """Incoming update, see https://core.telegram.org/bots/api#update

    ``classify()`` memoizes its result on the instance without locking, so an
    Update must not be shared between threads.
    """

    def __init__(self, data: Any = None) -> None:
        super().__init__(data)
        self._update_type: str | None = _UNSET

    def relations(self):
        return {
            "message": HasOne(Message),
            "edited_message": HasOne(EditedMessage),
            "channel_post": HasOne(Message),
            "edited_channel_post": HasOne(EditedMessage),
            "inline_query": HasOne(InlineQuery),
            "chosen_inline_result": HasOne(ChosenInlineResult),
            "callback_query": HasOne(CallbackQuery),
            "shipping_query": HasOne(ShippingQuery),
            "pre_checkout_query": HasOne(PreCheckoutQuery),
            "poll": HasOne(Poll),
            "poll_answer": HasOne(PollAnswer),
            "my_chat_member": HasOne(ChatMemberUpdated),
            "chat_member": HasOne(ChatMemberUpdated),
            "chat_join_request": HasOne(ChatJoinRequest),
        }

    def classify(self) -> str | None:
        """Kind of this update: the first field after ``update_id``, or ``web_app_data``."""
        if self._update_type is _UNSET:
            is_web_app_data = bool(self.get_message().get("web_app_data"))
            update_type = next((key for key in self.keys() if key != "update_id"), None)
            self._update_type = UpdateKind.WEB_APP_DATA.value if is_web_app_data else update_type
            LOGGER.debug("Classified update %s as %s", self.get("update_id"), self._update_type)
        return self._update_type

    def object_type(self) -> str | None:
        return self.classify()

    def is_kind(self, kind: str | UpdateKind) -> bool:
        """True when the kind field is present or the update classifies as ``kind``."""
        return self.is_type(kind)

    def detect_type(self) -> str | None:
        """Last known kind field present in the update.

        Deprecated: disagrees with ``classify()`` when several kind fields are
        present and never reports ``web_app_data``. Kept for older callers.
        """
        warnings.warn(
            "Update.detect_type() is deprecated, use Update.classify() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._detect_type()

    def _detect_type(self) -> str | None:
        return self.find_type(UPDATE_TYPES)

    def get_message(self) -> Document:
        update_type = self._detect_type()
        message: Any = None
        if update_type in _MESSAGE_FIELDS:
            message = self.get_property_value(update_type)
        elif update_type == UpdateKind.CALLBACK_QUERY.value:
            callback_query = self.callback_query
            if isinstance(callback_query, Document) and callback_query.has("message"):
                message = callback_query.message
        return message if isinstance(message, Document) else self.generic()

    def get_related_object(self) -> Any:
        update_type = self.classify()
        if update_type is None:
            return None
        return self.get_property_value(update_type)

    def get_chat(self) -> Document:
        if self.has("my_chat_member"):
            # chat member updates carry no message
            member = self.my_chat_member
            return member.get("chat", self.generic) if isinstance(member, Document) else self.generic()

        message = self.get_message()
        return message.get("chat", self.generic)

    def has_command(self) -> bool:
        entities = self.get_message().get("entities", Collection)
        return isinstance(entities, Collection) and entities.contains("type", "bot_command")

    def recent_message(self) -> Update:
        """Update wrapping the last stored value (``getUpdates`` responses).

        Deprecated, iterate the response instead.
        """
        warnings.warn(
            "Update.recent_message() is deprecated",
            DeprecationWarning,
            stacklevel=2,
        )
        keys = self.keys()
        return Update(self._items[keys[-1]] if keys else None)

