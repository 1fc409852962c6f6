import pytest

from tgobjects.objects import (
    UPDATE_TYPES,
    CallbackQuery,
    Chat,
    ChatJoinRequest,
    EditedMessage,
    InlineQuery,
    Message,
    Poll,
    PollAnswer,
    ShippingQuery,
    TelegramObject,
    Update,
    UpdateKind,
)


def test_update_kinds_table() -> None:
    assert len(UPDATE_TYPES) == 14
    assert UpdateKind.WEB_APP_DATA.value not in UPDATE_TYPES
    assert UpdateKind.MESSAGE == "message"


@pytest.mark.parametrize("kind", UPDATE_TYPES)
def test_single_kind_classification_agrees(kind) -> None:
    update = Update({"update_id": 1, kind: {"id": "x"}})
    assert update.classify() == kind
    with pytest.warns(DeprecationWarning):
        assert update.detect_type() == kind


def test_message_update_related_object(message_payload) -> None:
    update = Update({"update_id": 1, "message": message_payload})
    assert update.classify() == "message"
    related = update.get_related_object()
    assert type(related) is Message
    assert related == Message(message_payload)


@pytest.mark.parametrize("field", ["message", "edited_message", "channel_post", "edited_channel_post"])
def test_web_app_data_overrides_classification(field) -> None:
    update = Update(
        {
            "update_id": 1,
            field: {"chat": {"id": 1}, "web_app_data": {"data": "{}", "button_text": "Open"}},
        }
    )
    assert update.classify() == "web_app_data"
    assert update.is_kind(UpdateKind.WEB_APP_DATA)
    assert update.is_kind(field)
    assert update.get_related_object() is None


def test_web_app_data_inside_callback_query_message() -> None:
    update = Update(
        {
            "update_id": 1,
            "callback_query": {"id": "1", "message": {"web_app_data": {"data": "x"}}},
        }
    )
    assert update.classify() == "web_app_data"


def test_classify_and_legacy_detection_disagree_on_several_kinds() -> None:
    update = Update(
        {
            "update_id": 1,
            "message": {"text": "first"},
            "edited_message": {"text": "second"},
        }
    )
    assert update.classify() == "message"
    with pytest.warns(DeprecationWarning):
        assert update.detect_type() == "edited_message"
    message = update.get_message()
    assert isinstance(message, EditedMessage)
    assert message.text == "second"
    assert isinstance(update.get_related_object(), Message)
    assert update.get_related_object().text == "first"


def test_classify_is_computed_once(monkeypatch) -> None:
    update = Update({"update_id": 1, "poll": {"id": "p"}})
    assert update.classify() == "poll"

    def _fail(self):
        raise AssertionError("classification should be cached")

    monkeypatch.setattr(Update, "get_message", _fail)
    assert update.classify() == "poll"
    assert update.object_type() == "poll"


def test_unknown_top_level_field() -> None:
    update = Update({"update_id": 1, "message_reaction": {"chat": {"id": 1}}})
    assert update.classify() == "message_reaction"
    with pytest.warns(DeprecationWarning):
        assert update.detect_type() is None
    assert update.get_message() == TelegramObject()


def test_empty_update() -> None:
    update = Update({})
    assert update.classify() is None
    assert update.get_related_object() is None
    assert update.get_chat() == TelegramObject()
    assert update.has_command() is False


def test_is_kind() -> None:
    update = Update({"update_id": 1, "channel_post": {"text": "hi"}})
    assert update.is_kind("channel_post")
    assert update.is_kind("channelPost")
    assert update.is_kind(UpdateKind.CHANNEL_POST)
    assert not update.is_kind("message")


def test_get_chat_for_my_chat_member_skips_message(monkeypatch) -> None:
    update = Update(
        {
            "update_id": 1,
            "my_chat_member": {
                "chat": {"id": -100, "type": "group"},
                "from": {"id": 1},
                "new_chat_member": {"status": "member", "user": {"id": 2}},
            },
        }
    )

    def _fail(self):
        raise AssertionError("get_message should not be consulted")

    monkeypatch.setattr(Update, "get_message", _fail)
    chat = update.get_chat()
    assert isinstance(chat, Chat)
    assert chat.id == -100


def test_get_chat_from_message(message_payload) -> None:
    update = Update({"update_id": 1, "message": message_payload})
    chat = update.get_chat()
    assert isinstance(chat, Chat)
    assert chat.id == 42


def test_get_chat_without_chat_is_empty() -> None:
    update = Update({"update_id": 1, "inline_query": {"id": "q", "query": "cats"}})
    assert update.get_chat() == TelegramObject()


def test_callback_query_without_message() -> None:
    update = Update({"update_id": 1, "callback_query": {"id": "cb", "from": {"id": 1}, "data": "x"}})
    message = update.get_message()
    assert message == TelegramObject()
    assert len(message) == 0
    assert update.has_command() is False
    assert isinstance(update.get_related_object(), CallbackQuery)


def test_callback_query_with_message(message_payload) -> None:
    update = Update({"update_id": 1, "callback_query": {"id": "cb", "message": message_payload}})
    message = update.get_message()
    assert isinstance(message, Message)
    assert update.get_chat().id == 42
    assert update.has_command() is True


def test_has_command(message_payload) -> None:
    assert Update({"update_id": 1, "message": message_payload}).has_command() is True
    plain = dict(message_payload, entities=[{"type": "bold", "offset": 0, "length": 3}])
    assert Update({"update_id": 1, "message": plain}).has_command() is False
    no_entities = {"text": "hello", "chat": {"id": 1}}
    assert Update({"update_id": 1, "message": no_entities}).has_command() is False


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("inline_query", InlineQuery),
        ("shipping_query", ShippingQuery),
        ("poll", Poll),
        ("edited_message", EditedMessage),
    ],
)
def test_get_message_returns_kind_field(kind, expected) -> None:
    update = Update({"update_id": 1, kind: {"id": "x"}})
    assert type(update.get_message()) is expected


@pytest.mark.parametrize(
    ("kind", "related"),
    [
        ("poll_answer", PollAnswer),
        ("chat_join_request", ChatJoinRequest),
    ],
)
def test_kinds_without_message(kind, related) -> None:
    update = Update({"update_id": 1, kind: {"chat": {"id": 1}}})
    assert update.get_message() == TelegramObject()
    assert type(update.get_related_object()) is related


def test_recent_message_from_update_list() -> None:
    response = Update(
        {
            "ok": True,
            "result": [
                {"update_id": 1, "message": {"text": "a"}},
                {"update_id": 2, "message": {"text": "b"}},
            ],
        }
    )
    assert response.get_status() is True
    with pytest.warns(DeprecationWarning):
        recent = response.recent_message()
    assert recent.get("update_id") == 2
    assert recent.get_message().text == "b"


def test_null_message_reads_as_empty() -> None:
    update = Update({"update_id": 1, "message": None})
    assert update.message is None
    assert update.classify() == "message"
    assert update.get_message() == TelegramObject()
    assert update.get_chat() == TelegramObject()
    assert update.has_command() is False
    assert update.get_related_object() is None


def test_null_chat_inside_message() -> None:
    update = Update({"update_id": 1, "message": {"message_id": 5, "chat": None}})
    assert update.get_message().chat is None
    assert update.get_chat() == TelegramObject()
