"""
Unit tests for the message log.

Run with: pytest tests/test_messages.py -v
"""

import asyncio
import json

import pytest

from branchchat.application.commands.auth import RegisterUserCommand, RegisterUserHandler
from branchchat.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from branchchat.application.commands.messages import SendMessageCommand, SendMessageHandler
from branchchat.application.queries.messages import ListMessagesHandler, ListMessagesQuery
from branchchat.config.settings import Config
from branchchat.domain.exceptions import (
    ConversationNotFoundError,
    DomainValidationError,
    EmptyMessageError,
)
from branchchat.domain.value_objects.conversation_id import ConversationId


@pytest.fixture()
def conversation(conversation_repo):
    handler = FindOrCreateConversationHandler(conversation_repo)
    result = asyncio.run(
        handler.execute(
            FindOrCreateConversationCommand(user_id_1="alice-id", user_id_2="bob-id")
        )
    )
    return result.conversation


def _send(conversation_repo, message_repo, **fields):
    handler = SendMessageHandler(conv_repo=conversation_repo, msg_repo=message_repo)
    return asyncio.run(handler.execute(SendMessageCommand(**fields)))


def _list(message_repo, conversation_id):
    handler = ListMessagesHandler(message_repo)
    return asyncio.run(
        handler.execute(ListMessagesQuery(conversation_id=ConversationId(conversation_id)))
    )


class TestSendMessage:
    def test_text_message(self, conversation_repo, message_repo, conversation):
        message = _send(
            conversation_repo,
            message_repo,
            conversation_id=conversation.id.value,
            sender_id="alice-id",
            text_content="hi",
        )

        assert message.text_content == "hi"
        assert message.video_url is None
        assert message.branch_parent_message_id is None

    def test_video_only_message(self, conversation_repo, message_repo, conversation):
        message = _send(
            conversation_repo,
            message_repo,
            conversation_id=conversation.id.value,
            sender_id="bob-id",
            video_url="/videos/x.webm",
        )

        assert message.text_content is None
        assert message.video_url == "/videos/x.webm"

    def test_empty_message_rejected(self, conversation_repo, message_repo, conversation):
        with pytest.raises(EmptyMessageError):
            _send(
                conversation_repo,
                message_repo,
                conversation_id=conversation.id.value,
                sender_id="alice-id",
                text_content="",
            )

    def test_empty_message_checked_before_conversation(self, conversation_repo, message_repo):
        with pytest.raises(EmptyMessageError):
            _send(
                conversation_repo,
                message_repo,
                conversation_id="missing",
                sender_id="alice-id",
            )

    def test_unknown_conversation(self, conversation_repo, message_repo):
        with pytest.raises(ConversationNotFoundError):
            _send(
                conversation_repo,
                message_repo,
                conversation_id="missing",
                sender_id="alice-id",
                text_content="hi",
            )

    def test_missing_ids_rejected(self, conversation_repo, message_repo):
        with pytest.raises(DomainValidationError):
            _send(conversation_repo, message_repo, conversation_id=None, sender_id="a", text_content="hi")


class TestListMessages:
    def test_register_converse_and_read_back(self, storage_dir, user_repo, password_hasher,
                                             conversation_repo, message_repo):
        register = RegisterUserHandler(user_repo, password_hasher)
        alice = asyncio.run(register.execute(RegisterUserCommand("alice", "pw1")))
        bob = asyncio.run(register.execute(RegisterUserCommand("bob", "pw2")))

        conv = asyncio.run(
            FindOrCreateConversationHandler(conversation_repo).execute(
                FindOrCreateConversationCommand(alice.value, bob.value)
            )
        ).conversation
        m1 = _send(conversation_repo, message_repo, conversation_id=conv.id.value,
                   sender_id=alice.value, text_content="hi")
        m2 = _send(conversation_repo, message_repo, conversation_id=conv.id.value,
                   sender_id=bob.value, video_url="/videos/x.webm")

        assert [m.id for m in _list(message_repo, conv.id.value)] == [m1.id, m2.id]

    def test_sorted_by_timestamp_not_file_order(self, storage_dir, message_repo):
        records = [
            {"id": "late", "conversationId": "c1", "senderId": "a",
             "textContent": "2", "videoUrl": None, "timestamp": "2025-01-27T12:00:05Z"},
            {"id": "other", "conversationId": "c2", "senderId": "a",
             "textContent": "x", "videoUrl": None, "timestamp": "2025-01-27T12:00:00Z"},
            {"id": "early", "conversationId": "c1", "senderId": "b",
             "textContent": "1", "videoUrl": None, "timestamp": "2025-01-27T12:00:01Z"},
        ]
        with open(Config.messages_path(), "w", encoding="utf-8") as f:
            json.dump(records, f)

        assert [m.id.value for m in _list(message_repo, "c1")] == ["early", "late"]

    def test_equal_timestamps_keep_file_order(self, storage_dir, message_repo):
        records = [
            {"id": name, "conversationId": "c1", "senderId": "a", "textContent": name,
             "videoUrl": None, "timestamp": "2025-01-27T12:00:00Z"}
            for name in ("first", "second", "third")
        ]
        with open(Config.messages_path(), "w", encoding="utf-8") as f:
            json.dump(records, f)

        assert [m.id.value for m in _list(message_repo, "c1")] == ["first", "second", "third"]

    def test_unknown_conversation_is_empty(self, message_repo):
        assert _list(message_repo, "nope") == []
