"""
Unit tests for the conversation directory.

Run with: pytest tests/test_conversations.py -v
"""

import asyncio

import pytest

from branchchat.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from branchchat.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from branchchat.domain.entities.conversation import normalize_participants
from branchchat.domain.exceptions import DomainValidationError, InvalidParticipantsError
from branchchat.domain.value_objects.user_id import UserId


def _find_or_create(conversation_repo, user_id_1, user_id_2):
    handler = FindOrCreateConversationHandler(conversation_repo)
    return asyncio.run(
        handler.execute(
            FindOrCreateConversationCommand(user_id_1=user_id_1, user_id_2=user_id_2)
        )
    )


def _list(conversation_repo, user_id):
    handler = ListConversationsHandler(conversation_repo)
    return asyncio.run(handler.execute(ListConversationsQuery(user_id=user_id)))


class TestNormalizeParticipants:
    def test_order_independent(self):
        assert normalize_participants("b", "a") == normalize_participants("a", "b")
        assert normalize_participants("b", "a") == (UserId("a"), UserId("b"))

    @pytest.mark.parametrize("a,b", [(None, "b"), ("a", None), ("", "b"), ("a", "")])
    def test_missing_participant(self, a, b):
        with pytest.raises(InvalidParticipantsError):
            normalize_participants(a, b)

    def test_same_user_twice(self):
        with pytest.raises(InvalidParticipantsError):
            normalize_participants("a", "a")


class TestFindOrCreate:
    def test_first_call_creates(self, conversation_repo):
        result = _find_or_create(conversation_repo, "alice-id", "bob-id")

        assert result.created is True
        assert set(result.conversation.participants) == {
            UserId("alice-id"),
            UserId("bob-id"),
        }

    def test_second_call_either_order_returns_same(self, conversation_repo):
        first = _find_or_create(conversation_repo, "alice-id", "bob-id")
        second = _find_or_create(conversation_repo, "bob-id", "alice-id")

        assert second.created is False
        assert second.conversation == first.conversation
        assert len(_list(conversation_repo, "alice-id")) == 1

    def test_missing_user_rejected(self, conversation_repo):
        with pytest.raises(DomainValidationError):
            _find_or_create(conversation_repo, "alice-id", None)

    def test_concurrent_calls_create_one(self, conversation_repo):
        handler = FindOrCreateConversationHandler(conversation_repo)

        async def race():
            return await asyncio.gather(
                *[
                    handler.execute(
                        FindOrCreateConversationCommand(user_id_1=a, user_id_2=b)
                    )
                    for a, b in [("u1", "u2"), ("u2", "u1"), ("u1", "u2")]
                ]
            )

        results = asyncio.run(race())

        assert sum(r.created for r in results) == 1
        assert len({r.conversation.id for r in results}) == 1


class TestListConversations:
    def test_lists_only_user_conversations_in_creation_order(self, conversation_repo):
        ab = _find_or_create(conversation_repo, "a", "b").conversation
        _find_or_create(conversation_repo, "b", "c")
        ac = _find_or_create(conversation_repo, "c", "a").conversation

        assert [c.id for c in _list(conversation_repo, "a")] == [ab.id, ac.id]

    def test_unknown_user_gets_empty_list(self, conversation_repo):
        _find_or_create(conversation_repo, "a", "b")

        assert _list(conversation_repo, "z") == []

    def test_missing_user_id_rejected(self, conversation_repo):
        with pytest.raises(DomainValidationError):
            _list(conversation_repo, None)
