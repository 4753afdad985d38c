import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from valormind.core.prompts import ConversationMode
from valormind.crud.chat_session import chat_session_crud
from valormind.models.chat_message import ChatMessage, MessageRole
from valormind.models.chat_session import ChatSession
from valormind.schemas.session import MessageCreate
from valormind.utils.utils import session_title_from_message

STALE = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FakeAsyncSession:
    """Answers COUNT queries with a fixed number and records added objects"""

    def __init__(self, user_message_count=0):
        self.user_message_count = user_message_count
        self.added = []
        self.commits = 0

    async def execute(self, query):
        return SimpleNamespace(scalar=lambda: self.user_message_count)

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self.commits += 1

    async def refresh(self, obj):
        pass


def make_session():
    session = ChatSession(
        id=uuid.uuid4(), user_id="user-1", title="New friend chat", mode=ConversationMode.FRIEND
    )
    session.updated_at = STALE
    return session


async def test_first_user_message_titles_the_session():
    db = FakeAsyncSession(user_message_count=0)
    session = make_session()
    content = "I finally told my parents about changing my major and it went okay"

    message = await chat_session_crud.add_message(
        db, session=session, obj_in=MessageCreate(role=MessageRole.USER, content=content)
    )

    assert session.title == session_title_from_message(content)
    assert session.title.endswith("...")
    assert isinstance(message, ChatMessage)
    assert message.session_id == session.id
    assert message.content == content


async def test_later_user_message_keeps_the_title():
    db = FakeAsyncSession(user_message_count=3)
    session = make_session()

    await chat_session_crud.add_message(
        db, session=session, obj_in=MessageCreate(role=MessageRole.USER, content="another thing")
    )

    assert session.title == "New friend chat"


async def test_assistant_message_keeps_the_title():
    db = FakeAsyncSession(user_message_count=0)
    session = make_session()

    message = await chat_session_crud.add_message(
        db, session=session,
        obj_in=MessageCreate(role=MessageRole.ASSISTANT, content="I'm here", is_safety_response=True)
    )

    assert session.title == "New friend chat"
    assert message.is_safety_response is True


async def test_add_message_bumps_updated_at():
    db = FakeAsyncSession()
    session = make_session()
    before = datetime.now(timezone.utc) - timedelta(seconds=1)

    await chat_session_crud.add_message(
        db, session=session, obj_in=MessageCreate(role=MessageRole.USER, content="hi")
    )

    assert session.updated_at > before
    assert session in db.added
    assert db.commits == 1
