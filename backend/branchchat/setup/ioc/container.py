"""
Dishka DI Container Setup.

- Registers all dependencies (record stores, repositories, handlers, services)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (singleton, request-scoped)

Scopes:
- Scope.APP: created once and shared. Repositories live here because each
  wraps a JsonRecordStore whose write lock must be shared by every request.
- Scope.REQUEST: command/query handlers, new instance per HTTP request.

Flow:
  Container → JsonRecordStore(users.json) → JsonUserRepository → RegisterUserHandler
                                                   ↓
                                     provided as UserRepository interface
"""

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer

from branchchat.config.settings import Config
from branchchat.domain.ports.password_hasher import PasswordHasher
from branchchat.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from branchchat.domain.ports.token_issuer import TokenIssuer
from branchchat.infrastructure.persistence import (
    JsonConversationRepository,
    JsonMessageRepository,
    JsonRecordStore,
    JsonUserRepository,
)
from branchchat.infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer
from branchchat.infrastructure.storage import VideoStorageService
from branchchat.application.commands.auth import (
    AuthenticateUserHandler,
    RegisterUserHandler,
)
from branchchat.application.commands.conversations import (
    FindOrCreateConversationHandler,
)
from branchchat.application.commands.messages import SendMessageHandler
from branchchat.application.commands.videos import UploadVideoHandler
from branchchat.application.queries.conversations import ListConversationsHandler
from branchchat.application.queries.messages import ListMessagesHandler
from branchchat.application.queries.videos import GetVideoHandler


class AppProvider(Provider):
    """
    Application dependency provider.

    Reads settings from the given config class at resolve time, so tests can
    point STORAGE_DIR at a temporary directory before the first request.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return JsonUserRepository(JsonRecordStore(self._config.users_path()))

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return JsonConversationRepository(
            JsonRecordStore(self._config.conversations_path())
        )

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return JsonMessageRepository(JsonRecordStore(self._config.messages_path()))

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=self._config.BCRYPT_ROUNDS)

    @provide(scope=Scope.APP)
    def get_token_issuer(self) -> TokenIssuer:
        return JwtTokenIssuer(
            secret=self._config.AUTH_TOKEN_SECRET,
            issuer=self._config.AUTH_TOKEN_ISSUER,
            audience=self._config.AUTH_TOKEN_AUDIENCE,
            ttl_minutes=self._config.AUTH_TOKEN_TTL_MINUTES,
        )

    @provide(scope=Scope.APP)
    def get_video_storage(self) -> VideoStorageService:
        return VideoStorageService(self._config.video_dir())

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher)

    @provide(scope=Scope.REQUEST)
    def get_authenticate_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> AuthenticateUserHandler:
        return AuthenticateUserHandler(user_repository, password_hasher, token_issuer)

    @provide(scope=Scope.REQUEST)
    def get_find_or_create_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> FindOrCreateConversationHandler:
        return FindOrCreateConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_upload_video_handler(
        self, storage: VideoStorageService
    ) -> UploadVideoHandler:
        return UploadVideoHandler(
            storage,
            allowed_extensions=self._config.ALLOWED_VIDEO_EXTENSIONS,
            url_prefix=self._config.VIDEO_URL_PREFIX,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_video_handler(self, storage: VideoStorageService) -> GetVideoHandler:
        return GetVideoHandler(storage)


def create_container(config: type[Config] = Config) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(AppProvider(config))
