"""Get Video Query - Locate an uploaded clip for streaming."""

from dataclasses import dataclass

from branchchat.application.common.interfaces import Query, QueryHandler
from branchchat.domain.exceptions import VideoNotFoundError
from branchchat.infrastructure.storage.video_storage_service import VideoStorageService


@dataclass
class VideoFile:
    path: str
    filename: str
    media_type: str


@dataclass(frozen=True)
class GetVideoQuery(Query[VideoFile]):
    filename: str


class GetVideoHandler(QueryHandler[VideoFile]):
    def __init__(self, storage: VideoStorageService):
        self._storage = storage

    async def execute(self, query: GetVideoQuery) -> VideoFile:
        path = self._storage.resolve(query.filename)
        if not path:
            raise VideoNotFoundError(f"Video {query.filename} not found.")
        return VideoFile(
            path=path,
            filename=query.filename,
            media_type=self._storage.media_type(query.filename),
        )
