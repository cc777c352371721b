"""Metadata schemas for lazy-fs."""

import os
import stat
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class FileMetadata(BaseModel):
    """Snapshot of a file's metadata as reported by the host."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path the metadata was read from")
    size: int = Field(..., ge=0, description="Size in bytes")
    permissions: int = Field(..., description="Permission bits, e.g. 0o644")
    accessed: datetime = Field(..., description="Last access time (UTC)")
    modified: datetime = Field(..., description="Last modification time (UTC)")
    changed: datetime = Field(..., description="Last status change time (UTC)")
    created: Optional[datetime] = Field(
        default=None, description="Creation time (UTC), where the host records it"
    )

    @property
    def readonly(self) -> bool:
        return not self.permissions & (stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH)

    @classmethod
    def from_stat(cls, path: str, result: os.stat_result) -> "FileMetadata":
        birthtime = getattr(result, "st_birthtime", None)
        return cls(
            path=path,
            size=result.st_size,
            permissions=stat.S_IMODE(result.st_mode),
            accessed=_timestamp(result.st_atime),
            modified=_timestamp(result.st_mtime),
            changed=_timestamp(result.st_ctime),
            created=_timestamp(birthtime) if birthtime is not None else None,
        )
