"""
Pydantic models for the documents served by Mojang's launcher metadata service.

Every fetch boundary parses its payload into one of these models, so a change
in the upstream format surfaces as a SchemaMismatchError instead of a KeyError
deep inside the pipeline.
"""

from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mc_lang.exceptions import SchemaMismatchError

SHA1_PATTERN = r"^[0-9a-fA-F]{40}$"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ReleaseType(str, Enum):
    RELEASE = "release"
    SNAPSHOT = "snapshot"
    OLD_BETA = "old_beta"
    OLD_ALPHA = "old_alpha"
    OTHER = "other"


class ReleaseDescriptor(BaseModel):
    """One entry of the version manifest."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    type: ReleaseType
    metadata_url: str = Field(alias="url")

    @field_validator("type", mode="before")
    @classmethod
    def coerce_unknown_type(cls, v: Any) -> Any:
        """Maps release types this tool does not know about to OTHER."""
        if isinstance(v, str) and v not in ReleaseType._value2member_map_:
            return ReleaseType.OTHER
        return v

    @property
    def is_release(self) -> bool:
        return self.type is ReleaseType.RELEASE


class VersionManifest(BaseModel):
    versions: List[ReleaseDescriptor]


class _ArtifactRef(BaseModel):
    url: str
    sha1: str = Field(pattern=SHA1_PATTERN)


class _AssetIndexRef(BaseModel):
    url: str


class _Downloads(BaseModel):
    client: _ArtifactRef


class _VersionJson(BaseModel):
    assetIndex: _AssetIndexRef
    downloads: _Downloads


class ReleaseMetadata(BaseModel):
    """The parts of a per-version JSON document the pipeline needs."""

    model_config = ConfigDict(frozen=True)

    asset_index_url: str
    archive_url: str
    archive_checksum: str

    @classmethod
    def from_version_json(cls, payload: Any) -> "ReleaseMetadata":
        raw = parse_document(_VersionJson, payload, "version metadata")
        return cls(
            asset_index_url=raw.assetIndex.url,
            archive_url=raw.downloads.client.url,
            archive_checksum=raw.downloads.client.sha1.lower(),
        )


class AssetIndexEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    logical_path: str
    content_hash: str

    @property
    def code(self) -> str:
        """The file name stem, e.g. 'de_de' for 'minecraft/lang/de_de.json'."""
        return PurePosixPath(self.logical_path).stem


class _AssetObject(BaseModel):
    hash: str = Field(pattern=SHA1_PATTERN)
    size: Optional[int] = None


class _AssetIndexJson(BaseModel):
    objects: Dict[str, _AssetObject]


class AssetIndex(BaseModel):
    """Mapping of logical resource path to its index entry."""

    entries: Dict[str, AssetIndexEntry]

    @classmethod
    def from_index_json(cls, payload: Any) -> "AssetIndex":
        raw = parse_document(_AssetIndexJson, payload, "asset index")
        return cls(
            entries={
                path: AssetIndexEntry(
                    logical_path=path, content_hash=obj.hash.lower()
                )
                for path, obj in raw.objects.items()
            }
        )

    def get(self, logical_path: str) -> Optional[AssetIndexEntry]:
        return self.entries.get(logical_path)

    def values(self) -> List[AssetIndexEntry]:
        return list(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)


def parse_document(model: Type[ModelT], payload: Any, document: str) -> ModelT:
    """Validates a decoded JSON payload, converting failures to SchemaMismatchError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise SchemaMismatchError(document, str(e)) from e
