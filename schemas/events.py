"""
Pydantic schemas for the S3 event notification that triggers the function
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from urllib.parse import unquote_plus


class S3Bucket(BaseModel):
    name: str = Field(..., min_length=1)

    class Config:
        extra = "ignore"


class S3Object(BaseModel):
    # Keys arrive form-encoded: spaces as '+', everything else percent-encoded
    key: str = Field(..., min_length=1)
    size: Optional[int] = None

    class Config:
        extra = "ignore"


class S3Entity(BaseModel):
    bucket: S3Bucket
    object_: S3Object = Field(..., alias="object")

    class Config:
        extra = "ignore"
        populate_by_name = True


class S3EventRecord(BaseModel):
    """One entry of an S3 event's ``Records`` list"""
    event_name: Optional[str] = Field(None, alias="eventName")
    s3: S3Entity

    class Config:
        extra = "ignore"
        populate_by_name = True


class S3ObjectLocation(BaseModel):
    """Bucket and decoded key of the object to ingest"""
    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


class S3Event(BaseModel):
    """
    S3 event notification delivered by the Lambda runtime.

    Only the first record is processed; S3 delivers one record per
    object-created event.
    """
    records: List[S3EventRecord] = Field(..., alias="Records", min_length=1)

    class Config:
        extra = "ignore"
        populate_by_name = True

    def location(self) -> S3ObjectLocation:
        """Return bucket and decoded key of the first record"""
        entity = self.records[0].s3
        return S3ObjectLocation(
            bucket=entity.bucket.name,
            key=decode_object_key(entity.object_.key)
        )


def decode_object_key(raw_key: str) -> str:
    """
    Decode an S3 event object key.

    '+' is turned into a space before percent-decoding, so an encoded
    plus ('%2B') survives as a literal '+'.

        >>> decode_object_key("in%2Bfolder/a+b.csv")
        'in+folder/a b.csv'
    """
    return unquote_plus(raw_key)
