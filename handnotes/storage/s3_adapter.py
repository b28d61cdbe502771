from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from handnotes.storage.base import BaseObjectStore
from handnotes.storage.exceptions import ObjectAlreadyExistsError, StorageError


class S3ObjectStore(BaseObjectStore):
    """Object store adapter for S3 and S3-compatible services (MinIO, R2, Supabase)."""

    def __init__(
        self,
        *,
        bucket: str,
        endpoint_url: str | None = None,
        region: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        self._bucket = bucket
        self._endpoint_url = endpoint_url
        self._region = region
        self._public_base_url = public_base_url
        self._client: Any = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    def upload(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                IfNoneMatch="*",
            )
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in ("PreconditionFailed", "ConditionalRequestConflict"):
                raise ObjectAlreadyExistsError(
                    f"Object '{key}' already exists in bucket '{self._bucket}'"
                ) from exc
            raise StorageError(f"S3 upload failed for '{key}': {exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"S3 upload failed for '{key}': {exc}") from exc

    def public_url(self, key: str) -> str | None:
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{key}"
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{key}"
        if self._region:
            return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"
        return None

    def delete(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"S3 delete failed for '{key}': {exc}") from exc
