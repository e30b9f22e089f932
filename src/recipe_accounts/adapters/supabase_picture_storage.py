"""Supabase Storage bucket for profile pictures."""

from dataclasses import dataclass

from supabase import Client

from recipe_accounts.adapters.supabase_errors import translate_errors
from recipe_accounts.services.profiles import PictureStorage


@dataclass
class SupabasePictureStorage(PictureStorage):
    """Stores pictures in a Supabase Storage bucket, one object per name."""

    client: Client
    bucket: str

    def save(self, name: str, payload: bytes, content_type: str | None) -> None:
        """Upload the payload, overwriting any object with the same name."""
        with translate_errors("upload_picture"):
            self.client.storage.from_(self.bucket).upload(
                path=name,
                file=payload,
                file_options={
                    "content-type": content_type or "application/octet-stream",
                    "upsert": "true",
                },
            )
