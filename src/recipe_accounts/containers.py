"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from recipe_accounts.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from recipe_accounts.adapters.supabase_favorite_repository import (
    SupabaseFavoriteRepository,
)
from recipe_accounts.adapters.supabase_fridge_repository import (
    SupabaseFridgeRepository,
)
from recipe_accounts.adapters.supabase_picture_storage import SupabasePictureStorage
from recipe_accounts.adapters.supabase_preference_repository import (
    SupabasePreferenceRepository,
)
from recipe_accounts.adapters.supabase_user_repository import SupabaseUserRepository
from recipe_accounts.config import Settings
from recipe_accounts.services.accounts import AccountService
from recipe_accounts.services.favorites import FavoriteService
from recipe_accounts.services.fridge import FridgeService
from recipe_accounts.services.preferences import PreferenceService
from recipe_accounts.services.profiles import ProfileService
from recipe_accounts.services.tokens import TokenIssuer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_issuer: TokenIssuer
    account_service: AccountService
    profile_service: ProfileService
    fridge_service: FridgeService
    preference_service: PreferenceService
    favorite_service: FavoriteService


def build_token_issuer(settings: Settings) -> TokenIssuer:
    """Create the token issuer from configured secret and lifetime."""
    return TokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    picture_storage = SupabasePictureStorage(
        client=supabase_client, bucket=resolved_settings.profile_picture_bucket
    )
    token_issuer = build_token_issuer(resolved_settings)
    account_service = AccountService(
        repository=user_repository,
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        token_issuer=token_issuer,
    )
    profile_service = ProfileService(
        repository=user_repository, storage=picture_storage
    )
    fridge_service = FridgeService(SupabaseFridgeRepository(supabase_client))
    preference_service = PreferenceService(
        SupabasePreferenceRepository(supabase_client)
    )
    favorite_service = FavoriteService(
        repository=SupabaseFavoriteRepository(supabase_client),
        image_base_url=resolved_settings.recipe_image_base_url,
    )

    return AppContainer(
        settings=resolved_settings,
        token_issuer=token_issuer,
        account_service=account_service,
        profile_service=profile_service,
        fridge_service=fridge_service,
        preference_service=preference_service,
        favorite_service=favorite_service,
    )
