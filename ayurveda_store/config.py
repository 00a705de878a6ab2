from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "production"
    log_level: str = "INFO"

    postgres_user: str
    postgres_password: str
    postgres_db: str
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # Full Supabase connection string, takes precedence over postgres_*
    supabase_db_url: Optional[str] = None

    # Admin session tokens
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 12

    admin_email: Optional[str] = None
    admin_password: Optional[str] = None

    razorpay_key_id: Optional[str] = None
    razorpay_key_secret: Optional[str] = None
    currency: str = "INR"

    shiprocket_email: Optional[str] = None
    shiprocket_password: Optional[str] = None
    shiprocket_api_url: str = "https://apiv2.shiprocket.in/v1/external"
    shiprocket_pickup_location: str = "Primary"
    shiprocket_timeout: int = 15

    # Supabase Storage exposes an S3 compatible endpoint
    storage_endpoint_url: Optional[str] = None
    storage_access_key_id: Optional[str] = None
    storage_secret_access_key: Optional[str] = None
    storage_region: str = "auto"
    storage_bucket: str = "product-images"
    storage_public_base: Optional[str] = None

    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @property
    def database_url(self):
        if self.supabase_db_url:
            return self.supabase_db_url

        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def shiprocket_configured(self) -> bool:
        return bool(self.shiprocket_email and self.shiprocket_password)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"


settings = Settings()
