from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # DB
    DATABASE_URL: str = "sqlite:///./products.db"

    # Discount API
    DISCOUNT_API_URL: str = "https://64e7edd9b0fd9648b79066f8.mockapi.io/api/v1/discounts/apply"
    DISCOUNT_API_TIMEOUT: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"
    ACCESS_LOG_PATH: str = "tmp/logs/access.log"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
