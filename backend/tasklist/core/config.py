from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "TodoList API"
    API_PREFIX: str = "/api"

    # DB
    DATABASE_URL: str = "sqlite:///./data/todolist.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # uvicorn
    HOST: str = "127.0.0.1"
    PORT: int = 8000

settings = Settings()
