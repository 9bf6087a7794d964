from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    client_title: str = "GitHub Profile Finder"
    client_width: int = 900
    client_height: int = 640
    client_fps: int = 60

    api_endpoint: str = "api.github.com"
    api_endpoint_ssl: bool = True
    api_token: str | None = None
    api_timeout: float = 10.0

    # descarta respostas de buscas que já foram substituídas por outra
    discard_stale_results: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
