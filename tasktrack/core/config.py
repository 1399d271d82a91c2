from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./tasktrack.db")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "480"))  # 8h
    CORS_ORIGINS = getenv("CORS_ORIGINS", "http://localhost:3000")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(Settings, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
