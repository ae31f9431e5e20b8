from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./aquacalc.db"
    APP_NAME: str = "aquacalc"
    LOG_LEVEL: str = "INFO"

    # Stored per client: 'light' | 'dark' | 'system'
    DEFAULT_THEME_MODE: str = "system"

    # Calculation history
    SAVE_CALCULATIONS: bool = True
    HISTORY_LIMIT: int = 50

    # Reports
    REPORT_ORGANIZATION: str = "AquaCalc Farm Tools"

    class Config:
        env_file = ".env"


settings = Settings()
