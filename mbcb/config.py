from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "YNM Safety"
    APP_NAME: str = "mbcb-quoting-app"
    LOG_LEVEL: str = "INFO"

    # Barrier sets are laid and priced per this many running metres
    RUNNING_METRES_PER_SET: float = 4.0

    # GST: intra-state supply splits SGST + CGST, inter-state uses IGST
    GST_HOME_STATE: str = "telangana"
    SGST_RATE: float = 0.09
    CGST_RATE: float = 0.09
    IGST_RATE: float = 0.18

    class Config:
        env_file = ".env"


settings = Settings()
