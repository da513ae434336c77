from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("GRADEPLANNR_TITLE", "GradePlannr")
    default_target_grade: float = _float_env("GRADEPLANNR_DEFAULT_TARGET", 85.0)
    study_plan_size: int = _int_env("GRADEPLANNR_STUDY_PLAN_SIZE", 3)
    log_level: str = os.getenv("GRADEPLANNR_LOG_LEVEL", "INFO").upper()

    web_mode: bool = os.getenv("GRADEPLANNR_WEB", "0") == "1"
    port: int = _int_env("PORT", 8550)


settings = Settings()
