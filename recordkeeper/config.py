"""Runtime settings.

Every value has a default matching the demos' fixed file names, so no
environment or .env file is required.  Override with RECORDKEEPER_* variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECORDKEEPER_", env_file=".env", extra="ignore")

    inventory_file: Path = Path("inventory.json")
    students_file: Path = Path("students.txt")
    grade_report_file: Path = Path("grade_report.txt")
    log_level: str = "INFO"


settings = Settings()
