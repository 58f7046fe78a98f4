from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pymupdf"

    tabular_output_filename: str = "Momence Customers - YM Segment.csv"
    merged_document_filename: str = "Class Schedule.pdf"

    image_target_size_bytes: int = 5 * 1024 * 1024
    image_safety_margin: float = 0.95
    image_min_quality: float = 0.10
    image_max_quality: float = 0.95
    image_search_iterations: int = 10
    image_acceptance_ratio: float = 0.8
