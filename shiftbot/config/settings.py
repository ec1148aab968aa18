from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="SHIFTBOT_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="SHIFTBOT_LOG_FILE")
    log_rotation: str = Field(default="10 MB", validation_alias="SHIFTBOT_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="SHIFTBOT_LOG_RETENTION")
    schedule_api_base_url: str = Field(
        default="http://localhost:8080",  # Default for local dev; MUST point at the scheduling backend in production
        validation_alias="SHIFTBOT_SCHEDULE_API_BASE_URL",
    )
    schedule_api_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="SHIFTBOT_SCHEDULE_API_TIMEOUT_SECONDS",
    )
    stopword_refresh_seconds: int = Field(
        default=300,
        gt=0,
        validation_alias="SHIFTBOT_STOPWORD_REFRESH_SECONDS",
        description="Interval between stop-word catalog refreshes",
    )
    stopword_min_token_length: int = Field(
        default=3,
        ge=1,
        validation_alias="SHIFTBOT_STOPWORD_MIN_TOKEN_LENGTH",
        description="Catalog and message tokens shorter than this never count as location tokens",
    )
    match_min_score: float = Field(
        default=0.55,
        ge=0.0,
        le=1.0,
        validation_alias="SHIFTBOT_MATCH_MIN_SCORE",
        description="Candidates scoring below this are discarded",
    )
    match_tie_tolerance: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        validation_alias="SHIFTBOT_MATCH_TIE_TOLERANCE",
        description="Candidates within this distance of the best score are returned together",
    )
    match_time_diff_cap_minutes: int = Field(
        default=180,
        gt=0,
        validation_alias="SHIFTBOT_MATCH_TIME_DIFF_CAP_MINUTES",
    )
    match_overlap_bonus: float = Field(
        default=0.10,
        ge=0.0,
        le=1.0,
        validation_alias="SHIFTBOT_MATCH_OVERLAP_BONUS",
    )
    match_recency_horizon_days: int = Field(
        default=14,
        gt=0,
        validation_alias="SHIFTBOT_MATCH_RECENCY_HORIZON_DAYS",
    )
    match_date_only_score_cap: float = Field(
        default=0.50,
        ge=0.0,
        le=1.0,
        validation_alias="SHIFTBOT_MATCH_DATE_ONLY_SCORE_CAP",
        description="Upper bound for requests carrying nothing but a date",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid SHIFTBOT_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("schedule_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_date_only_cap(self) -> "Settings":
        """A date on its own must never be enough to accept a slot."""
        if self.match_date_only_score_cap >= self.match_min_score:
            raise ValueError(
                "SHIFTBOT_MATCH_DATE_ONLY_SCORE_CAP must be lower than SHIFTBOT_MATCH_MIN_SCORE "
                f"(got cap={self.match_date_only_score_cap}, min_score={self.match_min_score})"
            )
        return self


settings = Settings()
