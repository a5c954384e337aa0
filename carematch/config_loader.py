import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator


class ComponentWeights(BaseModel):
    """
    Maximum points for each of the ten breakdown components.

    The ten values must add up to exactly 100 so the final score reads as a
    percentage.
    """
    # Fit (job structure)
    age_range: float = Field(default=15.0, ge=0)
    modality: float = Field(default=10.0, ge=0)
    activities: float = Field(default=15.0, ge=0)
    regime: float = Field(default=10.0, ge=0)
    availability: float = Field(default=15.0, ge=0)
    children_count: float = Field(default=10.0, ge=0)

    # Trust
    seal: float = Field(default=10.0, ge=0)
    reviews: float = Field(default=10.0, ge=0)

    # Bonus
    distance_bonus: float = Field(default=3.0, ge=0)
    budget_bonus: float = Field(default=2.0, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> "ComponentWeights":
        total = sum(self.model_dump().values())
        if abs(total - 100.0) > 1e-6:
            raise ValueError(f"Component weights must sum to 100, got {total:g}")
        return self


class ScorerConfig(BaseModel):
    """
    Configuration for the component scorers.

    Fractions are applied to the component's max score.
    """
    weights: ComponentWeights = Field(default_factory=ComponentWeights)

    # Reviews: neutral floor for caregivers without reviews, and the review
    # count at which ratings are fully trusted.
    reviews_neutral_fraction: float = Field(default=0.5, ge=0, le=1)
    reviews_full_confidence_count: int = Field(default=10, ge=1)

    # Partial credits
    special_needs_partial_credit: float = Field(default=0.5, ge=0, le=1)
    regime_compatible_fraction: float = Field(default=0.5, ge=0, le=1)
    budget_adjacent_fraction: float = Field(default=0.5, ge=0, le=1)

    # Children above the caregiver's limit before the component hits zero
    children_over_capacity_tolerance: int = Field(default=2, ge=0)

    # Ceiling used when the caregiver did not declare a travel radius
    default_travel_distance_km: float = Field(default=10.0, gt=0)


class EligibilityConfig(BaseModel):
    """Hard-constraint settings for the eligibility filter."""
    # Multiplier applied to the caregiver's travel ceiling before eliminating
    distance_tolerance: float = Field(default=1.0, ge=1.0)
    # Families with pets eliminate caregivers who declared no comfort with animals
    pets_are_eliminatory: bool = True


class ResultPolicy(BaseModel):
    """Post-scoring filtering and truncation when ranking candidates for one job."""
    min_score: int = Field(default=0, ge=0, le=100)
    top_k: int = Field(default=20, ge=1)
    include_ineligible: bool = False


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    eligibility: EligibilityConfig = Field(default_factory=EligibilityConfig)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    log_level: str = "INFO"


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    env_log_level = os.environ.get("CAREMATCH_LOG_LEVEL")
    if env_log_level:
        data['log_level'] = env_log_level.upper()

    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['port'] = int(env_web_port)

    return data


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    data: Dict[str, Any] = {}

    if config_path:
        # If not found at relative path (e.g. running from another cwd), try the project root
        if not os.path.exists(config_path):
            base_dir = os.path.dirname(os.path.abspath(__file__))
            config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)

    return AppConfig(**data)
