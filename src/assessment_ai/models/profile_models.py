"""
Pydantic model for generation sampling profiles.
"""
from pydantic import BaseModel, ConfigDict, Field


class GenerationProfile(BaseModel):
    """Sampling parameters used for one kind of generation call."""
    model_config = ConfigDict(frozen=True)

    temperature: float = Field(ge=0.0, le=2.0, description="Sampling temperature")
    top_p: float = Field(ge=0.0, le=1.0, description="Nucleus sampling threshold")
    top_k: int = Field(ge=1, description="Top-k sampling cutoff")
    max_output_tokens: int = Field(ge=1, description="Maximum length of the generated output")
