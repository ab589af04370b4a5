from pydantic import BaseModel, Field, field_validator


class SiteRules(BaseModel):
    name: str = "CalcVerse"
    base_url: str = "https://calcverse.com"
    title_suffix: str = " - CalcVerse"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

class CalculatorPageRules(BaseModel):
    related_limit: int = Field(default=4, ge=0)

class GenerationRules(BaseModel):
    package: str = "calcverse_site"
    output_dir: str = "calcverse_site"

class SiteConfig(BaseModel):
    site: SiteRules = Field(default_factory=SiteRules)
    calculator_pages: CalculatorPageRules = Field(default_factory=CalculatorPageRules)
    generation: GenerationRules = Field(default_factory=GenerationRules)
