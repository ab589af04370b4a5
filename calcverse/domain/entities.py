from datetime import date
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# --- Enums / Literals ---
Category = Literal["financial", "health", "math", "other"]
InputType = Literal["number", "text", "select"]
OptionValue = str | int | float | bool

KNOWN_OUTPUT_FORMATS = ("currency", "decimal", "number")


def _alias(name: str, camel: str) -> AliasChoices:
    return AliasChoices(name, camel)


# --- Calculator Descriptor ---

class SelectOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: OptionValue
    label: str


class InputSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: InputType
    unit: str | None = None
    placeholder: str | None = None
    required: bool = False
    options: tuple[SelectOption, ...] = ()


class OutputSpec(BaseModel):
    """Display spec for one result. Unknown formats render as plain strings."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    format: str = "number"
    precision: int | None = Field(default=None, ge=0)


class CalculatorDescriptor(BaseModel):
    """One calculator: display strings, form shape and its calculate fragment."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    category: Category
    description: str = ""
    short_description: str = Field(
        default="", validation_alias=_alias("short_description", "shortDescription")
    )
    meta_description: str = Field(
        default="", validation_alias=_alias("meta_description", "metaDescription")
    )
    seo_keywords: tuple[str, ...] = Field(
        default=(), validation_alias=_alias("seo_keywords", "seoKeywords")
    )
    inputs: tuple[InputSpec, ...] = ()
    outputs: tuple[OutputSpec, ...] = ()
    formula: str = ""
    formula_explanation: str = Field(
        default="", validation_alias=_alias("formula_explanation", "formulaExplanation")
    )
    calculate_function: str = Field(
        validation_alias=_alias("calculate_function", "calculateFunction")
    )
    related: tuple[str, ...] = ()

    # Carried over from the content pipeline; not used by generation
    image: str | None = None
    tags: tuple[str, ...] = ()
    difficulty: str | None = None


# --- Store Document ---

class CategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    count: int = Field(ge=0)
    icon: str | None = None


class StoreMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_calculators: int = Field(ge=0)
    version: str = ""
    last_updated: date | str | None = None
    site_name: str = ""
    site_description: str = ""


class StoreDocument(BaseModel):
    """Top-level shape of the calculators data file."""

    model_config = ConfigDict(frozen=True)

    metadata: StoreMetadata
    categories: dict[Category, CategoryInfo] = Field(default_factory=dict)
    calculators: tuple[CalculatorDescriptor, ...]
