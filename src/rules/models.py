from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class TruncationRules(BaseModel):
    ellipsis: str = "..."
    preview_max_length: int = Field(default=80, ge=0)

class RandomRules(BaseModel):
    default_length: int = Field(default=16, ge=0)

class HexRules(BaseModel):
    uppercase: bool = True

class TextRules(BaseModel):
    truncation: TruncationRules = Field(default_factory=TruncationRules)
    random: RandomRules = Field(default_factory=RandomRules)
    hex: HexRules = Field(default_factory=HexRules)

    model_config = ConfigDict(extra="forbid")

    @field_validator("truncation")
    @classmethod
    def ellipsis_fits_preview(cls, value: TruncationRules) -> TruncationRules:
        # preview_max_length of 0 disables the check: every preview is "" then
        if value.preview_max_length and len(value.ellipsis) > value.preview_max_length:
            raise ValueError("ellipsis must not be longer than preview_max_length")
        return value

class Rules(BaseModel):
    project: ProjectRules
    text: TextRules = Field(default_factory=TextRules)
