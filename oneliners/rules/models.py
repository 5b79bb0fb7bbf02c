from pydantic import BaseModel, Field, field_validator

HEX_DIGIT_COUNTS = (3, 4, 6, 8)


class GeneratorRules(BaseModel):
    random_string_bytes: int = Field(default=32, ge=1, le=1024)
    hex_color_digits: int = 6
    ip_first_octet_offset: int = Field(default=1, ge=0, le=1)

    @field_validator("hex_color_digits")
    @classmethod
    def _check_digits(cls, v: int) -> int:
        if v not in HEX_DIGIT_COUNTS:
            raise ValueError(f"hex_color_digits must be one of {list(HEX_DIGIT_COUNTS)}")
        return v


class Rules(BaseModel):
    generators: GeneratorRules = Field(default_factory=GeneratorRules)
