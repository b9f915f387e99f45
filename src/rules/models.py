from pydantic import BaseModel, Field


class FluidRules(BaseModel):
    pixels_per_rem: float = Field(gt=0)
    type_scale_steps: list[int] = Field(min_length=1)  # [first, ..., last]
    space_steps: dict[str, float]
    space_pairs: dict[str, str]
    custom_pairs: dict[str, str]

    # FluidRulesPort
    def get_pixels_per_rem(self) -> float:
        return self.pixels_per_rem

    def get_type_scale_steps(self) -> tuple[int, int]:
        return self.type_scale_steps[0], self.type_scale_steps[-1]

    def get_space_steps(self) -> dict[str, float]:
        return self.space_steps

    def get_space_pairs(self) -> dict[str, str]:
        return self.space_pairs

    def get_custom_pairs(self) -> dict[str, str]:
        return self.custom_pairs

class CssRules(BaseModel):
    selector: str = ":where(html)"
    media_type: str = "text/css"

class Rules(BaseModel):
    fluid: FluidRules
    css: CssRules = Field(default_factory=CssRules)
