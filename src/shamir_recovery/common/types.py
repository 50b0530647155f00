from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Share(BaseModel):
    """A submitted share before decoding: its x-label and base-encoded value."""

    model_config = ConfigDict(frozen=True)

    x_label: int = Field(gt=0)
    base: int
    raw_value: str

    @field_validator("raw_value", mode="before")
    @classmethod
    def _number_as_digits(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class CaseKeys(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1)
    k: int = Field(ge=1)


class Case(BaseModel):
    """
    One recovery problem: the threshold parameters and the shares in input order.
    """

    model_config = ConfigDict(frozen=True)

    case_id: str
    keys: CaseKeys
    shares: list[Share]

    @model_validator(mode="after")
    def _unique_x_labels(self):
        seen = set()
        for share in self.shares:
            if share.x_label in seen:
                raise ValueError(f"duplicate share x-label {share.x_label}")
            seen.add(share.x_label)
        return self


class CaseResult(BaseModel):
    case_id: str
    secret: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
